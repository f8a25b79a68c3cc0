"""
Fast astronomical calculation module

Low-precision analytic Sun and Moon positions, Greenwich mean sidereal
time and the astronomical arguments used by the ocean loading model.
All routines use NumPy only and accept scalar or array epochs.

The orbital arguments are evaluated in TT and the rotation into the
Earth-fixed frame uses GMST in UT1. The Sun and Moon positions are
accurate to a few hundredths of a degree.

References:
    J. Meeus, "Astronomical Algorithms", 1998.
    D. D. McCarthy (ed.), IERS Conventions (1996), IERS Technical Note 21.

Copyright (c) 2024-2026 tkykszk
A derivative work of PyTMD (https://github.com/tsutterley/pyTMD)
Original author: Tyler Sutterley
Original license: MIT License (source code), CC BY 4.0 (content)

This software is licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations

import numpy as np

from ..time import MJD_1975, MJD_J2000, split_day, utc_to_ut1

# Constants
_JULIAN_CENTURY = 36525.0  # Julian century (days)
_DAY_SECONDS = 86400.0  # Seconds per day
_ARCSEC_TO_RAD = np.pi / (180.0 * 3600.0)  # Arcseconds to radians
_DEG_TO_RAD = np.pi / 180.0  # Degrees to radians

# TT-UT1 correction approximation (seconds)
# High precision is not required for tidal calculations
_TT_UT1_APPROX = 69.2

# Pre-computed constants
_TT_OFFSET = _TT_UT1_APPROX / _DAY_SECONDS
_EPSILON_J2000 = 23.43929111 * _DEG_TO_RAD  # Obliquity of ecliptic (radians)
_COS_EPSILON = np.cos(_EPSILON_J2000)
_SIN_EPSILON = np.sin(_EPSILON_J2000)

# GMST at 0h UT1 (seconds), IAU 1982
_GMST_COEFFICIENTS = np.array([24110.54841, 8640184.812866, 9.3104e-2, -6.2e-6])
# Ratio of universal to sidereal time
_SIDEREAL_RATIO = 1.002737909350795

# Astronomical arguments of IERS 1996 subroutine ARG (degrees)
_H0_COEFFICIENTS = np.array([279.69668, 36000.768930485, 3.03e-4])
_S0_COEFFICIENTS = np.array([270.434358, 481267.88314137, -0.001133, 1.9e-6])
_P0_COEFFICIENTS = np.array([334.329653, 4069.0340329577, -0.010325, -1.2e-5])


def polynomial_sum(coefficients: np.ndarray, t: np.ndarray) -> np.ndarray:
    """
    Compute polynomial sum using Horner's method

    Parameters
    ----------
    coefficients : np.ndarray
        Coefficient array [c0, c1, c2, ...]
    t : np.ndarray
        Time variable

    Returns
    -------
    np.ndarray
        c0 + c1*t + c2*t^2 + ...
    """
    result = np.zeros_like(t, dtype=np.float64)
    for c in reversed(coefficients):
        result = result * t + c
    return result


def greenwich_mean_sidereal_time(mjd: np.ndarray) -> np.ndarray:
    """
    Compute Greenwich Mean Sidereal Time

    Parameters
    ----------
    mjd : np.ndarray
        Modified Julian Day (UT1)

    Returns
    -------
    np.ndarray
        GMST (radians, 0 to 2*pi)
    """
    mjd = np.asarray(mjd, dtype=np.float64)
    midnight, ut = split_day(mjd)
    t1 = (midnight - MJD_J2000) / _JULIAN_CENTURY
    gmst = polynomial_sum(_GMST_COEFFICIENTS, t1) + _SIDEREAL_RATIO * ut
    return np.mod(gmst, _DAY_SECONDS) * np.pi / 43200.0


def solar_equatorial(mjd: np.ndarray) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Compute solar geocentric equatorial (inertial) coordinates

    Parameters
    ----------
    mjd : np.ndarray
        Modified Julian Day (UT1)

    Returns
    -------
    x, y, z : np.ndarray
        Solar equatorial coordinates (metres)
    """
    mjd = np.asarray(mjd, dtype=np.float64)
    # Julian centuries based on TT
    T = (mjd + _TT_OFFSET - MJD_J2000) / _JULIAN_CENTURY

    # Solar longitude of perihelion (radians)
    Ps = (282.94 + 1.7192 * T) * _DEG_TO_RAD

    # Solar mean anomaly
    M = (357.5256 + T * (35999.049 + T * (-1.559e-4 - 4.8e-7 * T))) * _DEG_TO_RAD

    cos_M = np.cos(M)
    sin_M = np.sin(M)
    cos_2M = 2.0 * cos_M * cos_M - 1.0
    sin_2M = 2.0 * sin_M * cos_M

    # Solar distance (metres)
    r_sun = 1e9 * (149.619 - 2.499 * cos_M - 0.021 * cos_2M)

    # Ecliptic longitude (radians)
    lambda_sun = Ps + M + _ARCSEC_TO_RAD * (6892.0 * sin_M + 72.0 * sin_2M)

    # Equatorial rectangular coordinates
    x = r_sun * np.cos(lambda_sun)
    y_temp = r_sun * np.sin(lambda_sun)
    y = y_temp * _COS_EPSILON
    z = y_temp * _SIN_EPSILON

    return x, y, z


def lunar_equatorial(mjd: np.ndarray) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Compute lunar geocentric equatorial (inertial) coordinates

    Parameters
    ----------
    mjd : np.ndarray
        Modified Julian Day (UT1)

    Returns
    -------
    u, v, w : np.ndarray
        Lunar equatorial coordinates (metres)
    """
    mjd = np.asarray(mjd, dtype=np.float64)
    T = (mjd + _TT_OFFSET - MJD_J2000) / _JULIAN_CENTURY

    # Lunar mean longitude
    s = (218.3164477 + T * (481267.88123421 + T * (-1.5786e-3 +
         T * (1.855835e-6 - 1.53388e-8 * T)))) * _DEG_TO_RAD

    # Lunar mean elongation
    D = (297.8501921 + T * (445267.1114034 + T * (-1.8819e-3 +
         T * (1.83195e-6 - 8.8445e-9 * T)))) * _DEG_TO_RAD

    # Lunar ascending node longitude
    N = (125.04452 + T * (-1934.136261 + T * (2.0708e-3 + 2.22222e-6 * T))) * _DEG_TO_RAD
    F = s - N

    # Solar mean anomaly (radians)
    M = (357.5256 + 35999.049 * T) * _DEG_TO_RAD

    # Lunar mean anomaly (radians)
    l = (134.96292 + 477198.86753 * T) * _DEG_TO_RAD

    D2 = 2.0 * D
    l2 = 2.0 * l
    F2 = 2.0 * F
    sin_M = np.sin(M)
    sin_F2 = np.sin(F2)

    # Lunar distance (metres)
    r_moon = 1e3 * (
        385000.0
        - 20905.0 * np.cos(l)
        - 3699.0 * np.cos(D2 - l)
        - 2956.0 * np.cos(D2)
        - 570.0 * np.cos(l2)
        + 246.0 * np.cos(l2 - D2)
        - 205.0 * np.cos(M - D2)
        - 171.0 * np.cos(l + D2)
        - 152.0 * np.cos(l + M - D2)
    )

    # Lunar ecliptic longitude (radians)
    lambda_moon = s + _ARCSEC_TO_RAD * (
        22640.0 * np.sin(l)
        + 769.0 * np.sin(l2)
        - 4586.0 * np.sin(l - D2)
        + 2370.0 * np.sin(D2)
        - 668.0 * sin_M
        - 412.0 * sin_F2
        - 212.0 * np.sin(l2 - D2)
        - 206.0 * np.sin(l + M - D2)
        + 192.0 * np.sin(l + D2)
        - 165.0 * np.sin(M - D2)
        - 148.0 * np.sin(l - M)
        - 125.0 * np.sin(D)
        - 110.0 * np.sin(l + M)
        - 55.0 * np.sin(F2 - D2)
    )

    # Lunar ecliptic latitude (radians)
    q = _ARCSEC_TO_RAD * (412.0 * sin_F2 + 541.0 * sin_M)
    F_minus_D2 = F - D2
    beta_moon = _ARCSEC_TO_RAD * (
        18520.0 * np.sin(F + lambda_moon - s + q)
        - 526.0 * np.sin(F_minus_D2)
        + 44.0 * np.sin(l + F_minus_D2)
        - 31.0 * np.sin(-l + F_minus_D2)
        - 25.0 * np.sin(-l2 + F)
        - 23.0 * np.sin(M + F_minus_D2)
        + 21.0 * np.sin(-l + F)
        + 11.0 * np.sin(-M + F_minus_D2)
    )

    cos_beta = np.cos(beta_moon)
    x = r_moon * np.cos(lambda_moon) * cos_beta
    y = r_moon * np.sin(lambda_moon) * cos_beta
    z = r_moon * np.sin(beta_moon)

    # Ecliptic to equatorial (rotation about X by -epsilon)
    u = x
    v = _COS_EPSILON * y - _SIN_EPSILON * z
    w = _SIN_EPSILON * y + _COS_EPSILON * z

    return u, v, w


def equatorial_to_ecef(
    x: np.ndarray,
    y: np.ndarray,
    z: np.ndarray,
    gmst: np.ndarray,
) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Rotate equatorial coordinates into the Earth-fixed frame

    Parameters
    ----------
    x, y, z : np.ndarray
        Geocentric equatorial coordinates
    gmst : np.ndarray
        Greenwich mean sidereal time (radians)

    Returns
    -------
    X, Y, Z : np.ndarray
        ECEF coordinates
    """
    cos_g = np.cos(gmst)
    sin_g = np.sin(gmst)

    # Z-rotation: [cos, sin, 0; -sin, cos, 0; 0, 0, 1] * [x, y, z]
    X = cos_g * x + sin_g * y
    Y = -sin_g * x + cos_g * y
    return X, Y, z


def solar_ecef(mjd: np.ndarray) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Compute solar ECEF coordinates

    Parameters
    ----------
    mjd : np.ndarray
        Modified Julian Day (UT1)

    Returns
    -------
    X, Y, Z : np.ndarray
        Solar ECEF coordinates (metres)
    """
    return equatorial_to_ecef(*solar_equatorial(mjd), greenwich_mean_sidereal_time(mjd))


def lunar_ecef(mjd: np.ndarray) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Compute lunar ECEF coordinates

    Parameters
    ----------
    mjd : np.ndarray
        Modified Julian Day (UT1)

    Returns
    -------
    X, Y, Z : np.ndarray
        Lunar ECEF coordinates (metres)
    """
    return equatorial_to_ecef(*lunar_equatorial(mjd), greenwich_mean_sidereal_time(mjd))


def sun_moon_position(mjd_utc: float, erp=None) -> tuple[np.ndarray, np.ndarray, float]:
    """
    Default ephemeris provider for the solid Earth tide

    Parameters
    ----------
    mjd_utc : float
        Modified Julian Day (UTC)
    erp : EarthRotationParameters, optional
        Earth rotation parameters; only UT1-UTC is applied

    Returns
    -------
    rsun : np.ndarray
        Sun ECEF position (metres), shape (3,)
    rmoon : np.ndarray
        Moon ECEF position (metres), shape (3,)
    gmst : float
        Greenwich mean sidereal time (radians)
    """
    ut1_utc = 0.0 if erp is None else erp.ut1_utc
    mjd_ut1 = float(utc_to_ut1(mjd_utc, ut1_utc))

    gmst = float(greenwich_mean_sidereal_time(mjd_ut1))
    rsun = np.array(equatorial_to_ecef(*solar_equatorial(mjd_ut1), gmst), dtype=np.float64)
    rmoon = np.array(equatorial_to_ecef(*lunar_equatorial(mjd_ut1), gmst), dtype=np.float64)
    return rsun, rmoon, gmst


def loading_arguments(
    mjd: np.ndarray,
) -> tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
    """
    Astronomical arguments for the ocean loading constituents

    Follows subroutine ARG of the IERS Conventions (1996).

    Parameters
    ----------
    mjd : np.ndarray
        Modified Julian Day (UT1)

    Returns
    -------
    fday : np.ndarray
        Seconds of day
    H0 : np.ndarray
        Mean longitude of the sun (radians)
    S0 : np.ndarray
        Mean longitude of the moon (radians)
    P0 : np.ndarray
        Mean longitude of lunar perigee (radians)
    """
    mjd = np.asarray(mjd, dtype=np.float64)
    midnight, fday = split_day(mjd)

    # Days since 1975-01-01, counting that day as day 1
    days = midnight - MJD_1975 + 1.0
    t = (27392.500528 + 1.000000035 * days) / _JULIAN_CENTURY

    H0 = polynomial_sum(_H0_COEFFICIENTS, t) * _DEG_TO_RAD
    S0 = polynomial_sum(_S0_COEFFICIENTS, t) * _DEG_TO_RAD
    P0 = polynomial_sum(_P0_COEFFICIENTS, t) * _DEG_TO_RAD
    return fday, H0, S0, P0
