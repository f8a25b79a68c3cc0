"""
pyTideDisp.predict.pole_tide - Solid Earth Pole Tide Displacement

Displacement of a site due to the centrifugal effect of polar motion
relative to the IERS (2010) conventional mean pole.

References:
    G. Petit and B. Luzum (eds.), IERS Conventions (2010), IERS
        Technical Note 36, Section 7.1.4, equations 7.24 to 7.26.

Copyright (c) 2024-2026 tkykszk

This software is licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations

import numpy as np

from ..time import MJD_2000

__all__ = [
    'mean_pole',
    'pole_tide',
]

_ARCSEC_TO_RAD = np.pi / (180.0 * 3600.0)  # Arcseconds to radians
_YEAR_DAYS = 365.25

# Start of the linear mean pole model (2010.0) in years since 2000.0
_Y2010 = 3653.0 / _YEAR_DAYS

# Mean pole coefficients (mas, mas/yr, ...)
_XP_CUBIC = np.array([55.974, 1.8243, 0.18413, 0.007024])
_YP_CUBIC = np.array([346.346, 1.7896, -0.10729, -0.000908])
_XP_LINEAR = np.array([23.513, 7.6141])
_YP_LINEAR = np.array([358.891, -0.6287])

# Pole tide amplitudes (m/arcsec)
_horizontal_coefficient = 9e-3
_radial_coefficient = 33e-3


def mean_pole(mjd: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    """
    IERS (2010) conventional mean pole

    Cubic model until 2010.0 and linear model afterwards. The two
    pieces are not continuous at 2010.0.

    Parameters
    ----------
    mjd : numpy.ndarray
        Modified Julian Day (UT1)

    Returns
    -------
    xp_bar : numpy.ndarray
        Mean pole x coordinate (milliarcseconds)
    yp_bar : numpy.ndarray
        Mean pole y coordinate (milliarcseconds)
    """
    # Years since 2000-01-01T00:00:00
    y = (np.asarray(mjd, dtype=np.float64) - MJD_2000) / _YEAR_DAYS

    cubic = y < _Y2010
    xp_bar = np.where(cubic, np.polyval(_XP_CUBIC[::-1], y), np.polyval(_XP_LINEAR[::-1], y))
    yp_bar = np.where(cubic, np.polyval(_YP_CUBIC[::-1], y), np.polyval(_YP_LINEAR[::-1], y))
    return xp_bar, yp_bar


def pole_tide(mjd: np.ndarray, lat: float, lon: float, erp) -> np.ndarray:
    """
    Displacement due to the solid Earth pole tide

    Parameters
    ----------
    mjd : numpy.ndarray
        Modified Julian Day (UT1)
    lat : float
        Site latitude (radians)
    lon : float
        Site longitude (radians)
    erp : EarthRotationParameters
        Earth rotation parameters with polar motion ``xp``, ``yp`` (radians)

    Returns
    -------
    denu : numpy.ndarray
        Local (east, north, up) displacement (meters),
        shape mjd.shape + (3,)
    """
    xp_bar, yp_bar = mean_pole(mjd)

    # Wobble parameters (arcsec), IERS 2010 eq. 7.24
    m1 = np.asarray(erp.xp) / _ARCSEC_TO_RAD - xp_bar * 1e-3
    m2 = -np.asarray(erp.yp) / _ARCSEC_TO_RAD + yp_bar * 1e-3

    # sin(2*theta) = sin(2*phi), cos(2*theta) = -cos(2*phi)
    cos_lon = np.cos(lon)
    sin_lon = np.sin(lon)
    de = _horizontal_coefficient * np.sin(lat) * (m1 * sin_lon - m2 * cos_lon)
    dn = -_horizontal_coefficient * np.cos(2.0 * lat) * (m1 * cos_lon + m2 * sin_lon)
    du = -_radial_coefficient * np.sin(2.0 * lat) * (m1 * cos_lon + m2 * sin_lon)

    return np.stack(np.broadcast_arrays(de, dn, du), axis=-1)
