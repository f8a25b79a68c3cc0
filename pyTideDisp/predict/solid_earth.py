"""
pyTideDisp.predict.solid_earth - Solid Earth Tide Displacement

Calculates solid Earth body tide displacements of a site from the
positions of the Sun and Moon following IERS conventions:

- degree-2 and degree-3 in-phase response with latitude-dependent
  Love and Shida numbers
- out-of-phase (mantle anelasticity) radial corrections for the
  diurnal and semi-diurnal bands
- frequency-domain correction for the K1 constituent
- optional removal of the permanent tidal deformation

References:
    D. D. McCarthy and G. Petit (eds.), IERS Conventions (2003),
        IERS Technical Note 32, Chapter 7.
    J. Kouba, A Guide to using International GNSS Service (IGS)
        products, 2009, Section 5.2.1.

Copyright (c) 2024-2026 tkykszk
Derived from pyTMD by Tyler Sutterley (MIT License)
"""

from __future__ import annotations

import numpy as np

__all__ = [
    'point_mass_tide',
    'solid_earth_tide',
    'permanent_deformation',
    'love_numbers',
]

# Constants
_re_wgs84 = 6378137.0  # WGS84 Earth semi-major axis (m)
GM_EARTH = 3.986004415e14  # Earth gravitational constant (m^3/s^2)
GM_SUN = 1.327124e20  # Sun gravitational constant (m^3/s^2)
GM_MOON = 4.902801e12  # Moon gravitational constant (m^3/s^2)

# Nominal Love/Shida numbers (Mathews et al. 1995, 1997)
_h2_default = 0.6078
_l2_default = 0.0847
_h3_default = 0.292
_l3_default = 0.015

# Out-of-phase radial coefficients (diurnal, semi-diurnal)
_dhi_diurnal = 0.0025
_dhi_semidiurnal = 0.0022

# K1 frequency-domain radial amplitude (m)
_k1_radial = -0.012

# Permanent tide amplitudes (m)
_permanent_radial = 0.1196
_permanent_north = 0.0247


def love_numbers(lat: float) -> tuple[float, float]:
    """
    Latitude-dependent degree-2 Love and Shida numbers

    Parameters
    ----------
    lat : float
        Site latitude (radians)

    Returns
    -------
    h2 : float
        Degree-2 Love number
    l2 : float
        Degree-2 Shida number
    """
    sin_lat = np.sin(lat)
    p = (3.0 * sin_lat * sin_lat - 1.0) / 2.0
    return _h2_default - 0.0006 * p, _l2_default + 0.0002 * p


def point_mass_tide(
    eu: np.ndarray,
    rp: np.ndarray,
    GMp: float,
    lat: float,
    lon: float,
) -> np.ndarray:
    """
    Tidal displacement of a site due to a single perturbing body

    Parameters
    ----------
    eu : numpy.ndarray
        Unit vector of the local vertical in ECEF, shape (3,)
    rp : numpy.ndarray
        ECEF position of the perturbing body (meters), shape (3,)
    GMp : float
        Gravitational parameter of the perturbing body (m^3/s^2)
    lat : float
        Site latitude (radians)
    lon : float
        Site longitude (radians)

    Returns
    -------
    dr : numpy.ndarray
        Displacement in ECEF (meters), shape (3,)
    """
    rp = np.asarray(rp, dtype=np.float64)
    eu = np.asarray(eu, dtype=np.float64)

    r = np.sqrt(np.dot(rp, rp))
    if r <= 0.0:
        return np.zeros(3)

    ep = rp / r

    # Scaling factors for degree 2 and 3
    K2 = GMp / GM_EARTH * _re_wgs84**4 / r**3
    K3 = K2 * _re_wgs84 / r

    # Latitude and longitude of the sub-body point
    latp = np.arcsin(ep[2])
    lonp = np.arctan2(ep[1], ep[0])
    cosp = np.cos(latp)
    cosl = np.cos(lat)

    # In phase, degree 2
    H2, L2 = love_numbers(lat)
    a = np.dot(ep, eu)
    dp = K2 * 3.0 * L2 * a
    du = K2 * (H2 * (1.5 * a * a - 0.5) - 3.0 * L2 * a * a)

    # In phase, degree 3
    dp += K3 * _l3_default * (7.5 * a * a - 1.5)
    du += K3 * (_h3_default * (2.5 * a * a * a - 1.5 * a)
                - _l3_default * (7.5 * a * a - 1.5) * a)

    # Out of phase, radial only
    du += 0.75 * _dhi_diurnal * K2 * np.sin(2.0 * latp) * np.sin(2.0 * lat) * np.sin(lon - lonp)
    du += 0.75 * _dhi_semidiurnal * K2 * cosp * cosp * cosl * cosl * np.sin(2.0 * (lon - lonp))

    return dp * ep + du * eu


def permanent_deformation(lat: float) -> tuple[float, float]:
    """
    Permanent tidal deformation removed from the conventional tide-free model

    Parameters
    ----------
    lat : float
        Site latitude (radians)

    Returns
    -------
    dn : float
        North displacement (meters)
    du : float
        Radial displacement (meters)
    """
    sin_lat = np.sin(lat)
    du = _permanent_radial * (1.5 * sin_lat * sin_lat - 0.5)
    dn = _permanent_north * np.sin(2.0 * lat)
    return dn, du


def solid_earth_tide(
    rsun: np.ndarray,
    rmoon: np.ndarray,
    lat: float,
    lon: float,
    E: np.ndarray,
    gmst: float,
    remove_permanent: bool = False,
) -> np.ndarray:
    """
    Calculate solid Earth tide displacement in Cartesian coordinates

    Parameters
    ----------
    rsun : numpy.ndarray
        Sun ECEF coordinates (meters), shape (3,)
    rmoon : numpy.ndarray
        Moon ECEF coordinates (meters), shape (3,)
    lat : float
        Site latitude (radians)
    lon : float
        Site longitude (radians)
    E : numpy.ndarray
        ECEF to ENU rotation matrix at the site, shape (3, 3)
    gmst : float
        Greenwich mean sidereal time (radians)
    remove_permanent : bool, default False
        Eliminate the permanent deformation (mean tide system)

    Returns
    -------
    dr : numpy.ndarray
        Displacement in ECEF (meters), shape (3,)
    """
    E = np.asarray(E, dtype=np.float64)
    en = E[1]
    eu = E[2]

    # Time domain, Sun and Moon
    dr = point_mass_tide(eu, rsun, GM_SUN, lat, lon)
    dr = dr + point_mass_tide(eu, rmoon, GM_MOON, lat, lon)

    # Frequency domain, only K1 radial
    du = _k1_radial * np.sin(2.0 * lat) * np.sin(gmst + lon)
    dr = dr + du * eu

    if remove_permanent:
        dn, du = permanent_deformation(lat)
        dr = dr + du * eu + dn * en

    return dr
