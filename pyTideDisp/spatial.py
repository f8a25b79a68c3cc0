"""
pyTideDisp.spatial - Spatial coordinate transformations

Provides the coordinate services used by the displacement models.

Functions:
    to_cartesian: Convert geodetic to cartesian (ECEF) coordinates
    site_latlon: Spherical latitude and longitude of an ECEF site
    ecef_to_enu_rotation: Rotation matrix from ECEF to local ENU
    enu_to_ecef: Rotate local ENU vectors into the ECEF frame
    datum: Ellipsoid parameters

References:
    B. Hofmann-Wellenhof and H. Moritz, "Physical Geodesy", 2005.

Copyright (c) 2024-2026 tkykszk
Derived from pyTMD by Tyler Sutterley (MIT License)
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

__all__ = [
    'datum',
    'to_cartesian',
    'site_latlon',
    'ecef_to_enu_rotation',
    'enu_to_ecef',
]


@dataclass
class datum:
    """
    Ellipsoid parameters for geodetic calculations

    Parameters
    ----------
    ellipsoid : str, optional
        Ellipsoid name (default: 'WGS84')
        Supported: 'WGS84', 'GRS80', 'WGS72'

    Attributes
    ----------
    a : float
        Semi-major axis (meters)
    f : float
        Flattening factor
    b : float
        Semi-minor axis (meters)
    e2 : float
        First eccentricity squared

    Examples
    --------
    >>> d = datum('WGS84')
    >>> d.a
    6378137.0
    """

    # Ellipsoid parameters (a: semi-major axis, f: flattening)
    _ellipsoids = {
        'WGS84': (6378137.0, 1.0 / 298.257223563),
        'GRS80': (6378137.0, 1.0 / 298.257222101),
        'WGS72': (6378135.0, 1.0 / 298.26),
    }

    a: float = 6378137.0  # WGS84 default
    f: float = 1.0 / 298.257223563
    name: str = 'WGS84'

    def __init__(self, ellipsoid: str = 'WGS84'):
        """Initialize datum with ellipsoid parameters"""
        ellipsoid = ellipsoid.upper()
        if ellipsoid not in self._ellipsoids:
            raise ValueError(
                f"Unknown ellipsoid: {ellipsoid}. "
                f"Supported: {list(self._ellipsoids.keys())}"
            )
        self.a, self.f = self._ellipsoids[ellipsoid]
        self.name = ellipsoid

    @property
    def b(self) -> float:
        """Semi-minor axis (meters)"""
        return self.a * (1.0 - self.f)

    @property
    def e2(self) -> float:
        """First eccentricity squared"""
        return self.f * (2.0 - self.f)


def to_cartesian(
    lon: np.ndarray,
    lat: np.ndarray,
    h: np.ndarray | None = None,
    ellipsoid: str = 'WGS84',
) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Convert geodetic coordinates to cartesian (ECEF)

    Parameters
    ----------
    lon : np.ndarray
        Longitude (degrees)
    lat : np.ndarray
        Latitude (degrees)
    h : np.ndarray, optional
        Height above ellipsoid (meters), default is 0
    ellipsoid : str, default 'WGS84'
        Reference ellipsoid name

    Returns
    -------
    x, y, z : np.ndarray
        ECEF coordinates (meters)

    Examples
    --------
    >>> x, y, z = to_cartesian(0.0, 45.0, 0.0)
    """
    lon = np.atleast_1d(np.asarray(lon, dtype=np.float64))
    lat = np.atleast_1d(np.asarray(lat, dtype=np.float64))

    if h is None:
        h = np.zeros_like(lon)
    else:
        h = np.atleast_1d(np.asarray(h, dtype=np.float64))

    d = datum(ellipsoid)

    lon_rad = np.radians(lon)
    lat_rad = np.radians(lat)
    cos_lat = np.cos(lat_rad)
    sin_lat = np.sin(lat_rad)

    # Radius of curvature in the prime vertical
    N = d.a / np.sqrt(1.0 - d.e2 * sin_lat**2)

    x = (N + h) * cos_lat * np.cos(lon_rad)
    y = (N + h) * cos_lat * np.sin(lon_rad)
    z = (N * (1.0 - d.e2) + h) * sin_lat

    return x, y, z


def site_latlon(xyz: np.ndarray) -> tuple[float, float]:
    """
    Spherical latitude and longitude of a site

    The tide models are evaluated with the geocentric latitude
    ``asin(z/|r|)`` rather than the ellipsoidal one.

    Parameters
    ----------
    xyz : np.ndarray
        Site ECEF coordinates (meters), shape (3,)

    Returns
    -------
    lat, lon : float
        Latitude and longitude (radians); zeros for a zero-length vector
    """
    xyz = np.asarray(xyz, dtype=np.float64)
    r = np.sqrt(np.dot(xyz, xyz))
    if r <= 0.0:
        return 0.0, 0.0
    return float(np.arcsin(xyz[2] / r)), float(np.arctan2(xyz[1], xyz[0]))


def ecef_to_enu_rotation(lat: float, lon: float) -> np.ndarray:
    """
    Create rotation matrix from ECEF to local ENU coordinates

    Rows are the east, north and up unit vectors expressed in ECEF.

    Parameters
    ----------
    lat : float
        Latitude in radians
    lon : float
        Longitude in radians

    Returns
    -------
    R : numpy.ndarray
        3x3 rotation matrix
    """
    sin_lat = np.sin(lat)
    cos_lat = np.cos(lat)
    sin_lon = np.sin(lon)
    cos_lon = np.cos(lon)

    R = np.array([
        [-sin_lon, cos_lon, 0.0],
        [-sin_lat * cos_lon, -sin_lat * sin_lon, cos_lat],
        [cos_lat * cos_lon, cos_lat * sin_lon, sin_lat]
    ])

    return R


def enu_to_ecef(R: np.ndarray, denu: np.ndarray) -> np.ndarray:
    """
    Rotate local (east, north, up) vectors into ECEF

    Parameters
    ----------
    R : numpy.ndarray
        ECEF to ENU rotation matrix (3, 3)
    denu : numpy.ndarray
        ENU vectors, shape (3,) or (n, 3)

    Returns
    -------
    numpy.ndarray
        ECEF vectors with the same shape as ``denu``
    """
    return np.asarray(denu, dtype=np.float64) @ R
