"""
pyTideDisp.compute - Site displacement due to tides

Combines the solid Earth tide, ocean tide loading and pole tide into a
single earth-fixed (ECEF) displacement of a site, for one epoch or for
a time series.

Copyright (c) 2024-2026 tkykszk

This software is licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations

import enum
import warnings
from typing import Callable, Optional, Union

import numpy as np

from . import config
from .astro.ephemeris import sun_moon_position
from .io.ERP import EarthRotationParameters
from .predict.ocean_loading import ocean_loading_tide
from .predict.pole_tide import pole_tide
from .predict.solid_earth import solid_earth_tide
from .spatial import ecef_to_enu_rotation, enu_to_ecef, site_latlon
from .time import to_mjd, utc_to_ut1

__all__ = [
    'TideOption',
    'resolve_erp',
    'tide_displacement',
    'tide_displacements',
]

# Ephemeris provider: (mjd_utc, erp) -> (rsun, rmoon, gmst)
Ephemeris = Callable[[float, EarthRotationParameters], tuple]


class TideOption(enum.IntFlag):
    """Tidal corrections to apply"""

    NONE = 0
    SOLID = 1
    OCEAN = 2
    POLE = 4
    REMOVE_PERMANENT = 8

    @classmethod
    def from_mode(cls, mode: int) -> 'TideOption':
        """
        Option flags for a positioning tide correction mode

        Parameters
        ----------
        mode : int
            0: off, 1: solid Earth tide only,
            2: solid Earth tide, ocean loading and pole tide

        Returns
        -------
        TideOption
        """
        modes = {
            0: cls.NONE,
            1: cls.SOLID,
            2: cls.SOLID | cls.OCEAN | cls.POLE,
        }
        if mode not in modes:
            raise ValueError(f"Unknown tide correction mode: {mode}. Must be 0, 1 or 2")
        return modes[mode]


def _resolve_options(options) -> TideOption:
    if options is None:
        return TideOption(config.get_default_options())
    return TideOption(config.parse_options(options))


def resolve_erp(erp, mjd_utc: float) -> EarthRotationParameters:
    """
    Earth rotation parameters at an epoch from any supported source

    Parameters
    ----------
    erp : ERPTable, EarthRotationParameters, sequence or None
        Object with an ``interpolate(mjd)`` method, or the four values
        (xp, yp, ut1_utc, lod)
    mjd_utc : float
        Modified Julian Day (UTC)

    Returns
    -------
    EarthRotationParameters
        Parameters at the epoch, all zero when ``erp`` is None
    """
    if erp is None:
        return EarthRotationParameters.ZERO
    if hasattr(erp, 'interpolate'):
        return erp.interpolate(mjd_utc)
    return EarthRotationParameters(*(float(v) for v in erp))


def _warn_missing(option: TideOption, argument: str) -> None:
    if config.is_missing_warnings_enabled():
        warnings.warn(
            f"{option.name} correction requested but '{argument}' was not given; "
            "the term is omitted",
            UserWarning,
            stacklevel=3
        )


def tide_displacement(
    time,
    xyz: np.ndarray,
    options: Optional[Union[int, str]] = None,
    erp=None,
    odisp=None,
    ephemeris: Optional[Ephemeris] = None,
) -> np.ndarray:
    """
    Displacement of a site by tides at one epoch

    Parameters
    ----------
    time : datetime, numpy.datetime64 or float
        Epoch (UTC); a float is a Modified Julian Day
    xyz : numpy.ndarray
        Site ECEF position (meters), shape (3,)
    options : int, str or TideOption, optional
        Corrections to apply (1: solid, 2: ocean, 4: pole,
        8: remove permanent deformation). Other bits are ignored.
        Default from ``config``.
    erp : ERPTable or EarthRotationParameters, optional
        Earth rotation parameters; required for the pole tide
    odisp : OceanLoadingCoefficients or numpy.ndarray, optional
        Ocean loading coefficients of the site; required for ocean loading
    ephemeris : callable, optional
        Sun and Moon provider ``(mjd_utc, erp) -> (rsun, rmoon, gmst)``,
        default is the analytic ephemeris

    Returns
    -------
    dr : numpy.ndarray
        Displacement in ECEF (meters), shape (3,)

    Examples
    --------
    >>> from datetime import datetime
    >>> dr = tide_displacement(datetime(2024, 1, 1), xyz, options=1)
    """
    opts = _resolve_options(options)

    mjd_utc = float(to_mjd(time))
    erpv = resolve_erp(erp, mjd_utc)
    mjd_ut1 = float(utc_to_ut1(mjd_utc, erpv.ut1_utc))

    xyz = np.asarray(xyz, dtype=np.float64).reshape(3)
    dr = np.zeros(3)
    if np.dot(xyz, xyz) <= 0.0:
        return dr

    lat, lon = site_latlon(xyz)
    E = ecef_to_enu_rotation(lat, lon)

    if opts & TideOption.SOLID:
        if ephemeris is None:
            ephemeris = sun_moon_position
        rsun, rmoon, gmst = ephemeris(mjd_utc, erpv)
        dr += solid_earth_tide(
            rsun, rmoon, lat, lon, E, gmst,
            remove_permanent=bool(opts & TideOption.REMOVE_PERMANENT),
        )

    if opts & TideOption.OCEAN:
        if odisp is not None:
            dr += enu_to_ecef(E, ocean_loading_tide(mjd_ut1, odisp))
        else:
            _warn_missing(TideOption.OCEAN, 'odisp')

    if opts & TideOption.POLE:
        if erp is not None:
            dr += enu_to_ecef(E, pole_tide(mjd_ut1, lat, lon, erpv))
        else:
            _warn_missing(TideOption.POLE, 'erp')

    return dr


def tide_displacements(
    times,
    xyz: np.ndarray,
    options: Optional[Union[int, str]] = None,
    erp=None,
    odisp=None,
    ephemeris: Optional[Ephemeris] = None,
    coordinate_system: str = 'cartesian',
) -> np.ndarray:
    """
    Displacement of a site by tides over a time series

    Parameters
    ----------
    times : array_like
        Epochs (datetime64, datetime or MJD, UTC)
    xyz : numpy.ndarray
        Site ECEF position (meters), shape (3,)
    options, erp, odisp, ephemeris
        As for :func:`tide_displacement`
    coordinate_system : str, default 'cartesian'
        Output coordinate system:
        - 'cartesian': ECEF (dX, dY, dZ) displacements
        - 'enu': local (east, north, up) displacements

    Returns
    -------
    numpy.ndarray
        Displacements (meters), shape (n_times, 3)

    Examples
    --------
    >>> times = np.arange('2024-01-01', '2024-01-02', dtype='datetime64[h]')
    >>> denu = tide_displacements(times, xyz, coordinate_system='enu')
    """
    coordinate_system = coordinate_system.lower()
    if coordinate_system not in ('cartesian', 'enu'):
        raise ValueError(
            f"Unknown coordinate_system: {coordinate_system}. "
            "Must be 'cartesian' or 'enu'"
        )

    mjd = np.atleast_1d(to_mjd(times))
    xyz = np.asarray(xyz, dtype=np.float64).reshape(3)

    dr = np.zeros((len(mjd), 3))
    for i, t in enumerate(mjd):
        dr[i] = tide_displacement(
            float(t), xyz,
            options=options, erp=erp, odisp=odisp, ephemeris=ephemeris,
        )

    if coordinate_system == 'cartesian':
        return dr

    # Rotate into the local frame of the site
    lat, lon = site_latlon(xyz)
    E = ecef_to_enu_rotation(lat, lon)
    return dr @ E.T
