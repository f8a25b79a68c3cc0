"""
pyTideDisp.time - Time conversions for tidal displacement

Converts datetime, numpy.datetime64 and Modified Julian Day inputs to
MJD (UTC), applies UT1-UTC offsets and splits epochs into whole days
and seconds of day.

Copyright (c) 2024-2026 tkykszk

This software is licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Union

import numpy as np

__all__ = [
    'MJD_J2000',
    'MJD_2000',
    'MJD_1975',
    'datetime_to_mjd',
    'to_mjd',
    'utc_to_ut1',
    'split_day',
]

# MJD of 1970-01-01T00:00:00 (Unix epoch)
_MJD_UNIX = 40587.0
# MJD of J2000.0 (2000-01-01T12:00:00)
MJD_J2000 = 51544.5
# MJD of 2000-01-01T00:00:00
MJD_2000 = 51544.0
# MJD of 1975-01-01T00:00:00
MJD_1975 = 42413.0
_DAY_SECONDS = 86400.0

TimeLike = Union[float, np.ndarray, datetime, np.datetime64]


def datetime_to_mjd(dt: datetime) -> float:
    """Convert datetime to Modified Julian Day (MJD), naive input is UTC"""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.timestamp() / _DAY_SECONDS + _MJD_UNIX


def to_mjd(times: TimeLike) -> Union[float, np.ndarray]:
    """
    Convert times to Modified Julian Day

    Parameters
    ----------
    times : datetime, numpy.datetime64, float or array of these
        Input times (UTC). Numeric input is taken to be MJD already.

    Returns
    -------
    float or numpy.ndarray
        Modified Julian Day, scalar for scalar input
    """
    if isinstance(times, datetime):
        return datetime_to_mjd(times)
    if isinstance(times, np.datetime64):
        seconds = times.astype('datetime64[us]').astype(np.int64) * 1e-6
        return float(seconds / _DAY_SECONDS + _MJD_UNIX)

    arr = np.asarray(times)
    if np.issubdtype(arr.dtype, np.datetime64):
        seconds = arr.astype('datetime64[us]').astype(np.int64) * 1e-6
        return seconds / _DAY_SECONDS + _MJD_UNIX
    if arr.dtype == object:
        return np.array([datetime_to_mjd(t) if isinstance(t, datetime)
                         else float(to_mjd(t)) for t in arr.ravel()]
                        ).reshape(arr.shape)
    if arr.ndim == 0:
        return float(arr)
    return arr.astype(np.float64)


def utc_to_ut1(mjd_utc: Union[float, np.ndarray],
               ut1_utc: Union[float, np.ndarray] = 0.0):
    """Shift MJD (UTC) by UT1-UTC (seconds) to MJD (UT1)"""
    return mjd_utc + np.asarray(ut1_utc) / _DAY_SECONDS


def split_day(mjd: Union[float, np.ndarray]):
    """
    Split MJD into the MJD of midnight and seconds of day

    Parameters
    ----------
    mjd : float or numpy.ndarray
        Modified Julian Day

    Returns
    -------
    day : float or numpy.ndarray
        MJD at 00:00 of the same day
    seconds : float or numpy.ndarray
        Seconds elapsed since 00:00
    """
    day = np.floor(mjd)
    return day, (mjd - day) * _DAY_SECONDS
