"""
pyTideDisp.io.dataset - xarray output of displacement time series

Usage:
    from pyTideDisp import tide_displacements
    from pyTideDisp.io import to_dataset

    times = np.arange('2024-01-01', '2024-01-02', dtype='datetime64[h]')
    dr = tide_displacements(times, xyz, options=7, erp=erp, odisp=odisp)
    ds = to_dataset(times, dr)

Copyright (c) 2024-2026 tkykszk

This software is licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations

from typing import Optional

import numpy as np

from ..time import to_mjd

try:
    import xarray as xr
    HAS_XARRAY = True
except ImportError:
    HAS_XARRAY = False
    xr = None

__all__ = ['HAS_XARRAY', 'to_dataset']

# Variable names and long names per coordinate system
_COMPONENTS = {
    'cartesian': (
        ('dx', 'X displacement (ECEF)'),
        ('dy', 'Y displacement (ECEF)'),
        ('dz', 'Z displacement (ECEF)'),
    ),
    'enu': (
        ('east', 'East displacement'),
        ('north', 'North displacement'),
        ('up', 'Up displacement'),
    ),
}


def to_dataset(
    times,
    displacement: np.ndarray,
    coordinate_system: str = 'cartesian',
    station: Optional[str] = None,
    options: Optional[int] = None,
) -> 'xr.Dataset':
    """
    Wrap a displacement time series in an xarray Dataset

    Parameters
    ----------
    times : array_like
        Epochs (datetime64, datetime or MJD)
    displacement : numpy.ndarray
        Displacements (meters), shape (n_times, 3)
    coordinate_system : str, default 'cartesian'
        'cartesian' for ECEF (dx, dy, dz) or 'enu' for (east, north, up)
    station : str, optional
        Station name stored as a dataset attribute
    options : int, optional
        Correction option bitmask stored as a dataset attribute

    Returns
    -------
    xr.Dataset
        Dataset with one variable per component along ``time`` and the
        MJD of each epoch as an auxiliary coordinate
    """
    if not HAS_XARRAY:
        raise ImportError("xarray is required for Dataset output")

    key = coordinate_system.lower()
    if key not in _COMPONENTS:
        raise ValueError(
            f"Unknown coordinate_system: {coordinate_system}. "
            f"Must be one of {list(_COMPONENTS.keys())}"
        )

    displacement = np.atleast_2d(np.asarray(displacement, dtype=np.float64))
    time_values = np.atleast_1d(np.asarray(times))
    if displacement.shape != (len(time_values), 3):
        raise ValueError(
            f"displacement must have shape ({len(time_values)}, 3), "
            f"got {displacement.shape}"
        )
    mjd = np.atleast_1d(to_mjd(time_values))

    data_vars = {
        name: (('time',), displacement[:, i], {'units': 'm', 'long_name': long_name})
        for i, (name, long_name) in enumerate(_COMPONENTS[key])
    }
    attrs = {'coordinate_system': key}
    if station is not None:
        attrs['station'] = station
    if options is not None:
        attrs['options'] = int(options)

    return xr.Dataset(
        data_vars,
        coords={
            'time': time_values,
            'mjd': (('time',), mjd, {'units': 'days', 'long_name': 'Modified Julian Day'}),
        },
        attrs=attrs,
    )
