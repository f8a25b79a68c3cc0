"""
pyTideDisp - Site displacement due to solid Earth, ocean loading and pole tides

Computes the earth-fixed displacement of a site on the Earth's surface
used to correct GNSS positions to the conventional tide-free frame.

Copyright (c) 2024-2026 tkykszk

This software is licensed under the MIT License.
See LICENSE file for details.

Usage:
    from datetime import datetime
    import numpy as np
    import pyTideDisp

    xyz = np.array([3370658.5, 711877.1, 5349786.9])  # ONSA

    # Solid Earth tide only
    dr = pyTideDisp.tide_displacement(datetime(2024, 1, 1), xyz, options=1)

    # Solid Earth tide, ocean loading and pole tide
    odisp = pyTideDisp.io.read_blq('stations.blq', 'ONSA')
    erp = pyTideDisp.io.read_erp('igs24p01.erp')
    dr = pyTideDisp.tide_displacement(
        datetime(2024, 1, 1), xyz, options=7, erp=erp, odisp=odisp
    )
"""

from . import compute
from . import config
from . import io
from . import predict
from . import spatial
from .compute import (
    TideOption,
    tide_displacement,
    tide_displacements,
)
from .io import (
    EarthRotationParameters,
    ERPTable,
    read_blq,
    read_erp,
)
from .predict import (
    OceanLoadingCoefficients,
    mean_pole,
    ocean_loading_tide,
    point_mass_tide,
    pole_tide,
    solid_earth_tide,
)
from .spatial import (
    to_cartesian,
    datum,
)
from .time import (
    datetime_to_mjd,
    to_mjd,
)
from .config import (
    # Default options
    get_default_options,
    set_default_options,
    # Missing-data warnings
    enable_missing_warnings,
    disable_missing_warnings,
    is_missing_warnings_enabled,
    missing_warnings,
    # Status
    get_settings_info,
)

__version__ = '0.1.0'
__all__ = [
    'compute',
    'config',
    'io',
    'predict',
    'spatial',
    # Tidal displacement
    'TideOption',
    'tide_displacement',
    'tide_displacements',
    # Components
    'point_mass_tide',
    'solid_earth_tide',
    'ocean_loading_tide',
    'mean_pole',
    'pole_tide',
    # Data
    'OceanLoadingCoefficients',
    'EarthRotationParameters',
    'ERPTable',
    'read_blq',
    'read_erp',
    # Spatial
    'to_cartesian',
    'datum',
    # Time
    'datetime_to_mjd',
    'to_mjd',
    # Settings
    'get_default_options',
    'set_default_options',
    'enable_missing_warnings',
    'disable_missing_warnings',
    'is_missing_warnings_enabled',
    'missing_warnings',
    'get_settings_info',
]
