"""
pyTideDisp.io - Input and output of tidal displacement data

This module provides:
- BLQ: ocean tide loading coefficient files
- ERP: IGS Earth rotation parameter files and interpolation
- dataset: xarray Dataset output of displacement time series

Copyright (c) 2024-2026 tkykszk

This software is licensed under the MIT License.
See LICENSE file for details.
"""

from . import BLQ
from . import ERP
from .BLQ import (
    read_blq,
    read_blq_stations,
)
from .ERP import (
    EarthRotationParameters,
    ERPTable,
    read_erp,
)
from .dataset import to_dataset

__all__ = [
    'BLQ',
    'ERP',
    # BLQ functions
    'read_blq',
    'read_blq_stations',
    # ERP functions
    'EarthRotationParameters',
    'ERPTable',
    'read_erp',
    # Dataset output
    'to_dataset',
]
