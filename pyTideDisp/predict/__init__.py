"""
pyTideDisp.predict - Tidal displacement models

Provides functions for:
- Solid Earth tide displacement (Sun and Moon point masses)
- Ocean tide loading displacement (11-constituent harmonic synthesis)
- Solid Earth pole tide displacement

Copyright (c) 2024-2026 tkykszk

This software is licensed under the MIT License.
See LICENSE file for details.
"""

from .ocean_loading import (
    CONSTITUENTS,
    OceanLoadingCoefficients,
    constituent_arguments,
    ocean_loading_tide,
)
from .pole_tide import (
    mean_pole,
    pole_tide,
)
from .solid_earth import (
    GM_EARTH,
    GM_MOON,
    GM_SUN,
    love_numbers,
    permanent_deformation,
    point_mass_tide,
    solid_earth_tide,
)

__all__ = [
    'CONSTITUENTS',
    'GM_EARTH',
    'GM_MOON',
    'GM_SUN',
    # Ocean loading
    'OceanLoadingCoefficients',
    'constituent_arguments',
    'love_numbers',
    'mean_pole',
    'ocean_loading_tide',
    'permanent_deformation',
    # Solid Earth tide
    'point_mass_tide',
    # Pole tide
    'pole_tide',
    'solid_earth_tide',
]
