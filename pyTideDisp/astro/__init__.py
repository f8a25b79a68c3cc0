"""
pyTideDisp.astro - Astronomical calculation module

Provides functions for:
- Solar and lunar ephemerides
- Greenwich mean sidereal time
- Astronomical arguments of the ocean loading constituents

Copyright (c) 2024-2026 tkykszk
A derivative work of PyTMD (https://github.com/tsutterley/pyTMD)
Original author: Tyler Sutterley
Original license: MIT License (source code), CC BY 4.0 (content)

This software is licensed under the MIT License.
See LICENSE file for details.
"""

from .ephemeris import (
    solar_equatorial,
    lunar_equatorial,
    equatorial_to_ecef,
    solar_ecef,
    lunar_ecef,
    greenwich_mean_sidereal_time,
    polynomial_sum,
    sun_moon_position,
    loading_arguments,
)

__all__ = [
    'solar_equatorial',
    'lunar_equatorial',
    'equatorial_to_ecef',
    'solar_ecef',
    'lunar_ecef',
    'greenwich_mean_sidereal_time',
    'polynomial_sum',
    'sun_moon_position',
    'loading_arguments',
]
