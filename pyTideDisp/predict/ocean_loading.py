"""
pyTideDisp.predict.ocean_loading - Ocean Tide Loading Displacement

Harmonic synthesis of site displacements due to ocean tide loading
from the 11 standard constituents of a BLQ coefficient table
(M2, S2, N2, K2, K1, O1, P1, Q1, Mf, Mm, Ssa).

References:
    D. D. McCarthy (ed.), IERS Conventions (1996), IERS Technical
        Note 21, Chapter 7 (subroutine ARG).
    H.-G. Scherneck, "Explanatory supplement to the section Local site
        displacement due to ocean loading", 1999.

Copyright (c) 2024-2026 tkykszk

This software is licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from ..astro.ephemeris import loading_arguments

__all__ = [
    'CONSTITUENTS',
    'OceanLoadingCoefficients',
    'constituent_arguments',
    'ocean_loading_tide',
]

# Constituent order of BLQ tables
CONSTITUENTS = ('m2', 's2', 'n2', 'k2', 'k1', 'o1', 'p1', 'q1', 'mf', 'mm', 'ssa')

# Angular speed (rad/s) and multipliers of H0, S0, P0 and 2*pi
_ARGUMENTS = np.array([
    [1.40519e-4, 2.0, -2.0, 0.0, 0.00],   # M2
    [1.45444e-4, 0.0, 0.0, 0.0, 0.00],    # S2
    [1.37880e-4, 2.0, -3.0, 1.0, 0.00],   # N2
    [1.45842e-4, 2.0, 0.0, 0.0, 0.00],    # K2
    [0.72921e-4, 1.0, 0.0, 0.0, 0.25],    # K1
    [0.67598e-4, 1.0, -2.0, 0.0, -0.25],  # O1
    [0.72523e-4, -1.0, 0.0, 0.0, -0.25],  # P1
    [0.64959e-4, 1.0, -3.0, 1.0, -0.25],  # Q1
    [0.53234e-5, 0.0, 2.0, 0.0, 0.00],    # Mf
    [0.26392e-5, 0.0, 1.0, -1.0, 0.00],   # Mm
    [0.03982e-5, 2.0, 0.0, 0.0, 0.00],    # Ssa
])
_ARGUMENTS.setflags(write=False)


@dataclass(frozen=True, eq=False)
class OceanLoadingCoefficients:
    """
    Ocean loading coefficients of a station

    Parameters
    ----------
    values : numpy.ndarray
        Table of shape (11, 6); for each constituent the amplitudes
        radial, west, south (meters) followed by the phases radial,
        west, south (degrees). A flat sequence of 66 values in the
        same order is also accepted.
    station : str, optional
        Station name
    """

    values: np.ndarray
    station: str = ''

    def __post_init__(self):
        values = np.array(self.values, dtype=np.float64)
        if values.size != len(CONSTITUENTS) * 6:
            raise ValueError(
                f"Ocean loading table must have {len(CONSTITUENTS) * 6} values, "
                f"got {values.size}"
            )
        values = values.reshape(len(CONSTITUENTS), 6)
        values.setflags(write=False)
        object.__setattr__(self, 'values', values)

    @classmethod
    def from_blq(cls, rows: np.ndarray, station: str = '') -> 'OceanLoadingCoefficients':
        """
        Create from the 6 x 11 layout of a BLQ record

        Parameters
        ----------
        rows : numpy.ndarray
            Rows amplitude radial/west/south and phase radial/west/south,
            columns in constituent order
        station : str, optional
            Station name
        """
        rows = np.asarray(rows, dtype=np.float64).reshape(6, len(CONSTITUENTS))
        return cls(rows.T, station=station)

    @property
    def amplitude(self) -> np.ndarray:
        """Amplitudes radial, west, south (meters), shape (11, 3)"""
        return self.values[:, :3]

    @property
    def phase(self) -> np.ndarray:
        """Phases radial, west, south (degrees), shape (11, 3)"""
        return self.values[:, 3:]


def constituent_arguments(mjd: np.ndarray) -> np.ndarray:
    """
    Angular arguments of the 11 ocean loading constituents

    Parameters
    ----------
    mjd : numpy.ndarray
        Modified Julian Day (UT1)

    Returns
    -------
    numpy.ndarray
        Arguments (radians), shape mjd.shape + (11,)
    """
    fday, H0, S0, P0 = loading_arguments(mjd)
    a = np.stack(np.broadcast_arrays(fday, H0, S0, P0, 2.0 * np.pi), axis=-1)
    return a @ _ARGUMENTS.T


def ocean_loading_tide(mjd: np.ndarray, odisp) -> np.ndarray:
    """
    Displacement due to ocean tide loading

    Parameters
    ----------
    mjd : numpy.ndarray
        Modified Julian Day (UT1)
    odisp : OceanLoadingCoefficients or numpy.ndarray
        Coefficient table, shape (11, 6) or 66 values

    Returns
    -------
    denu : numpy.ndarray
        Local (east, north, up) displacement (meters),
        shape mjd.shape + (3,)
    """
    if not isinstance(odisp, OceanLoadingCoefficients):
        odisp = OceanLoadingCoefficients(odisp)

    mjd = np.asarray(mjd, dtype=np.float64)
    ang = constituent_arguments(mjd)

    # (radial, west, south) summed over constituents
    phase = np.radians(odisp.phase)
    dp = np.sum(
        odisp.amplitude * np.cos(ang[..., :, np.newaxis] - phase),
        axis=-2
    )

    return np.stack([-dp[..., 1], -dp[..., 2], dp[..., 0]], axis=-1)
