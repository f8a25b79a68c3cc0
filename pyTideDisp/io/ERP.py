"""
pyTideDisp.io.ERP - Earth rotation parameter files

Reads IGS Earth rotation parameter files (ERP version 2) and evaluates
polar motion, UT1-UTC and length of day at arbitrary epochs.

Each data row of an ERP file holds
    MJD Xpole Ypole UT1-UTC LOD Sx Sy Sut Slod Nr Nf Nt Xrt Yrt
with pole coordinates and rates in 1e-6 arcsec (per day) and
UT1-UTC and LOD in 1e-7 seconds. Header and comment lines are skipped.

Copyright (c) 2024-2026 tkykszk

This software is licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations

import warnings
from dataclasses import dataclass
from pathlib import Path
from typing import ClassVar, Union

import numpy as np

__all__ = [
    'EarthRotationParameters',
    'ERPTable',
    'read_erp',
]

_ARCSEC_TO_RAD = np.pi / (180.0 * 3600.0)
_POLE_SCALE = 1e-6 * _ARCSEC_TO_RAD
_TIME_SCALE = 1e-7
_MIN_COLUMNS = 5
_MAX_COLUMNS = 14


@dataclass(frozen=True)
class EarthRotationParameters:
    """
    Earth rotation parameters at one epoch

    Attributes
    ----------
    xp : float
        Pole x coordinate (radians)
    yp : float
        Pole y coordinate (radians)
    ut1_utc : float
        UT1-UTC (seconds)
    lod : float
        Length of day excess (seconds/day)
    """

    ZERO: ClassVar['EarthRotationParameters']

    xp: float = 0.0
    yp: float = 0.0
    ut1_utc: float = 0.0
    lod: float = 0.0

    def interpolate(self, mjd: float) -> 'EarthRotationParameters':
        """Constant parameters, returned unchanged for any epoch"""
        return self


EarthRotationParameters.ZERO = EarthRotationParameters()


class ERPTable:
    """
    Table of Earth rotation parameters

    Parameters
    ----------
    mjd : array_like
        Epochs of the records (MJD, UTC)
    xp, yp : array_like
        Pole coordinates (radians)
    ut1_utc : array_like
        UT1-UTC (seconds)
    lod : array_like
        Length of day excess (seconds/day)
    xpr, ypr : array_like, optional
        Pole coordinate rates (radians/day), zero if not given
    """

    def __init__(self, mjd, xp, yp, ut1_utc, lod, xpr=None, ypr=None):
        self.mjd = np.atleast_1d(np.asarray(mjd, dtype=np.float64))
        n = len(self.mjd)

        def _column(values):
            if values is None:
                return np.zeros(n)
            values = np.atleast_1d(np.asarray(values, dtype=np.float64))
            if values.shape != self.mjd.shape:
                raise ValueError(
                    f"ERP column has shape {values.shape}, expected {self.mjd.shape}"
                )
            return values

        self.xp = _column(xp)
        self.yp = _column(yp)
        self.ut1_utc = _column(ut1_utc)
        self.lod = _column(lod)
        self.xpr = _column(xpr)
        self.ypr = _column(ypr)

    def __len__(self) -> int:
        return len(self.mjd)

    def __repr__(self) -> str:
        if len(self) == 0:
            return 'ERPTable(empty)'
        return f'ERPTable(n={len(self)}, mjd={self.mjd[0]:.2f}..{self.mjd[-1]:.2f})'

    def _extrapolate(self, i: int, mjd: float) -> EarthRotationParameters:
        day = mjd - self.mjd[i]
        return EarthRotationParameters(
            xp=float(self.xp[i] + self.xpr[i] * day),
            yp=float(self.yp[i] + self.ypr[i] * day),
            ut1_utc=float(self.ut1_utc[i] - self.lod[i] * day),
            lod=float(self.lod[i]),
        )

    def interpolate(self, mjd: float) -> EarthRotationParameters:
        """
        Earth rotation parameters at an epoch

        Linear interpolation between the bracketing records; outside the
        table the nearest record is propagated with its rates.

        Parameters
        ----------
        mjd : float
            Modified Julian Day (UTC)

        Returns
        -------
        EarthRotationParameters
            Parameters at the epoch, all zero for an empty table
        """
        n = len(self)
        if n == 0:
            return EarthRotationParameters.ZERO

        mjd = float(mjd)
        if mjd <= self.mjd[0]:
            return self._extrapolate(0, mjd)
        if mjd >= self.mjd[-1]:
            return self._extrapolate(n - 1, mjd)

        j = int(np.searchsorted(self.mjd, mjd, side='right')) - 1
        j = min(max(j, 0), n - 2)
        if self.mjd[j + 1] == self.mjd[j]:
            a = 0.5
        else:
            a = (mjd - self.mjd[j]) / (self.mjd[j + 1] - self.mjd[j])

        def _lerp(values):
            return float((1.0 - a) * values[j] + a * values[j + 1])

        return EarthRotationParameters(
            xp=_lerp(self.xp),
            yp=_lerp(self.yp),
            ut1_utc=_lerp(self.ut1_utc),
            lod=_lerp(self.lod),
        )


def _leading_floats(line: str) -> list[float]:
    """Parse whitespace-separated numbers up to the first non-number"""
    values = []
    for token in line.split()[:_MAX_COLUMNS]:
        try:
            values.append(float(token))
        except ValueError:
            break
    return values


def read_erp(input_file: Union[str, Path]) -> ERPTable:
    """
    Read an IGS ERP (version 2) file

    Parameters
    ----------
    input_file : str or Path
        Path to the ERP file

    Returns
    -------
    ERPTable
        Earth rotation parameters in file order
    """
    input_file = Path(input_file).expanduser()
    if not input_file.exists():
        raise FileNotFoundError(f"File not found: {input_file}")

    rows = []
    with open(input_file, 'r') as f:
        for line in f:
            v = _leading_floats(line)
            if len(v) < _MIN_COLUMNS:
                continue
            v.extend([0.0] * (_MAX_COLUMNS - len(v)))
            rows.append(v)

    if not rows:
        warnings.warn(
            f"No Earth rotation parameters found in {input_file}",
            UserWarning,
            stacklevel=2
        )
        return ERPTable([], [], [], [], [])

    data = np.array(rows, dtype=np.float64)
    return ERPTable(
        mjd=data[:, 0],
        xp=data[:, 1] * _POLE_SCALE,
        yp=data[:, 2] * _POLE_SCALE,
        ut1_utc=data[:, 3] * _TIME_SCALE,
        lod=data[:, 4] * _TIME_SCALE,
        xpr=data[:, 12] * _POLE_SCALE,
        ypr=data[:, 13] * _POLE_SCALE,
    )
