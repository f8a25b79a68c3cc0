"""
pyTideDisp.io.BLQ - Ocean tide loading coefficient files

Reads station records from BLQ files as distributed by the Onsala
ocean loading service (http://holt.oso.chalmers.se/loading/).

A BLQ file holds comment lines starting with ``$$`` and one record per
station: a line with the station name starting at the third column,
followed by six rows of eleven values (amplitudes radial, west, south
in meters, then phases radial, west, south in degrees) in the
constituent order M2 S2 N2 K2 K1 O1 P1 Q1 Mf Mm Ssa.

Copyright (c) 2024-2026 tkykszk

This software is licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations

import warnings
from pathlib import Path
from typing import Iterator, Optional, Union

import numpy as np

from ..predict.ocean_loading import CONSTITUENTS, OceanLoadingCoefficients

__all__ = [
    'read_blq',
    'read_blq_stations',
]

_COMMENT = '$$'
_ROWS = 6
_NAME_LENGTH = 16


def _station_key(name: str) -> str:
    """Normalized station name: first word, uppercase, 16 characters"""
    words = name.split()
    return words[0][:_NAME_LENGTH].upper() if words else ''


def _read_record(lines: Iterator[str]) -> Optional[np.ndarray]:
    """Read the six coefficient rows following a station name line"""
    rows = []
    for line in lines:
        if line.startswith(_COMMENT):
            continue
        try:
            values = [float(v) for v in line.split()[:len(CONSTITUENTS)]]
        except ValueError:
            continue
        if len(values) < len(CONSTITUENTS):
            continue
        rows.append(values)
        if len(rows) == _ROWS:
            return np.array(rows, dtype=np.float64)
    return None


def read_blq(
    input_file: Union[str, Path],
    station: str,
) -> Optional[OceanLoadingCoefficients]:
    """
    Read the ocean loading coefficients of a station from a BLQ file

    Parameters
    ----------
    input_file : str or Path
        Path to the BLQ file
    station : str
        Station name, compared case-insensitively

    Returns
    -------
    OceanLoadingCoefficients or None
        Coefficients of the station, None if the station is not found
    """
    input_file = Path(input_file).expanduser()
    if not input_file.exists():
        raise FileNotFoundError(f"File not found: {input_file}")

    key = _station_key(station)
    if not key:
        raise ValueError("Station name must not be empty")

    with open(input_file, 'r') as f:
        lines = iter(f)
        for line in lines:
            if line.startswith(_COMMENT) or len(line) < 2:
                continue
            if _station_key(line[2:]) != key:
                continue
            rows = _read_record(lines)
            if rows is not None:
                return OceanLoadingCoefficients.from_blq(rows, station=key)

    warnings.warn(
        f"No ocean loading coefficients for station {key} in {input_file}",
        UserWarning,
        stacklevel=2
    )
    return None


def read_blq_stations(input_file: Union[str, Path]) -> list[str]:
    """
    List the station names of a BLQ file

    Parameters
    ----------
    input_file : str or Path
        Path to the BLQ file

    Returns
    -------
    list of str
        Uppercase station names in file order
    """
    input_file = Path(input_file).expanduser()
    if not input_file.exists():
        raise FileNotFoundError(f"File not found: {input_file}")

    stations = []
    with open(input_file, 'r') as f:
        lines = iter(f)
        for line in lines:
            if line.startswith(_COMMENT) or len(line) < 2:
                continue
            key = _station_key(line[2:])
            if not key:
                continue
            # A name line is followed by its coefficient rows
            try:
                float(key)
            except ValueError:
                if _read_record(lines) is not None:
                    stations.append(key)
    return stations
