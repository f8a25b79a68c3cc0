"""
pyTideDisp.config - Process-wide settings for tidal displacement

Settings are read from environment variables at import time and can be
changed at runtime.

Environment variables:
    PYTIDEDISP_OPTIONS: default correction options, either an integer
        bitmask (1 solid, 2 ocean, 4 pole, 8 remove permanent deformation)
        or comma-separated names (e.g. ``solid,ocean,pole``)
    PYTIDEDISP_WARN_MISSING: warn when a requested correction is skipped
        because its input data were not supplied

Copyright (c) 2024-2026 tkykszk

This software is licensed under the MIT License.
"""

import os
import threading
import warnings
from contextlib import contextmanager

__all__ = [
    'OPTION_NAMES',
    'parse_options',
    'get_default_options',
    'set_default_options',
    'enable_missing_warnings',
    'disable_missing_warnings',
    'is_missing_warnings_enabled',
    'missing_warnings',
    'get_settings_info',
]

OPTION_NAMES = {
    'solid': 1,
    'ocean': 2,
    'pole': 4,
    'remove_permanent': 8,
}
_ALL_OPTIONS = 15
_DEFAULT_OPTIONS = 1


def parse_options(value) -> int:
    """Parse an option bitmask from an integer or comma-separated names.

    Parameters
    ----------
    value : int or str
        Bitmask, or names from ``OPTION_NAMES`` separated by commas or ``|``

    Returns
    -------
    int
        Option bitmask; bits other than the four correction flags are dropped
    """
    if isinstance(value, int):
        return int(value) & _ALL_OPTIONS

    text = str(value).strip().lower()
    if not text:
        return 0
    if text.isdigit():
        return parse_options(int(text))

    options = 0
    for name in text.replace('|', ',').split(','):
        name = name.strip()
        if not name:
            continue
        if name not in OPTION_NAMES:
            raise ValueError(
                f"Unknown correction option: {name!r}. "
                f"Supported: {list(OPTION_NAMES.keys())}"
            )
        options |= OPTION_NAMES[name]
    return options


class _Settings:
    """Thread-safe settings state."""

    def __init__(self):
        self._lock = threading.Lock()
        self._default_options = _DEFAULT_OPTIONS
        self._warn_missing = False

        self._init_from_env()

    def _init_from_env(self):
        """Initialize state from environment variables."""
        # PYTIDEDISP_OPTIONS
        options = os.environ.get('PYTIDEDISP_OPTIONS', '')
        if options.strip():
            try:
                self._default_options = parse_options(options)
            except ValueError as e:
                warnings.warn(
                    f"Ignoring PYTIDEDISP_OPTIONS={options!r}: {e}. "
                    f"Using default options {_DEFAULT_OPTIONS}.",
                    UserWarning,
                    stacklevel=2
                )

        # PYTIDEDISP_WARN_MISSING
        warn_missing = os.environ.get('PYTIDEDISP_WARN_MISSING', '').lower()
        if warn_missing in ('1', 'true', 'yes'):
            self._warn_missing = True

    @property
    def default_options(self) -> int:
        with self._lock:
            return self._default_options

    @default_options.setter
    def default_options(self, value: int):
        with self._lock:
            self._default_options = value

    @property
    def warn_missing(self) -> bool:
        with self._lock:
            return self._warn_missing

    @warn_missing.setter
    def warn_missing(self, value: bool):
        with self._lock:
            self._warn_missing = value


# Global state instance
_state = _Settings()


def get_default_options() -> int:
    """Return the option bitmask used when none is given."""
    return _state.default_options


def set_default_options(options) -> None:
    """Set the option bitmask used when none is given.

    Parameters
    ----------
    options : int or str
        Bitmask or comma-separated option names
    """
    _state.default_options = parse_options(options)


def enable_missing_warnings() -> None:
    """Warn when a requested correction lacks its input data."""
    _state.warn_missing = True


def disable_missing_warnings() -> None:
    """Silently skip corrections that lack their input data."""
    _state.warn_missing = False


def is_missing_warnings_enabled() -> bool:
    """Check whether missing-data warnings are enabled."""
    return _state.warn_missing


@contextmanager
def missing_warnings(enabled: bool = True):
    """Context manager to temporarily toggle missing-data warnings.

    Example
    -------
    >>> with missing_warnings():
    ...     dr = tide_displacement(mjd, xyz, options=7)
    """
    prev_state = _state.warn_missing
    _state.warn_missing = enabled
    try:
        yield
    finally:
        _state.warn_missing = prev_state


def get_settings_info() -> dict:
    """Return the current settings as a dictionary."""
    options = _state.default_options
    return {
        'default_options': options,
        'default_option_names': [
            name for name, bit in OPTION_NAMES.items() if options & bit
        ],
        'warn_missing': _state.warn_missing,
    }
