"""
Tests for reading BLQ ocean loading coefficient files
"""

import numpy as np
import pytest

from pyTideDisp.io.BLQ import read_blq, read_blq_stations
from pyTideDisp.predict.ocean_loading import OceanLoadingCoefficients


def test_read_station(blq_file):
    """Read the first station of the file"""
    odisp = read_blq(blq_file, 'ONSA')
    assert isinstance(odisp, OceanLoadingCoefficients)
    assert odisp.station == 'ONSA'
    assert odisp.values.shape == (11, 6)
    # M2 radial amplitude
    assert odisp.values[0, 0] == pytest.approx(0.00344)
    # Ssa south phase
    assert odisp.values[10, 5] == pytest.approx(-10.5)
    # K1 west amplitude
    assert odisp.amplitude[4, 1] == pytest.approx(0.00074)


def test_read_second_station(blq_file):
    """Station names are compared case-insensitively"""
    odisp = read_blq(blq_file, 'WTZR')
    assert odisp.station == 'WTZR'
    assert odisp.values[0, 0] == pytest.approx(0.00631)
    assert odisp.phase[0, 0] == pytest.approx(-51.4)


def test_lowercase_request(blq_file):
    odisp = read_blq(blq_file, 'onsa')
    assert odisp is not None
    assert odisp.values[1, 0] == pytest.approx(0.00121)


def test_missing_station(blq_file):
    """An absent station returns None with a warning"""
    with pytest.warns(UserWarning, match="No ocean loading coefficients"):
        odisp = read_blq(blq_file, 'ZIMM')
    assert odisp is None


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_blq(tmp_path / 'missing.blq', 'ONSA')


def test_empty_station_name(blq_file):
    with pytest.raises(ValueError, match="Station name"):
        read_blq(blq_file, '  ')


def test_truncated_record(tmp_path):
    """A record with fewer than six rows is not returned"""
    path = tmp_path / 'short.blq'
    path.write_text(
        "  ONSA\n"
        "  .00344 .00121 .00078 .00033 .00184 .00111 .00061 .00013 .00026 .00021 .00014\n"
    )
    with pytest.warns(UserWarning):
        assert read_blq(path, 'ONSA') is None


def test_station_list(blq_file):
    assert read_blq_stations(blq_file) == ['ONSA', 'WTZR']


def test_coefficients_flat_order(blq_file):
    """Flattened coefficients are constituent-major"""
    odisp = read_blq(blq_file, 'ONSA')
    flat = odisp.values.ravel()
    # Constituent n, row i of the record is at n * 6 + i
    assert flat[1 * 6 + 0] == pytest.approx(0.00121)
    assert flat[0 * 6 + 3] == pytest.approx(-64.7)
    np.testing.assert_allclose(flat[10 * 6:], [0.00014, 0.00003, 0.00001, 2.1, -177.7, -10.5])
