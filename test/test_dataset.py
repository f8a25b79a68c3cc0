"""
Tests for xarray Dataset output of displacement time series
"""

import numpy as np
import pytest

xr = pytest.importorskip('xarray')


class TestToDataset:
    """Tests for to_dataset"""

    def test_cartesian(self, onsa_xyz):
        from pyTideDisp.compute import tide_displacements
        from pyTideDisp.io.dataset import to_dataset

        times = np.arange('2024-01-01', '2024-01-02', dtype='datetime64[h]')
        dr = tide_displacements(times, onsa_xyz, options=1)
        ds = to_dataset(times, dr, station='ONSA', options=1)

        assert isinstance(ds, xr.Dataset)
        assert set(ds.data_vars) == {'dx', 'dy', 'dz'}
        assert ds.sizes['time'] == 24
        assert ds.attrs['station'] == 'ONSA'
        assert ds.attrs['options'] == 1
        assert ds['dz'].attrs['units'] == 'm'
        np.testing.assert_array_equal(ds['dy'].values, dr[:, 1])
        np.testing.assert_allclose(ds['mjd'].values, 60310.0 + np.arange(24) / 24.0)

    def test_enu(self):
        from pyTideDisp.io.dataset import to_dataset

        mjd = np.array([60310.0, 60310.5])
        denu = np.array([[0.01, 0.02, 0.1], [-0.01, 0.0, -0.05]])
        ds = to_dataset(mjd, denu, coordinate_system='enu')
        assert set(ds.data_vars) == {'east', 'north', 'up'}
        np.testing.assert_array_equal(ds['up'].values, [0.1, -0.05])
        assert ds.attrs['coordinate_system'] == 'enu'

    def test_shape_mismatch(self):
        from pyTideDisp.io.dataset import to_dataset

        with pytest.raises(ValueError, match="displacement must have shape"):
            to_dataset([60310.0, 60311.0], np.zeros((3, 3)))

    def test_unknown_coordinate_system(self):
        from pyTideDisp.io.dataset import to_dataset

        with pytest.raises(ValueError, match="Unknown coordinate_system"):
            to_dataset([60310.0], np.zeros((1, 3)), coordinate_system='geographic')
