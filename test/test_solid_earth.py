"""
Tests for pyTideDisp solid Earth tide functions

Tests the solid Earth tide displacement calculations including:
- point_mass_tide(): displacement due to a single body
- solid_earth_tide(): Sun and Moon with the K1 correction
- permanent_deformation(): permanent tide removal
- Love number latitude dependence
"""

import numpy as np
import pytest


def _reference_point_mass(eu, rp, GMp, lat, lon):
    """Displacement from a single body written out term by term"""
    r = np.linalg.norm(rp)
    ep = rp / r
    K2 = GMp / 3.986004415e14 * 6378137.0**4 / r**3
    K3 = K2 * 6378137.0 / r
    latp = np.arcsin(ep[2])
    lonp = np.arctan2(ep[1], ep[0])
    p = (3.0 * np.sin(lat)**2 - 1.0) / 2.0
    H2 = 0.6078 - 0.0006 * p
    L2 = 0.0847 + 0.0002 * p
    a = np.dot(ep, eu)
    dp = K2 * 3.0 * L2 * a + K3 * 0.015 * (7.5 * a**2 - 1.5)
    du = (
        K2 * (H2 * (1.5 * a**2 - 0.5) - 3.0 * L2 * a**2)
        + K3 * (0.292 * (2.5 * a**3 - 1.5 * a) - 0.015 * (7.5 * a**2 - 1.5) * a)
        + 0.75 * 0.0025 * K2 * np.sin(2.0 * latp) * np.sin(2.0 * lat) * np.sin(lon - lonp)
        + 0.75 * 0.0022 * K2 * np.cos(latp)**2 * np.cos(lat)**2 * np.sin(2.0 * (lon - lonp))
    )
    return dp * ep + du * eu


class TestLoveNumbers:
    """Tests for latitude-dependent Love numbers"""

    def test_love_numbers_equator(self):
        """At the equator P2(sin(lat)) = -1/2"""
        from pyTideDisp.predict.solid_earth import love_numbers

        h2, l2 = love_numbers(0.0)
        assert h2 == pytest.approx(0.6078 + 0.0003)
        assert l2 == pytest.approx(0.0847 - 0.0001)

    def test_love_numbers_pole(self):
        """At the pole P2(sin(lat)) = 1"""
        from pyTideDisp.predict.solid_earth import love_numbers

        h2, l2 = love_numbers(np.pi / 2.0)
        assert h2 == pytest.approx(0.6072)
        assert l2 == pytest.approx(0.0849)


class TestPointMassTide:
    """Tests for point_mass_tide function"""

    def test_zero_body_position(self):
        """A body at the geocentre gives no displacement"""
        from pyTideDisp.predict.solid_earth import GM_MOON, point_mass_tide

        dr = point_mass_tide(np.array([1.0, 0.0, 0.0]), np.zeros(3), GM_MOON, 0.0, 0.0)
        assert np.all(dr == 0.0)

    def test_sub_lunar_point_radial(self):
        """Moon overhead at the equator lifts the site radially"""
        from pyTideDisp.predict.solid_earth import GM_MOON, point_mass_tide

        eu = np.array([1.0, 0.0, 0.0])
        dr = point_mass_tide(eu, np.array([3.84e8, 0.0, 0.0]), GM_MOON, 0.0, 0.0)

        # Displacement is along the site vertical
        assert abs(dr[1]) < 1e-12
        assert abs(dr[2]) < 1e-12
        # Lunar bulge of a few decimetres
        assert 0.2 < dr[0] < 0.4

    def test_quadrature_depression(self):
        """Moon on the horizon lowers the site"""
        from pyTideDisp.predict.solid_earth import GM_MOON, point_mass_tide

        eu = np.array([1.0, 0.0, 0.0])
        dr = point_mass_tide(eu, np.array([0.0, 3.84e8, 0.0]), GM_MOON, 0.0, 0.0)
        assert dr[0] < 0.0
        assert -0.2 < dr[0] < -0.1

    def test_sun_smaller_than_moon(self):
        """The solar tide is about half the lunar tide"""
        from pyTideDisp.predict.solid_earth import GM_MOON, GM_SUN, point_mass_tide

        eu = np.array([1.0, 0.0, 0.0])
        moon = point_mass_tide(eu, np.array([3.84e8, 0.0, 0.0]), GM_MOON, 0.0, 0.0)
        sun = point_mass_tide(eu, np.array([1.496e11, 0.0, 0.0]), GM_SUN, 0.0, 0.0)
        assert 0.3 < sun[0] / moon[0] < 0.6

    def test_semidiurnal_out_of_phase(self):
        """Bodies mirrored about the meridian differ by the 0.0022 term"""
        from pyTideDisp.predict.solid_earth import GM_MOON, point_mass_tide

        r = 3.84e8
        c = np.sqrt(0.5)
        eu = np.array([1.0, 0.0, 0.0])
        east = point_mass_tide(eu, r * np.array([c, c, 0.0]), GM_MOON, 0.0, 0.0)
        west = point_mass_tide(eu, r * np.array([c, -c, 0.0]), GM_MOON, 0.0, 0.0)

        K2 = 4.902801e12 / 3.986004415e14 * 6378137.0**4 / r**3
        assert east[0] - west[0] == pytest.approx(-2.0 * 0.75 * 0.0022 * K2, rel=1e-9)

    def test_diurnal_out_of_phase(self):
        """Bodies mirrored about the meridian differ by the 0.0025 term"""
        from pyTideDisp.predict.solid_earth import GM_MOON, point_mass_tide

        r = 3.84e8
        c = np.sqrt(0.5)
        lat = np.pi / 4.0
        eu = np.array([c, 0.0, c])
        east = point_mass_tide(eu, r * np.array([0.0, c, c]), GM_MOON, lat, 0.0)
        west = point_mass_tide(eu, r * np.array([0.0, -c, c]), GM_MOON, lat, 0.0)

        K2 = 4.902801e12 / 3.986004415e14 * 6378137.0**4 / r**3
        assert np.dot(east - west, eu) == pytest.approx(-2.0 * 0.75 * 0.0025 * K2, rel=1e-9)

    def test_off_meridian_reference(self):
        """Body off the meridian and off the equator"""
        from pyTideDisp.predict.solid_earth import GM_MOON, GM_SUN, point_mass_tide

        lat, lon = 0.61, -1.13
        eu = np.array([np.cos(lat) * np.cos(lon), np.cos(lat) * np.sin(lon), np.sin(lat)])
        for rp, GMp in (
            (np.array([1.1e8, -2.9e8, 1.5e8]), GM_MOON),
            (np.array([-9.0e10, 1.1e11, -4.2e10]), GM_SUN),
        ):
            expected = _reference_point_mass(eu, rp, GMp, lat, lon)
            np.testing.assert_allclose(
                point_mass_tide(eu, rp, GMp, lat, lon), expected, rtol=1e-12, atol=1e-15
            )


class TestSolidEarthTide:
    """Tests for solid_earth_tide function"""

    def _frame(self, lat, lon):
        from pyTideDisp.spatial import ecef_to_enu_rotation
        return ecef_to_enu_rotation(lat, lon)

    def test_k1_term_only(self):
        """Without bodies only the K1 correction remains"""
        from pyTideDisp.predict.solid_earth import solid_earth_tide

        lat = np.pi / 4.0
        E = self._frame(lat, 0.0)
        dr = solid_earth_tide(np.zeros(3), np.zeros(3), lat, 0.0, E, np.pi / 2.0)
        np.testing.assert_allclose(dr, -0.012 * E[2], atol=1e-15)

    def test_permanent_deformation_delta(self):
        """Removing the permanent tide adds the closed-form bulge"""
        from pyTideDisp.predict.solid_earth import (
            permanent_deformation, solid_earth_tide,
        )

        lat, lon = np.radians(52.0), np.radians(13.0)
        E = self._frame(lat, lon)
        rsun = np.array([1.2e11, 8.0e10, 3.0e10])
        rmoon = np.array([2.0e8, -3.0e8, 1.0e8])

        dr0 = solid_earth_tide(rsun, rmoon, lat, lon, E, 1.0)
        dr1 = solid_earth_tide(rsun, rmoon, lat, lon, E, 1.0, remove_permanent=True)

        dn, du = permanent_deformation(lat)
        np.testing.assert_allclose(dr1 - dr0, du * E[2] + dn * E[1], atol=1e-12)

    def test_permanent_deformation_values(self):
        """Permanent tide at the equator and the pole"""
        from pyTideDisp.predict.solid_earth import permanent_deformation

        dn, du = permanent_deformation(0.0)
        assert du == pytest.approx(-0.0598)
        assert dn == pytest.approx(0.0)

        dn, du = permanent_deformation(np.pi / 2.0)
        assert du == pytest.approx(0.1196)
        assert dn == pytest.approx(0.0, abs=1e-15)

    def test_magnitude_bounded(self):
        """Solid tide stays below 0.6 m over a day"""
        from pyTideDisp.astro.ephemeris import sun_moon_position
        from pyTideDisp.predict.solid_earth import solid_earth_tide

        lat, lon = np.radians(10.0), np.radians(140.0)
        E = self._frame(lat, lon)
        for mjd in 60310.0 + np.arange(24) / 24.0:
            rsun, rmoon, gmst = sun_moon_position(mjd)
            dr = solid_earth_tide(rsun, rmoon, lat, lon, E, gmst)
            assert np.linalg.norm(dr) < 0.6
