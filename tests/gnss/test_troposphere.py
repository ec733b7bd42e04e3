#!/usr/bin/env python3
"""Test suite for tropospheric delay models"""

import unittest
from datetime import datetime

import numpy as np

from pvtcore.core.time import GNSSTime
from pvtcore.gnss.troposphere import (
    TropoComponents,
    mapping_function,
    tropo_delay,
    unb3_delay_components,
    unb3_meteo,
)


class TestMappingFunction(unittest.TestCase):
    """Test elevation mapping"""

    def test_zenith(self):
        """Mapping is 1 at zenith"""
        self.assertAlmostEqual(mapping_function(90.0), 1.0, places=9)

    def test_monotonic(self):
        """Mapping decreases with elevation"""
        elevations = np.linspace(0.0, 90.0, 181)
        values = [mapping_function(el) for el in elevations]
        for low, high in zip(values[:-1], values[1:]):
            self.assertGreaterEqual(low, high)

    def test_low_elevation(self):
        """About 10 at 5 degrees, bounded at the horizon"""
        self.assertAlmostEqual(mapping_function(5.0), 10.2, delta=0.3)
        self.assertAlmostEqual(mapping_function(0.0), 1.001 / np.sqrt(0.002001), places=6)


class TestTropoDelay(unittest.TestCase):
    """Test slant delay"""

    def test_zenith_sum(self):
        """Slant delay equals zwd + zdd at zenith"""
        self.assertAlmostEqual(tropo_delay(90.0, 0.1, 2.3), 2.4, places=9)

    def test_monotonic_in_elevation(self):
        """Higher elevation, shorter path"""
        delays = [tropo_delay(float(el), 0.15, 2.25) for el in range(5, 91)]
        for low, high in zip(delays[:-1], delays[1:]):
            self.assertGreaterEqual(low, high)
        self.assertGreater(delays[0], 5 * delays[-1])

    def test_components(self):
        """TropoComponents exposes the zenith total"""
        c = TropoComponents(zwd=0.12, zdd=2.3)
        self.assertAlmostEqual(c.ztd, 2.42)


class TestUNB3(unittest.TestCase):
    """Test the UNB3 zenith model"""

    def setUp(self):
        self.t = GNSSTime.from_datetime(datetime(2024, 7, 1, 12))

    def test_sea_level_values(self):
        """Dry ~2.3 m, wet a few decimeters at sea level"""
        for lat in (0.0, 15.0, 37.5, 45.0, 60.0, 80.0, -33.0):
            zdd, zwd = unb3_delay_components(self.t, lat, 0.0)
            self.assertAlmostEqual(zdd, 2.3, delta=0.05)
            self.assertGreater(zwd, 0.02)
            self.assertLess(zwd, 0.4)

    def test_equator_is_wetter(self):
        """Tropical air carries more water vapour"""
        _, zwd_eq = unb3_delay_components(self.t, 10.0, 0.0)
        _, zwd_pole = unb3_delay_components(self.t, 75.0, 0.0)
        self.assertGreater(zwd_eq, zwd_pole)

    def test_altitude_decreases_delay(self):
        """Less atmosphere above a higher receiver"""
        zdd0, zwd0 = unb3_delay_components(self.t, 45.0, 0.0)
        zdd1, zwd1 = unb3_delay_components(self.t, 45.0, 2000.0)
        self.assertLess(zdd1, zdd0)
        self.assertLess(zwd1, zwd0)
        # roughly exp(-h / 8 km) for the hydrostatic part
        self.assertAlmostEqual(zdd1 / zdd0, np.exp(-2000.0 / 8400.0), delta=0.02)

    def test_negative_altitude_is_sea_level(self):
        """Below sea level clamps to sea level"""
        self.assertEqual(unb3_delay_components(self.t, 45.0, -50.0),
                         unb3_delay_components(self.t, 45.0, 0.0))

    def test_above_model_atmosphere(self):
        """No delay above the model top"""
        self.assertEqual(unb3_delay_components(self.t, 45.0, 60000.0), (0.0, 0.0))

    def test_seasons(self):
        """Northern summer is warmer than northern winter, opposite in the south"""
        winter = GNSSTime.from_datetime(datetime(2024, 1, 28))
        summer = GNSSTime.from_datetime(datetime(2024, 7, 28))
        self.assertGreater(unb3_meteo(summer, 45.0)[1], unb3_meteo(winter, 45.0)[1])
        self.assertLess(unb3_meteo(summer, -45.0)[1], unb3_meteo(winter, -45.0)[1])

    def test_no_seasonal_term_in_tropics(self):
        """Amplitudes vanish below 15 degrees"""
        winter = GNSSTime.from_datetime(datetime(2024, 1, 28))
        summer = GNSSTime.from_datetime(datetime(2024, 7, 28))
        np.testing.assert_allclose(unb3_meteo(summer, 10.0), unb3_meteo(winter, 10.0))


if __name__ == '__main__':
    unittest.main()
