#!/usr/bin/env python3
"""Test suite for GNSSTime"""

import unittest
from datetime import datetime

from pvtcore.core.time import GNSSTime


class TestGNSSTime(unittest.TestCase):
    """Test GNSS epochs"""

    def test_tow_normalization(self):
        """TOW outside one week rolls the week number"""
        t = GNSSTime(2300, 604800.5, 'GPS')
        self.assertEqual(t.week, 2301)
        self.assertAlmostEqual(t.tow, 0.5)

        t = GNSSTime(2300, -0.5, 'GPS')
        self.assertEqual(t.week, 2299)
        self.assertAlmostEqual(t.tow, 604799.5)

    def test_invalid_time_system(self):
        """Unknown time scales are refused"""
        with self.assertRaises(ValueError):
            GNSSTime(2300, 0.0, 'TAI')

    def test_seconds_arithmetic(self):
        """Adding and subtracting seconds keeps the time scale"""
        t = GNSSTime(2300, 100.0, 'GAL')
        later = t + 0.25
        earlier = t - 0.25
        self.assertEqual(later.time_sys, 'GAL')
        self.assertAlmostEqual(later - t, 0.25, places=12)
        self.assertAlmostEqual(t - earlier, 0.25, places=12)
        self.assertLess(earlier, t)
        self.assertGreater(later, t)

    def test_small_offsets_are_kept(self):
        """A nanosecond offset survives the arithmetic"""
        t = GNSSTime(2300, 345600.0, 'GPS')
        self.assertAlmostEqual(t - (t - 1.0e-9), 1.0e-9, delta=1.0e-10)

    def test_mixed_time_systems(self):
        """Differences across time scales raise"""
        with self.assertRaises(ValueError):
            GNSSTime(2300, 0.0, 'GPS') - GNSSTime(2300, 0.0, 'BDS')
        with self.assertRaises(ValueError):
            GNSSTime(2300, 0.0, 'GPS') < GNSSTime(2300, 0.0, 'GAL')

    def test_equality(self):
        """Epochs within one nanosecond are equal"""
        t = GNSSTime(2300, 10.0, 'GPS')
        self.assertEqual(t, GNSSTime(2300, 10.0 + 1e-12, 'GPS'))
        self.assertNotEqual(t, GNSSTime(2300, 10.0, 'GAL'))
        self.assertNotEqual(t, t + 1e-6)

    def test_gps_seconds(self):
        """Seconds since origin round trip through week/tow"""
        t = GNSSTime.from_gps_seconds(2300 * 604800 + 1234.5)
        self.assertEqual(t.week, 2300)
        self.assertAlmostEqual(t.tow, 1234.5)
        self.assertAlmostEqual(t.to_gps_seconds(), 2300 * 604800 + 1234.5)

    def test_datetime(self):
        """Datetime conversion uses the GPS origin"""
        t = GNSSTime.from_datetime(datetime(1980, 1, 13, 0, 0, 30))
        self.assertEqual(t.week, 1)
        self.assertAlmostEqual(t.tow, 30.0)
        self.assertEqual(t.to_datetime(), datetime(1980, 1, 13, 0, 0, 30))

    def test_day_of_year(self):
        """Fractional day of year"""
        t = GNSSTime.from_datetime(datetime(2024, 1, 1))
        self.assertAlmostEqual(t.day_of_year(), 1.0)

        t = GNSSTime.from_datetime(datetime(2024, 2, 1, 12))
        self.assertAlmostEqual(t.day_of_year(), 32.5)

    def test_copy(self):
        """Copies are independent"""
        t = GNSSTime(2300, 10.0, 'BDS')
        c = t.copy()
        c.tow = 20.0
        self.assertEqual(t.tow, 10.0)
        self.assertEqual(c.time_sys, 'BDS')


if __name__ == '__main__':
    unittest.main()
