#!/usr/bin/env python3
# flightleg/geometry/tests/test_runway_geometry.py
import unittest

from flightleg.geometry import (
    Coordinate, ZERO_VECTOR, distance_ft, heading, runway_unit_vector, position_on_runway,
    standard_rate_bank_angle, ground_speed, wind_correction_angle
)

# KSFO 28R, thresholds approximately
THR_28R = Coordinate(37.61353, -122.35718)
THR_10L = Coordinate(37.62872, -122.39341)


class TestRunwayUnitVector(unittest.TestCase):
    def setUp(self):
        self.vector = runway_unit_vector(THR_28R, THR_10L)

    def test_one_nm_along_vector(self):
        one_nm = position_on_runway(THR_28R, self.vector, 6076.12)
        self.assertAlmostEqual(distance_ft(THR_28R, one_nm), 6076.12, delta=5.0)

    def test_full_length_reaches_opposite_threshold(self):
        length_ft = distance_ft(THR_28R, THR_10L)
        end = position_on_runway(THR_28R, self.vector, length_ft)
        self.assertAlmostEqual(end.lat, THR_10L.lat, places=5)
        self.assertAlmostEqual(end.lon, THR_10L.lon, places=5)

    def test_positions_stay_on_centerline(self):
        runway_heading = heading(THR_28R, THR_10L)
        p = position_on_runway(THR_28R, self.vector, 3000.0)
        self.assertAlmostEqual(heading(THR_28R, p), runway_heading, delta=0.05)

    def test_zero_distance_is_threshold(self):
        self.assertEqual(position_on_runway(THR_28R, self.vector, 0.0), THR_28R)

    def test_degenerate_runway(self):
        self.assertEqual(runway_unit_vector(THR_28R, THR_28R), ZERO_VECTOR)
        self.assertEqual(position_on_runway(THR_28R, ZERO_VECTOR, 5000.0), THR_28R)


class TestFlightDynamics(unittest.TestCase):
    def test_bank_angle_clamped(self):
        self.assertEqual(standard_rate_bank_angle(0.0), 15.0)
        self.assertEqual(standard_rate_bank_angle(300.0), 22.5)
        self.assertEqual(standard_rate_bank_angle(480.0), 30.0)

    def test_ground_speed_still_air(self):
        self.assertEqual(ground_speed(250.0, 90.0, 0.0, 0.0), 250.0)

    def test_ground_speed_head_and_tail(self):
        self.assertAlmostEqual(ground_speed(250.0, 90.0, 90.0, 50.0), 200.0, places=6)
        self.assertAlmostEqual(ground_speed(250.0, 90.0, 270.0, 50.0), 300.0, places=6)

    def test_degenerate_wind_triangle(self):
        self.assertEqual(ground_speed(0.0, 90.0, 0.0, 30.0), 0.0)
        self.assertEqual(ground_speed(20.0, 90.0, 0.0, 40.0), 0.0)

    def test_wind_correction_into_wind(self):
        # Wind from the left of a northbound course: crab left
        self.assertLess(wind_correction_angle(200.0, 0.0, 270.0, 30.0), 0.0)
        self.assertGreater(wind_correction_angle(200.0, 0.0, 90.0, 30.0), 0.0)
        self.assertEqual(wind_correction_angle(0.0, 0.0, 90.0, 30.0), 0.0)
        self.assertEqual(wind_correction_angle(200.0, 0.0, 90.0, 0.0), 0.0)


if __name__ == '__main__':
    unittest.main()
