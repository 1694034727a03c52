#!/usr/bin/env python3
# flightleg/dispatch/tests/test_checks.py
import unittest

from flightleg.aircraft import get_aircraft_profile
from flightleg.weather import Metar, WindReport, Visibility, CloudLayer
from flightleg.dispatch import (
    check_range, check_departure_runway, check_arrival_runway,
    check_departure_weather, check_arrival_weather, check_crosswind
)


def metar(direction=0, speed=0, gust=None, visibility=9999, unit='M', clouds=()):
    return Metar(wind=WindReport(direction, speed, gust), visibility=Visibility(visibility, unit), clouds=tuple(clouds))


class TestRangeAndRunway(unittest.TestCase):
    def setUp(self):
        self.b738 = get_aircraft_profile('B738')

    def test_range_limit(self):
        self.assertTrue(check_range(2700, self.b738).passed)
        result = check_range(3000, self.b738)
        self.assertFalse(result.passed)
        self.assertEqual(result.message, 'Route 3000 nm EXCEEDS effective range of 2700 nm')

    def test_departure_runway_too_short(self):
        result = check_departure_runway(8000, 'ASP', self.b738)
        self.assertFalse(result.passed)
        self.assertEqual(result.message, 'Runway 8000 ft too short (need 8625 ft)')

    def test_arrival_runway_too_short(self):
        result = check_arrival_runway(6000, 'CON', self.b738)
        self.assertFalse(result.passed)
        self.assertEqual(result.message, 'Runway 6000 ft too short for landing (need 6325 ft)')

    def test_surface_allow_list(self):
        self.assertTrue(check_departure_runway(10000, 'asph', self.b738).passed)
        result = check_departure_runway(10000, 'GRS', self.b738)
        self.assertFalse(result.passed)
        self.assertEqual(result.message, 'Runway surface "GRS" not suitable for B738')

    def test_surface_reported_before_length(self):
        result = check_arrival_runway(3000, 'GRE', self.b738)
        self.assertIn('not suitable', result.message)


class TestWeatherChecks(unittest.TestCase):
    def setUp(self):
        self.b738 = get_aircraft_profile('B738')

    def test_missing_metar_assumes_vmc(self):
        for result in (check_departure_weather(None), check_arrival_weather(None, self.b738)):
            self.assertTrue(result.passed)
            self.assertEqual(result.message, 'No METAR - assuming VMC')
            self.assertEqual(result.value, 'N/A')

    def test_departure_visibility(self):
        self.assertTrue(check_departure_weather(metar(visibility=0.25, unit='SM')).passed)
        result = check_departure_weather(metar(visibility=300))
        self.assertFalse(result.passed)
        self.assertEqual(result.message, 'Departure visibility 300 M BELOW minima')

    def test_arrival_visibility_below_cat_i(self):
        result = check_arrival_weather(metar(visibility=400), self.b738)
        self.assertFalse(result.passed)
        self.assertEqual(result.message, 'Arrival visibility 400 M BELOW CAT I minima')

    def test_arrival_ceiling_below_cat_i(self):
        result = check_arrival_weather(metar(clouds=[CloudLayer('SCT', 100), CloudLayer('OVC', 150)]), self.b738)
        self.assertFalse(result.passed)
        self.assertEqual(result.message, 'Arrival ceiling 150 ft BELOW CAT I minima (200 ft)')
        self.assertEqual(result.value, '150ft / 9999M')

    def test_arrival_above_minima(self):
        result = check_arrival_weather(metar(clouds=[CloudLayer('BKN', 800)]), self.b738)
        self.assertTrue(result.passed)
        self.assertEqual(result.limit, '200ft / 550m')


class TestCrosswindCheck(unittest.TestCase):
    def setUp(self):
        self.b738 = get_aircraft_profile('B738')

    def test_ninety_degree_wind(self):
        result = check_crosswind(90, 270, metar(0, 20), None, self.b738)
        self.assertTrue(result.passed)
        self.assertEqual(result.value, 20)

    def test_gust_used_and_location_named(self):
        result = check_crosswind(90, 180, metar(0, 5), metar(270, 25, gust=45), self.b738)
        self.assertFalse(result.passed)
        self.assertEqual(result.message, 'Crosswind 45 kt at arrival EXCEEDS limit of 33 kt')

    def test_variable_wind_has_no_crosswind(self):
        result = check_crosswind(90, 90, metar('VRB', 40), metar('VRB', 40), self.b738)
        self.assertTrue(result.passed)
        self.assertEqual(result.value, 0)


if __name__ == '__main__':
    unittest.main()
