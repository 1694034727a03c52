#!/usr/bin/env python3
# flightleg/weather/tests/test_weather.py
import unittest

from flightleg.weather import (
    Metar, WindReport, Visibility, CloudLayer, VARIABLE_WIND, parse_wind_direction,
    visibility_meters, ceiling_ft, calculate_wind_components, calculate_runway_wind_components
)


class TestMetarParsing(unittest.TestCase):
    def test_from_camel_case_dict(self):
        metar = Metar.from_dict({
            'wind': {'direction': 270, 'speedKts': 12, 'gustKts': 22},
            'visibility': {'value': 10, 'unit': 'SM'},
            'clouds': [{'coverage': 'few', 'baseFt': 2500}, {'coverage': 'BKN', 'baseFt': 4000}],
        })
        self.assertEqual(metar.wind.direction, 270.0)
        self.assertEqual(metar.wind.effective_speed_kts, 22.0)
        self.assertEqual(metar.visibility.unit, 'SM')
        self.assertEqual(metar.clouds[0].coverage, 'FEW')

    def test_variable_wind(self):
        metar = Metar.from_dict({'wind': {'direction': 'VRB', 'speed_kts': 3}, 'visibility': {'value': 9999}})
        self.assertTrue(metar.wind.is_variable)
        self.assertEqual(metar.clouds, ())

    def test_none_stays_none(self):
        self.assertIsNone(Metar.from_dict(None))

    def test_unreadable_directions_are_variable(self):
        for direction in (None, 'VAR', '', 'nan'):
            metar = Metar.from_dict({'wind': {'direction': direction, 'speedKts': 8}, 'visibility': {'value': 9999}})
            self.assertEqual(metar.wind.direction, VARIABLE_WIND)
            self.assertTrue(metar.wind.is_variable)
        self.assertEqual(Metar.from_dict({'wind': {'direction': '250', 'speedKts': 8}}).wind.direction, 250.0)

    def test_parse_wind_direction(self):
        self.assertEqual(parse_wind_direction(90), 90.0)
        self.assertIsNone(parse_wind_direction('VRB'))
        self.assertIsNone(parse_wind_direction(None))
        self.assertIsNone(parse_wind_direction(True))


class TestVisibilityAndCeiling(unittest.TestCase):
    def test_statute_miles(self):
        self.assertEqual(visibility_meters(Visibility(0.25, 'SM')), 402.25)
        self.assertEqual(visibility_meters(Visibility(800, 'M')), 800)

    def test_ceiling_is_first_bkn_ovc_vv_with_base(self):
        metar = Metar(
            wind=WindReport(0, 0),
            visibility=Visibility(9999),
            clouds=(CloudLayer('SCT', 800), CloudLayer('BKN', None), CloudLayer('OVC', 1200), CloudLayer('BKN', 300)),
        )
        self.assertEqual(ceiling_ft(metar), 1200)

    def test_no_ceiling(self):
        metar = Metar(wind=WindReport(0, 0), visibility=Visibility(9999), clouds=(CloudLayer('FEW', 3000),))
        self.assertIsNone(ceiling_ft(metar))


class TestWindComponents(unittest.TestCase):
    def test_pure_crosswind(self):
        """Runway 090 with wind 000 at 20 kt"""
        self.assertEqual(calculate_wind_components(90, 0, 20), {'headwind': 0, 'crosswind': 20})

    def test_pure_headwind_and_tailwind(self):
        self.assertEqual(calculate_wind_components(90, 90, 15), {'headwind': 15, 'crosswind': 0})
        self.assertEqual(calculate_wind_components(90, 270, 15), {'headwind': -15, 'crosswind': 0})

    def test_variable_and_calm(self):
        self.assertEqual(calculate_wind_components(90, 'VRB', 20), {'headwind': 0, 'crosswind': 0})
        self.assertEqual(calculate_wind_components(90, 180, 0), {'headwind': 0, 'crosswind': 0})
        self.assertEqual(calculate_wind_components(90, 'VAR', 20), {'headwind': 0, 'crosswind': 0})
        self.assertEqual(calculate_runway_wind_components(90, None, 20), {'headwind': 0, 'crosswind': 0, 'tailwind': 0})

    def test_quartering_wind(self):
        comps = calculate_wind_components(360, 30, 20)
        self.assertEqual(comps, {'headwind': 17, 'crosswind': 10})

    def test_runway_components_report_tailwind(self):
        self.assertEqual(calculate_runway_wind_components(90, 270, 12)['tailwind'], 12)
        self.assertEqual(calculate_runway_wind_components(90, 90, 12)['tailwind'], 0)
        self.assertEqual(calculate_runway_wind_components(90, 'VRB', 12),
                         {'headwind': 0, 'crosswind': 0, 'tailwind': 0})


if __name__ == '__main__':
    unittest.main()
