#!/usr/bin/env python3
# flightleg/dispatch/tests/test_dispatch.py
import dataclasses
import unittest

from flightleg.aircraft import get_aircraft_profile
from flightleg.weather import Metar, WindReport, Visibility
from flightleg.dispatch import DispatchInput, DispatchEvaluator, DispatchPolicy, evaluate


def make_input(**overrides):
    params = dict(
        aircraft=get_aircraft_profile('B738'),
        route_distance_nm=1000,
        payload_kg=15000,
        departure_runway_length_ft=10000,
        departure_runway_surface='ASP',
        departure_runway_heading=280,
        arrival_runway_length_ft=9000,
        arrival_runway_surface='CON',
        arrival_runway_heading=250,
    )
    params.update(overrides)
    return DispatchInput(**params)


class TestDispatchScenarios(unittest.TestCase):
    def test_typical_flight_is_feasible(self):
        result = evaluate(make_input())
        self.assertTrue(result.feasible)
        self.assertEqual(result.reasons, ())
        self.assertEqual(result.status, 'GO')
        self.assertEqual(result.fuel_plan.block_fuel_kg, 8500)
        self.assertEqual(result.computed.tow_kg, 41413 + 15000 + 8500)
        self.assertEqual(result.computed.reserve_fuel_kg, 295 + 1200 + 1000)
        self.assertEqual(result.computed.flight_time_min, 154)
        self.assertEqual(result.computed.range_margin_nm, 1700)

    def test_route_beyond_range(self):
        result = evaluate(make_input(route_distance_nm=3000))
        self.assertFalse(result.checks.range.passed)
        self.assertFalse(result.feasible)
        self.assertIn('Route 3000 nm EXCEEDS effective range of 2700 nm', result.reasons)
        self.assertEqual(result.status, 'NO-GO')

    def test_short_departure_runway(self):
        result = evaluate(make_input(departure_runway_length_ft=8000))
        self.assertFalse(result.checks.departure_runway.passed)
        self.assertEqual(result.reasons, ('Runway 8000 ft too short (need 8625 ft)',))

    def test_reasons_follow_check_order(self):
        result = evaluate(make_input(route_distance_nm=3000, departure_runway_surface='GRS',
                                     arrival_metar=Metar.from_dict({'wind': {'direction': 0, 'speedKts': 0},
                                                                    'visibility': {'value': 100, 'unit': 'M'}})))
        self.assertEqual(len(result.reasons), 3)
        self.assertTrue(result.reasons[0].startswith('Route'))
        self.assertTrue(result.reasons[1].startswith('Runway surface'))
        self.assertTrue(result.reasons[2].startswith('Arrival visibility'))

    def test_unreadable_wind_direction_counts_as_variable(self):
        metar = Metar(wind=WindReport('VAR', 25), visibility=Visibility(10, 'SM'))
        result = evaluate(make_input(departure_metar=metar, arrival_metar=metar))
        self.assertTrue(result.checks.crosswind.passed)
        self.assertTrue(result.feasible)


class TestDispatchWarnings(unittest.TestCase):
    def test_low_range_margin(self):
        result = evaluate(make_input(route_distance_nm=2650))
        self.assertTrue(result.feasible)
        self.assertIn('Low range margin: only 50 nm reserve', result.warnings)
        self.assertEqual(result.status, 'CONDITIONAL')

    def test_low_fuel_margin(self):
        aircraft = dataclasses.replace(get_aircraft_profile('B738'), max_fuel_capacity_kg=8800)
        result = evaluate(make_input(aircraft=aircraft))
        self.assertEqual(result.warnings, ('Low fuel margin: only 300 kg extra capacity',))

    def test_tow_near_mtow(self):
        result = evaluate(make_input(route_distance_nm=2650, payload_kg=19500))
        self.assertTrue(result.checks.tow_weight.passed)
        self.assertIn('TOW near MTOW limit: only 303 kg margin', result.warnings)

    def test_no_warning_when_check_fails(self):
        result = evaluate(make_input(route_distance_nm=3000))
        self.assertFalse(any(w.startswith('Low range margin') for w in result.warnings))

    def test_warnings_do_not_block(self):
        result = evaluate(make_input(route_distance_nm=2650))
        self.assertEqual(result.feasible, len(result.reasons) == 0)


class TestDispatchDeterminism(unittest.TestCase):
    def test_identical_input_identical_output(self):
        dispatch_input = make_input(departure_metar=Metar.from_dict({
            'wind': {'direction': 310, 'speedKts': 14, 'gustKts': 24},
            'visibility': {'value': 6, 'unit': 'SM'},
            'clouds': [{'coverage': 'BKN', 'baseFt': 1200}],
        }))
        self.assertEqual(evaluate(dispatch_input), evaluate(dispatch_input))

    def test_custom_policy(self):
        strict = DispatchEvaluator(DispatchPolicy(range_factor=0.3))
        result = strict.evaluate(make_input())
        self.assertFalse(result.checks.range.passed)
        self.assertTrue(evaluate(make_input(), DispatchPolicy()).feasible)


if __name__ == '__main__':
    unittest.main()
