#!/usr/bin/env python3
# flightleg/dispatch/tests/test_fuel_plan.py
import unittest

from flightleg.aircraft import get_aircraft_profile
from flightleg.dispatch import calculate_fuel_plan, calculate_weights, DispatchPolicy


class TestFuelPlan(unittest.TestCase):
    def setUp(self):
        self.b738 = get_aircraft_profile('B738')

    def test_b738_1000nm(self):
        plan = calculate_fuel_plan(1000, self.b738)
        self.assertEqual(plan.taxi_out_fuel_kg, 100)          # 0.25 h x 400
        self.assertEqual(plan.trip_fuel_kg, 5893)              # 1120 + 4373.3 + 400
        self.assertEqual(plan.contingency_fuel_kg, 295)
        self.assertEqual(plan.alternate_fuel_kg, 1200)
        self.assertEqual(plan.final_reserve_fuel_kg, 1000)
        self.assertEqual(plan.total_required_kg, 8488)
        self.assertEqual(plan.block_fuel_kg, 8500)

    def test_block_fuel_is_rounded_up_to_100(self):
        for distance in (50, 333, 1234, 2200):
            plan = calculate_fuel_plan(distance, self.b738)
            self.assertEqual(plan.block_fuel_kg % 100, 0)
            self.assertGreaterEqual(plan.block_fuel_kg, plan.total_required_kg)
            self.assertLessEqual(plan.block_fuel_kg - plan.total_required_kg, 100)

    def test_short_route_has_no_cruise(self):
        plan = calculate_fuel_plan(120, self.b738)
        self.assertEqual(plan.trip_fuel_kg, 1120 + 400)

    def test_policy_knobs(self):
        plan = calculate_fuel_plan(1000, self.b738, DispatchPolicy(contingency_ratio=0.0))
        self.assertEqual(plan.contingency_fuel_kg, 0)


class TestWeights(unittest.TestCase):
    def setUp(self):
        self.b738 = get_aircraft_profile('B738')
        self.plan = calculate_fuel_plan(1000, self.b738)

    def test_weight_chain(self):
        weights = calculate_weights(self.b738, 15000, self.plan)
        self.assertEqual(weights.zfw_kg, 41413 + 15000)
        self.assertEqual(weights.tow_kg, 41413 + 15000 + 8500)
        self.assertEqual(weights.lw_kg, weights.tow_kg - 100 - 5893)

    def test_landing_fuel_keeps_reserves(self):
        weights = calculate_weights(self.b738, 15000, self.plan)
        self.assertEqual(weights.landing_fuel_kg, 8500 - 100 - 5893)
        self.assertGreater(weights.landing_fuel_kg, self.plan.alternate_fuel_kg + self.plan.final_reserve_fuel_kg)


if __name__ == '__main__':
    unittest.main()
