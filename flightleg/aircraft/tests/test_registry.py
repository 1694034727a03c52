#!/usr/bin/env python3
# flightleg/aircraft/tests/test_registry.py
import dataclasses
import unittest

from flightleg.aircraft import (
    AircraftRegistry, UnknownAircraftError, derive_reference_speeds,
    get_aircraft_profile, get_all_aircraft_profiles
)


class TestAircraftRegistry(unittest.TestCase):
    def test_b738_profile(self):
        b738 = get_aircraft_profile('B738')
        self.assertEqual(b738.mtow_kg, 79016)
        self.assertEqual(b738.max_range_nm, 2935)
        self.assertEqual(b738.takeoff_distance_ft, 7500)
        self.assertEqual(b738.cat_i_min_visibility_m, 550)
        self.assertEqual(b738.cat_i_min_ceiling_ft, 200)

    def test_lookup_is_case_insensitive(self):
        self.assertIs(get_aircraft_profile('a320'), get_aircraft_profile('A320'))

    def test_unknown_type(self):
        with self.assertRaises(UnknownAircraftError) as ctx:
            get_aircraft_profile('C172')
        self.assertEqual(ctx.exception.icao_code, 'C172')

    def test_all_six_types(self):
        codes = sorted(p.icao_code for p in get_all_aircraft_profiles())
        self.assertEqual(codes, ['A320', 'A359', 'B738', 'B77W', 'CRJ9', 'E190'])

    def test_profiles_are_frozen(self):
        with self.assertRaises(dataclasses.FrozenInstanceError):
            get_aircraft_profile('B738').mtow_kg = 1

    def test_custom_registry(self):
        registry = AircraftRegistry(profiles={})
        self.assertNotIn('B738', registry)
        registry.register(get_aircraft_profile('B738'))
        self.assertIn('b738', registry)


class TestReferenceSpeeds(unittest.TestCase):
    def test_b738_speeds(self):
        # VR = round(450 * 0.38) = 171, V1 = round(171 * 0.92) = 157
        self.assertEqual(derive_reference_speeds(450), (157, 171, 183, 144))

    def test_profile_carries_speeds(self):
        b738 = get_aircraft_profile('B738')
        self.assertEqual((b738.v1_kts, b738.vr_kts, b738.v2_kts, b738.vref_kts), (157, 171, 183, 144))

    def test_speed_order(self):
        for profile in get_all_aircraft_profiles():
            self.assertLess(profile.v1_kts, profile.vr_kts)
            self.assertLess(profile.vr_kts, profile.v2_kts)


if __name__ == '__main__':
    unittest.main()
