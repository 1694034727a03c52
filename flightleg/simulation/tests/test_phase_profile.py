#!/usr/bin/env python3
# flightleg/simulation/tests/test_phase_profile.py
import math
import unittest

import numpy as np

from flightleg.geometry import Coordinate, distance_ft
from flightleg.aircraft import get_aircraft_profile
from flightleg.airport import Runway, RunwayEnd, SelectedRunway
from flightleg.route import generate_route
from flightleg.weather import Metar
from flightleg.simulation import (
    PlanningState, FlightPhase, SimulationConstants, build_snapshot, build_flight_profile, seek, derive_state
)


def make_selection(icao, designator, heading_deg, threshold, opposite, elevation_ft, length_ft):
    end = RunwayEnd(designator, heading_deg, threshold, elevation_ft, opposite_threshold=opposite)
    return SelectedRunway(designator=designator, runway=Runway(icao, (end,), length_ft), end=end)


def make_snapshot(metar=None):
    dep = make_selection('KSFO', '28R', 298, Coordinate(37.61353, -122.35718),
                         Coordinate(37.62872, -122.39341), 13, 11870)
    arr = make_selection('KLAX', '24R', 263, Coordinate(33.9520, -118.4019),
                         Coordinate(33.9491, -118.4310), 125, 8926)
    aircraft = get_aircraft_profile('B738')
    route = generate_route('KSFO', 'KLAX', dep, arr, aircraft.cruise_altitude_ft, aircraft.cruise_speed_kts)
    return build_snapshot(PlanningState('KSFO', 'KLAX', dep, arr, aircraft, route, Metar.from_dict(metar)))


class TestFlightProfile(unittest.TestCase):
    def setUp(self):
        self.snapshot = make_snapshot()
        self.profile = build_flight_profile(self.snapshot)

    def test_samples_are_ordered(self):
        self.assertTrue(np.all(np.diff(self.profile.times) > 0))
        self.assertTrue(np.all(np.diff(self.profile.distances_nm) >= 0))
        self.assertEqual(self.profile.times[0], 0.0)
        self.assertAlmostEqual(self.profile.distances_nm[-1], self.snapshot.total_distance_nm)
        self.assertFalse(self.profile.stalled)

    def test_lineup_hold(self):
        hold = SimulationConstants.LINEUP_HOLD_SEC
        self.assertEqual(self.profile.sample(hold)['distance_nm'], 0.0)
        self.assertGreater(self.profile.sample(hold + 1)['distance_nm'], 0.0)

    def test_plausible_block_time(self):
        # ~300 nm at mostly jet speeds
        minutes = self.profile.total_time_sec / 60
        self.assertGreater(minutes, 40)
        self.assertLess(minutes, 120)

    def test_profile_is_cached_per_snapshot(self):
        self.assertIs(build_flight_profile(self.snapshot), self.profile)

    def test_values_are_finite(self):
        for values in (self.profile.airspeeds_kts, self.profile.ground_speeds_kts,
                       self.profile.pitches_deg, self.profile.vertical_speeds_fpm):
            self.assertTrue(np.all(np.isfinite(values)))
        self.assertTrue(np.all(self.profile.ground_speeds_kts >= 0))


class TestDerivedStates(unittest.TestCase):
    def setUp(self):
        self.snapshot = make_snapshot()

    def test_ground_phases_stay_on_centerline(self):
        dep = self.snapshot.departure
        for progress in np.linspace(0.0, 0.02, 41):
            state = seek(self.snapshot, float(progress))
            if not state.phase.is_ground:
                continue
            self.assertEqual(state.route_distance_nm, 0.0)
            self.assertEqual(state.heading_deg, dep.heading_deg)
            self.assertAlmostEqual(distance_ft(dep.threshold, state.position), state.ground_distance_ft,
                                   delta=max(5.0, state.ground_distance_ft * 0.005))

    def test_route_phases_report_route_distance(self):
        state = seek(self.snapshot, 0.5)
        self.assertTrue(FlightPhase.CLIMB <= state.phase <= FlightPhase.DESCENT)
        self.assertEqual(state.ground_distance_ft, 0.0)
        self.assertGreater(state.route_distance_nm, 0.0)
        self.assertGreater(state.altitude_ft, 10000)

    def test_takeoff_speeds(self):
        table = self.snapshot.phase_table
        profile = build_flight_profile(self.snapshot)
        # first sample past the ROTATE boundary is at or above VR
        index = int(np.argmax(profile.distances_nm >= table.start_of(FlightPhase.ROTATE)))
        self.assertGreaterEqual(profile.airspeeds_kts[index], 165)

    def test_altitude_never_below_field(self):
        for progress in np.linspace(0.0, 1.0, 101):
            state = seek(self.snapshot, float(progress))
            self.assertGreaterEqual(state.altitude_ft, 13 - 1e-6)
            self.assertTrue(math.isfinite(state.vertical_speed_fpm))
            self.assertTrue(math.isfinite(state.pitch_deg))


class TestWind(unittest.TestCase):
    def test_crosswind_crab_and_ground_speed(self):
        calm = make_snapshot()
        windy = make_snapshot({'wind': {'direction': 225, 'speedKts': 40}, 'visibility': {'value': 10, 'unit': 'SM'}})
        calm_state = seek(calm, 0.5)
        windy_state = seek(windy, 0.5)
        self.assertEqual(windy.wind.speed_kts, 40)
        self.assertNotAlmostEqual(calm_state.heading_deg, windy_state.heading_deg, places=1)
        self.assertNotEqual(build_flight_profile(calm).total_time_sec,
                            build_flight_profile(windy).total_time_sec)

    def test_wind_does_not_move_ground_roll(self):
        windy = make_snapshot({'wind': {'direction': 200, 'speedKts': 30}, 'visibility': {'value': 10, 'unit': 'SM'}})
        state = derive_state(windy, SimulationConstants.LINEUP_HOLD_SEC + 10)
        self.assertEqual(state.phase, FlightPhase.TAKEOFF_ROLL)
        self.assertLess(state.ground_distance_ft / 6076.12, windy.phase_table.start_of(FlightPhase.ROTATE))
        self.assertEqual(state.heading_deg, windy.departure.heading_deg)
        self.assertEqual(state.ground_speed_kts, state.indicated_airspeed_kts)


class TestLandingRoll(unittest.TestCase):
    def setUp(self):
        self.snapshot = make_snapshot()
        self.profile = build_flight_profile(self.snapshot)

    def test_rollout_is_on_the_ground_and_slows_to_exit_speed(self):
        elevation = self.snapshot.arrival.elevation_ft
        total_time = self.profile.total_time_sec
        seen = set()
        for elapsed in np.linspace(total_time - 90, total_time - 1e-3, 600):
            state = derive_state(self.snapshot, float(elapsed))
            if state.phase in (FlightPhase.LANDING, FlightPhase.TAXI_IN):
                seen.add(state.phase)
                self.assertAlmostEqual(state.altitude_ft, elevation)
            if state.phase is FlightPhase.TAXI_IN:
                self.assertLessEqual(state.indicated_airspeed_kts, SimulationConstants.RUNWAY_EXIT_SPEED_KTS + 1e-9)
                self.assertLessEqual(state.ground_speed_kts, SimulationConstants.RUNWAY_EXIT_SPEED_KTS + 1e-9)
        self.assertEqual(seen, {FlightPhase.LANDING, FlightPhase.TAXI_IN})

    def test_touchdown_at_approach_speed(self):
        table = self.snapshot.phase_table
        index = int(np.argmax(self.profile.distances_nm >= table.start_of(FlightPhase.LANDING)))
        self.assertAlmostEqual(self.profile.airspeeds_kts[index], self.snapshot.aircraft.approach_speed_kts, delta=5)

    def test_taxi_in_samples_below_exit_speed(self):
        table = self.snapshot.phase_table
        taxiing = self.profile.distances_nm >= table.start_of(FlightPhase.TAXI_IN)
        self.assertTrue(np.any(taxiing))
        self.assertTrue(np.all(self.profile.airspeeds_kts[taxiing] <= SimulationConstants.RUNWAY_EXIT_SPEED_KTS + 1e-9))


if __name__ == '__main__':
    unittest.main()
