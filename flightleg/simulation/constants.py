# flightleg/simulation/constants.py

class SimulationConstants:
    """Heuristic timing and performance figures for the phase engine."""

    # ===== PLAYBACK =====
    MAX_TICK_SEC = 1.0                  # per-tick cap, applied before the speed multiplier
    MIN_SPEED_MULTIPLIER = 0.1
    MAX_SPEED_MULTIPLIER = 100.0
    LINEUP_HOLD_SEC = 5.0

    # ===== PROFILE INTEGRATION =====
    PROFILE_STEP_SEC = 1.0
    LIFTOFF_STEP_SEC = 0.05
    MAX_PROFILE_SEC = 24 * 3600.0

    # ===== TAKEOFF =====
    # (takeoff distance ft above which, ground acceleration kt/s), checked in order
    GROUND_ACCELERATION_BANDS = ((10000, 2.5), (7000, 3.0), (5000, 3.5))
    DEFAULT_GROUND_ACCELERATION_KTS_S = 4.0
    ROTATION_ACCELERATION_FACTOR = 0.5
    ROTATION_PITCH_RATE_DEG_S = 3.0
    LIFTOFF_PITCH_DEG = 8.0
    INITIAL_CLIMB_PITCH_DEG = 15.0
    LIFTOFF_ACCELERATION_KTS_S = 1.5
    LIFTOFF_SPEED_MARGIN_KTS = 20.0     # accelerate towards V2 + this after liftoff
    VS_RAMP_FPM_PER_SEC = 500.0
    VS_STABILITY_FACTOR = 0.9
    INITIAL_CLIMB_AGL_FT = 400.0

    # ===== CLIMB =====
    INITIAL_CLIMB_RATE_FPM = 2500.0
    APPROACH_SPEED_INCREMENT_KTS = 5    # approach speed = Vref + this

    # ===== SPEED SCHEDULE =====
    SPEED_LIMIT_ALTITUDE_FT = 10000.0
    SPEED_LIMIT_KTS = 250.0
    DESCENT_SPEED_KTS = 280.0
    APPROACH_MIN_SPEED_KTS = 180.0
    APPROACH_SPEED_MARGIN_KTS = 20.0
    RUNWAY_EXIT_SPEED_KTS = 20.0
    TAXI_SPEED_KTS = 15.0
    AIRBORNE_ACCELERATION_KTS_S = 2.0
    AIRBORNE_DECELERATION_KTS_S = 1.5
    LANDING_DECELERATION_KTS_S = 4.0

    # ===== ROUTE PHASE BOUNDARIES (nm before the arrival threshold, unless noted) =====
    APPROACH_START_NM = 30.0
    FINAL_START_NM = 8.0
    LANDING_ROLL_MARGIN_SEC = 3.0       # touchdown this long before the deceleration must start
    TAXI_IN_START_NM = 0.05
    MIN_PHASE_SPAN_NM = 0.01

    # ===== ATTITUDE =====
    MIN_PITCH_DEG = -10.0
    MAX_PITCH_DEG = 15.0
    TURN_ANTICIPATION_NM = 2.0
    MIN_TURN_DEG = 1.0

    # ===== SNAPSHOT SANITY =====
    THRESHOLD_MATCH_TOLERANCE_NM = 0.1
