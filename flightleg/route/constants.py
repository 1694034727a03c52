# flightleg/route/constants.py

class RouteConstants:
    # ===== DEPARTURE =====
    CLIMB_OUT_DISTANCE_NM = 5.0
    CLIMB_OUT_ALTITUDE_FT = 3000
    CLIMB_OUT_SPEED_KTS = 180
    SID_DISTANCE_NM = 15.0
    SID_ALTITUDE_CRUISE_RATIO = 0.3
    SID_SPEED_KTS = 250

    # ===== ENROUTE =====
    SPEED_LIMIT_ALTITUDE_FT = 10000
    SPEED_LIMIT_KTS = 250
    CLIMB_GRADIENT_FT_PER_NM = 300
    ENROUTE_SPACING_NM = 100
    MIN_ENROUTE_WAYPOINTS = 3
    MAX_ENROUTE_WAYPOINTS = 15
    # Below this route length the ENROUTE and STAR points are omitted
    MIN_ENROUTE_ROUTE_NM = 40.0

    # ===== ARRIVAL =====
    STAR_ENTRY_DISTANCE_NM = 20.0
    STAR_ALTITUDE_FT = 10000
    STAR_LEG_SPEED_KTS = 280
    FAF_DISTANCE_NM = 8.0
    FAF_ALTITUDE_FT = 2500
    FAF_SPEED_KTS = 160
    FAF_LEG_SPEED_KTS = 180
    THRESHOLD_SPEED_KTS = 140

    # ===== DEFAULTS =====
    DEFAULT_CRUISE_ALTITUDE_FT = 35000
    DEFAULT_CRUISE_SPEED_KTS = 450

    NAME_CONSONANTS = 'BCDFGHJKLMNPQRSTVWXYZ'
    NAME_VOWELS = 'AEIOU'
