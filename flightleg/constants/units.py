"""flightleg/constants/units.py"""


class UnitConstants:
    # ===== EARTH MODEL =====
    EARTH_RADIUS_NM = 3440.065

    # ===== DISTANCE =====
    FEET_PER_NAUTICAL_MILE = 6076.12
    FT_TO_NM = 1 / 6076.12
    METERS_PER_STATUTE_MILE = 1609    # operational rounding, not 1609.344

    # ===== SPEED =====
    KTS_TO_FPS = 1.68781              # knots -> feet per second
    KTS_TO_FPM = 101.269              # knots -> feet per minute
    SECONDS_PER_HOUR = 3600.0

