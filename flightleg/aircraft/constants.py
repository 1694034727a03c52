# flightleg/aircraft/constants.py

class AircraftConstants:
    """Simplified but plausible airline profiles. Not certification data."""

    # ===== REFERENCE SPEED DERIVATION (fractions of cruise TAS) =====
    VR_CRUISE_RATIO = 0.38
    V1_VR_RATIO = 0.92
    V2_VR_INCREMENT_KTS = 12
    VREF_CRUISE_RATIO = 0.32

    # ===== CAT I MINIMA (shared by all profiles) =====
    CAT_I = {
        'MIN_VISIBILITY_M': 550,
        'MIN_CEILING_FT': 200
    }

    # ===== PROFILES =====
    # weights kg, range nm, speed kt (TAS), altitude ft, fuel flow kg/hr, distances ft, wind kt
    PROFILES = {
        'B738': {
            'NAME': 'Boeing 737-800',
            'MTOW': 79016, 'MLW': 66361, 'MZFW': 62732, 'OEW': 41413,
            'MAX_FUEL': 20894,
            'MAX_RANGE_NM': 2935,
            'CRUISE_SPEED': 450, 'CRUISE_ALT': 35000,
            'FUEL_FLOW': {'TAXI': 400, 'CLIMB': 3200, 'CRUISE': 2400, 'DESCENT': 1000, 'HOLDING': 2000},
            'TAKEOFF_DIST_FT': 7500, 'LANDING_DIST_FT': 5500,
            'MAX_CROSSWIND': 33, 'MAX_TAILWIND': 10
        },
        'A320': {
            'NAME': 'Airbus A320-200',
            'MTOW': 78000, 'MLW': 66000, 'MZFW': 62500, 'OEW': 42600,
            'MAX_FUEL': 19000,
            'MAX_RANGE_NM': 3300,
            'CRUISE_SPEED': 447, 'CRUISE_ALT': 37000,
            'FUEL_FLOW': {'TAXI': 350, 'CLIMB': 3000, 'CRUISE': 2200, 'DESCENT': 900, 'HOLDING': 1800},
            'TAKEOFF_DIST_FT': 7200, 'LANDING_DIST_FT': 5100,
            'MAX_CROSSWIND': 35, 'MAX_TAILWIND': 10
        },
        'B77W': {
            'NAME': 'Boeing 777-300ER',
            'MTOW': 351535, 'MLW': 251290, 'MZFW': 237680, 'OEW': 167800,
            'MAX_FUEL': 145538,
            'MAX_RANGE_NM': 7370,
            'CRUISE_SPEED': 490, 'CRUISE_ALT': 39000,
            'FUEL_FLOW': {'TAXI': 1200, 'CLIMB': 9000, 'CRUISE': 6800, 'DESCENT': 2500, 'HOLDING': 5500},
            'TAKEOFF_DIST_FT': 10500, 'LANDING_DIST_FT': 6500,
            'MAX_CROSSWIND': 38, 'MAX_TAILWIND': 15
        },
        'A359': {
            'NAME': 'Airbus A350-900',
            'MTOW': 280000, 'MLW': 205000, 'MZFW': 192000, 'OEW': 142400,
            'MAX_FUEL': 110000,
            'MAX_RANGE_NM': 8100,
            'CRUISE_SPEED': 488, 'CRUISE_ALT': 41000,
            'FUEL_FLOW': {'TAXI': 900, 'CLIMB': 7500, 'CRUISE': 5500, 'DESCENT': 2000, 'HOLDING': 4500},
            'TAKEOFF_DIST_FT': 9000, 'LANDING_DIST_FT': 6000,
            'MAX_CROSSWIND': 38, 'MAX_TAILWIND': 15
        },
        'E190': {
            'NAME': 'Embraer E190',
            'MTOW': 51800, 'MLW': 44000, 'MZFW': 40500, 'OEW': 28080,
            'MAX_FUEL': 12971,
            'MAX_RANGE_NM': 2450,
            'CRUISE_SPEED': 430, 'CRUISE_ALT': 39000,
            'FUEL_FLOW': {'TAXI': 280, 'CLIMB': 2100, 'CRUISE': 1600, 'DESCENT': 650, 'HOLDING': 1300},
            'TAKEOFF_DIST_FT': 6200, 'LANDING_DIST_FT': 4200,
            'MAX_CROSSWIND': 30, 'MAX_TAILWIND': 10
        },
        'CRJ9': {
            'NAME': 'Bombardier CRJ-900',
            'MTOW': 38330, 'MLW': 34020, 'MZFW': 31751, 'OEW': 21910,
            'MAX_FUEL': 8875,
            'MAX_RANGE_NM': 1550,
            'CRUISE_SPEED': 447, 'CRUISE_ALT': 35000,
            'FUEL_FLOW': {'TAXI': 220, 'CLIMB': 1800, 'CRUISE': 1400, 'DESCENT': 550, 'HOLDING': 1100},
            'TAKEOFF_DIST_FT': 5800, 'LANDING_DIST_FT': 4800,
            'MAX_CROSSWIND': 28, 'MAX_TAILWIND': 10
        },
    }
