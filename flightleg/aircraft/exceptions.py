# flightleg/aircraft/exceptions.py

class AircraftError(Exception):
    """Base exception for aircraft registry errors"""
    pass

class UnknownAircraftError(AircraftError):
    """Requested ICAO type code is not in the registry"""
    def __init__(self, icao_code: str, message: str = "Unknown aircraft type"):
        self.icao_code = icao_code
        super().__init__(f"{message}: {icao_code}")
