# flightleg/airport/exceptions.py

class AirportError(Exception):
    """Base exception for airport and runway data errors"""
    pass

class RunwayEndNotFoundError(AirportError):
    """Runway has no end other than the given designator"""
    def __init__(self, designator: str, message: str = "Cannot find opposite end for runway"):
        self.designator = designator
        super().__init__(f"{message} {designator}")
