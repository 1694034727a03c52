# flightleg/simulation/exceptions.py
"""
Simulation errors. Only snapshot building and engine construction raise;
ticking and seeking never do.
"""
from typing import List


class SimulationError(Exception):
    """Base class for all simulation errors"""
    pass

class SnapshotError(SimulationError):
    """Planning state cannot be frozen into a snapshot"""
    def __init__(self, errors: List[str], message: str = "Cannot create simulation snapshot"):
        self.errors = list(errors)
        super().__init__(f"{message}: {', '.join(self.errors)}")

class EngineConstructionError(SimulationError):
    """Snapshot is unusable for the phase engine"""
    def __init__(self, field_name: str, value, message: str = "Invalid snapshot value"):
        self.field_name = field_name
        self.value = value
        super().__init__(f"{message}: {field_name}={value}")
