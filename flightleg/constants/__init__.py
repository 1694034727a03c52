"""flightleg/constants - shared unit conversions"""
from .units import UnitConstants

__all__ = ['UnitConstants']
