from .rounding import round_half_up, ceil_to

__all__ = ['round_half_up', 'ceil_to']
