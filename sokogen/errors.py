"""
Exception types raised by the level generator and the solver.
"""


class SokogenError(Exception):
    """Base class for all sokogen errors."""


class ConfigError(SokogenError, ValueError):
    """Invalid generator configuration, tunables or preset name."""


class PlacementError(SokogenError):
    """No free cell could be found for an entity within the retry bound."""


class MoveError(SokogenError):
    """A move cannot be applied to the current puzzle state."""
