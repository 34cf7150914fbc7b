"""Exception types raised by the simulator."""

from __future__ import annotations


class SimulationError(Exception):
    """Base class for every error the simulator raises."""


class InvalidBoardError(SimulationError):
    """The board's snakes and ladders are malformed."""


class EmptyInputError(SimulationError):
    """Statistics were requested over zero games."""


class ConfigError(SimulationError):
    """The board config file could not be read or parsed."""


class DiceExhaustedError(SimulationError):
    """A scripted die was asked for more rolls than it holds."""
