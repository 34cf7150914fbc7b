"""Dice: a seeded random die for simulations and a scripted one for tests."""

from __future__ import annotations

import random
from collections import deque
from collections.abc import Iterable
from typing import Protocol, runtime_checkable

from snakes_sim.board import DIE_SIZE
from snakes_sim.errors import DiceExhaustedError


@runtime_checkable
class Dice(Protocol):
    """Structural interface: any object with a ``roll`` method works."""

    def roll(self) -> int: ...


class RandomDice:
    """Uniform die backed by a private ``random.Random``."""

    def __init__(self, rng: random.Random | None = None, sides: int = DIE_SIZE):
        self.rng = rng or random.Random()
        self.sides = sides

    def roll(self) -> int:
        return self.rng.randint(1, self.sides)


class ScriptedDice:
    """Deterministic die for testing; replays *values* left to right."""

    def __init__(self, values: Iterable[int]):
        self._values = deque(values)

    @property
    def remaining(self) -> int:
        return len(self._values)

    def roll(self) -> int:
        if not self._values:
            raise DiceExhaustedError("Scripted die has no rolls left")
        return self._values.popleft()
