"""Board layout and movement rules for Snakes & Ladders."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from snakes_sim.errors import InvalidBoardError

DIE_SIZE = 6
NEAR_MISS = (-2, -1, 1, 2)

# fmt: off
CANON_ROUTES: dict[int, int] = {
    # Snakes (go DOWN)
    27:  5,  40:  3,  43: 18,  54: 31,
    66: 45,  76: 58,  89: 53,  99: 41,
    # Ladders (go UP)
     4: 25,  13: 46,  33: 49,  42: 63,
    50: 69,  62: 81,  74: 92,
}
# fmt: on


@dataclass(frozen=True)
class Board:
    """Immutable board: winning square plus snake/ladder transitions."""

    size: int
    transitions: Mapping[int, int] = field(default_factory=dict)
    _snakes: frozenset[int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        routes = dict(self.transitions)
        _validate(self.size, routes)
        object.__setattr__(self, "transitions", MappingProxyType(routes))
        snakes = frozenset(sq for sq, dest in routes.items() if dest < sq)
        object.__setattr__(self, "_snakes", snakes)

    def __reduce__(self):
        # MappingProxyType can't be pickled; rebuild from a plain dict.
        return (Board, (self.size, dict(self.transitions)))

    @classmethod
    def from_pairs(cls, size: int, pairs: Iterable[tuple[int, int]]) -> Board:
        """Build a board from ``(from, to)`` pairs, rejecting duplicate sources."""
        routes: dict[int, int] = {}
        for src, dest in pairs:
            if src in routes:
                raise InvalidBoardError(
                    f"Duplicate snake or ladder from square {src}"
                )
            routes[src] = dest
        return cls(size, routes)

    def resolve(self, square: int) -> int:
        return self.transitions.get(square, square)

    def is_ladder(self, square: int) -> bool:
        return self.resolve(square) > square

    def is_snake(self, square: int) -> bool:
        return square in self._snakes

    def near_snake(self, square: int) -> bool:
        """True if a snake head is 1 or 2 squares away from *square*."""
        return any(square + delta in self._snakes for delta in NEAR_MISS)


def _validate(size: int, routes: dict[int, int]) -> None:
    if size < 1:
        raise InvalidBoardError(f"Board size must be positive, got {size}")

    for src, dest in routes.items():
        if src == 0:
            raise InvalidBoardError("A snake or ladder cannot start on square 0")
        if not 1 <= src <= size:
            raise InvalidBoardError(f"Illegal snake/ladder start position: {src}")
        if src == size:
            raise InvalidBoardError(
                f"A snake or ladder cannot start on the winning square {size}"
            )
        if not 1 <= dest <= size:
            raise InvalidBoardError(f"Illegal snake/ladder end position: {dest}")
        if src == dest:
            raise InvalidBoardError(f"Snake or ladder links to itself on square {src}")
        if dest in routes:
            raise InvalidBoardError(
                f"Snake or ladder from {src} lands on another one at {dest}"
            )

    # Six snake heads in a row can never be rolled past.
    run = 0
    for square in range(1, size):
        run = run + 1 if routes.get(square, square) < square else 0
        if run == DIE_SIZE:
            raise InvalidBoardError(
                f"Squares {square - DIE_SIZE + 1}-{square} are all snakes; "
                f"square {size} is unreachable"
            )


def blank(size: int) -> Board:
    return Board(size)


def canon_board() -> Board:
    """The 100-square reference board."""
    return Board(100, CANON_ROUTES)


# ── Single roll ──────────────────────────────────────────────────────

@dataclass(frozen=True)
class RollResult:
    """What happened after a roll."""

    value: int
    landed: int
    destination: int
    bounced: bool = False
    won: bool = False
    lucky: bool = False
    unlucky: bool = False

    @property
    def climb(self) -> int:
        return max(0, self.destination - self.landed)

    @property
    def slide(self) -> int:
        return max(0, self.landed - self.destination)


def apply_roll(board: Board, position: int, roll: int) -> RollResult:
    """Compute the result of rolling *roll* from *position*.

    Does NOT mutate anything; the caller moves the token to
    ``result.destination``.
    """
    landed = position + roll

    # Overshoot → stay put
    if landed > board.size:
        return RollResult(
            value=roll, landed=position, destination=position, bounced=True,
        )

    destination = board.resolve(landed)
    unlucky = destination < landed
    lucky = not unlucky and (
        destination > landed
        or board.near_snake(landed)
        or (landed == board.size and position >= board.size - DIE_SIZE)
    )

    return RollResult(
        value=roll,
        landed=landed,
        destination=destination,
        won=destination == board.size,
        lucky=lucky,
        unlucky=unlucky,
    )
