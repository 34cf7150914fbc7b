"""Cross-game statistics: a mergeable summary folded into min/avg/max.

``SimSummary`` holds integer min/total/max per metric, so merging two
partial summaries is exact and order-independent. Averages are computed
once, in ``finalize``.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from functools import reduce

from snakes_sim.errors import EmptyInputError
from snakes_sim.game import GameResult, longer_turn

METRICS = ("rolls", "climb", "slide", "lucky_rolls", "unlucky_rolls")


@dataclass(frozen=True)
class MetricSummary:
    minimum: int
    total: int
    maximum: int

    @classmethod
    def of(cls, value: int) -> MetricSummary:
        return cls(minimum=value, total=value, maximum=value)

    def merge(self, other: MetricSummary) -> MetricSummary:
        return MetricSummary(
            minimum=min(self.minimum, other.minimum),
            total=self.total + other.total,
            maximum=max(self.maximum, other.maximum),
        )


@dataclass(frozen=True)
class MultiSimResult:
    """Final statistics over every simulated game."""

    games: int
    min_rolls: int
    avg_rolls: float
    max_rolls: int
    min_climb: int  # Total distance
    avg_climb: float
    max_climb: int
    min_slide: int
    avg_slide: float
    max_slide: int
    biggest_turn_climb: int  # Greatest climb in a single turn, including re-rolls
    biggest_turn_slide: int
    longest_turn: tuple[int, ...]  # e.g. (6, 5) < (6, 6, 2) < (6, 6, 3)
    min_lucky_rolls: int
    avg_lucky_rolls: float
    max_lucky_rolls: int
    min_unlucky_rolls: int
    avg_unlucky_rolls: float
    max_unlucky_rolls: int


@dataclass(frozen=True)
class SimSummary:
    """Partial aggregate over one or more games."""

    games: int
    rolls: MetricSummary
    climb: MetricSummary
    slide: MetricSummary
    lucky_rolls: MetricSummary
    unlucky_rolls: MetricSummary
    biggest_turn_climb: int
    biggest_turn_slide: int
    longest_turn: tuple[int, ...]

    @classmethod
    def from_game(cls, game: GameResult) -> SimSummary:
        return cls(
            games=1,
            rolls=MetricSummary.of(game.rolls),
            climb=MetricSummary.of(game.climb),
            slide=MetricSummary.of(game.slide),
            lucky_rolls=MetricSummary.of(game.lucky_rolls),
            unlucky_rolls=MetricSummary.of(game.unlucky_rolls),
            biggest_turn_climb=game.biggest_turn_climb,
            biggest_turn_slide=game.biggest_turn_slide,
            longest_turn=game.longest_turn,
        )

    def merge(self, other: SimSummary) -> SimSummary:
        # longer_turn keeps its second argument on a tie, and equal turns
        # are identical tuples, so argument order doesn't matter.
        return SimSummary(
            games=self.games + other.games,
            rolls=self.rolls.merge(other.rolls),
            climb=self.climb.merge(other.climb),
            slide=self.slide.merge(other.slide),
            lucky_rolls=self.lucky_rolls.merge(other.lucky_rolls),
            unlucky_rolls=self.unlucky_rolls.merge(other.unlucky_rolls),
            biggest_turn_climb=max(self.biggest_turn_climb, other.biggest_turn_climb),
            biggest_turn_slide=max(self.biggest_turn_slide, other.biggest_turn_slide),
            longest_turn=longer_turn(other.longest_turn, self.longest_turn),
        )

    def finalize(self) -> MultiSimResult:
        fields: dict[str, object] = {}
        for name in METRICS:
            metric: MetricSummary = getattr(self, name)
            fields[f"min_{name}"] = metric.minimum
            fields[f"avg_{name}"] = metric.total / self.games
            fields[f"max_{name}"] = metric.maximum
        return MultiSimResult(
            games=self.games,
            biggest_turn_climb=self.biggest_turn_climb,
            biggest_turn_slide=self.biggest_turn_slide,
            longest_turn=self.longest_turn,
            **fields,
        )


def merge_all(summaries: Iterable[SimSummary]) -> SimSummary:
    """Merge partial summaries; raises ``EmptyInputError`` if there are none."""
    summaries = iter(summaries)
    first = next(summaries, None)
    if first is None:
        raise EmptyInputError("No games to summarize")
    return reduce(SimSummary.merge, summaries, first)


def summarize(games: Iterable[GameResult]) -> SimSummary:
    return merge_all(SimSummary.from_game(g) for g in games)


def aggregate(games: Iterable[GameResult]) -> MultiSimResult:
    """Fold every game into min/avg/max statistics."""
    return summarize(games).finalize()
