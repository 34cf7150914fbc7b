"""Tests for snakes_sim.stats (cross-game aggregation)."""

import itertools

import pytest

from snakes_sim.errors import EmptyInputError
from snakes_sim.game import GameResult
from snakes_sim.stats import (
    MetricSummary,
    MultiSimResult,
    SimSummary,
    aggregate,
    merge_all,
    summarize,
)


def _game(
    rolls: int = 10,
    climb: int = 0,
    slide: int = 0,
    turn_climb: int = 0,
    turn_slide: int = 0,
    longest: tuple[int, ...] = (1,),
    lucky: int = 1,
    unlucky: int = 0,
) -> GameResult:
    return GameResult(
        rolls=rolls,
        climb=climb,
        slide=slide,
        biggest_turn_climb=turn_climb,
        biggest_turn_slide=turn_slide,
        longest_turn=longest,
        lucky_rolls=lucky,
        unlucky_rolls=unlucky,
    )


GAMES = [
    _game(rolls=8, climb=40, slide=12, turn_climb=30, turn_slide=12, longest=(6, 5), lucky=3, unlucky=1),
    _game(rolls=0, climb=0, slide=0, longest=(), lucky=0, unlucky=0),
    _game(rolls=3, climb=21, slide=58, turn_climb=21, turn_slide=43, longest=(6, 6, 2), lucky=2, unlucky=2),
    _game(rolls=25, climb=7, slide=90, turn_climb=7, turn_slide=50, longest=(6, 6, 1), lucky=5, unlucky=4),
    _game(rolls=14, climb=63, slide=0, turn_climb=44, longest=(5,), lucky=4, unlucky=0),
]


# ── MetricSummary ────────────────────────────────────────────────────

def test_metric_merge():
    merged = MetricSummary.of(8).merge(MetricSummary.of(0)).merge(MetricSummary.of(3))
    assert merged == MetricSummary(minimum=0, total=11, maximum=8)


# ── aggregate ────────────────────────────────────────────────────────

def test_singleton_average_is_the_value():
    result = aggregate([_game(rolls=5, lucky=2)])
    assert result.games == 1
    assert (result.min_rolls, result.avg_rolls, result.max_rolls) == (5, 5.0, 5)
    assert (result.min_lucky_rolls, result.avg_lucky_rolls, result.max_lucky_rolls) == (2, 2.0, 2)


def test_aggregate_min_avg_max():
    result = aggregate(GAMES[:3])
    assert (result.min_rolls, result.avg_rolls, result.max_rolls) == (0, 11.0 / 3.0, 8)
    assert (result.min_climb, result.avg_climb, result.max_climb) == (0, 61 / 3, 40)
    assert (result.min_slide, result.avg_slide, result.max_slide) == (0, 70 / 3, 58)
    assert (result.min_unlucky_rolls, result.max_unlucky_rolls) == (0, 2)


def test_aggregate_global_turn_records():
    result = aggregate(GAMES)
    assert result == MultiSimResult(
        games=5,
        min_rolls=0, avg_rolls=50 / 5, max_rolls=25,
        min_climb=0, avg_climb=131 / 5, max_climb=63,
        min_slide=0, avg_slide=160 / 5, max_slide=90,
        biggest_turn_climb=44,
        biggest_turn_slide=50,
        longest_turn=(6, 6, 2),
        min_lucky_rolls=0, avg_lucky_rolls=14 / 5, max_lucky_rolls=5,
        min_unlucky_rolls=0, avg_unlucky_rolls=7 / 5, max_unlucky_rolls=4,
    )


def test_aggregate_accepts_a_generator():
    result = aggregate(g for g in GAMES)
    assert result.games == 5


# ── empty input ──────────────────────────────────────────────────────

def test_empty_list_raises():
    with pytest.raises(EmptyInputError):
        aggregate([])


def test_empty_generator_raises():
    with pytest.raises(EmptyInputError):
        summarize(g for g in [])


def test_merge_all_empty_raises():
    with pytest.raises(EmptyInputError):
        merge_all([])


# ── merge properties ─────────────────────────────────────────────────

def test_any_two_way_partition_merges_to_the_same_summary():
    whole = summarize(GAMES)
    for split in range(1, len(GAMES)):
        left = summarize(GAMES[:split])
        right = summarize(GAMES[split:])
        assert left.merge(right) == whole
        assert right.merge(left) == whole
        assert left.merge(right).finalize() == whole.finalize()


def test_merge_order_does_not_matter():
    whole = summarize(GAMES)
    for order in itertools.permutations(GAMES):
        parts = [SimSummary.from_game(g) for g in order]
        assert merge_all(parts) == whole


def test_merge_is_associative():
    a, b, c = (summarize([g]) for g in GAMES[:3])
    assert a.merge(b).merge(c) == a.merge(b.merge(c))
