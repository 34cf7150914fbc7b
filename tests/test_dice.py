"""Tests for snakes_sim.dice."""

import random

import pytest

from snakes_sim.dice import Dice, RandomDice, ScriptedDice
from snakes_sim.errors import DiceExhaustedError


def test_random_dice_in_range():
    dice = RandomDice(random.Random(7))
    values = [dice.roll() for _ in range(600)]
    assert min(values) == 1
    assert max(values) == 6


def test_random_dice_is_reproducible():
    a = RandomDice(random.Random(42))
    b = RandomDice(random.Random(42))
    assert [a.roll() for _ in range(50)] == [b.roll() for _ in range(50)]


def test_scripted_dice_replays_in_order():
    dice = ScriptedDice([2, 6, 4])
    assert [dice.roll(), dice.roll(), dice.roll()] == [2, 6, 4]
    assert dice.remaining == 0


def test_scripted_dice_runs_out():
    dice = ScriptedDice([1])
    dice.roll()
    with pytest.raises(DiceExhaustedError):
        dice.roll()


def test_both_satisfy_protocol():
    assert isinstance(RandomDice(), Dice)
    assert isinstance(ScriptedDice([]), Dice)
