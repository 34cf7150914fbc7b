"""Tests for snakes_sim.render."""

import json

from snakes_sim.game import GameResult
from snakes_sim.render import format_summary, result_to_dict
from snakes_sim.stats import aggregate

RESULT = aggregate([
    GameResult(rolls=7, climb=74, slide=0, biggest_turn_climb=21, biggest_turn_slide=0,
               longest_turn=(6, 2), lucky_rolls=6, unlucky_rolls=0),
    GameResult(rolls=30, climb=10, slide=43, biggest_turn_climb=10, biggest_turn_slide=43,
               longest_turn=(5,), lucky_rolls=4, unlucky_rolls=2),
])


def test_format_summary():
    text = format_summary(RESULT)
    assert "Games simulated: 2" in text
    assert "Rolls to win" in text
    assert "18.50" in text                       # average rolls
    assert "Biggest climb in one turn: 21" in text
    assert "Biggest slide in one turn: 43" in text
    assert text.endswith("Longest turn: [6, 2]")


def test_result_to_dict_is_json_safe():
    data = json.loads(json.dumps(result_to_dict(RESULT)))
    assert data["games"] == 2
    assert data["avg_rolls"] == 18.5
    assert data["longest_turn"] == [6, 2]
    assert data["max_unlucky_rolls"] == 2
