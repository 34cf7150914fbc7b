"""Game simulator: plays one single-player Snakes & Ladders game."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Protocol

from snakes_sim.board import DIE_SIZE, Board, RollResult, apply_roll
from snakes_sim.dice import Dice, RandomDice


# ── Longest turn ────────────────────────────────────────────────────

def turn_key(rolls: Sequence[int]) -> tuple[int, tuple[int, ...]]:
    """Sort key for turns: more rolls first, then lexicographic by value."""
    return len(rolls), tuple(rolls)


def longer_turn(candidate: Sequence[int], best: Sequence[int]) -> tuple[int, ...]:
    """Return whichever turn wins; *best* is kept on a tie."""
    if turn_key(candidate) > turn_key(best):
        return tuple(candidate)
    return tuple(best)


# ── Structured types ────────────────────────────────────────────────

@dataclass(frozen=True)
class TurnRecord:
    """Rolls and snake/ladder movement within a single turn."""

    rolls: tuple[int, ...]
    climb: int = 0
    slide: int = 0


@dataclass
class GameState:
    """Mutable state that evolves during a game."""

    position: int = 0
    turns: int = 0
    rolls: int = 0
    climbs: int = 0
    slides: int = 0
    climb: int = 0
    slide: int = 0
    biggest_turn_climb: int = 0
    biggest_turn_slide: int = 0
    longest_turn: tuple[int, ...] = ()
    lucky_rolls: int = 0
    unlucky_rolls: int = 0


@dataclass(frozen=True)
class GameResult:
    """Raw metrics for one finished game."""

    rolls: int
    climb: int
    slide: int
    biggest_turn_climb: int
    biggest_turn_slide: int
    longest_turn: tuple[int, ...]
    lucky_rolls: int
    unlucky_rolls: int
    turns: int = 0
    climbs: int = 0
    slides: int = 0


# ── Observer ────────────────────────────────────────────────────────

class GameObserver(Protocol):
    """Receives each turn as it finishes."""

    def on_turn(self, turn: TurnRecord) -> None: ...


@dataclass
class ListObserver:
    """Collects turns into a list."""

    turns: list[TurnRecord] = field(default_factory=list)

    def on_turn(self, turn: TurnRecord) -> None:
        self.turns.append(turn)


# ── Simulator ───────────────────────────────────────────────────────

class GameSimulator:
    """Play one game on *board* until the token reaches the winning square.

    The board must be winnable; ``Board`` validation guarantees that, so
    there is no turn limit here.
    """

    def __init__(
        self,
        board: Board,
        dice: Dice | None = None,
        state: GameState | None = None,
        observer: GameObserver | None = None,
    ):
        self.board = board
        self.dice = dice or RandomDice()
        self.state = state or GameState()
        self.observer = observer

    def has_won(self) -> bool:
        return self.state.position == self.board.size

    def play(self) -> GameResult:
        while not self.has_won():
            self.play_turn()
        return self.result()

    def play_turn(self) -> TurnRecord:
        """Roll once, and keep rolling on a 6. Stop on a win or overshoot."""
        state = self.state
        rolls: list[int] = []
        climb = slide = 0

        while True:
            outcome = self.roll()
            rolls.append(outcome.value)
            climb += outcome.climb
            slide += outcome.slide
            if outcome.won or outcome.bounced or outcome.value != DIE_SIZE:
                break

        state.turns += 1
        state.biggest_turn_climb = max(state.biggest_turn_climb, climb)
        state.biggest_turn_slide = max(state.biggest_turn_slide, slide)
        state.longest_turn = longer_turn(rolls, state.longest_turn)

        record = TurnRecord(rolls=tuple(rolls), climb=climb, slide=slide)
        if self.observer is not None:
            self.observer.on_turn(record)
        return record

    def roll(self) -> RollResult:
        """Roll the die once, move the token and update the counters."""
        state = self.state
        outcome = apply_roll(self.board, state.position, self.dice.roll())

        state.rolls += 1
        state.position = outcome.destination
        if outcome.climb:
            state.climbs += 1
            state.climb += outcome.climb
        if outcome.slide:
            state.slides += 1
            state.slide += outcome.slide
        if outcome.unlucky:
            state.unlucky_rolls += 1
        elif outcome.lucky:
            state.lucky_rolls += 1
        return outcome

    def result(self) -> GameResult:
        state = self.state
        return GameResult(
            rolls=state.rolls,
            climb=state.climb,
            slide=state.slide,
            biggest_turn_climb=state.biggest_turn_climb,
            biggest_turn_slide=state.biggest_turn_slide,
            longest_turn=state.longest_turn,
            lucky_rolls=state.lucky_rolls,
            unlucky_rolls=state.unlucky_rolls,
            turns=state.turns,
            climbs=state.climbs,
            slides=state.slides,
        )


def play_game(board: Board, dice: Dice | None = None) -> GameResult:
    return GameSimulator(board, dice).play()
