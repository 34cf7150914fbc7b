"""Board config files: JSON with iterations, size, snakes and ladders."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from snakes_sim.board import Board
from snakes_sim.errors import ConfigError, InvalidBoardError

DEFAULT_CONFIG = Path("config.json")


@dataclass(frozen=True)
class BoardConfig:
    """Everything needed to run a batch of simulations."""

    size: int
    ladders_and_snakes: tuple[tuple[int, int], ...]
    iterations: int

    def build_board(self) -> Board:
        return Board.from_pairs(self.size, self.ladders_and_snakes)


def _int(data: dict, key: str) -> int:
    if key not in data:
        raise ConfigError(f"Config is missing '{key}'")
    value = data[key]
    if not isinstance(value, int) or isinstance(value, bool):
        raise ConfigError(f"'{key}' must be an integer, got {value!r}")
    return value


def _pairs(data: dict, key: str) -> list[tuple[int, int]]:
    pairs = []
    for item in data.get(key, []):
        if (
            not isinstance(item, (list, tuple))
            or len(item) != 2
            or not all(isinstance(v, int) and not isinstance(v, bool) for v in item)
        ):
            raise ConfigError(f"Each entry in '{key}' must be a [from, to] pair, got {item!r}")
        pairs.append((item[0], item[1]))
    return pairs


def parse_config(data: Any) -> BoardConfig:
    """Validate a decoded config dict."""
    if not isinstance(data, dict):
        raise ConfigError("Config must be a JSON object")

    iterations = _int(data, "iterations")
    if iterations < 0:
        raise ConfigError(f"'iterations' must not be negative, got {iterations}")
    size = _int(data, "size")
    snakes = _pairs(data, "snakes")
    ladders = _pairs(data, "ladders")

    if any(src < dest for src, dest in snakes):
        raise InvalidBoardError("Some snake(s) are going upwards!")
    if any(src > dest for src, dest in ladders):
        raise InvalidBoardError("Some ladder(s) are going downwards!")

    return BoardConfig(
        size=size,
        ladders_and_snakes=tuple(snakes + ladders),
        iterations=iterations,
    )


def load_config(path: Path | str = DEFAULT_CONFIG) -> BoardConfig:
    path = Path(path)
    try:
        contents = path.read_text()
    except OSError as exc:
        raise ConfigError(f"Can't read config file {path}: {exc}") from exc
    try:
        data = json.loads(contents)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in {path}: {exc}") from exc
    return parse_config(data)
