"""Batch runner: simulates many games and aggregates them."""

from __future__ import annotations

import logging
import os
import random
from concurrent.futures import ProcessPoolExecutor

from snakes_sim.board import Board
from snakes_sim.dice import RandomDice
from snakes_sim.game import GameSimulator
from snakes_sim.stats import MultiSimResult, SimSummary, merge_all, summarize

logger = logging.getLogger(__name__)


def game_rng(base_seed: int, index: int) -> random.Random:
    """Private RNG for game *index*; independent of how games are chunked."""
    return random.Random(f"{base_seed}/{index}")


def simulate_range(board: Board, base_seed: int, start: int, stop: int) -> SimSummary:
    """Play games ``start`` to ``stop - 1`` and summarize them."""
    games = (
        GameSimulator(board, RandomDice(game_rng(base_seed, i))).play()
        for i in range(start, stop)
    )
    summary = summarize(games)
    logger.debug("Finished games %d-%d", start, stop - 1)
    return summary


def chunk_bounds(count: int, chunks: int) -> list[tuple[int, int]]:
    """Split ``range(count)`` into at most *chunks* contiguous, non-empty slices."""
    base, extra = divmod(count, chunks)
    bounds = []
    start = 0
    for i in range(chunks):
        size = base + (1 if i < extra else 0)
        if size > 0:
            bounds.append((start, start + size))
            start += size
    return bounds


def run_batch(
    board: Board,
    count: int,
    seed: int | None = None,
    workers: int = 1,
) -> MultiSimResult:
    """Simulate *count* games on *board* and return their statistics.

    Game ``i`` always uses the same RNG for a given *seed*, so the result
    doesn't depend on *workers*. With ``workers > 1`` the games are split
    across a process pool and the partial summaries merged in order.
    """
    if seed is None:
        seed = random.SystemRandom().getrandbits(63)
    available = os.cpu_count() or 1
    workers = max(1, min(workers, available, count or 1))

    logger.info(
        "Simulating %d games on a %d-square board (seed=%d, workers=%d)",
        count, board.size, seed, workers,
    )

    bounds = chunk_bounds(count, workers)
    if len(bounds) <= 1:
        partials = [simulate_range(board, seed, start, stop) for start, stop in bounds]
    else:
        with ProcessPoolExecutor(max_workers=workers) as pool:
            futures = [
                pool.submit(simulate_range, board, seed, start, stop)
                for start, stop in bounds
            ]
            partials = [f.result() for f in futures]

    return merge_all(partials).finalize()
