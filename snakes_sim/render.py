"""Text and JSON renderings of a ``MultiSimResult``."""

from __future__ import annotations

from dataclasses import asdict

from snakes_sim.stats import METRICS, MultiSimResult

LABELS = {
    "rolls": "Rolls to win",
    "climb": "Climb distance",
    "slide": "Slide distance",
    "lucky_rolls": "Lucky rolls",
    "unlucky_rolls": "Unlucky rolls",
}


def result_to_dict(result: MultiSimResult) -> dict:
    """JSON-safe dict of every field."""
    data = asdict(result)
    data["longest_turn"] = list(result.longest_turn)
    return data


def format_summary(result: MultiSimResult) -> str:
    lines = [
        f"Games simulated: {result.games}",
        "",
        f"  {'':16s} {'min':>8s} {'avg':>10s} {'max':>8s}",
    ]
    for name in METRICS:
        lo = getattr(result, f"min_{name}")
        avg = getattr(result, f"avg_{name}")
        hi = getattr(result, f"max_{name}")
        lines.append(f"  {LABELS[name]:16s} {lo:8d} {avg:10.2f} {hi:8d}")

    turn = ", ".join(str(r) for r in result.longest_turn)
    lines += [
        "",
        f"Biggest climb in one turn: {result.biggest_turn_climb}",
        f"Biggest slide in one turn: {result.biggest_turn_slide}",
        f"Longest turn: [{turn}]",
    ]
    return "\n".join(lines)
