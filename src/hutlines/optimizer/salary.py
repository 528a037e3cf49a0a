"""Estimated contract values derived from card ratings."""

from __future__ import annotations

from typing import List, Sequence

from hutlines.models import PlayerRecord


def estimate_salary(overall: int) -> int:
    """Step estimate by rating band.

    Ratings under 70 fall below the 750k base and keep dropping; callers get
    the raw figure.
    """

    if overall >= 90:
        return 10_000_000 + (overall - 90) * 500_000
    if overall >= 85:
        return 5_000_000 + (overall - 85) * 800_000
    if overall >= 80:
        return 2_000_000 + (overall - 80) * 400_000
    return 750_000 + (overall - 70) * 125_000


def attach_salaries(players: Sequence[PlayerRecord]) -> List[PlayerRecord]:
    return [player.model_copy(update={"salary": estimate_salary(player.overall)}) for player in players]
