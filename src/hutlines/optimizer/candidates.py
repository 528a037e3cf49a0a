"""Enumerate candidate lines from a player pool."""

from __future__ import annotations

from itertools import combinations
from typing import AbstractSet, Iterator, Sequence, Tuple

from hutlines.models import PlayerRecord, same_person


SUPPORTED_LINE_SIZES = (2, 3)


def _distinct_people(players: Tuple[PlayerRecord, ...]) -> bool:
    return not any(same_person(first, second) for first, second in combinations(players, 2))


def _iter_combinations(
    available: Sequence[PlayerRecord], size: int
) -> Iterator[Tuple[PlayerRecord, ...]]:
    for group in combinations(available, size):
        if _distinct_people(group):
            yield group


def iter_line_candidates(
    pool: Sequence[PlayerRecord],
    size: int,
    used_names: AbstractSet[str] = frozenset(),
) -> Iterator[Tuple[PlayerRecord, ...]]:
    """Yield unordered groups of ``size`` unused players in pool order.

    Groups holding the same person twice (by normalized name) are skipped.
    Each call returns a fresh iterator.
    """

    if size not in SUPPORTED_LINE_SIZES:
        raise ValueError(f"Unsupported line size {size!r}; expected one of {SUPPORTED_LINE_SIZES}")
    available = [player for player in pool if player.name_key not in used_names]
    return _iter_combinations(available, size)
