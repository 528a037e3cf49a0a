"""Heuristic line scoring."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from .service import OptimizedLine


BASE_WEIGHT = 10
OVR_BONUS_WEIGHT = 1000
AP_BONUS_WEIGHT = 100
SALARY_BONUS_WEIGHT = 10
TOP_SLOTS = 2


def slot_weight(slot_number: int) -> int:
    return 2 if slot_number <= TOP_SLOTS else 1


def score_line(line: "OptimizedLine", slot_number: int) -> float:
    """Score a line for a given slot.

    Top slots favour overall boosts, depth slots favour ability points;
    salary boosts only break ties between otherwise similar lines.
    """

    weight = slot_weight(slot_number)
    return (
        line.base_total_ovr * BASE_WEIGHT
        + line.ovr_bonus * OVR_BONUS_WEIGHT * weight
        + line.ap_bonus * AP_BONUS_WEIGHT * (3 - weight)
        + (line.salary_bonus / 1_000_000) * SALARY_BONUS_WEIGHT
    )
