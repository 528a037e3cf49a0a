"""Parse line combination boost descriptors into typed bonuses."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, Literal


BonusKind = Literal["OVR", "AP", "SAL", "UNKNOWN"]

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")
_MILLIONS = re.compile(r"(\d+(?:\.\d*)?)M")


@dataclass(frozen=True)
class Bonus:
    kind: BonusKind
    value: int


UNKNOWN_BONUS = Bonus(kind="UNKNOWN", value=0)


def _leading_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def parse_bonus(descriptor: str) -> Bonus:
    """Classify a boost string such as ``"2 OVR"``, ``"5 AP"`` or ``"+1.0M SAL"``.

    Checks run in priority order (overall, ability points, salary) and never
    raise; anything unrecognised maps to an ``UNKNOWN`` bonus worth zero.
    """

    if "OVR" in descriptor:
        return Bonus(kind="OVR", value=_leading_int(descriptor))
    if "AP" in descriptor:
        return Bonus(kind="AP", value=_leading_int(descriptor))
    match = _MILLIONS.search(descriptor)
    if match:
        return Bonus(kind="SAL", value=int(round(float(match.group(1)) * 1_000_000)))
    return UNKNOWN_BONUS


@dataclass(frozen=True)
class LineBonuses:
    ovr_bonus: int = 0
    ap_bonus: int = 0
    salary_bonus: int = 0

    @classmethod
    def from_bonuses(cls, bonuses: Iterable[Bonus]) -> "LineBonuses":
        ovr = ap = salary = 0
        for bonus in bonuses:
            if bonus.kind == "OVR":
                ovr += bonus.value
            elif bonus.kind == "AP":
                ap += bonus.value
            elif bonus.kind == "SAL":
                salary += bonus.value
        return cls(ovr_bonus=ovr, ap_bonus=ap, salary_bonus=salary)
