"""Built-in line combination catalog."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Optional, Tuple


LINE_KIND_SIZES: Dict[str, int] = {
    "forward": 3,
    "defense": 2,
}


@dataclass(frozen=True)
class SynergyRule:
    rule_id: str
    kind: str
    requirements: Tuple[str, ...]
    boost: str
    status: Optional[str] = None

    @property
    def size(self) -> Optional[int]:
        return LINE_KIND_SIZES.get(self.kind)


def _forward(rule_id: str, boost: str, *teams: str, status: Optional[str] = None) -> SynergyRule:
    return SynergyRule(rule_id=rule_id, kind="forward", requirements=teams, boost=boost, status=status)


def _defense(rule_id: str, boost: str, *teams: str, status: Optional[str] = None) -> SynergyRule:
    return SynergyRule(rule_id=rule_id, kind="defense", requirements=teams, boost=boost, status=status)


_LINE_COMBINATIONS: Tuple[SynergyRule, ...] = (
    # forward salary
    _forward("f1", "+2.0M SAL", "CZE", "LAK", "SWE"),
    _forward("f2", "+1.0M SAL", "BOS", "VGK", "TOR"),
    _forward("f3", "+1.0M SAL", "MTL", "COL", "TB"),
    _forward("f4", "+1.0M SAL", "RUS", "PIT", "CAR"),
    _forward("f5", "+1.0M SAL", "SWE", "SWE", "SWE"),
    _forward("f6", "+1.0M SAL", "FIN", "FIN", "FIN"),
    # forward overall
    _forward("f7", "2 OVR", "ANA", "ANA", "ANA"),
    _forward("f8", "2 OVR", "FIN", "FIN", "FIN"),
    _forward("f9", "1 OVR", "SJS", "PHI", "TB"),
    _forward("f10", "1 OVR", "NYR", "USA", "NYR"),
    _forward("f11", "1 OVR", "CAN", "GER", "EDM"),
    _forward("f12", "1 OVR", "CAN", "SWE", "WSH"),
    # forward ability points
    _forward("f13", "5 AP", "NYR", "MTL", "TOR"),
    _forward("f14", "5 AP", "PIT", "PIT", "ANA"),
    _forward("f15", "5 AP", "SJS", "VAN", "SEA"),
    _forward("f16", "5 AP", "COL", "NJD", "NYI"),
    _forward("f17", "3 AP", "CAN", "CAN", "CAN"),
    _forward("f18", "3 AP", "USA", "USA", "USA"),
    # defense salary
    _defense("d1", "+3.0M SAL", "DAL", "STL"),
    _defense("d2", "+2.0M SAL", "EDM", "USA"),
    _defense("d3", "+1.0M SAL", "USA", "TB"),
    _defense("d4", "+1.0M SAL", "ANA", "CAR"),
    _defense("d5", "+1.0M SAL", "PHI", "WSH"),
    # defense overall
    _defense("d6", "2 OVR", "BOS", "BOS"),
    _defense("d7", "2 OVR", "CAN", "MIN", status="+2"),
    _defense("d8", "2 OVR", "SWE", "DET", status="+2"),
    _defense("d9", "1 OVR", "VAN", "NJD"),
    _defense("d10", "1 OVR", "USA", "FLA", status="+2"),
    _defense("d11", "1 OVR", "FIN", "CAR"),
    # defense ability points
    _defense("d12", "5 AP", "CGY", "STL", status="+2"),
    _defense("d13", "5 AP", "LAK", "PIT"),
    _defense("d14", "5 AP", "RUS", "NYR"),
)

_RULES_BY_ID: Dict[str, SynergyRule] = {rule.rule_id: rule for rule in _LINE_COMBINATIONS}


def default_catalog() -> Tuple[SynergyRule, ...]:
    """Return the built-in catalog in its declared order."""

    return _LINE_COMBINATIONS


def iter_rules(kind: Optional[str] = None) -> Iterable[SynergyRule]:
    """Return catalog rules, optionally restricted to one line kind."""

    if kind is None:
        return iter(_LINE_COMBINATIONS)
    return (rule for rule in _LINE_COMBINATIONS if rule.kind == kind)


def get_rule(rule_id: str) -> SynergyRule:
    """Fetch a rule by id, raising KeyError if missing."""

    if rule_id not in _RULES_BY_ID:
        raise KeyError(f"No line combination configured with id={rule_id!r}")
    return _RULES_BY_ID[rule_id]
