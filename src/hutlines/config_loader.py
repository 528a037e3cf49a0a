"""Load line combination catalogs from JSON files."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, Mapping, Tuple

from hutlines.config import SynergyRule


def _rule_from_entry(index: int, entry: Mapping[str, Any]) -> SynergyRule:
    if not isinstance(entry, Mapping):
        raise ValueError(f"catalog entry {index} is not an object")
    missing = [key for key in ("id", "type", "boost", "teams") if key not in entry]
    if missing:
        raise ValueError(f"catalog entry {index} is missing {', '.join(missing)}")
    teams = entry["teams"]
    if isinstance(teams, str) or not isinstance(teams, (list, tuple)):
        raise ValueError(f"catalog entry {index} has non-list teams {teams!r}")
    status = entry.get("status")
    return SynergyRule(
        rule_id=str(entry["id"]),
        kind=str(entry["type"]),
        requirements=tuple(str(team) for team in teams),
        boost=str(entry["boost"]),
        status=str(status) if status is not None else None,
    )


def rules_from_entries(entries: Iterable[Mapping[str, Any]]) -> Tuple[SynergyRule, ...]:
    """Build rules from ``{"id", "type", "boost", "teams"}`` objects.

    A rule whose team count disagrees with its type is accepted as-is; the
    matcher never pairs it with a line.
    """

    return tuple(_rule_from_entry(idx, entry) for idx, entry in enumerate(entries))


@dataclass
class CatalogFile:
    rules: Tuple[SynergyRule, ...]

    @classmethod
    def load(cls, path: Path) -> "CatalogFile":
        data = json.loads(path.read_text(encoding="utf-8"))
        if isinstance(data, Mapping):
            data = data.get("combinations", [])
        if not isinstance(data, list):
            raise ValueError(f"catalog {path} must hold a list of combinations")
        return cls(rules=rules_from_entries(data))
