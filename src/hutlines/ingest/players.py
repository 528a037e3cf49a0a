"""Helpers to load exported player lists and split them into role pools."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, List, Mapping, Sequence

from pydantic import BaseModel, ConfigDict, Field

from hutlines.models import (
    DEFENSE_POSITIONS,
    FORWARD_POSITIONS,
    GOALIE_POSITIONS,
    PlayerRecord,
)


logger = logging.getLogger(__name__)

_POSITION_ALIASES = {"GK": "G"}


class ScrapedPlayerRow(BaseModel):
    """One player row as written by the stats exporter; extra columns are ignored."""

    id: str = ""
    full_name: str = ""
    position: str = ""
    team: str = ""
    nationality: str = ""
    overall: Any = Field(default="0")
    card: str = ""

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)


@dataclass(frozen=True)
class RosterPools:
    forwards: List[PlayerRecord]
    defensemen: List[PlayerRecord]
    goalies: List[PlayerRecord]


def _canonical_position(raw: str) -> str:
    token = raw.strip().upper()
    return _POSITION_ALIASES.get(token, token)


def rows_to_records(rows: Sequence[ScrapedPlayerRow]) -> List[PlayerRecord]:
    records: List[PlayerRecord] = []
    for index, row in enumerate(rows):
        name = row.full_name.strip()
        if not name:
            logger.warning("Skipping player row %s with no name (id=%r)", index, row.id)
            continue
        metadata: dict[str, object] = {}
        if row.position:
            metadata["raw_position"] = row.position
        records.append(
            PlayerRecord(
                player_id=row.id.strip() or name,
                name=name,
                position=_canonical_position(row.position),
                team=row.team.strip(),
                nationality=row.nationality.strip(),
                overall=row.overall,
                card=row.card.strip(),
                metadata=metadata,
            )
        )
    return records


def rows_from_payload(payload: Sequence[Mapping[str, Any]]) -> List[ScrapedPlayerRow]:
    return [ScrapedPlayerRow.model_validate(item) for item in payload]


def load_players_json(path: Path) -> List[PlayerRecord]:
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, list):
        raise ValueError(f"{path} must contain a JSON list of players")
    return rows_to_records(rows_from_payload(data))


def categorize_by_position(records: Sequence[PlayerRecord]) -> RosterPools:
    """Split records into forward, defense and goalie pools, preserving order."""

    forwards: List[PlayerRecord] = []
    defensemen: List[PlayerRecord] = []
    goalies: List[PlayerRecord] = []
    for record in records:
        if record.position in FORWARD_POSITIONS:
            forwards.append(record)
        elif record.position in DEFENSE_POSITIONS:
            defensemen.append(record)
        elif record.position in GOALIE_POSITIONS:
            goalies.append(record)
        else:
            logger.debug("Ignoring %s with unknown position %r", record.name, record.position)
    return RosterPools(forwards=forwards, defensemen=defensemen, goalies=goalies)
