"""Canonical player models shared across ingestion and optimizer layers."""

from __future__ import annotations

import logging
import re
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, ValidationInfo, field_validator
from pydantic.config import ConfigDict


logger = logging.getLogger(__name__)

FORWARD_POSITIONS = ("C", "LW", "RW")
DEFENSE_POSITIONS = ("LD", "RD", "D")
GOALIE_POSITIONS = ("G",)

_NON_LETTERS = re.compile(r"[^a-z]")


def normalize_name(name: str) -> str:
    """Collapse a display name to lowercase letters only."""

    return _NON_LETTERS.sub("", name.lower())


def same_person(first: "PlayerRecord", second: "PlayerRecord") -> bool:
    return first.name_key == second.name_key


class PlayerRecord(BaseModel):
    """Rated player card used by the line builder."""

    player_id: str = Field(..., min_length=1)
    name: str
    position: str
    team: str
    nationality: str
    overall: int = 0
    card: str = ""
    salary: Optional[int] = None
    metadata: Dict[str, Any] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)

    @field_validator("overall", mode="before")
    @classmethod
    def _coerce_overall(cls, value: Any, info: ValidationInfo) -> int:
        if isinstance(value, int):
            return int(value)
        try:
            if isinstance(value, float):
                return int(value)
            return int(str(value).strip() if value is not None else "")
        except (ValueError, OverflowError):
            logger.warning(
                "Rating %r for %s is not an integer; treating it as 0",
                value,
                info.data.get("name", "<unknown>"),
            )
            return 0

    @property
    def name_key(self) -> str:
        return normalize_name(self.name)
