"""Canonical player models."""

from .player import (
    DEFENSE_POSITIONS,
    FORWARD_POSITIONS,
    GOALIE_POSITIONS,
    PlayerRecord,
    normalize_name,
    same_person,
)

__all__ = [
    "DEFENSE_POSITIONS",
    "FORWARD_POSITIONS",
    "GOALIE_POSITIONS",
    "PlayerRecord",
    "normalize_name",
    "same_person",
]
