"""Pydantic models for API I/O."""

from .team import (
    CombinationResponse,
    LineResponse,
    OptimizeRequest,
    PlayerPayload,
    PlayerResponse,
    SearchBudgetPayload,
    TeamResponse,
)

__all__ = [
    "CombinationResponse",
    "LineResponse",
    "OptimizeRequest",
    "PlayerPayload",
    "PlayerResponse",
    "SearchBudgetPayload",
    "TeamResponse",
]
