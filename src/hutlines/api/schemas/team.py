from __future__ import annotations

from typing import Any, Dict, List, Literal

from pydantic import BaseModel, Field


class PlayerPayload(BaseModel):
    id: str = Field(..., min_length=1)
    full_name: str = Field(..., min_length=1)
    position: str = ""
    team: str
    nationality: str
    overall: int | float | str | None = 0
    card: str = ""


class SearchBudgetPayload(BaseModel):
    forward_top: int | None = Field(default=None, ge=1, le=5000)
    forward_depth: int | None = Field(default=None, ge=1, le=5000)
    defense_top: int | None = Field(default=None, ge=1, le=5000)
    defense_depth: int | None = Field(default=None, ge=1, le=5000)


class OptimizeRequest(BaseModel):
    forwards: List[PlayerPayload] = Field(default_factory=list)
    defensemen: List[PlayerPayload] = Field(default_factory=list)
    goalies: List[PlayerPayload] = Field(default_factory=list)
    budget: SearchBudgetPayload | None = None
    combinations: List[Dict[str, Any]] | None = None


class CombinationResponse(BaseModel):
    id: str
    type: str
    boost: str
    teams: List[str]
    bonus_type: Literal["OVR", "AP", "SAL", "UNKNOWN"]
    bonus_value: int
    status: str | None = None


class PlayerResponse(BaseModel):
    id: str
    full_name: str
    position: str
    team: str
    nationality: str
    overall: int
    card: str
    salary: int


class LineResponse(BaseModel):
    players: List[PlayerResponse]
    combinations: List[CombinationResponse]
    base_total_ovr: int
    total_ovr: int
    ovr_bonus: int
    ap_bonus: int
    salary_bonus: int
    total_salary: int
    score: float


class TeamResponse(BaseModel):
    forward_lines: List[LineResponse]
    defense_lines: List[LineResponse]
    goalies: List[PlayerResponse]
    total_salary: int
    total_ovr: int
    total_ovr_bonus: int
    total_ap_bonus: int
    total_salary_bonus: int
