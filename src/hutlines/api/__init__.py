"""REST API for the hutlines line builder."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Iterable, List

from fastapi import FastAPI, HTTPException, Query

from hutlines.api.schemas import (
    CombinationResponse,
    LineResponse,
    OptimizeRequest,
    PlayerPayload,
    PlayerResponse,
    SearchBudgetPayload,
    TeamResponse,
)
from hutlines.config import SearchSettings, SynergyRule
from hutlines.config_loader import rules_from_entries
from hutlines.models import PlayerRecord
from hutlines.optimizer import OptimizedLine, OptimizedTeam, SynergyCatalog, build_team


logger = logging.getLogger(__name__)

KIND_CHOICES = ("forward", "defense")
BOOST_CHOICES = ("SAL", "OVR", "AP")


def combination_to_response(rule: SynergyRule, catalog: SynergyCatalog) -> CombinationResponse:
    bonus = catalog.bonus_for(rule)
    return CombinationResponse(
        id=rule.rule_id,
        type=rule.kind,
        boost=rule.boost,
        teams=list(rule.requirements),
        bonus_type=bonus.kind,
        bonus_value=bonus.value,
        status=rule.status,
    )


def player_to_response(player: PlayerRecord) -> PlayerResponse:
    return PlayerResponse(
        id=player.player_id,
        full_name=player.name,
        position=player.position,
        team=player.team,
        nationality=player.nationality,
        overall=player.overall,
        card=player.card,
        salary=player.salary or 0,
    )


def line_to_response(line: OptimizedLine, catalog: SynergyCatalog) -> LineResponse:
    return LineResponse(
        players=[player_to_response(player) for player in line.players],
        combinations=[combination_to_response(rule, catalog) for rule in line.combinations],
        base_total_ovr=line.base_total_ovr,
        total_ovr=line.total_ovr,
        ovr_bonus=line.ovr_bonus,
        ap_bonus=line.ap_bonus,
        salary_bonus=line.salary_bonus,
        total_salary=line.total_salary,
        score=line.score,
    )


def team_to_response(team: OptimizedTeam, catalog: SynergyCatalog) -> TeamResponse:
    return TeamResponse(
        forward_lines=[line_to_response(line, catalog) for line in team.forward_lines],
        defense_lines=[line_to_response(line, catalog) for line in team.defense_lines],
        goalies=[player_to_response(goalie) for goalie in team.goalies],
        total_salary=team.total_salary,
        total_ovr=team.total_ovr,
        total_ovr_bonus=team.total_ovr_bonus,
        total_ap_bonus=team.total_ap_bonus,
        total_salary_bonus=team.total_salary_bonus,
    )


def _payload_to_records(players: Iterable[PlayerPayload]) -> List[PlayerRecord]:
    return [
        PlayerRecord(
            player_id=player.id,
            name=player.full_name,
            position=player.position,
            team=player.team,
            nationality=player.nationality,
            overall=player.overall,
            card=player.card,
        )
        for player in players
    ]


def _apply_budget(settings: SearchSettings, budget: SearchBudgetPayload | None) -> SearchSettings:
    if budget is None:
        return settings
    forward_top, _, forward_depth, _ = settings.forward_caps
    defense_top, defense_depth, _ = settings.defense_caps
    forward_top = budget.forward_top or forward_top
    forward_depth = budget.forward_depth or forward_depth
    defense_top = budget.defense_top or defense_top
    defense_depth = budget.defense_depth or defense_depth
    return replace(
        settings,
        forward_caps=(forward_top, forward_top, forward_depth, forward_depth),
        defense_caps=(defense_top, defense_depth, defense_depth),
    )


def create_app(catalog: SynergyCatalog | None = None) -> FastAPI:
    app = FastAPI(title="hutlines line builder")
    app.state.catalog = catalog if catalog is not None else SynergyCatalog()
    app.state.settings = SearchSettings.from_env()

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/combinations", response_model=list[CombinationResponse])
    async def combinations(
        kind: str | None = Query(None),
        boost: str | None = Query(None),
    ) -> list[CombinationResponse]:
        if kind is not None and kind not in KIND_CHOICES:
            raise HTTPException(status_code=400, detail=f"kind must be one of {', '.join(KIND_CHOICES)}")
        boost_key = boost.upper() if boost else None
        if boost_key is not None and boost_key not in BOOST_CHOICES:
            raise HTTPException(status_code=400, detail=f"boost must be one of {', '.join(BOOST_CHOICES)}")
        active: SynergyCatalog = app.state.catalog
        rules = active.rules_for_kind(kind) if kind else active.rules
        return [
            combination_to_response(rule, active)
            for rule in rules
            if boost_key is None or active.bonus_for(rule).kind == boost_key
        ]

    @app.post("/optimize", response_model=TeamResponse)
    def optimize(request: OptimizeRequest) -> TeamResponse:
        active: SynergyCatalog = app.state.catalog
        if request.combinations is not None:
            try:
                active = SynergyCatalog(rules_from_entries(request.combinations))
            except ValueError as exc:
                raise HTTPException(status_code=400, detail=str(exc)) from exc
            logger.info("Using request catalog with %s combinations", len(active))
        settings = _apply_budget(app.state.settings, request.budget)
        team = build_team(
            _payload_to_records(request.forwards),
            _payload_to_records(request.defensemen),
            _payload_to_records(request.goalies),
            catalog=active,
            settings=settings,
        )
        return team_to_response(team, active)

    return app
