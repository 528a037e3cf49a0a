"""Greedy, budgeted line builder."""

from __future__ import annotations

from dataclasses import dataclass, replace
import logging
import time
from itertools import islice
from typing import AbstractSet, FrozenSet, List, Optional, Sequence, Tuple

from hutlines.config import LINE_KIND_SIZES, SearchSettings, SynergyRule
from hutlines.models import PlayerRecord

from .candidates import iter_line_candidates
from .matching import SynergyCatalog
from .salary import attach_salaries
from .scoring import score_line


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OptimizedLine:
    players: Tuple[PlayerRecord, ...]
    combinations: Tuple[SynergyRule, ...]
    base_total_ovr: int
    total_ovr: int
    ovr_bonus: int
    ap_bonus: int
    salary_bonus: int
    total_salary: int
    score: float = 0.0


@dataclass(frozen=True)
class OptimizedTeam:
    forward_lines: Tuple[OptimizedLine, ...]
    defense_lines: Tuple[OptimizedLine, ...]
    goalies: Tuple[PlayerRecord, ...]
    total_salary: int
    total_ovr: int
    total_ovr_bonus: int
    total_ap_bonus: int
    total_salary_bonus: int


def prepare_pool(players: Sequence[PlayerRecord]) -> List[PlayerRecord]:
    """Attach salary estimates and order by rating, highest first (stable)."""

    return sorted(attach_salaries(players), key=lambda player: player.overall, reverse=True)


def evaluate_line(
    players: Sequence[PlayerRecord],
    kind: str,
    catalog: SynergyCatalog,
) -> OptimizedLine:
    combinations = catalog.find_matching_rules(players, kind)
    bonuses = catalog.bonuses_for(combinations)
    base_total = sum(player.overall for player in players)
    salary_total = sum(player.salary or 0 for player in players)
    return OptimizedLine(
        players=tuple(players),
        combinations=tuple(combinations),
        base_total_ovr=base_total,
        total_ovr=base_total + bonuses.ovr_bonus,
        ovr_bonus=bonuses.ovr_bonus,
        ap_bonus=bonuses.ap_bonus,
        salary_bonus=bonuses.salary_bonus,
        total_salary=salary_total - bonuses.salary_bonus,
    )


def fill_line(
    pool: Sequence[PlayerRecord],
    *,
    kind: str,
    slot_number: int,
    used_names: AbstractSet[str],
    catalog: SynergyCatalog,
    cap: int,
) -> Optional[OptimizedLine]:
    """Score up to ``cap`` candidates for one slot and return the best, if any.

    Ties keep the earliest candidate enumerated.
    """

    size = LINE_KIND_SIZES[kind]
    best_line: Optional[OptimizedLine] = None
    best_score: Optional[float] = None
    scored = 0
    for players in islice(iter_line_candidates(pool, size, used_names), max(0, cap)):
        scored += 1
        line = evaluate_line(players, kind, catalog)
        score = score_line(line, slot_number)
        if best_score is None or score > best_score:
            best_score = score
            best_line = replace(line, score=score)

    if scored >= cap:
        logger.debug("%s slot %s hit search budget of %s candidates", kind, slot_number, cap)
    return best_line


def commit_line(used_names: AbstractSet[str], line: OptimizedLine) -> FrozenSet[str]:
    return frozenset(used_names) | {player.name_key for player in line.players}


def _build_lines(
    pool: Sequence[PlayerRecord],
    *,
    kind: str,
    caps: Sequence[int],
    used_names: FrozenSet[str],
    catalog: SynergyCatalog,
) -> Tuple[List[OptimizedLine], FrozenSet[str]]:
    lines: List[OptimizedLine] = []
    for slot_number, cap in enumerate(caps, start=1):
        slot_start = time.perf_counter()
        line = fill_line(
            pool,
            kind=kind,
            slot_number=slot_number,
            used_names=used_names,
            catalog=catalog,
            cap=cap,
        )
        if line is None:
            logger.warning(
                "Ran out of %s candidates after %s/%s lines (pool=%s)",
                kind,
                len(lines),
                len(caps),
                len(pool),
            )
            break
        lines.append(line)
        used_names = commit_line(used_names, line)
        logger.info(
            "Built %s line %s – %s (score %.1f, ovr %s, combos %s, %.3fs)",
            kind,
            slot_number,
            ", ".join(player.name for player in line.players),
            line.score,
            line.total_ovr,
            ",".join(rule.rule_id for rule in line.combinations) or "-",
            time.perf_counter() - slot_start,
        )
    return lines, used_names


def select_goalies(
    goalies: Sequence[PlayerRecord],
    used_names: AbstractSet[str],
    count: int,
) -> Tuple[PlayerRecord, ...]:
    """Pick the highest rated goalies not already dressed elsewhere."""

    taken = set(used_names)
    selected: List[PlayerRecord] = []
    for goalie in sorted(goalies, key=lambda player: player.overall, reverse=True):
        if len(selected) >= count:
            break
        if goalie.name_key in taken:
            continue
        selected.append(goalie)
        taken.add(goalie.name_key)
    return tuple(selected)


def build_team(
    forwards: Sequence[PlayerRecord],
    defensemen: Sequence[PlayerRecord],
    goalies: Sequence[PlayerRecord],
    *,
    catalog: SynergyCatalog | None = None,
    settings: SearchSettings | None = None,
) -> OptimizedTeam:
    """Fill forward lines, defense pairs and goalie slots in priority order."""

    catalog = catalog if catalog is not None else SynergyCatalog()
    settings = settings if settings is not None else SearchSettings()
    run_start = time.perf_counter()

    forward_pool = prepare_pool(forwards)
    defense_pool = prepare_pool(defensemen)
    goalie_pool = attach_salaries(goalies)

    logger.info(
        "Starting line build – forwards=%s, defensemen=%s, goalies=%s, rules=%s",
        len(forward_pool),
        len(defense_pool),
        len(goalie_pool),
        len(catalog),
    )

    used_names: FrozenSet[str] = frozenset()
    forward_lines, used_names = _build_lines(
        forward_pool,
        kind="forward",
        caps=settings.forward_caps,
        used_names=used_names,
        catalog=catalog,
    )
    defense_lines, used_names = _build_lines(
        defense_pool,
        kind="defense",
        caps=settings.defense_caps,
        used_names=used_names,
        catalog=catalog,
    )
    selected_goalies = select_goalies(goalie_pool, used_names, settings.goalie_count)

    lines = forward_lines + defense_lines
    team = OptimizedTeam(
        forward_lines=tuple(forward_lines),
        defense_lines=tuple(defense_lines),
        goalies=selected_goalies,
        total_salary=sum(line.total_salary for line in lines)
        + sum(goalie.salary or 0 for goalie in selected_goalies),
        total_ovr=sum(line.total_ovr for line in lines)
        + sum(goalie.overall for goalie in selected_goalies),
        total_ovr_bonus=sum(line.ovr_bonus for line in lines),
        total_ap_bonus=sum(line.ap_bonus for line in lines),
        total_salary_bonus=sum(line.salary_bonus for line in lines),
    )
    logger.info(
        "Completed line build in %.2fs – %s forward lines, %s defense pairs, %s goalies, ovr %s (+%s), ap +%s, salary %s",
        time.perf_counter() - run_start,
        len(team.forward_lines),
        len(team.defense_lines),
        len(team.goalies),
        team.total_ovr,
        team.total_ovr_bonus,
        team.total_ap_bonus,
        team.total_salary,
    )
    return team
