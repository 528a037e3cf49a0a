"""Synergy-driven line optimizer."""

from .bonus import Bonus, LineBonuses, parse_bonus
from .candidates import iter_line_candidates
from .matching import SynergyCatalog, matches_affiliation, rule_applies
from .salary import estimate_salary
from .scoring import score_line
from .service import OptimizedLine, OptimizedTeam, build_team

__all__ = [
    "Bonus",
    "LineBonuses",
    "OptimizedLine",
    "OptimizedTeam",
    "SynergyCatalog",
    "build_team",
    "estimate_salary",
    "iter_line_candidates",
    "matches_affiliation",
    "parse_bonus",
    "rule_applies",
    "score_line",
]
