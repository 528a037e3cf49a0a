"""Configuration helpers for line combinations and search budgets."""

from .catalog import LINE_KIND_SIZES, SynergyRule, default_catalog, get_rule, iter_rules
from .search import SearchSettings

__all__ = [
    "LINE_KIND_SIZES",
    "SearchSettings",
    "SynergyRule",
    "default_catalog",
    "get_rule",
    "iter_rules",
]
