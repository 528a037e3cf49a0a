"""Match concrete lines against line combination rules."""

from __future__ import annotations

from itertools import permutations
from typing import Dict, Iterable, List, Sequence, Tuple

from hutlines.config import SynergyRule, default_catalog
from hutlines.models import PlayerRecord

from .bonus import Bonus, LineBonuses, parse_bonus


def matches_affiliation(player: PlayerRecord, requirement: str) -> bool:
    return player.team == requirement or player.nationality == requirement


def rule_applies(players: Sequence[PlayerRecord], rule: SynergyRule) -> bool:
    """Return True if some ordering of ``players`` satisfies every requirement slot."""

    if rule.size is None or len(players) != rule.size:
        return False
    if len(rule.requirements) != len(players):
        return False
    for ordering in permutations(players):
        if all(
            matches_affiliation(player, requirement)
            for player, requirement in zip(ordering, rule.requirements)
        ):
            return True
    return False


class SynergyCatalog:
    """Read-only view over a rule catalog with bonuses parsed up front.

    Safe to share between concurrent builds; nothing here mutates after
    construction.
    """

    def __init__(self, rules: Iterable[SynergyRule] | None = None):
        source = tuple(default_catalog() if rules is None else rules)
        by_kind: Dict[str, List[SynergyRule]] = {}
        for rule in source:
            by_kind.setdefault(rule.kind, []).append(rule)
        self._rules = source
        self._by_kind: Dict[str, Tuple[SynergyRule, ...]] = {
            kind: tuple(kind_rules) for kind, kind_rules in by_kind.items()
        }
        self._bonuses: Dict[SynergyRule, Bonus] = {rule: parse_bonus(rule.boost) for rule in source}

    def __len__(self) -> int:
        return len(self._rules)

    @property
    def rules(self) -> Tuple[SynergyRule, ...]:
        return self._rules

    def rules_for_kind(self, kind: str) -> Tuple[SynergyRule, ...]:
        return self._by_kind.get(kind, ())

    def bonus_for(self, rule: SynergyRule) -> Bonus:
        bonus = self._bonuses.get(rule)
        return bonus if bonus is not None else parse_bonus(rule.boost)

    def find_matching_rules(self, players: Sequence[PlayerRecord], kind: str) -> List[SynergyRule]:
        return [rule for rule in self.rules_for_kind(kind) if rule_applies(players, rule)]

    def bonuses_for(self, rules: Iterable[SynergyRule]) -> LineBonuses:
        return LineBonuses.from_bonuses(self.bonus_for(rule) for rule in rules)
