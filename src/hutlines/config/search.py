"""Search budget settings for the line builder."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Tuple


logger = logging.getLogger(__name__)

_FORWARD_TOP_ENV = "HUTLINES_FORWARD_TOP_BUDGET"
_FORWARD_DEPTH_ENV = "HUTLINES_FORWARD_DEPTH_BUDGET"
_DEFENSE_TOP_ENV = "HUTLINES_DEFENSE_TOP_BUDGET"
_DEFENSE_DEPTH_ENV = "HUTLINES_DEFENSE_DEPTH_BUDGET"

_FORWARD_TOP_DEFAULT = 200
_FORWARD_DEPTH_DEFAULT = 100
_DEFENSE_TOP_DEFAULT = 100
_DEFENSE_DEPTH_DEFAULT = 50
_GOALIE_COUNT_DEFAULT = 2


def _env_int(name: str, default: int, *, min_value: int | None = None) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("%s=%r is not a whole number; keeping the default budget of %d", name, raw, default)
        return default
    if min_value is not None:
        value = max(min_value, value)
    return value


@dataclass(frozen=True)
class SearchSettings:
    """Per-slot candidate caps; one entry per line to build."""

    forward_caps: Tuple[int, ...] = (
        _FORWARD_TOP_DEFAULT,
        _FORWARD_TOP_DEFAULT,
        _FORWARD_DEPTH_DEFAULT,
        _FORWARD_DEPTH_DEFAULT,
    )
    defense_caps: Tuple[int, ...] = (
        _DEFENSE_TOP_DEFAULT,
        _DEFENSE_DEPTH_DEFAULT,
        _DEFENSE_DEPTH_DEFAULT,
    )
    goalie_count: int = _GOALIE_COUNT_DEFAULT

    @property
    def forward_lines(self) -> int:
        return len(self.forward_caps)

    @property
    def defense_pairs(self) -> int:
        return len(self.defense_caps)

    @classmethod
    def from_env(cls) -> "SearchSettings":
        forward_top = _env_int(_FORWARD_TOP_ENV, _FORWARD_TOP_DEFAULT, min_value=1)
        forward_depth = _env_int(_FORWARD_DEPTH_ENV, _FORWARD_DEPTH_DEFAULT, min_value=1)
        defense_top = _env_int(_DEFENSE_TOP_ENV, _DEFENSE_TOP_DEFAULT, min_value=1)
        defense_depth = _env_int(_DEFENSE_DEPTH_ENV, _DEFENSE_DEPTH_DEFAULT, min_value=1)
        return cls(
            forward_caps=(forward_top, forward_top, forward_depth, forward_depth),
            defense_caps=(defense_top, defense_depth, defense_depth),
        )
