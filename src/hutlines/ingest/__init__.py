"""Input adapters that normalize exported player data."""

from .fetcher import FetchError, FetchProgress, PlayerStatsClient, clean_player_row
from .players import (
    RosterPools,
    ScrapedPlayerRow,
    categorize_by_position,
    load_players_json,
    rows_from_payload,
    rows_to_records,
)

__all__ = [
    "FetchError",
    "FetchProgress",
    "PlayerStatsClient",
    "RosterPools",
    "ScrapedPlayerRow",
    "categorize_by_position",
    "clean_player_row",
    "load_players_json",
    "rows_from_payload",
    "rows_to_records",
]
