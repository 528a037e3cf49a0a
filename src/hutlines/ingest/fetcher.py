"""Paginated client for the card stats tables."""

from __future__ import annotations

import logging
import re
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

import httpx


logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://www.nhlhutbuilder.com"

_ENDPOINTS = {
    "skaters": "/php/player_stats.php",
    "goalies": "/php/goalie_stats.php",
}

_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
)

_ID_PATTERN = re.compile(r'id="(\d+)"')
_NAME_PATTERN = re.compile(r">([^<]+)<")
_TAG_PATTERN = re.compile(r"<[^>]+>")
_IMAGE_PATTERN = re.compile(r'src="([^"]+)"')


class FetchError(RuntimeError):
    """Raised when the stats endpoint cannot be read."""


@dataclass(frozen=True)
class FetchProgress:
    current: int
    total: int
    status: str


def clean_player_row(
    raw: Dict[str, Any],
    *,
    id_prefix: str = "",
    base_url: str = DEFAULT_BASE_URL,
) -> Dict[str, Any]:
    """Strip the HTML the stats table wraps around names, weights and card art.

    Goalie rows pass ``id_prefix="G"`` so their ids never collide with skater
    ids from the other table. ``card_art`` is replaced by an absolute
    ``card_image`` URL (``None`` when the cell holds no image).
    """

    row = dict(raw)
    full_name = str(raw.get("full_name") or "")
    id_match = _ID_PATTERN.search(full_name)
    name_match = _NAME_PATTERN.search(full_name)
    row["id"] = f"{id_prefix}{id_match.group(1)}" if id_match else str(raw.get("id") or "unknown")
    row["full_name"] = name_match.group(1).strip() if name_match else full_name.strip()
    if "weight" in raw and raw["weight"] is not None:
        row["weight"] = _TAG_PATTERN.sub("", str(raw["weight"]))
    image_match = _IMAGE_PATTERN.search(str(row.pop("card_art", None) or ""))
    row["card_image"] = f"{base_url.rstrip('/')}/{image_match.group(1).lstrip('/')}" if image_match else None
    return row


class PlayerStatsClient:
    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        *,
        client: Optional[httpx.Client] = None,
        batch_size: int = 100,
        delay: float = 0.1,
        timeout: float = 30.0,
    ):
        self.base_url = base_url
        self.batch_size = max(1, batch_size)
        self.delay = max(0.0, delay)
        self._client = client or httpx.Client(
            base_url=base_url,
            timeout=timeout,
            headers={"User-Agent": _USER_AGENT},
        )
        self._owns_client = client is None

    def __enter__(self) -> "PlayerStatsClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def fetch_page(self, kind: str, start: int, length: int) -> Dict[str, Any]:
        if kind not in _ENDPOINTS:
            raise KeyError(f"Unsupported table {kind!r}")
        form = {
            "draw": "1",
            "start": str(start),
            "length": str(length),
            "columns[0][data]": "card_art",
            "columns[0][searchable]": "false",
            "columns[0][orderable]": "false",
        }
        try:
            resp = self._client.post(_ENDPOINTS[kind], data=form)
            resp.raise_for_status()
            payload = resp.json()
        except httpx.HTTPError as exc:
            logger.error("Error fetching %s starting at %s: %s", kind, start, exc)
            raise FetchError(f"Failed to fetch {kind} data: {exc}") from exc
        except ValueError as exc:
            logger.error("Invalid JSON from %s table at %s: %s", kind, start, exc)
            raise FetchError(f"Invalid {kind} payload: {exc}") from exc
        if not isinstance(payload, dict):
            raise FetchError(f"Unexpected {kind} payload type {type(payload).__name__}")
        return payload

    def fetch_all(
        self,
        kind: str = "skaters",
        progress: Optional[Callable[[FetchProgress], None]] = None,
    ) -> List[Dict[str, Any]]:
        """Download every row of a table, ``batch_size`` rows per request."""

        first = self.fetch_page(kind, 0, 1)
        total = int(first.get("recordsTotal") or 0)
        if progress:
            progress(FetchProgress(0, total, f"Found {total} total {kind}. Starting extraction..."))

        id_prefix = "G" if kind == "goalies" else ""
        rows: List[Dict[str, Any]] = []
        start = 0
        while start < total:
            payload = self.fetch_page(kind, start, self.batch_size)
            batch = payload.get("data") or []
            if not batch:
                break
            rows.extend(clean_player_row(raw, id_prefix=id_prefix, base_url=self.base_url) for raw in batch)
            start += self.batch_size
            logger.info("Fetched %s/%s %s", len(rows), total, kind)
            if progress:
                progress(FetchProgress(len(rows), total, f"Extracted {len(rows)} of {total} {kind}..."))
            if start < total and self.delay:
                time.sleep(self.delay)

        if kind == "goalies":
            for row in rows:
                row["position"] = "G"
        if progress:
            progress(FetchProgress(len(rows), total, f"Completed! Extracted {len(rows)} {kind}."))
        return rows
