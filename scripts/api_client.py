"""Lightweight REST client for the hutlines API."""

from __future__ import annotations

import argparse
import json
from pathlib import Path

import httpx


FORWARD_POSITIONS = {"C", "LW", "RW"}
DEFENSE_POSITIONS = {"LD", "RD", "D"}
GOALIE_POSITIONS = {"G", "GK"}


def split_pool(rows: list[dict]) -> dict[str, list[dict]]:
    pools: dict[str, list[dict]] = {"forwards": [], "defensemen": [], "goalies": []}
    for row in rows:
        position = str(row.get("position", "")).upper()
        if position in FORWARD_POSITIONS:
            pools["forwards"].append(row)
        elif position in DEFENSE_POSITIONS:
            pools["defensemen"].append(row)
        elif position in GOALIE_POSITIONS:
            pools["goalies"].append(row)
    return pools


def main() -> None:
    parser = argparse.ArgumentParser(description="Interact with the hutlines REST API")
    parser.add_argument("base_url", help="Base URL of the API, e.g. http://localhost:8000")
    parser.add_argument("players", type=Path, nargs="?", help="Players JSON")
    parser.add_argument("--list-combinations", action="store_true", help="List catalog combinations and exit")
    parser.add_argument("--kind", choices=["forward", "defense"], help="Filter combinations by line kind")
    parser.add_argument("--boost", choices=["SAL", "OVR", "AP"], help="Filter combinations by boost type")
    parser.add_argument("--output", type=Path, help="Write the optimized team JSON here")
    args = parser.parse_args()

    with httpx.Client(base_url=args.base_url, timeout=60.0) as client:
        if args.list_combinations:
            params = {key: value for key, value in (("kind", args.kind), ("boost", args.boost)) if value}
            resp = client.get("/combinations", params=params)
            resp.raise_for_status()
            print(json.dumps(resp.json(), indent=2))
            return

        if args.players is None:
            raise SystemExit("players file is required unless using --list-combinations")

        rows = json.loads(args.players.read_text(encoding="utf-8"))
        resp = client.post("/optimize", json=split_pool(rows))
        if resp.status_code == 422:
            raise SystemExit(f"invalid player payload: {resp.text}")
        resp.raise_for_status()
        payload = resp.json()

    print(f"Received {len(payload['forward_lines'])} forward lines, {len(payload['defense_lines'])} defense pairs")
    print(f"Total OVR {payload['total_ovr']} (+{payload['total_ovr_bonus']})")
    if args.output:
        args.output.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        print(f"Team saved to {args.output}")
    else:
        print(json.dumps(payload, indent=2))


if __name__ == "__main__":
    main()
