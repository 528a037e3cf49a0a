"""Command-line interface for building lines from exported player lists."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from hutlines.api import team_to_response
from hutlines.config import SearchSettings
from hutlines.config_loader import CatalogFile
from hutlines.ingest import FetchError, PlayerStatsClient, categorize_by_position, load_players_json
from hutlines.ingest.fetcher import DEFAULT_BASE_URL
from hutlines.optimizer import OptimizedTeam, SynergyCatalog, build_team


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Build synergy-boosted lines from a player pool")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log search progress")
    subparsers = parser.add_subparsers(dest="command", required=True)

    optimize = subparsers.add_parser("optimize", help="Build forward lines, defense pairs and goalies")
    optimize.add_argument("players", type=Path, help="Players JSON (list of exported rows)")
    optimize.add_argument(
        "--goalies",
        type=Path,
        default=None,
        help="Optional separate goalies JSON",
    )
    optimize.add_argument(
        "--catalog",
        type=Path,
        default=None,
        help="Line combination catalog JSON (defaults to the built-in catalog)",
    )
    optimize.add_argument("--output", type=Path, default=Path("lines.json"), help="Output JSON path")

    fetch = subparsers.add_parser("fetch", help="Download skaters and goalies from the stats tables")
    fetch.add_argument("--base-url", default=DEFAULT_BASE_URL, help="Stats site base URL")
    fetch.add_argument("--output", type=Path, default=Path("players.json"), help="Output JSON path")
    fetch.add_argument("--batch-size", type=int, default=100, help="Rows per request")
    return parser.parse_args(argv)


def _print_team(team: OptimizedTeam) -> None:
    for label, lines in (("Forward line", team.forward_lines), ("Defense pair", team.defense_lines)):
        for idx, line in enumerate(lines, start=1):
            names = " / ".join(f"{player.name} ({player.overall})" for player in line.players)
            combos = ", ".join(f"{rule.rule_id} {rule.boost}" for rule in line.combinations) or "no combination"
            print(f"{label} {idx}: {names} – OVR {line.total_ovr} [{combos}]")
    for goalie in team.goalies:
        print(f"Goalie: {goalie.name} ({goalie.overall})")
    print(
        f"Total OVR {team.total_ovr} (+{team.total_ovr_bonus}), AP +{team.total_ap_bonus}, "
        f"salary {team.total_salary:,} (saved {team.total_salary_bonus:,})"
    )


def _run_optimize(args: argparse.Namespace) -> None:
    records = load_players_json(args.players)
    if args.goalies:
        records = records + load_players_json(args.goalies)
    pools = categorize_by_position(records)

    if args.catalog:
        catalog = SynergyCatalog(CatalogFile.load(args.catalog).rules)
    else:
        catalog = SynergyCatalog()

    settings = SearchSettings.from_env()
    team = build_team(
        pools.forwards,
        pools.defensemen,
        pools.goalies,
        catalog=catalog,
        settings=settings,
    )
    _print_team(team)

    if len(team.forward_lines) < settings.forward_lines or len(team.defense_lines) < settings.defense_pairs:
        print("Player pool too small to fill every line")

    payload = team_to_response(team, catalog).model_dump()
    args.output.write_text(json.dumps(payload, indent=2), encoding="utf-8")
    print(f"Wrote lines to {args.output}")


def _run_fetch(args: argparse.Namespace) -> None:
    with PlayerStatsClient(args.base_url, batch_size=args.batch_size) as client:
        try:
            rows = client.fetch_all("skaters") + client.fetch_all("goalies")
        except FetchError as exc:
            raise SystemExit(str(exc)) from exc
    args.output.write_text(json.dumps(rows, indent=2), encoding="utf-8")
    print(f"Wrote {len(rows)} players to {args.output}")


def main(argv: list[str] | None = None) -> None:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if args.command == "optimize":
        _run_optimize(args)
    else:
        _run_fetch(args)


if __name__ == "__main__":
    main()
