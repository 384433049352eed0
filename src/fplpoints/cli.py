"""Command-line interface for scoring a season of provider fixtures."""

from __future__ import annotations

import argparse
import csv
import json
import logging
from pathlib import Path
from typing import Any, Sequence

from fplpoints.config import Settings
from fplpoints.exceptions import FplPointsError
from fplpoints.fetch import FplClient, load_json, save_json
from fplpoints.ingest import build_registry, convert_fixtures, parse_bootstrap, parse_fixtures
from fplpoints.models import Fixture
from fplpoints.registry import PlayerRegistry
from fplpoints.scoring import reconcile, score_fixtures


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Score fantasy fixtures and total season points")
    parser.add_argument("--bootstrap", type=Path, default=None, help="Saved bootstrap-static JSON (fetched if omitted)")
    parser.add_argument("--fixtures", type=Path, default=None, help="Saved fixtures JSON (fetched if omitted)")
    parser.add_argument("--save-raw", type=Path, default=None, help="Directory to save fetched JSON payloads")
    parser.add_argument("--event", type=int, default=None, help="Only score fixtures from this gameweek")
    parser.add_argument(
        "--include-unfinished",
        action="store_true",
        help="Also score fixtures that are not finished or provisionally finished",
    )
    parser.add_argument("--workers", type=int, default=None, help="Worker processes (default FPLPOINTS_WORKERS or 1)")
    parser.add_argument("--output", type=Path, default=Path("points.csv"), help="Output CSV path")
    parser.add_argument(
        "--report",
        type=Path,
        default=None,
        help="Optional path to write a JSON comparison with provider-reported totals",
    )
    parser.add_argument("--strict", action="store_true", help="Abort on the first fixture that fails to score")
    parser.add_argument(
        "--skip-malformed-players",
        action="store_true",
        help="Skip players whose numeric fields do not parse instead of aborting",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def _load_payloads(args: argparse.Namespace) -> tuple[Any, Any]:
    bootstrap_payload = load_json(args.bootstrap) if args.bootstrap else None
    fixtures_payload = load_json(args.fixtures) if args.fixtures else None
    if bootstrap_payload is not None and fixtures_payload is not None:
        return bootstrap_payload, fixtures_payload

    with FplClient() as client:
        if bootstrap_payload is None:
            bootstrap_payload = client.bootstrap()
            if args.save_raw:
                args.save_raw.mkdir(parents=True, exist_ok=True)
                save_json(bootstrap_payload, args.save_raw / "bootstrap-static.json")
        if fixtures_payload is None:
            fixtures_payload = client.fixtures(args.event)
            if args.save_raw:
                args.save_raw.mkdir(parents=True, exist_ok=True)
                save_json(fixtures_payload, args.save_raw / "fixtures.json")
    return bootstrap_payload, fixtures_payload


def _select_fixtures(fixtures: Sequence[Fixture], *, event: int | None, include_unfinished: bool) -> list[Fixture]:
    selected = []
    for fixture in fixtures:
        if event is not None and fixture.event != event:
            continue
        if not include_unfinished and not fixture.is_complete:
            continue
        selected.append(fixture)
    return selected


def _write_points_csv(path: Path, totals: dict[int, int], registry: PlayerRegistry) -> None:
    with path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(["player_id", "name", "position", "points", "reported_points"])
        for player in sorted(registry, key=lambda p: (-totals.get(p.id, 0), p.id)):
            writer.writerow([
                player.id,
                player.display_name,
                player.position.value,
                totals.get(player.id, 0),
                player.points_record.total_points,
            ])


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    settings = Settings.from_env()
    workers = max(1, args.workers) if args.workers is not None else settings.workers

    try:
        bootstrap_payload, fixtures_payload = _load_payloads(args)
        bootstrap = parse_bootstrap(bootstrap_payload)
        registry = build_registry(bootstrap, skip_malformed=args.skip_malformed_players)
        fixtures = convert_fixtures(parse_fixtures(fixtures_payload))
    except FplPointsError as exc:
        print(f"Failed to load provider data: {exc}")
        return 1

    selected = _select_fixtures(fixtures, event=args.event, include_unfinished=args.include_unfinished)
    print(f"Scoring {len(selected)}/{len(fixtures)} fixtures for {len(registry)} players")

    try:
        output = score_fixtures(selected, registry, workers=workers, strict=args.strict)
    except FplPointsError as exc:
        print(f"Scoring aborted: {exc}")
        return 1

    totals = dict(output.totals.totals)
    _write_points_csv(args.output, totals, registry)
    print(f"Wrote season totals for {len(totals)} players to {args.output}")

    if output.failures:
        preview = ", ".join(str(failure.fixture_id) for failure in output.failures[:5])
        more = len(output.failures) - 5
        suffix = f", +{more} more" if more > 0 else ""
        print(f"Fixtures not scored: {preview}{suffix}")

    if args.report:
        report = reconcile(totals, registry)
        payload = report.as_dict()
        payload["fixtures_scored"] = len(output.points)
        payload["fixtures_failed"] = [
            {"fixture_id": failure.fixture_id, "error": failure.kind, "message": failure.message}
            for failure in output.failures
        ]
        args.report.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        print(f"Matched {report.matched}/{report.checked} provider totals; wrote report to {args.report}")

    return 0 if output.complete else 2


if __name__ == "__main__":
    raise SystemExit(main())
