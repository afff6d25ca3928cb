"""
Command-line interface and request boundary for roast generation.

`handle_roast_request` is the thin handler an HTTP route would call: it
validates the payload, runs the orchestrator and maps the outcome to a
(status, body) pair. `main` wraps the same handler for the terminal, reading
the payload from a JSON file or stdin.
"""
import argparse
import json
import random
import sys
from pathlib import Path
from typing import Any, List, Tuple

from pydantic import ValidationError

from steam_roast.config import settings
from steam_roast.core.models import GameRecord, RoastResult, Tier
from steam_roast.core.orchestrator import RoastOrchestrator
from steam_roast.core.remote import RemoteRoastRequester
from steam_roast.infra import log_utils


class RoastRequestError(ValueError):
    """The caller sent something the roast engine cannot accept."""


def parse_roast_request(payload: Any) -> Tuple[List[GameRecord], Tier]:
    """Validate a `{"games": [...], "tier": ...}` payload."""

    if not isinstance(payload, dict):
        raise RoastRequestError("Games data is required")

    games = payload.get("games")
    if not games or not isinstance(games, list):
        raise RoastRequestError("Games data is required")

    try:
        tier = Tier(payload.get("tier", Tier.MEDIUM.value))
    except ValueError as e:
        raise RoastRequestError("Invalid tier. Use: light, medium, or brutal") from e

    try:
        records = [GameRecord.model_validate(g) for g in games]
    except ValidationError as e:
        raise RoastRequestError(f"Invalid game entry: {e.errors()[0]['msg']}") from e

    return records, tier


def handle_roast_request(payload: Any, orchestrator: RoastOrchestrator) -> Tuple[int, dict]:
    """Validate, roast, and map the result to a status code and JSON body."""

    try:
        games, tier = parse_roast_request(payload)
    except RoastRequestError as e:
        log_utils.log_message(f"Rejected roast request: {e}", "WARN")
        return 400, RoastResult.failure(str(e)).model_dump(mode="json")

    try:
        result = orchestrator.generate_roast(games, tier)
    except Exception as e:
        log_utils.log_message(f"Roast request failed: {e}", "ERROR")
        return 500, RoastResult.failure("Internal server error").model_dump(mode="json")

    status = 200 if result.success else 500
    return status, result.model_dump(mode="json")


def _load_payload(path: str, tier: str | None) -> Any:
    text = sys.stdin.read() if path == "-" else Path(path).read_text(encoding="utf-8")
    data = json.loads(text)
    # A bare list is a GetOwnedGames "games" array
    if isinstance(data, list):
        data = {"games": data}
    if tier and isinstance(data, dict):
        data["tier"] = tier
    return data


def main(argv: list[str] | None = None) -> int:
    """Parses CLI arguments, roasts the given library and prints the JSON response."""
    parser = argparse.ArgumentParser(prog="steam-roast", description="Roast a Steam library.")
    parser.add_argument(
        "--games",
        required=True,
        help="JSON file with a list of games or a {'games': [...], 'tier': ...} payload ('-' for stdin).",
    )
    parser.add_argument(
        "--tier",
        default=None,
        help="Roast intensity: light, medium or brutal (overrides the payload).",
    )
    parser.add_argument(
        "--offline",
        action="store_true",
        help="Skip remote backends and use the template fallback only.",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for template selection, for reproducible fallback roasts.",
    )
    args = parser.parse_args(argv)

    log_utils.log_message(f"Roast CLI invoked (offline={args.offline}).", "INFO")

    try:
        payload = _load_payload(args.games, args.tier)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        print(json.dumps({"success": False, "error": f"Could not read games: {e}"}))
        return 1

    rng = random.Random(args.seed) if args.seed is not None else None
    requester = RemoteRoastRequester([]) if args.offline else RemoteRoastRequester.from_settings(settings)
    orchestrator = RoastOrchestrator(requester, rng=rng)

    status, body = handle_roast_request(payload, orchestrator)
    print(json.dumps(body, indent=2, ensure_ascii=False))
    return 0 if status == 200 else 1


if __name__ == "__main__":
    sys.exit(main())
