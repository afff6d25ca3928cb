"""Summary statistics over a list of owned games."""

import math
from typing import Iterable

from steam_roast.core.models import GameRecord, LibraryStats

# A game counts as played once it has at least an hour on the clock
PLAYED_THRESHOLD_MINUTES = 60
TOP_GAMES_LIMIT = 5


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up (Python's round() uses banker's rounding)."""

    return int(math.floor(value + 0.5))


def _percent(part: float, whole: float) -> int:
    """Return part/whole as an integer percentage, or 0 if whole is empty."""

    return round_half_up(part / whole * 100) if whole else 0


def aggregate_stats(games: Iterable[GameRecord]) -> LibraryStats:
    """Derive LibraryStats from raw game records. Never fails; empty input gives zeros."""

    games = list(games)
    total_games = len(games)
    if total_games == 0:
        return LibraryStats()

    total_playtime = sum(g.playtime_minutes for g in games)
    backlog = sum(1 for g in games if g.playtime_minutes < PLAYED_THRESHOLD_MINUTES)
    played = total_games - backlog

    # max() keeps the first of equal maxima, sorted() is stable
    most_played = max(games, key=lambda g: g.playtime_minutes)
    top_games = sorted(games, key=lambda g: g.playtime_minutes, reverse=True)[:TOP_GAMES_LIMIT]

    return LibraryStats(
        total_games=total_games,
        played_games=played,
        backlog_games=backlog,
        total_playtime_minutes=total_playtime,
        most_played_game=most_played,
        top_games=tuple(top_games),
        average_playtime_minutes=total_playtime / total_games,
        most_played_share_percent=_percent(most_played.playtime_minutes, total_playtime),
        played_percent=_percent(played, total_games),
    )
