"""Offline roast synthesis from the template bank."""

import random
import re
from typing import Dict, Iterable, Optional

from steam_roast.core.models import GameRecord, LibraryStats, PersonalityTag, Tier
from steam_roast.core.personality import classify_personality
from steam_roast.core.stats import aggregate_stats
from steam_roast.core.templates import EMPTY_LIBRARY_ROAST, ROAST_TEMPLATES

_PLACEHOLDER_PAT = re.compile(r"\{(\w+)\}")

MINUTES_PER_HOUR = 60
MINUTES_PER_DAY = 24 * MINUTES_PER_HOUR


def _plural(n: int, unit: str) -> str:
    return f"{n} {unit}" if n == 1 else f"{n} {unit}s"


def format_time(minutes: int) -> str:
    """
    Render minutes in the coarsest non-zero unit, rounding down.

    1500 -> "1 day", 90 -> "1 hour", 30 -> "30 minutes".
    """
    days = minutes // MINUTES_PER_DAY
    if days > 0:
        return _plural(days, "day")
    hours = minutes // MINUTES_PER_HOUR
    if hours > 0:
        return _plural(hours, "hour")
    return _plural(minutes, "minute")


def template_values(stats: LibraryStats) -> Dict[str, str]:
    """Build the placeholder -> text mapping for one library."""

    most_played = stats.most_played_game
    return {
        "totalGames": str(stats.total_games),
        "backlog": str(stats.backlog_games),
        "totalTime": format_time(stats.total_playtime_minutes),
        "mostPlayed": most_played.name if most_played else "nothing",
        "mostPlayedTime": format_time(most_played.playtime_minutes if most_played else 0),
        "mostPlayedPercent": str(stats.most_played_share_percent),
        "playedGames": str(stats.played_games),
        "avgHours": f"{stats.average_playtime_minutes / MINUTES_PER_HOUR:.1f}",
        "playedPercent": str(stats.played_percent),
        "unplayedPercent": str(stats.unplayed_percent),
    }


def fill_template(template: str, values: Dict[str, str]) -> str:
    """
    Substitute every `{name}` in one pass.

    Unknown names are left untouched so a missing mapping shows up in tests.
    """
    return _PLACEHOLDER_PAT.sub(lambda m: values.get(m.group(1), m.group(0)), template)


def generate_fallback_roast(
    games: Iterable[GameRecord],
    tier: Tier = Tier.MEDIUM,
    rng: Optional[random.Random] = None,
) -> str:
    """Pick and fill a template for the library's personality. Always returns text."""

    rng = rng or random.Random()
    stats = aggregate_stats(games)
    personality = classify_personality(stats)

    templates = ROAST_TEMPLATES.get(Tier(tier), {}).get(personality)
    if personality is PersonalityTag.EMPTY or not templates:
        return EMPTY_LIBRARY_ROAST

    return fill_template(rng.choice(templates), template_values(stats))
