"""
Library personality classification.

Maps LibraryStats onto one of a fixed set of play-pattern buckets. A library
can satisfy several heuristics at once, so the checks run in a fixed order and
the first match wins.
"""

from steam_roast.core.models import LibraryStats, PersonalityTag

# Heuristic thresholds, kept as-is for behavioural compatibility
HYPERFOCUS_SHARE_PERCENT = 50  # one game holds more than half of all playtime
COLLECTOR_BACKLOG_RATIO = 0.7  # more than 70% of games under an hour
BUTTERFLY_AVG_MINUTES = 120  # average game gets less than two hours
COMPLETIONIST_PLAYED_RATIO = 0.8  # more than 80% of games actually played

PERSONALITY_DESCRIPTIONS = {
    PersonalityTag.HYPERFOCUS: "Sinks almost all of their time into a single game and ignores the rest of the library.",
    PersonalityTag.COLLECTOR: "Buys games far faster than they play them; most of the library has never been touched.",
    PersonalityTag.BUTTERFLY: "Flits between games, giving each one a short try before moving on.",
    PersonalityTag.COMPLETIONIST: "Actually plays what they buy; nearly every game has real hours on it.",
    PersonalityTag.CASUAL: "A balanced, unremarkable mix of played games and backlog.",
    PersonalityTag.EMPTY: "Owns no games at all.",
}


def classify_personality(stats: LibraryStats) -> PersonalityTag:
    """Return the first personality bucket the stats fall into."""

    if stats.total_games == 0:
        return PersonalityTag.EMPTY
    if stats.most_played_share_percent > HYPERFOCUS_SHARE_PERCENT:
        return PersonalityTag.HYPERFOCUS
    if stats.backlog_games / stats.total_games > COLLECTOR_BACKLOG_RATIO:
        return PersonalityTag.COLLECTOR
    if stats.average_playtime_minutes < BUTTERFLY_AVG_MINUTES:
        return PersonalityTag.BUTTERFLY
    if stats.played_games / stats.total_games > COMPLETIONIST_PLAYED_RATIO:
        return PersonalityTag.COMPLETIONIST
    return PersonalityTag.CASUAL


def describe_personality(tag: PersonalityTag) -> str:
    return PERSONALITY_DESCRIPTIONS[tag]
