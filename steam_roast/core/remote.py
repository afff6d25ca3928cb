"""
Remote roast generation.

Builds one prompt from the library stats and walks the configured backends in
order, one attempt each, until a backend returns usable text.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from steam_roast.config import Settings
from steam_roast.core.fallback import format_time
from steam_roast.core.models import LibraryStats, Tier
from steam_roast.core.personality import classify_personality, describe_personality
from steam_roast.generators import RoastGenerator, build_generators
from steam_roast.infra.log_utils import log_message

# Anything this short is an empty reply or a refusal stub, not a roast
MIN_ROAST_LENGTH = 10
LOG_PREVIEW_CHARS = 200

TIER_INSTRUCTIONS = {
    Tier.LIGHT: "Be gentle and playful. Soft teasing, like a friend poking fun. Keep it lighthearted and encouraging.",
    Tier.MEDIUM: "Be witty and sarcastic. Roast them like a good friend who knows their habits. Call out the absurdity but keep it fun.",
    Tier.BRUTAL: "Be absolutely savage. No mercy. Tear apart their life choices, their backlog shame, their addiction to one game. Make them question their existence. Hilariously cruel.",
}


def _format_top_games(stats: LibraryStats) -> str:
    if not stats.top_games:
        return "- None"
    return "\n".join(
        f"{i}. {g.name} ({format_time(g.playtime_minutes)})"
        for i, g in enumerate(stats.top_games, start=1)
    )


def build_roast_prompt(stats: LibraryStats, tier: Tier) -> str:
    """Render the single prompt shared by every backend."""

    tier = Tier(tier)
    personality = classify_personality(stats)
    most_played = stats.most_played_game

    return f"""You are a comedy roast writer specializing in video game addiction and Steam library shaming.

STEAM LIBRARY DATA:
- Total games owned: {stats.total_games}
- Total time played: {format_time(stats.total_playtime_minutes)}
- Games actually played (1 hour or more): {stats.played_games} ({stats.played_percent}%)
- Games never played (backlog): {stats.backlog_games} ({stats.unplayed_percent}%)
- Average time per game: {stats.average_playtime_minutes / 60:.1f} hours
- Most played game: {most_played.name if most_played else "None"} ({format_time(most_played.playtime_minutes if most_played else 0)}, {stats.most_played_share_percent}% of all playtime)

TOP GAMES:
{_format_top_games(stats)}

LIBRARY PERSONALITY: {personality.value} ({describe_personality(personality)})

ROAST STYLE: {TIER_INSTRUCTIONS[tier]}

Write a short, punchy roast (2-4 sentences max) about this person's Steam library. Focus on the most embarrassing or absurd details. Be funny, not mean-spirited. Make it shareable.

Roast:"""


class RemoteRoastRequester:
    """Tries each backend once, strictly in order, and returns the first usable roast."""

    def __init__(
        self,
        generators: Sequence[RoastGenerator],
        max_tokens: int = 200,
        temperature: float = 0.8,
    ):
        self.generators: List[RoastGenerator] = list(generators)
        self.max_tokens = max_tokens
        self.temperature = temperature

    @classmethod
    def from_settings(cls, settings: Settings) -> "RemoteRoastRequester":
        return cls(
            build_generators(settings),
            max_tokens=settings.ROAST_MAX_TOKENS,
            temperature=settings.ROAST_TEMPERATURE,
        )

    def request_roast(self, stats: LibraryStats, tier: Tier) -> Optional[str]:
        """Return the first accepted roast, or None once every backend has failed."""

        prompt = build_roast_prompt(stats, tier)

        for generator in self.generators:
            try:
                raw = generator.generate(prompt, self.max_tokens, self.temperature)
            except Exception as e:
                log_message(f"[roast] {generator.name} failed: {e}", "WARN")
                continue

            if raw is not None and not isinstance(raw, str):
                log_message(f"[roast] {generator.name} returned non-text {type(raw).__name__}, trying next backend", "WARN")
                continue

            preview = (raw or "")[:LOG_PREVIEW_CHARS]
            log_message(f"[roast] {generator.name} responded: {preview!r}")

            roast = (raw or "").strip()
            if len(roast) > MIN_ROAST_LENGTH:
                return roast
            log_message(f"[roast] {generator.name} reply too short, trying next backend", "WARN")

        log_message("[roast] All backends exhausted.", "WARN")
        return None
