import random
from typing import Iterable, Optional

from steam_roast.config import Settings
from steam_roast.config import settings as default_settings
from steam_roast.core.fallback import generate_fallback_roast
from steam_roast.core.models import GameRecord, RoastResult, Tier
from steam_roast.core.personality import classify_personality
from steam_roast.core.remote import RemoteRoastRequester
from steam_roast.core.stats import aggregate_stats
from steam_roast.infra import log_utils


class RoastOrchestrator:
    """
    Runs one roast request: aggregate, ask the remote backends, fall back to
    templates. Once input has passed boundary validation the result is always
    a successful RoastResult.
    """

    def __init__(self, requester: RemoteRoastRequester, rng: Optional[random.Random] = None):
        self.requester = requester
        self.rng = rng

    @classmethod
    def from_settings(cls, settings: Settings, rng: Optional[random.Random] = None) -> "RoastOrchestrator":
        return cls(RemoteRoastRequester.from_settings(settings), rng=rng)

    def generate_roast(self, games: Iterable[GameRecord], tier: Tier = Tier.MEDIUM) -> RoastResult:
        games = list(games)
        tier = Tier(tier)

        try:
            stats = aggregate_stats(games)
            personality = classify_personality(stats)
            log_utils.log_message(
                f"[roast] {stats.total_games} games, personality={personality.value}, tier={tier.value}"
            )
            roast = self.requester.request_roast(stats, tier)
        except Exception as e:
            log_utils.log_message(f"[roast] Remote path crashed: {e}. Using fallback.", "ERROR")
            roast = None

        if roast:
            return RoastResult.ok(roast, tier)

        log_utils.log_message("[roast] Using template fallback.")
        return RoastResult.ok(generate_fallback_roast(games, tier, rng=self.rng), tier)


def generate_roast(
    games: Iterable[GameRecord],
    tier: Tier | str = Tier.MEDIUM,
    settings: Optional[Settings] = None,
) -> RoastResult:
    """Caller-facing entry point: one roast for one library."""

    orchestrator = RoastOrchestrator.from_settings(settings or default_settings)
    return orchestrator.generate_roast(games, Tier(tier))
