import random

from steam_roast.config import Settings
from steam_roast.core.fallback import fill_template, template_values
from steam_roast.core.models import GameRecord, PersonalityTag, Tier
from steam_roast.core.orchestrator import RoastOrchestrator, generate_roast
from steam_roast.core.remote import RemoteRoastRequester
from steam_roast.core.stats import aggregate_stats
from steam_roast.core.templates import EMPTY_LIBRARY_ROAST, ROAST_TEMPLATES
from steam_roast.generators import GeneratorError, RoastGenerator


class StubGenerator(RoastGenerator):
    def __init__(self, reply=None, error=None):
        self.reply = reply
        self.error = error

    @property
    def name(self) -> str:
        return "stub"

    def generate(self, prompt: str, max_tokens: int, temperature: float) -> str:
        if self.error:
            raise self.error
        return self.reply


class ExplodingRequester(RemoteRoastRequester):
    def __init__(self):
        super().__init__([])

    def request_roast(self, stats, tier):
        raise ZeroDivisionError("boom")


GAMES = [GameRecord(name="A", playtime_minutes=6000)]


def test_remote_roast_is_accepted():
    orch = RoastOrchestrator(RemoteRoastRequester([StubGenerator(reply="A model-written roast.")]))
    result = orch.generate_roast(GAMES, Tier.BRUTAL)
    assert result.success is True
    assert result.roast == "A model-written roast."
    assert result.tier is Tier.BRUTAL
    assert result.error is None


def test_all_backends_down_falls_back_to_template():
    gens = [StubGenerator(error=GeneratorError("502 Bad Gateway")) for _ in range(3)]
    orch = RoastOrchestrator(RemoteRoastRequester(gens), rng=random.Random(3))
    result = orch.generate_roast(GAMES, "medium")

    assert result.success is True
    assert result.tier is Tier.MEDIUM
    assert "A" in result.roast and "4 days" in result.roast
    assert "502" not in result.roast


def test_internal_error_falls_back():
    orch = RoastOrchestrator(ExplodingRequester(), rng=random.Random(0))
    result = orch.generate_roast(GAMES, Tier.LIGHT)
    assert result.success is True
    assert "4 days" in result.roast


def test_fallback_output_matches_a_template_for_the_tier():
    orch = RoastOrchestrator(RemoteRoastRequester([]), rng=random.Random(11))
    games = [GameRecord(name="Solo", playtime_minutes=90)]
    result = orch.generate_roast(games, Tier.LIGHT)
    values = template_values(aggregate_stats(games))
    expected = {fill_template(t, values) for t in ROAST_TEMPLATES[Tier.LIGHT][PersonalityTag.HYPERFOCUS]}
    assert result.roast in expected


def test_empty_games_still_returns_text():
    result = RoastOrchestrator(RemoteRoastRequester([])).generate_roast([], Tier.MEDIUM)
    assert result.success is True
    assert result.roast == EMPTY_LIBRARY_ROAST


def test_generate_roast_without_credentials_uses_fallback():
    s = Settings(_env_file=None, OPENROUTER_API_KEY=None, CF_ACCOUNT_ID=None, CF_API_TOKEN=None)
    result = generate_roast(GAMES, "brutal", settings=s)
    assert result.success is True
    assert result.tier is Tier.BRUTAL
    assert "A" in result.roast
