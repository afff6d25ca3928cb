"""
Text-generation backends for the remote roast path.

`build_generators` turns settings into the ordered backend list; the first
entry gets the first attempt.
"""

from typing import List

from steam_roast.config import Settings
from steam_roast.infra.log_utils import log_message

from .base import GeneratorError, RoastGenerator
from .cloudflare import CloudflareGenerator
from .openrouter import OpenRouterGenerator

__all__ = [
    "CloudflareGenerator",
    "GeneratorError",
    "OpenRouterGenerator",
    "RoastGenerator",
    "build_generators",
]


def build_generators(settings: Settings) -> List[RoastGenerator]:
    """Build the configured backends in priority order, skipping any without credentials."""

    generators: List[RoastGenerator] = []

    if settings.OPENROUTER_API_KEY:
        for model in settings.OPENROUTER_MODELS:
            generators.append(
                OpenRouterGenerator(
                    api_key=settings.OPENROUTER_API_KEY,
                    model=model,
                    url=settings.OPENROUTER_URL,
                    timeout=settings.ROAST_REQUEST_TIMEOUT_S,
                    referer=settings.APP_URL,
                    app_title=settings.APP_NAME,
                )
            )
    else:
        log_message("OPENROUTER_API_KEY not set. Skipping OpenRouter backends.", "WARN")

    if settings.CF_ACCOUNT_ID and settings.CF_API_TOKEN:
        generators.append(
            CloudflareGenerator(
                account_id=settings.CF_ACCOUNT_ID,
                api_token=settings.CF_API_TOKEN,
                model=settings.CF_MODEL,
                timeout=settings.ROAST_REQUEST_TIMEOUT_S,
            )
        )
    else:
        log_message("CF_ACCOUNT_ID or CF_API_TOKEN not set. Skipping Cloudflare backend.", "WARN")

    return generators
