"""
Centralised config for the roast service.

Settings are loaded from a `.env` file or the process environment and exposed
through a singleton `settings` object. Components take a `Settings` instance
explicitly, so tests can build their own with fake credentials instead of
mutating the environment.
"""

from pathlib import Path
from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Centralized application settings.

    Nothing here is required: a missing backend credential simply removes that
    backend from the generator list, and the roast falls back to templates.
    """
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore", case_sensitive=False)

    # --- CORE SETTINGS ---
    PROJECT_ROOT: Path = Path(__file__).parent.parent.resolve()
    ENVIRONMENT: str = "development"

    # --- OPENROUTER ---
    OPENROUTER_API_KEY: Optional[str] = None
    OPENROUTER_URL: str = "https://openrouter.ai/api/v1/chat/completions"
    # Priority order: first model gets the first attempt
    OPENROUTER_MODELS: List[str] = Field(
        default_factory=lambda: [
            "arcee-ai/trinity-large-preview:free",
            "meta-llama/llama-3.3-70b-instruct:free",
            "mistralai/mistral-7b-instruct:free",
        ]
    )
    APP_URL: str = "https://steam-roaster.vercel.app"
    APP_NAME: str = "Steam Library Roaster"

    # --- CLOUDFLARE WORKERS AI ---
    CF_ACCOUNT_ID: Optional[str] = None
    CF_API_TOKEN: Optional[str] = None
    CF_MODEL: str = "@cf/meta/llama-3-8b-instruct"

    # --- GENERATION LIMITS ---
    ROAST_MAX_TOKENS: int = 200
    ROAST_TEMPERATURE: float = 0.8
    ROAST_REQUEST_TIMEOUT_S: float = 8.0  # per backend call

    # --- FILE PATHS (derived from PROJECT_ROOT) ---
    @property
    def log_path(self) -> Path:
        return self.PROJECT_ROOT / "logs/roast_history.log"


# Create a single, importable instance of the settings
settings = Settings()
