"""Runtime configuration read from environment variables."""
import os
from typing import Optional

from pydantic import BaseModel, Field

DEFAULT_MODEL = "gpt-4o-mini"


def _get_env_int(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        val = int(raw)
        return val if val > 0 else default
    except ValueError:
        return default


def _get_env_float(name: str, default: float) -> float:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        val = float(raw)
        return val if val > 0 else default
    except ValueError:
        return default


class Settings(BaseModel):
    openai_api_key: Optional[str] = Field(None, description="OpenAI API key")
    openai_model: str = Field(DEFAULT_MODEL, description="Model used by the exchange agent")
    max_tool_rounds: int = Field(5, description="Upper bound on model/tool round trips per request")
    countries_api_base_url: Optional[str] = None
    rates_api_base_url: Optional[str] = None
    rates_api_timeout: float = 30.0
    public_base_url: str = "http://localhost:5000"


def get_settings() -> Settings:
    """
    Build settings from the current environment.

    Read on every call so tests and the run script can adjust the
    environment before the app is created.
    """
    return Settings(
        openai_api_key=os.getenv("OPENAI_API_KEY"),
        openai_model=os.getenv("OPENAI_MODEL", "").strip() or DEFAULT_MODEL,
        max_tool_rounds=_get_env_int("OPENAI_MAX_TOOL_ROUNDS", 5),
        countries_api_base_url=os.getenv("COUNTRIES_API_BASE_URL"),
        rates_api_base_url=os.getenv("RATES_API_BASE_URL"),
        rates_api_timeout=_get_env_float("RATES_API_TIMEOUT_SECONDS", 30.0),
        public_base_url=os.getenv("A2A_PUBLIC_BASE_URL", "http://localhost:5000"),
    )
