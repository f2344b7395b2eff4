from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from urllib.parse import urlparse

from dotenv import load_dotenv, find_dotenv

_env_path = find_dotenv(".env") or ".env"
load_dotenv(_env_path, override=False)

DEFAULT_JUDGE0_API_URL = "https://judge029.p.rapidapi.com"
MISSING_KEY_MESSAGE = "RapidAPI key is not configured. Please set RAPIDAPI_KEY in your .env file."


def _float_var(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"Invalid number for {name}: {raw}")


@dataclass(frozen=True)
class Settings:
    """Central configuration (env driven). Loaded once, never mutated."""

    rapidapi_key: str = ""
    judge0_api_url: str = DEFAULT_JUDGE0_API_URL
    judge0_host: str = ""
    judge0_timeout_s: float = 10.0
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        # Normalise base URL so path joins stay predictable
        object.__setattr__(self, "judge0_api_url", self.judge0_api_url.strip().rstrip("/"))
        if not self.judge0_host:
            object.__setattr__(self, "judge0_host", urlparse(self.judge0_api_url).netloc)

    @property
    def has_api_key(self) -> bool:
        return bool(self.rapidapi_key and self.rapidapi_key.strip())

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            rapidapi_key=os.getenv("RAPIDAPI_KEY", ""),
            judge0_api_url=os.getenv("JUDGE0_API_URL") or DEFAULT_JUDGE0_API_URL,
            judge0_host=os.getenv("JUDGE0_HOST", ""),
            judge0_timeout_s=_float_var("JUDGE0_TIMEOUT_S", 10.0),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )


@lru_cache()
def get_settings() -> Settings:
    return Settings.from_env()
