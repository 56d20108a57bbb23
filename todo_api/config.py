"""Application settings loaded from environment variables."""

import os
from dataclasses import dataclass
from functools import lru_cache

ENV_PREFIX = "TODO_API"


def _env(suffix: str, default: str) -> str:
    value = os.getenv(f"{ENV_PREFIX}_{suffix}")
    return default if value is None or not value.strip() else value.strip()


def _env_int(suffix: str, default: int) -> int:
    raw = _env(suffix, str(default))
    try:
        return int(raw)
    except ValueError:
        return default


@dataclass(frozen=True)
class Settings:
    title: str = "Todo API"
    version: str = "1.0.0"
    host: str = "127.0.0.1"
    port: int = 8000
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    return Settings(
        title=_env("TITLE", "Todo API"),
        host=_env("HOST", "127.0.0.1"),
        port=_env_int("PORT", 8000),
        log_level=_env("LOG_LEVEL", "INFO").upper(),
    )
