"""Application configuration helpers."""

import logging
import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

logger = logging.getLogger(__name__)


class ConfigError(RuntimeError):
    """Raised when a configuration value cannot be used."""


@dataclass(frozen=True)
class Settings:
    database_url: str
    server_port: int = 3000
    pool_max_connections: int = 5


def _get_int_env(name: str, default: str) -> int:
    raw = os.getenv(name) or default
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from exc


def _build_database_url() -> str:
    host = os.getenv("PG_HOST", "localhost")
    port = _get_int_env("PG_PORT", "5432")
    user = os.getenv("PG_USER", "postgres")
    password = os.getenv("PG_PASSWORD", "password")
    dbname = os.getenv("PG_DATABASE", "spots")
    return f"postgres://{user}:{password}@{host}:{port}/{dbname}"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load settings from environment variables with sensible defaults."""
    load_dotenv()

    database_url = os.getenv("DATABASE_URL", "")
    if not database_url:
        database_url = _build_database_url()
        logger.warning("DATABASE_URL is not set; falling back to PG_* settings.")

    server_port = _get_int_env("PORT", os.getenv("SPOTS_PORT") or "3000")
    pool_max_connections = _get_int_env("DB_POOL_MAX", "5")

    return Settings(
        database_url=database_url,
        server_port=server_port,
        pool_max_connections=pool_max_connections,
    )
