from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True)
class Settings:
    """
    Application settings loaded from environment variables.

    Env vars:
    - STATIC_DIR: directory of front-end assets served for unmatched paths.
      Default './frontend/dist/frontend'
    - HOST: listening host. Default '0.0.0.0'
    - PORT: listening port. Default 3000
    - DATABASE_PATH: path to the sqlite db file. Default 'todos.db'
    - DB_POOL_SIZE: number of pooled sqlite connections kept open. Default 5
    - CORS_ALLOW_ORIGINS: comma-separated list of allowed origins; '*' by default
    - LOG_LEVEL: root log level. Default 'INFO'
    """

    static_dir: str = "./frontend/dist/frontend"
    host: str = "0.0.0.0"
    port: int = 3000
    database_path: str = "todos.db"
    db_pool_size: int = 5
    cors_allow_origins: List[str] = field(default_factory=lambda: ["*"])
    log_level: str = "INFO"


def _get_env(name: str, default: str) -> str:
    value = os.getenv(name, default)
    if value is None or value == "":
        return default
    return value


def _parse_int(value: str, default: int, minimum: int = 0) -> int:
    try:
        parsed = int(value.strip())
    except ValueError:
        return default
    return parsed if parsed >= minimum else default


_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


def _parse_level(value: str, default: str) -> str:
    level = value.strip().upper()
    return level if level in _LOG_LEVELS else default


def _parse_origins(origins_value: str) -> List[str]:
    """
    Parse CORS origins from env. Supports:
    - '*' to allow all origins
    - Comma-separated list of origins
    """
    value = origins_value.strip()
    if value == "*":
        return ["*"]
    return [o.strip() for o in value.split(",") if o.strip()]


# PUBLIC_INTERFACE
def get_settings() -> Settings:
    """Return application settings loaded from environment variables."""
    return Settings(
        static_dir=_get_env("STATIC_DIR", Settings.static_dir).strip(),
        host=_get_env("HOST", Settings.host).strip(),
        port=_parse_int(_get_env("PORT", str(Settings.port)), Settings.port, minimum=1),
        database_path=_get_env("DATABASE_PATH", Settings.database_path).strip(),
        db_pool_size=_parse_int(_get_env("DB_POOL_SIZE", str(Settings.db_pool_size)), Settings.db_pool_size, minimum=1),
        cors_allow_origins=_parse_origins(_get_env("CORS_ALLOW_ORIGINS", "*")),
        log_level=_parse_level(_get_env("LOG_LEVEL", Settings.log_level), Settings.log_level),
    )
