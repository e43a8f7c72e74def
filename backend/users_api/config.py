"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - DATABASE_URL is required; a blank value is rejected at load time
    - Empty variables (PORT=) count as unset and fall back to defaults
    - get_settings() is cached (lru_cache) — single instance per process
    - database_url is always handed to SQLAlchemy in asyncpg form

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for every setting except DATABASE_URL
"""

from functools import lru_cache
from typing import Literal
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_ASYNCPG_SCHEME = "postgresql+asyncpg://"
_PLAIN_SCHEMES = ("postgresql://", "postgres://")


def normalize_database_url(url: str) -> str:
    """Rewrite a libpq-style URL into the form SQLAlchemy's asyncpg dialect accepts."""
    for scheme in _PLAIN_SCHEMES:
        if url.startswith(scheme):
            url = _ASYNCPG_SCHEME + url[len(scheme):]
            break

    parts = urlsplit(url)
    if not parts.query:
        return url
    # asyncpg takes ssl=..., libpq takes sslmode=...
    params = [
        ("ssl" if k == "sslmode" else k, v)
        for (k, v) in parse_qsl(parts.query, keep_blank_values=True)
    ]
    return urlunsplit((
        parts.scheme, parts.netloc, parts.path, urlencode(params), parts.fragment,
    ))


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", case_sensitive=False, env_ignore_empty=True,
    )

    # Database
    database_url: str
    database_pool_size: int = 5
    database_max_overflow: int = 10

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        if isinstance(v, str):
            v = v.strip()
            if not v:
                raise ValueError("DATABASE_URL cannot be empty")
            return normalize_database_url(v)
        return v

    # Server
    host: str = "0.0.0.0"
    port: int = 8080

    # CORS
    cors_allow_origin: str = "*"
    cors_allow_methods: str = "GET, POST, OPTIONS, PUT, DELETE"
    cors_allow_headers: str = "*"

    # Observability
    log_level: str = "INFO"
    log_format: Literal["json", "text"] = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
