"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Every setting has a working default; nothing is required to boot
    - get_settings() is cached (lru_cache) — single instance per process
    - Seeds default to None (non-deterministic); set them to pin catalog/noise output

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # GitHub loader
    github_api_base_url: str = "https://api.github.com"
    github_username: str = "hiteshchoudhary"
    github_timeout_seconds: float = 10.0

    @field_validator("github_api_base_url", mode="before")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        if isinstance(v, str):
            return v.rstrip("/")
        return v

    # Demos
    catalog_size: int = 2000
    catalog_seed: int | None = None
    noise_seed: int | None = None
    noise_iterations_per_unit: int = 100_000
    max_fibonacci_n: int = 35

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
