"""Application Configuration - environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables (never hardcoded beyond dev placeholders)
    - get_settings() is cached (lru_cache) - single instance per process
    - fee_rate and tax_rate are non-negative and carry exactly four fractional digits

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Rates typed as Decimal: the env string "0.04" never passes through float
"""

from decimal import Decimal
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from billing.core.money import MAX_RATE, normalize_rate

_ASYNC_DRIVERS = {
    "postgresql://": "postgresql+asyncpg://",
    "sqlite://": "sqlite+aiosqlite://",
}


def to_async_driver_url(url: str) -> str:
    """Hosting platforms hand out sync URLs; the engine needs an async driver."""
    for prefix, replacement in _ASYNC_DRIVERS.items():
        if url.startswith(prefix):
            return url.replace(prefix, replacement, 1)
    return url


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = "postgresql+asyncpg://billing:billing@db:5432/billing"

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_to_async_driver(cls, v: str) -> str:
        if isinstance(v, str):
            return to_async_driver_url(v)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10

    # Authentication
    jwt_secret: str = "your-secret-key"
    jwt_algorithm: str = "HS256"
    token_ttl_minutes: int = 60
    bcrypt_rounds: int = 12

    # Invoicing
    fee_rate: Decimal = Decimal("0.0400")
    tax_rate: Decimal = Decimal("0.1000")

    @field_validator("fee_rate", "tax_rate")
    @classmethod
    def quantize_rate(cls, v: Decimal) -> Decimal:
        if v < 0 or v >= MAX_RATE:
            raise ValueError(f"rate must be in [0, {MAX_RATE})")
        return normalize_rate(v)

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
