from typing import Literal

from pydantic import ValidationError as SettingsParseError
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import ConfigError

LOG_LEVELS = ("debug", "info", "warning", "error", "critical")


class Settings(BaseSettings):
    PORT: int = 8080
    DATABASE_URL: str = "postgres://localhost/tenant_verify"
    API_KEY: str = "development-key"
    LOG_LEVEL: str = "debug"
    ENVIRONMENT: Literal["development", "production"] = "development"

    MAX_CONNECTIONS: int = 25
    TIMEOUT_SECONDS: int = 30

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", frozen=True)

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT == "production"

    @property
    def is_development(self) -> bool:
        return self.ENVIRONMENT == "development"

    def validate_for_startup(self) -> "Settings":
        # ports below 1024 need root
        if not 1024 <= self.PORT <= 65535:
            raise ConfigError(f"PORT must be between 1024 and 65535, got {self.PORT}")
        if self.is_production and not self.DATABASE_URL.strip():
            raise ConfigError("DATABASE_URL cannot be empty in production")
        if self.MAX_CONNECTIONS < 1:
            raise ConfigError("MAX_CONNECTIONS must be at least 1")
        # 0 would mean no timeout at all
        if self.TIMEOUT_SECONDS < 1:
            raise ConfigError("TIMEOUT_SECONDS must be at least 1")
        if self.LOG_LEVEL.lower() not in LOG_LEVELS:
            raise ConfigError(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}")
        return self


def load_settings(**overrides) -> Settings:
    """
    Build the settings once at startup and validate them.
    Any parse or range problem surfaces as ConfigError.
    """
    try:
        settings = Settings(**overrides)
    except SettingsParseError as exc:
        raise ConfigError(f"Invalid configuration: {exc}") from exc
    return settings.validate_for_startup()
