"""Application configuration from environment variables."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Mapping
    default_use_short_names: bool = Field(
        default=True,
        description="Use bare field names as graph property names unless an entity says otherwise",
    )
    entity_modules: str = Field(
        default="",
        description="Comma-separated modules whose entity classes are mapped at startup",
    )

    # API
    api_host: str = Field(default="127.0.0.1", description="Introspection API bind host")
    api_port: int = Field(default=8000, description="Introspection API port")

    # Application
    environment: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Environment name",
    )
    log_level: str = Field(default="INFO", description="Logging level")
    debug: bool = Field(default=False, description="Debug mode")

    @property
    def entity_module_names(self) -> list[str]:
        return [m.strip() for m in self.entity_modules.split(",") if m.strip()]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
