"""
Application settings, read from the environment (and a local .env file)
"""
from functools import lru_cache
from typing import List

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable support"""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", frozen=True, populate_by_name=True)

    # MONGO_URL is the older name, still honoured
    mongo_uri: str = Field(
        default="mongodb://localhost:27017",
        validation_alias=AliasChoices("MONGO_URI", "MONGO_URL"),
    )
    database_name: str = "recipe_app"
    recipes_collection: str = "recipes"
    request_timeout_seconds: float = Field(default=10.0, gt=0)
    max_page_size: int = Field(default=100, ge=1)
    host: str = "0.0.0.0"
    port: int = 8027
    log_level: str = "INFO"
    # Comma-separated, e.g. "http://a.test,http://b.test"
    cors_origins: str = "*"

    @field_validator("log_level")
    @classmethod
    def _upper(cls, value: str) -> str:
        return value.upper()

    @property
    def request_timeout_ms(self) -> int:
        return int(self.request_timeout_seconds * 1000)

    @property
    def cors_origin_list(self) -> List[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


@lru_cache()
def get_settings() -> Settings:
    return Settings()
