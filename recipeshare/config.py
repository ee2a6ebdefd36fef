from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import List, Literal, Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Env(Enum):
    local = "local"
    dev = "dev"
    prod = "prod"


class Settings(BaseSettings):
    """Service settings, read from ``RECIPESHARE_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="RECIPESHARE_", env_file=".env", extra="ignore"
    )

    app_name: str = "RecipeShare"
    env: Env = Env.local
    # Names understood by both logging and uvicorn
    log_level: Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"] = "INFO"
    log_file: Optional[Path] = None
    api_prefix: str = "/api/recipes"
    # JSON list in the environment, e.g. '["http://localhost:3000"]'
    cors_origins: List[str] = ["*"]
    # JSON list of recipe payloads loaded into the store at startup
    seed_file: Optional[Path] = None
    host: str = "127.0.0.1"
    port: int = 8000

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, v):
        return v.upper() if isinstance(v, str) else v


@lru_cache
def get_settings() -> Settings:
    return Settings()
