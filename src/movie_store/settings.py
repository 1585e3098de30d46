from functools import lru_cache
from typing import Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):

    # ---- app/runtime ----
    env: Literal["dev", "staging", "prod"] = "dev"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # ---- API server configuration ----
    api_host: str = "0.0.0.0"  # listen on every interface
    api_port: int = 8000
    api_reload: bool = False  # Auto-reload on code changes (dev only)

    # ---- collection ----
    seed_movies: bool = True  # load the two sample movies at startup
    id_upper_bound: int = 10_000_000  # generated ids are drawn from [0, id_upper_bound)
    random_seed: Optional[int] = None  # None -> OS entropy

    model_config = SettingsConfigDict(
        env_file = ".env",
        env_prefix="APP_",      # APP_ENV, APP_API_PORT, etc.
        extra = "ignore"
    )


@lru_cache
def get_settings() -> Settings:
    """Singleton accessor to avoid reparsing .env on every import."""
    return Settings()
