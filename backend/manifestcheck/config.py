"""Library configuration via environment variables."""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings
from functools import lru_cache


FailurePolicy = Literal["abort", "isolate"]


class Settings(BaseSettings):
    """Settings loaded from MANIFESTCHECK_* environment variables."""

    # Logging
    DEBUG: bool = False
    LOG_LEVEL: str = "info"

    # Validator execution
    VALIDATOR_FAILURE_POLICY: FailurePolicy = "abort"
    VALIDATOR_MAX_WORKERS: int = Field(default=1, ge=1)

    model_config = {
        "env_prefix": "MANIFESTCHECK_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


@lru_cache
def get_settings() -> Settings:
    return Settings()
