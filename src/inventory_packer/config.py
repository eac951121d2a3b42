"""Runtime settings; loads .env locally via python-dotenv."""

from __future__ import annotations

import logging
import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

# does not override variables already set in the environment
load_dotenv()

DEFAULT_SEED_COUNT = 3


class Settings(BaseModel):
    seed_count: int = Field(
        default=DEFAULT_SEED_COUNT,
        ge=1,
        description="Number of largest footprint groups tried as seeds")
    log_level: str = Field(default="INFO", description="Logging level name")

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level '{value}'")
        return level


def get_settings() -> Settings:
    """Build settings from PACKER_* environment variables."""
    values: dict[str, str] = {}
    seed_count = os.getenv("PACKER_SEED_COUNT")
    if seed_count:
        values["seed_count"] = seed_count
    log_level = os.getenv("PACKER_LOG_LEVEL")
    if log_level:
        values["log_level"] = log_level

    try:
        return Settings(**values)
    except ValidationError as e:
        raise ValueError(f"Invalid PACKER_* configuration: {e}") from e
