import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, field_validator

__all__ = ["Settings", "settings"]

ENV_PREFIX = "LISTKIT_"


class Settings(BaseModel):
    """Runtime settings for listkit.

    Values come from an optional JSON file and are then overridden by
    ``LISTKIT_*`` environment variables.
    """

    LOG_LEVEL: str = Field("INFO", description="Level of the listkit logger.")
    LOG_FORMAT: str = Field(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="logging.Formatter format string.",
    )
    WARN_ON_HASH_COLLISION: bool = Field(
        True,
        description="Warn when find_by_hash returns an element that is not equal to the probe.",
    )

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def validate_log_level(cls, value: Any) -> str:
        level = str(value).strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level '{value}'.")
        return level

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "Settings":
        config_path = path or Path().home() / ".listkit.json"

        values: Dict[str, Any] = {}
        if config_path.exists():
            with open(config_path, "r") as f:
                values.update(json.load(f))

        for name in cls.model_fields:
            raw = os.getenv(ENV_PREFIX + name)
            if raw is not None:
                values[name] = raw

        return cls(**values)


settings = Settings.load()
