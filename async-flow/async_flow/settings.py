import os
from typing import List, Mapping, Optional

import pydantic

ENV_PREFIX = "ASYNC_FLOW_"

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class Settings(pydantic.BaseModel):
    """Knobs shared by the code blocks."""

    # how long every simulated remote call takes
    delay_seconds: pydantic.NonNegativeFloat = 1.0
    log_level: str = "INFO"
    fruits_to_get: List[str] = ["apple", "grape", "pear"]

    @pydantic.field_validator("log_level")
    @classmethod
    def _known_level(cls, level: str) -> str:
        level = level.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"unknown log level {level!r}, expected one of {LOG_LEVELS}")
        return level

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """
        Build settings from ASYNC_FLOW_* variables, e.g.

            ASYNC_FLOW_DELAY_SECONDS=0.1 ASYNC_FLOW_FRUITS=apple,kiwi python 5.py

        Raises:
            pydantic.ValidationError: A variable is set to an invalid value.
        """
        if environ is None:
            environ = os.environ

        values = {}
        if f"{ENV_PREFIX}DELAY_SECONDS" in environ:
            values["delay_seconds"] = environ[f"{ENV_PREFIX}DELAY_SECONDS"]
        if f"{ENV_PREFIX}LOG_LEVEL" in environ:
            values["log_level"] = environ[f"{ENV_PREFIX}LOG_LEVEL"]
        if f"{ENV_PREFIX}FRUITS" in environ:
            values["fruits_to_get"] = [
                fruit.strip()
                for fruit in environ[f"{ENV_PREFIX}FRUITS"].split(",")
                if fruit.strip()
            ]
        return cls(**values)
