"""
Runtime configuration, read from ``NUMBER_WORDS_*`` environment variables.

Entry points (``main.py``, ``api.py``) load a ``.env`` file first, so the
same variables can live there.  Values are validated by pydantic; a bad
value fails loudly at startup rather than on the first parse.
"""

from __future__ import annotations

import os
from functools import lru_cache
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

ENV_PREFIX = "NUMBER_WORDS_"


class ParserSettings(BaseModel):
    """Parser and host settings."""

    model_config = ConfigDict(frozen=True)

    # Highest scale word accepted; "billion" adds a fourth triple
    max_scale: Literal["million", "billion"] = "million"
    # Signed integer width for the overflow check, 0 = unbounded
    int_bits: int = Field(default=64, ge=0)
    log_level: str = "WARNING"

    @field_validator("max_scale", mode="before")
    @classmethod
    def lower_scale(cls, value: object) -> object:
        return value.strip().lower() if isinstance(value, str) else value

    @field_validator("log_level")
    @classmethod
    def upper_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {value!r}")
        return level

    @property
    def int_range(self) -> tuple[int, int] | None:
        """Inclusive (low, high) bounds, or None when unbounded."""
        if not self.int_bits:
            return None
        return -(2 ** (self.int_bits - 1)), 2 ** (self.int_bits - 1) - 1


@lru_cache(maxsize=1)
def load_settings() -> ParserSettings:
    """Build settings from the environment (cached; ``cache_clear`` to reload)."""
    values: dict[str, str] = {}
    for name in ParserSettings.model_fields:
        raw = os.environ.get(f"{ENV_PREFIX}{name.upper()}")
        if raw is not None and raw.strip():
            values[name] = raw
    return ParserSettings(**values)
