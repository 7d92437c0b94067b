"""Configuration for table layout. Environment overrides use the PI_TABLE_ prefix."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from pi.table.errors import ConfigError

DEFAULT_FALLBACK_COLUMNS = 80


@dataclass
class Config:
    """Layout configuration.

    ``columns`` forces the available width; when ``None`` the terminal is
    queried and ``fallback_columns`` is used if it cannot be.
    """

    columns: int | None = None
    fallback_columns: int = DEFAULT_FALLBACK_COLUMNS
    padding: str = " "
    border: str = "|"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Config:
        env = os.environ if environ is None else environ
        config = cls()

        columns = env.get("PI_TABLE_COLUMNS")
        if columns:
            config.columns = _positive_int("PI_TABLE_COLUMNS", columns)

        fallback = env.get("PI_TABLE_FALLBACK_COLUMNS")
        if fallback:
            config.fallback_columns = _positive_int("PI_TABLE_FALLBACK_COLUMNS", fallback)

        border = env.get("PI_TABLE_BORDER")
        if border is not None:
            if not border:
                raise ConfigError("PI_TABLE_BORDER must not be empty")
            config.border = border

        padding = env.get("PI_TABLE_PADDING")
        if padding is not None:
            config.padding = padding

        return config


def _positive_int(name: str, raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from None
    if value <= 0:
        raise ConfigError(f"{name} must be positive, got {value}")
    return value
