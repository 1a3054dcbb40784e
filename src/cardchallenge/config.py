"""Runtime settings read from environment variables."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from .errors import ConfigurationError
from .selection import DEFAULT_BATCH_SIZE

ENV_PREFIX = "CARDCHALLENGE_"
DEFAULT_DB_PATH = Path("card_deck.db")
DEFAULT_CSV_PATH = Path("cards.csv")
DEFAULT_DRAWS = 3
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class Settings:
    """Where to persist the deck and how to run the demonstration."""

    db_path: Path = DEFAULT_DB_PATH
    csv_path: Path = DEFAULT_CSV_PATH
    seed: int | None = None
    batch_size: int = DEFAULT_BATCH_SIZE
    draws: int = DEFAULT_DRAWS
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Build settings from ``CARDCHALLENGE_*`` variables, falling back to defaults."""
        env = os.environ if environ is None else environ

        def get(name: str) -> str | None:
            value = env.get(ENV_PREFIX + name)
            if value is None or not value.strip():
                return None
            return value.strip()

        db_path = get("DB")
        csv_path = get("CSV")
        seed = get("SEED")
        batch_size = get("BATCH_SIZE")
        draws = get("DRAWS")
        log_level = (get("LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper()
        if not isinstance(logging.getLevelName(log_level), int):
            raise ConfigurationError(f"{ENV_PREFIX}LOG_LEVEL has unknown level {log_level!r}.")

        return cls(
            db_path=Path(db_path) if db_path else DEFAULT_DB_PATH,
            csv_path=Path(csv_path) if csv_path else DEFAULT_CSV_PATH,
            seed=_parse_int("SEED", seed) if seed is not None else None,
            batch_size=_parse_non_negative("BATCH_SIZE", batch_size, DEFAULT_BATCH_SIZE),
            draws=_parse_non_negative("DRAWS", draws, DEFAULT_DRAWS),
            log_level=log_level,
        )


def _parse_int(name: str, raw: str) -> int:
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{ENV_PREFIX}{name} must be an integer, got {raw!r}.") from exc


def _parse_non_negative(name: str, raw: str | None, default: int) -> int:
    if raw is None:
        return default
    value = _parse_int(name, raw)
    if value < 0:
        raise ConfigurationError(f"{ENV_PREFIX}{name} must be non-negative, got {value}.")
    return value
