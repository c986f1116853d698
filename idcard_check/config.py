from __future__ import annotations

import logging
import os

from dotenv import load_dotenv

load_dotenv()


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    # isdigit() alone lets through '²' and other digits int() refuses.
    return int(raw) if raw.isascii() and raw.isdigit() else default


class Config:
    # Two-digit years land in the 100-year window starting this many years ago.
    CENTURY_WINDOW_BACK: int = _int_env("IDCARD_CENTURY_WINDOW_BACK", 80)
    # Latest birth year a 15-digit number can carry.
    LEGACY_LAST_BIRTH_YEAR: int = _int_env("IDCARD_LEGACY_LAST_BIRTH_YEAR", 1999)
    LEGACY_MIN_YEAR: int = _int_env("IDCARD_LEGACY_MIN_YEAR", 50)

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    def __init__(self, **overrides: int | str) -> None:
        for key, value in overrides.items():
            if not hasattr(type(self), key):
                raise AttributeError(f"unknown setting: {key}")
            expected = type(getattr(type(self), key))
            if type(value) is not expected:
                raise TypeError(
                    f"{key} must be {expected.__name__}, got {type(value).__name__}"
                )
            setattr(self, key, value)


config = Config()


def configure_logging(level: str | None = None) -> None:
    logging.basicConfig(
        level=level or config.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
