"""Validation and normalization of resident identity numbers.

Two forms exist:

* legacy, 15 digits: ``RRRRRR YYMMDD SSS``
* modern, 18 characters: ``RRRRRR YYYYMMDD SSS C`` where ``C`` is the
  GB 11643-1999 check character (``0``-``9`` or ``X``).

Every public predicate here is total: malformed input gives ``False`` or
``None``. Only :func:`compute_checksum` raises, and only on a contract
violation.
"""
from __future__ import annotations

import calendar
import logging
import re
from datetime import date
from typing import Optional, Sequence

from idcard_check.config import Config, config
from idcard_check.errors import InvalidInputError
from idcard_check.reference_data import (
    BODY_LENGTH,
    CHECK_CODES,
    LEGACY_LENGTH,
    MODERN_LENGTH,
    REGION_CODES,
    WEIGHTS,
)

logger = logging.getLogger(__name__)

_RE_LEGACY = re.compile(
    r"[1-9]\d{7}(?:0[1-9]|1[0-2])(?:[012]\d|3[01])\d{3}", re.ASCII
)
_RE_MODERN = re.compile(
    r"[1-9]\d{5}[1-9]\d{3}(?:0[1-9]|1[0-2])(?:[012]\d|3[01])\d{3}[\dxX]", re.ASCII
)
_RE_SEPARATORS = re.compile(r"[\s\-]")


def _is_digits(value: object) -> bool:
    # str.isdigit() alone accepts non-ASCII digits such as '٣'.
    return isinstance(value, str) and value.isascii() and value.isdigit()


def _mask(value: str) -> str:
    return value[:6] + "*" * max(len(value) - 6, 0)


# ── formats ──────────────────────────────────────────────────────────────


def is_legacy_format(value: object) -> bool:
    """Return True if value looks like a 15-digit legacy number."""
    return isinstance(value, str) and _RE_LEGACY.fullmatch(value) is not None


def is_modern_format(value: object) -> bool:
    """Return True if value looks like an 18-character modern number."""
    return isinstance(value, str) and _RE_MODERN.fullmatch(value) is not None


def is_plausible_format(value: object) -> bool:
    """Lexical check for either form. The check character is not verified."""
    return is_legacy_format(value) or is_modern_format(value)


# ── checksum ─────────────────────────────────────────────────────────────


def _weighted_sum(digits: Sequence[int]) -> int:
    if len(digits) != len(WEIGHTS):
        raise InvalidInputError(
            f"expected {len(WEIGHTS)} digits, got {len(digits)}"
        )
    return sum(d * w for d, w in zip(digits, WEIGHTS))


def compute_checksum(body: str) -> str:
    """Return the check character for the first 17 digits of a modern number.

    Raises InvalidInputError unless body is exactly 17 ASCII digits.
    """
    if not isinstance(body, str) or len(body) != BODY_LENGTH:
        raise InvalidInputError("checksum body must be a string of 17 digits")
    if not _is_digits(body):
        raise InvalidInputError("checksum body must contain digits only")
    return CHECK_CODES[_weighted_sum([int(c) for c in body]) % 11]


def is_valid_modern(value: object) -> bool:
    """Return True if value is 18 characters with a matching check character."""
    if not isinstance(value, str) or len(value) != MODERN_LENGTH:
        return False
    body = value[:BODY_LENGTH]
    if not _is_digits(body):
        return False
    expected = compute_checksum(body)
    if value[BODY_LENGTH].upper() != expected:
        logger.debug("Number %s: check character does not match %s", _mask(value), expected)
        return False
    return True


# ── legacy numbers ───────────────────────────────────────────────────────


def _expand_year(yy: int, today: date, settings: Config) -> int:
    """Map a two-digit year into the 100-year window opening
    ``CENTURY_WINDOW_BACK`` years before today."""
    start = today.year - settings.CENTURY_WINDOW_BACK
    year = start - start % 100 + yy
    if year < start:
        year += 100
    return year


def _parse_birth(fragment: str, today: date, settings: Config) -> Optional[date]:
    """Parse a ``YYMMDD`` fragment, or return None if it is not a real date."""
    year = _expand_year(int(fragment[0:2]), today, settings)
    try:
        return date(year, int(fragment[2:4]), int(fragment[4:6]))
    except ValueError:
        return None


def convert_legacy_to_modern(
    value: object,
    today: Optional[date] = None,
    settings: Optional[Config] = None,
) -> Optional[str]:
    """Convert a 15-digit number to its 18-character form, or return None."""
    if not isinstance(value, str) or len(value) != LEGACY_LENGTH or not _is_digits(value):
        return None
    settings = settings or config
    today = today or date.today()

    birth = _parse_birth(value[6:12], today, settings)
    if birth is None:
        logger.debug("Legacy number %s: birth date is not a calendar date", _mask(value))
        return None
    if birth > today:
        logger.debug("Legacy number %s: birth date %s is in the future", _mask(value), birth)
        return None
    if birth.year > settings.LEGACY_LAST_BIRTH_YEAR:
        logger.debug(
            "Legacy number %s: birth year %d is after %d",
            _mask(value), birth.year, settings.LEGACY_LAST_BIRTH_YEAR,
        )
        return None

    body = f"{value[:6]}{birth.year:04d}{value[8:]}"
    return body + compute_checksum(body)


def is_valid_any(
    value: object,
    today: Optional[date] = None,
    settings: Optional[Config] = None,
) -> bool:
    """Validate either form; legacy numbers are converted first."""
    if isinstance(value, str) and len(value) == LEGACY_LENGTH:
        converted = convert_legacy_to_modern(value, today=today, settings=settings)
        if converted is None:
            return False
        value = converted
    return is_valid_modern(value)


def is_plausible_legacy(
    value: object,
    today: Optional[date] = None,
    settings: Optional[Config] = None,
) -> bool:
    """Best-effort check of a 15-digit number.

    Legacy numbers have no check character, so this can only reject obvious
    garbage. Prefer ``is_valid_any`` which converts first.
    """
    if not isinstance(value, str) or len(value) != LEGACY_LENGTH or not _is_digits(value):
        return False
    settings = settings or config
    today = today or date.today()

    if value[:2] not in REGION_CODES:
        logger.debug("Legacy number %s: unknown region %s", _mask(value), value[:2])
        return False

    birth = _parse_birth(value[6:12], today, settings)
    if birth is None:
        logger.debug("Legacy number %s: birth date is not a calendar date", _mask(value))
        return False
    if birth > today:
        logger.debug("Legacy number %s: birth date %s is in the future", _mask(value), birth)
        return False

    # Two-digit years between the current one and LEGACY_MIN_YEAR are rejected.
    yy = int(value[6:8])
    if yy < settings.LEGACY_MIN_YEAR and yy > today.year % 100:
        logger.debug("Legacy number %s: two-digit year %02d is out of range", _mask(value), yy)
        return False

    month = int(value[8:10])
    day = int(value[10:12])
    if not 1 <= month <= 12:
        logger.debug("Legacy number %s: month %d is out of range", _mask(value), month)
        return False
    if not 1 <= day <= calendar.monthrange(birth.year, month)[1]:
        logger.debug("Legacy number %s: day %d is out of range", _mask(value), day)
        return False
    return True


# ── normalization ────────────────────────────────────────────────────────


def normalize(text: object) -> Optional[str]:
    """Return text without spaces/hyphens and with an uppercase check
    character, or None if the result is not a plausible number."""
    if not isinstance(text, str):
        return None
    cleaned = _RE_SEPARATORS.sub("", text)
    if cleaned.endswith("x"):
        cleaned = cleaned[:-1] + "X"
    return cleaned if is_plausible_format(cleaned) else None


def to_modern(
    value: object,
    today: Optional[date] = None,
    settings: Optional[Config] = None,
) -> Optional[str]:
    """Return the uppercase 18-character form of a valid number, or None."""
    if not isinstance(value, str):
        return None
    if len(value) == LEGACY_LENGTH:
        return convert_legacy_to_modern(value, today=today, settings=settings)
    if is_valid_modern(value):
        return value.upper()
    return None
