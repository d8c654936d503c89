"""Miscellaneous parsing helpers.

Each helper returns ``None`` when the value cannot be parsed instead of
raising, so callers can degrade to a neutral result.
"""

from __future__ import annotations

import datetime as dt
import re
from decimal import Decimal, InvalidOperation
from typing import Optional

_MONEY_RE = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?", re.ASCII)
_DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)
_TIME_RE = re.compile(r"\d{1,2}:\d{2}", re.ASCII)

# Largest decimal exponent representable as a double
_MAX_EXPONENT = 308


def parse_decimal(value: str | None) -> Optional[Decimal]:
    """Parse a decimal money string such as ``"35.35"``.

    Only plain ASCII numerals with an optional exponent are accepted, so
    whitespace, digit separators, ``NaN`` and ``Infinity`` are rejected,
    as are magnitudes outside the range of a double.
    """
    if not value or not _MONEY_RE.fullmatch(value):
        return None
    try:
        amount = Decimal(value)
    except InvalidOperation:
        return None
    if amount and abs(amount.adjusted()) > _MAX_EXPONENT:
        return None
    return amount


def parse_purchase_date(value: str | None) -> Optional[dt.date]:
    """Parse a ``YYYY-MM-DD`` calendar date."""
    if not value or not _DATE_RE.fullmatch(value):
        return None
    try:
        return dt.datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        return None


def parse_purchase_time(value: str | None) -> Optional[dt.time]:
    """Parse a 24-hour ``HH:MM`` clock time."""
    if not value or not _TIME_RE.fullmatch(value):
        return None
    try:
        return dt.datetime.strptime(value, "%H:%M").time()
    except ValueError:
        return None
