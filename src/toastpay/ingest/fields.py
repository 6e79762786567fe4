"""Cell access and lenient number parsing."""

from __future__ import annotations

import re
from decimal import Decimal
from typing import Optional

from toastpay.core.types import Row

# Leading decimal literal, the part of the text a lenient float parse keeps.
_NUMBER_PREFIX = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_INTEGER_PREFIX = re.compile(r"[+-]?\d+")

# Magnitudes a float parse cannot represent as a finite, nonzero number.
_MAX_EXPONENT = 308
_MIN_EXPONENT = -324


def cell(row: Row, index: int) -> str:
    """Trimmed field at ``index``; out-of-range reads as empty."""
    if 0 <= index < len(row):
        return row[index].strip()
    return ""


def parse_number(text: str) -> Decimal:
    """Parse the leading numeric part of ``text``, defaulting to 0.

    ``"12.5"`` -> 12.5, ``"8 hrs"`` -> 8, ``""`` / ``"n/a"`` / ``"1e400"`` -> 0.
    """
    match = _NUMBER_PREFIX.match(text.strip())
    if match is None:
        return Decimal("0")
    value = Decimal(match.group(0))
    if value and not _MIN_EXPONENT <= value.adjusted() <= _MAX_EXPONENT:
        return Decimal("0")
    return value


def parse_employee_id(text: str) -> Optional[int]:
    """Leading integer of an employee id, or None if it has none."""
    match = _INTEGER_PREFIX.match(text.strip())
    if match is None:
        return None
    return int(match.group(0))
