"""Render ledger lines as CSV text.

Fields are joined with bare commas; nothing is quoted. Every value written is
a number, a line type or a department tag, none of which contain commas.
"""

from __future__ import annotations

from collections.abc import Iterable
from decimal import Decimal
from typing import Optional

from toastpay.models.ledger import LedgerLine

HEADER = ("employee_id", "type", "hours", "rate", "amount", "dept")


def format_number(value: Optional[Decimal | int]) -> str:
    """Plain notation without trailing zeros: 150.00 -> "150", 12.50 -> "12.5"."""
    if value is None:
        return ""
    if isinstance(value, int):
        return str(value)
    if value == 0:
        return "0"
    return format(value.normalize(), "f")


def render_row(line: LedgerLine) -> str:
    return ",".join([
        format_number(line.employee_id),
        line.type.value,
        format_number(line.hours),
        format_number(line.rate),
        format_number(line.amount),
        line.dept.value,
    ])


def render_csv(lines: Iterable[LedgerLine]) -> str:
    out = [",".join(HEADER)]
    out.extend(render_row(line) for line in lines)
    return "\n".join(out) + "\n"
