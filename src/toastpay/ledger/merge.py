"""Fan hours and tips records out into ledger lines."""

from __future__ import annotations

from collections.abc import Iterable
from decimal import ROUND_HALF_UP, Decimal, localcontext

from toastpay.ingest.fields import parse_employee_id
from toastpay.models.ledger import LedgerLine, LineType
from toastpay.models.records import HoursRecord, TipsRecord

CENT = Decimal("0.01")


def round2(value: Decimal) -> Decimal:
    with localcontext() as ctx:
        # room for every integer digit plus the two decimals
        ctx.prec = max(ctx.prec, value.adjusted() + 3)
        return value.quantize(CENT, rounding=ROUND_HALF_UP)


def merge(hours_records: Iterable[HoursRecord], tips_records: Iterable[TipsRecord]) -> list[LedgerLine]:
    """Hours lines first (REG then OT per record), then one TPCRRS line per tips record.

    Input order is kept. Employees present in both files are not reconciled.
    OT lines carry hours and rate but no amount.
    """
    lines: list[LedgerLine] = []

    for rec in hours_records:
        employee_id = parse_employee_id(rec.employee_id)
        lines.append(LedgerLine(
            employee_id=employee_id,
            type=LineType.REG,
            hours=rec.regular_hours,
            rate=rec.normal_rate,
            amount=round2(rec.regular_hours * rec.normal_rate),
            dept=rec.dept,
        ))
        lines.append(LedgerLine(
            employee_id=employee_id,
            type=LineType.OT,
            hours=rec.overtime_hours,
            rate=rec.normal_rate,
            dept=rec.dept,
        ))

    for rec in tips_records:
        lines.append(LedgerLine(
            employee_id=parse_employee_id(rec.employee_id),
            type=LineType.TPCRRS,
            amount=round2(rec.tips),
            dept=rec.dept,
        ))

    return lines
