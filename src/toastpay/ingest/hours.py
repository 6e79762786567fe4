"""Labor summary export -> HoursRecord."""

from __future__ import annotations

import structlog

from toastpay.core.types import Row
from toastpay.ingest.fields import parse_number
from toastpay.ingest.rows import MAX_ROWS, iter_validated_rows
from toastpay.models.records import HoursRecord
from toastpay.models.schema_mapping import LABOR_SCHEMA

logger = structlog.get_logger()


def build_hours_records(rows: list[Row], max_rows: int = MAX_ROWS) -> list[HoursRecord]:
    """Build hours records from a tokenized labor file.

    Job codes must map to a department and every row needs an employee id;
    the first violation raises and no records are returned. Hours and rate
    fall back to 0 when they do not parse.
    """
    records = [
        HoursRecord(
            employee_id=row.employee_id,
            regular_hours=parse_number(row.values["regular_hours"]),
            overtime_hours=parse_number(row.values["overtime_hours"]),
            dept=row.dept,
            normal_rate=parse_number(row.values["normal_rate"]),
        )
        for row in iter_validated_rows(rows, LABOR_SCHEMA, max_rows)
    ]
    logger.info("hours_records_built", file_tag=LABOR_SCHEMA.tag, record_count=len(records))
    return records
