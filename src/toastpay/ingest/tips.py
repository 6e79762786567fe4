"""Tips & gratuity export -> TipsRecord."""

from __future__ import annotations

import structlog

from toastpay.core.types import Row
from toastpay.ingest.fields import parse_number
from toastpay.ingest.rows import MAX_ROWS, iter_validated_rows
from toastpay.models.records import TipsRecord
from toastpay.models.schema_mapping import TIPS_SCHEMA

logger = structlog.get_logger()


def build_tips_records(rows: list[Row], max_rows: int = MAX_ROWS) -> list[TipsRecord]:
    """Build tips records from a tokenized tips file. Same fail-fast rules as labor."""
    records = [
        TipsRecord(
            employee_id=row.employee_id,
            dept=row.dept,
            tips=parse_number(row.values["tips"]),
        )
        for row in iter_validated_rows(rows, TIPS_SCHEMA, max_rows)
    ]
    logger.info("tips_records_built", file_tag=TIPS_SCHEMA.tag, record_count=len(records))
    return records
