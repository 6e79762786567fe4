"""Validation pass shared by the labor and tips builders."""

from __future__ import annotations

from collections.abc import Iterator
from typing import NamedTuple

import structlog

from toastpay.core.config import IngestConfig
from toastpay.core.exceptions import MissingIdentifier, UnmappedDepartment
from toastpay.core.types import Row
from toastpay.ingest.columns import resolve_columns
from toastpay.ingest.fields import cell
from toastpay.models.department import Department
from toastpay.models.schema_mapping import FileSchema

logger = structlog.get_logger()

MAX_ROWS: int = IngestConfig.model_fields["max_rows"].default


class ValidatedRow(NamedTuple):
    row_number: int  # 1-based, header is row 1
    employee_id: str
    dept: Department
    values: dict[str, str]  # raw numeric cells keyed by field name


def iter_validated_rows(rows: list[Row], schema: FileSchema, max_rows: int) -> Iterator[ValidatedRow]:
    """Yield the data rows of one file with identity and department checked.

    Raises on the first bad row. Callers must consume the whole iterator
    before using anything it produced, so a failure leaves no partial output.
    """
    if not rows:
        return

    index = resolve_columns(rows[0], schema)
    row_count = min(max_rows, len(rows))
    if len(rows) > row_count:
        logger.warning(
            "row_cap_reached",
            file_tag=schema.tag,
            max_rows=max_rows,
            ignored=len(rows) - row_count,
        )

    for x in range(1, row_count):
        cells = [c.strip() for c in rows[x]]
        row_number = x + 1

        employee_id = cell(cells, index["employee_id"])
        if not employee_id:
            logger.warning("employee_id_missing", file_tag=schema.tag, row=row_number)
            raise MissingIdentifier(schema.tag, row_number)

        source_value = cell(cells, index["department"])
        dept = schema.department_map.get(source_value)
        if dept is None:
            logger.warning(
                "department_unmapped",
                file_tag=schema.tag,
                row=row_number,
                value=source_value,
            )
            raise UnmappedDepartment(schema.tag, row_number, schema.unmapped_reason, source_value)

        yield ValidatedRow(
            row_number=row_number,
            employee_id=employee_id,
            dept=dept,
            values={name: cell(cells, index[name]) for name in schema.numeric},
        )
