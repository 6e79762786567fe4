"""Header lookup for Toast exports.

A name that is not in the header resolves to ``None``; the schema's fallback
position is applied as a separate, explicit step. A column that genuinely
sits at position 0 therefore resolves to 0 and is never replaced by the
fallback.
"""

from __future__ import annotations

from typing import Optional

import structlog

from toastpay.core.types import ColumnIndex, Row
from toastpay.models.schema_mapping import FileSchema

logger = structlog.get_logger()


def normalize_header(header_row: Row) -> list[str]:
    return [cell.strip().lower() for cell in header_row]


def find_column(header: list[str], name: str) -> Optional[int]:
    """Index of the first exact match of ``name`` in a normalized header."""
    try:
        return header.index(name)
    except ValueError:
        return None


def resolve_columns(header_row: Row, schema: FileSchema) -> ColumnIndex:
    """Map each of the schema's field names to a column position."""
    header = normalize_header(header_row)
    resolved: ColumnIndex = {}
    for field_name, spec in schema.columns.items():
        index = find_column(header, spec.name)
        if index is None:
            logger.info(
                "column_fallback",
                file_tag=schema.tag,
                column=spec.name,
                fallback=spec.fallback,
            )
            index = spec.fallback
        resolved[field_name] = index
    return resolved
