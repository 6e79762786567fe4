"""Run coordinator: build both exports, join, merge, export.

Each file is built independently and reports either its records or its one
error message. Merging and export only happen once both results are present
and neither carries an error.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable, Sequence
from typing import Any, NamedTuple

import structlog

from toastpay.core.config import AppSettings
from toastpay.core.exceptions import LedgerAborted, RowValidationError, StorageError
from toastpay.core.protocols import IFileStore
from toastpay.core.types import Row
from toastpay.ingest.hours import build_hours_records
from toastpay.ingest.rows import MAX_ROWS
from toastpay.ingest.tips import build_tips_records
from toastpay.ingest.tokenizer import tokenize
from toastpay.ledger.export import render_csv
from toastpay.ledger.merge import merge
from toastpay.models.ledger import LedgerLine, RunResult, RunStatus
from toastpay.models.schema_mapping import LABOR_SCHEMA, TIPS_SCHEMA

logger = structlog.get_logger()

Builder = Callable[[list[Row], int], Sequence[Any]]


class FileOutcome(NamedTuple):
    """Result slot for one source file."""

    records: Sequence[Any]
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def build_file(builder: Builder, text: str, max_rows: int = MAX_ROWS) -> FileOutcome:
    try:
        return FileOutcome(builder(tokenize(text), max_rows))
    except RowValidationError as exc:
        return FileOutcome([], str(exc))


def join_outcomes(hours: FileOutcome, tips: FileOutcome) -> list[LedgerLine]:
    """Merge once both slots are filled; raise if either file failed."""
    errors = [o.error for o in (hours, tips) if o.error is not None]
    if errors:
        raise LedgerAborted(errors)
    return merge(hours.records, tips.records)


def build_ledger(hours_text: str, tips_text: str, max_rows: int = MAX_ROWS) -> list[LedgerLine]:
    """Build the ledger from already-decoded file contents."""
    return join_outcomes(
        build_file(build_hours_records, hours_text, max_rows),
        build_file(build_tips_records, tips_text, max_rows),
    )


async def _load(
    store: IFileStore, path: str, tag: str, builder: Builder, settings: AppSettings,
) -> FileOutcome:
    try:
        data = await asyncio.to_thread(store.read, path)
        text = data.decode(settings.ingest.encoding)
    except (StorageError, UnicodeDecodeError) as exc:
        logger.warning("source_read_failed", file_tag=tag, path=path, error=str(exc))
        return FileOutcome([], f"[{tag}] Could not read {path}: {exc}\nPlease correct and retry")
    return build_file(builder, text, settings.ingest.max_rows)


async def process_files(
    store: IFileStore,
    hours_path: str,
    tips_path: str,
    output_path: str | None = None,
    settings: AppSettings | None = None,
) -> RunResult:
    """Read both exports concurrently, then export the ledger if both are valid.

    On any failure nothing is written and the result carries every message.
    """
    if settings is None:
        settings = AppSettings()
    if output_path is None:
        output_path = settings.export.filename

    hours, tips = await asyncio.gather(
        _load(store, hours_path, LABOR_SCHEMA.tag, build_hours_records, settings),
        _load(store, tips_path, TIPS_SCHEMA.tag, build_tips_records, settings),
    )

    try:
        lines = join_outcomes(hours, tips)
    except LedgerAborted as exc:
        logger.warning("ledger_aborted", error_count=len(exc.errors))
        return RunResult(
            status=RunStatus.FAILED,
            hours_record_count=len(hours.records),
            tips_record_count=len(tips.records),
            errors=exc.errors,
        )

    csv_text = render_csv(lines)
    written = await asyncio.to_thread(
        store.write, output_path, csv_text.encode("utf-8"), "text/csv",
    )
    logger.info("ledger_exported", path=written, line_count=len(lines))
    return RunResult(
        status=RunStatus.COMPLETED,
        hours_record_count=len(hours.records),
        tips_record_count=len(tips.records),
        line_count=len(lines),
        output_path=written,
    )
