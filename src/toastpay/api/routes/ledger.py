"""Ledger endpoint: upload both exports, download the merged CSV."""

from __future__ import annotations

import structlog
from fastapi import APIRouter, File, Request, UploadFile
from fastapi.responses import JSONResponse, Response

from toastpay.core.config import AppSettings
from toastpay.core.exceptions import LedgerAborted
from toastpay.ledger.export import render_csv
from toastpay.pipeline import build_ledger

router = APIRouter(tags=["ledger"])
logger = structlog.get_logger()


def _settings(request: Request) -> AppSettings:
    return getattr(request.app.state, "settings", None) or AppSettings()


async def _decode(upload: UploadFile, tag: str, encoding: str) -> tuple[str | None, str | None]:
    data = await upload.read()
    try:
        return data.decode(encoding), None
    except UnicodeDecodeError as exc:
        return None, f"[{tag}] Could not read {upload.filename}: {exc}\nPlease correct and retry"


@router.post("/ledger")
async def create_ledger(
    request: Request,
    hours: UploadFile = File(...),
    tips: UploadFile = File(...),
) -> Response:
    """Return the ledger CSV as a download, or 422 with the validation messages."""
    settings = _settings(request)
    encoding = settings.ingest.encoding

    hours_text, hours_error = await _decode(hours, "LABOR", encoding)
    tips_text, tips_error = await _decode(tips, "TIPS", encoding)
    decode_errors = [e for e in (hours_error, tips_error) if e is not None]
    if decode_errors:
        return JSONResponse(status_code=422, content={"errors": decode_errors})

    try:
        lines = build_ledger(hours_text, tips_text, settings.ingest.max_rows)
    except LedgerAborted as exc:
        logger.warning("ledger_aborted", error_count=len(exc.errors))
        return JSONResponse(status_code=422, content={"errors": exc.errors})

    logger.info("ledger_exported", line_count=len(lines), filename=settings.export.filename)
    return Response(
        content=render_csv(lines),
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{settings.export.filename}"'},
    )
