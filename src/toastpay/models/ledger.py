"""Ledger output models."""

from __future__ import annotations

from decimal import Decimal
from enum import StrEnum
from typing import Optional

from pydantic import BaseModel, Field

from toastpay.models.department import Department


class LineType(StrEnum):
    REG = "REG"
    OT = "OT"
    TPCRRS = "TPCRRS"  # pooled tips


class LedgerLine(BaseModel):
    """One pay-type contribution for one employee in the exported CSV."""

    model_config = {"frozen": True}

    employee_id: Optional[int]  # None when the source id has no leading digits
    type: LineType
    hours: Optional[Decimal] = None
    rate: Optional[Decimal] = None
    amount: Optional[Decimal] = None
    dept: Department


class RunStatus(StrEnum):
    COMPLETED = "COMPLETED"
    FAILED = "FAILED"


class RunResult(BaseModel):
    """Outcome of one labor + tips processing run."""

    status: RunStatus
    hours_record_count: int = 0
    tips_record_count: int = 0
    line_count: int = 0
    output_path: str = ""
    errors: list[str] = Field(default_factory=list)
