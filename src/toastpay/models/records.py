"""Typed rows produced by the labor and tips builders."""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel

from toastpay.core.types import EmployeeId
from toastpay.models.department import Department


class HoursRecord(BaseModel):
    """One labor summary row: an employee's hours under one job code."""

    model_config = {"frozen": True}

    employee_id: EmployeeId
    regular_hours: Decimal = Decimal("0")
    overtime_hours: Decimal = Decimal("0")
    dept: Department
    normal_rate: Decimal = Decimal("0")


class TipsRecord(BaseModel):
    """One tips row: an employee's tips and gratuity after pooling."""

    model_config = {"frozen": True}

    employee_id: EmployeeId
    dept: Department
    tips: Decimal = Decimal("0")
