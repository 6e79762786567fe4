"""Column layouts for the two Toast export files."""

from __future__ import annotations

from pydantic import BaseModel, Field

from toastpay.models.department import (
    JOB_CODE_DEPARTMENTS,
    JOB_TITLE_DEPARTMENTS,
    Department,
)


class ColumnSpec(BaseModel):
    """A canonical header name and the position assumed when it is absent."""

    model_config = {"frozen": True}

    name: str  # lower-case, trimmed
    fallback: int


class FileSchema(BaseModel):
    """Everything needed to turn one export's rows into typed records."""

    model_config = {"frozen": True}

    tag: str  # prefix of every error message for this file
    employee_id: ColumnSpec
    department: ColumnSpec
    numeric: dict[str, ColumnSpec] = Field(default_factory=dict)
    department_map: dict[str, Department]
    unmapped_reason: str

    @property
    def columns(self) -> dict[str, ColumnSpec]:
        """All columns keyed by record field name."""
        return {
            "employee_id": self.employee_id,
            "department": self.department,
            **self.numeric,
        }


LABOR_SCHEMA = FileSchema(
    tag="LABOR",
    employee_id=ColumnSpec(name="employee id", fallback=14),
    department=ColumnSpec(name="job code", fallback=15),
    numeric={
        "regular_hours": ColumnSpec(name="regular hours", fallback=2),
        "overtime_hours": ColumnSpec(name="overtime hours", fallback=3),
        "normal_rate": ColumnSpec(name="normal rate", fallback=4),
    },
    department_map=JOB_CODE_DEPARTMENTS,
    unmapped_reason="Invalid Job Code",
)

TIPS_SCHEMA = FileSchema(
    tag="TIPS",
    employee_id=ColumnSpec(name="employee id", fallback=0),
    department=ColumnSpec(name="job", fallback=2),
    numeric={
        "tips": ColumnSpec(name="tips and gratuity after pooling", fallback=18),
    },
    department_map=JOB_TITLE_DEPARTMENTS,
    unmapped_reason="Invalid Job",
)
