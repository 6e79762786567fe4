"""Tests for the tips & gratuity builder."""

from __future__ import annotations

from decimal import Decimal

import pytest

from toastpay.core.exceptions import MissingIdentifier, UnmappedDepartment
from toastpay.ingest.tips import build_tips_records
from toastpay.ingest.tokenizer import tokenize
from toastpay.models.department import Department

HEADER = "Employee Id,Employee,Job,Tips And Gratuity After Pooling"


def _rows(*lines: str) -> list[list[str]]:
    return tokenize("\n".join((HEADER,) + lines) + "\n")


class TestBuild:
    def test_sample_export(self, tips_csv):
        records = build_tips_records(tokenize(tips_csv))
        assert [(r.employee_id, r.dept, r.tips) for r in records] == [
            ("7", Department.BARTEND, Decimal("123.455")),
            ("8", Department.RUNNER, Decimal("45.1")),
        ]

    def test_every_job_title_maps(self):
        titles = ["Food Runner", "Server", "Bartender", "Host", "Steward", "Training Server"]
        records = build_tips_records(_rows(*[f"{i},x,{t},1" for i, t in enumerate(titles, 1)]))
        assert [r.dept for r in records] == [
            Department.RUNNER,
            Department.SERVER,
            Department.BARTEND,
            Department.HOST,
            Department.STEWARD,
            Department.TSERVER,
        ]

    def test_unparsable_tips_default_to_zero(self):
        assert build_tips_records(_rows("7,x,Host,"))[0].tips == 0

    def test_fallback_tips_column(self):
        header = "Employee Id,Employee,Job"
        row = ["7", "x", "Server"] + [""] * 15 + ["12.5"]
        records = build_tips_records(tokenize(header + "\n" + ",".join(row)))
        assert records[0].tips == Decimal("12.5")


class TestValidation:
    def test_missing_employee_id(self):
        with pytest.raises(MissingIdentifier) as exc_info:
            build_tips_records(_rows(",x,Server,1"))
        assert str(exc_info.value) == "[TIPS] Employee ID missing for row 2\nPlease correct and retry"

    def test_job_titles_are_case_sensitive(self):
        with pytest.raises(UnmappedDepartment) as exc_info:
            build_tips_records(_rows("7,x,Server,1", "8,x,bartender,1"))
        assert exc_info.value.row_number == 3
        assert str(exc_info.value) == "[TIPS] Invalid Job for row 3\nPlease correct and retry"

    def test_job_code_is_not_a_job_title(self):
        with pytest.raises(UnmappedDepartment):
            build_tips_records(_rows("7,x,212,1"))
