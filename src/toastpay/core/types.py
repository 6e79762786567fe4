"""Type aliases used across ToastPay."""

from __future__ import annotations

Row = list[str]
ColumnIndex = dict[str, int]
EmployeeId = str
