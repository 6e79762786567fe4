"""ToastPay exception hierarchy."""

from __future__ import annotations


class ToastPayError(Exception):
    """Base exception for all ToastPay errors."""


class RowValidationError(ToastPayError):
    """A data row failed validation; aborts the whole file."""

    def __init__(self, tag: str, row_number: int, reason: str) -> None:
        self.tag = tag
        self.row_number = row_number
        self.reason = reason
        super().__init__(f"[{tag}] {reason} for row {row_number}\nPlease correct and retry")


class MissingIdentifier(RowValidationError):
    """Employee id is blank on a data row."""

    def __init__(self, tag: str, row_number: int) -> None:
        super().__init__(tag, row_number, "Employee ID missing")


class UnmappedDepartment(RowValidationError):
    """Job code or job title has no department tag."""

    def __init__(self, tag: str, row_number: int, reason: str, value: str) -> None:
        self.value = value
        super().__init__(tag, row_number, reason)


class StorageError(ToastPayError):
    """Reading a source file or writing the ledger failed."""


class LedgerAborted(ToastPayError):
    """One or both source files failed; nothing was merged or exported."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        super().__init__("\n\n".join(errors))
