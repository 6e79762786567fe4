"""Protocol interfaces for the collaborators around the ledger core.

Structural typing, no inheritance required, easy to test with isinstance().
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class IFileStore(Protocol):
    """Supplies raw source file content and accepts the exported ledger."""

    def read(self, path: str) -> bytes: ...

    def write(self, path: str, data: bytes, content_type: str = "application/octet-stream") -> str: ...
