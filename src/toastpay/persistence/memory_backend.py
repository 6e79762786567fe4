"""In-memory backend for unit tests."""

from __future__ import annotations

from toastpay.core.exceptions import StorageError


class MemoryFileStore:
    """Dict-backed IFileStore for unit tests."""

    def __init__(self, files: dict[str, bytes] | None = None) -> None:
        self._files: dict[str, bytes] = dict(files or {})
        self.content_types: dict[str, str] = {}

    def read(self, path: str) -> bytes:
        try:
            return self._files[path]
        except KeyError as exc:
            raise StorageError(f"No such file {path!r}") from exc

    def write(self, path: str, data: bytes, content_type: str = "application/octet-stream") -> str:
        self._files[path] = data
        self.content_types[path] = content_type
        return path

    def exists(self, path: str) -> bool:
        return path in self._files
