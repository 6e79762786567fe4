"""Filesystem backend implementing IFileStore."""

from __future__ import annotations

from pathlib import Path

from toastpay.core.exceptions import StorageError


class LocalFileStore:
    """IFileStore over local paths, resolved against ``root``."""

    def __init__(self, root: str | Path = ".") -> None:
        self._root = Path(root)

    def _resolve(self, path: str) -> Path:
        return self._root / path

    def read(self, path: str) -> bytes:
        try:
            return self._resolve(path).read_bytes()
        except OSError as exc:
            raise StorageError(f"Read failed for {path!r}: {exc}") from exc

    def write(self, path: str, data: bytes, content_type: str = "application/octet-stream") -> str:
        target = self._resolve(path)
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(data)
        except OSError as exc:
            raise StorageError(f"Write failed for {path!r}: {exc}") from exc
        return str(target)
