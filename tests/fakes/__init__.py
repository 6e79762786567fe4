"""Shared test doubles, re-exported from the memory backend."""

from __future__ import annotations

from toastpay.persistence.memory_backend import MemoryFileStore

__all__ = ["MemoryFileStore"]
