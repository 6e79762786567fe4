"""Pluggable file stores behind the IFileStore protocol."""

from __future__ import annotations

from typing import Literal

from toastpay.core.config import AppSettings
from toastpay.core.protocols import IFileStore
from toastpay.persistence.local_backend import LocalFileStore
from toastpay.persistence.s3_backend import S3FileStore


def create_file_store(
    settings: AppSettings | None = None,
    backend: Literal["local", "s3"] = "local",
) -> IFileStore:
    """Create the file store used for both source reads and the ledger write."""
    if settings is None:
        settings = AppSettings()

    if backend == "s3":
        return S3FileStore(
            bucket=settings.s3.bucket,
            region=settings.s3.region,
            endpoint_url=settings.s3.endpoint_url,
        )
    return LocalFileStore()
