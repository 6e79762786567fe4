"""Application configuration using pydantic-settings with grouped env prefixes."""

from __future__ import annotations

from typing import Literal

from pydantic_settings import BaseSettings


class IngestConfig(BaseSettings):
    """Source file parsing configuration."""

    model_config = {"env_prefix": "TOASTPAY_INGEST_"}

    max_rows: int = 5000  # header row counts against the cap
    encoding: str = "utf-8-sig"


class ExportConfig(BaseSettings):
    """Ledger CSV export configuration."""

    model_config = {"env_prefix": "TOASTPAY_EXPORT_"}

    filename: str = "processed_payroll.csv"


class S3Config(BaseSettings):
    """S3 file storage configuration."""

    model_config = {"env_prefix": "TOASTPAY_S3_"}

    bucket: str = "toastpay-payroll-files"
    region: str = "us-east-1"
    endpoint_url: str | None = None  # LocalStack override


class AppSettings(BaseSettings):
    """Root application settings aggregating all sub-configs."""

    model_config = {"env_prefix": "TOASTPAY_"}

    environment: Literal["dev", "uat", "prod"] = "dev"
    log_level: str = "INFO"
    json_logs: bool = False

    ingest: IngestConfig = IngestConfig()
    export: ExportConfig = ExportConfig()
    s3: S3Config = S3Config()
