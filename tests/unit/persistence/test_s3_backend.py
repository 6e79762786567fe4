"""Unit tests for S3FileStore using moto."""

from __future__ import annotations

import asyncio

import boto3
import pytest
from moto import mock_aws

from toastpay.core.exceptions import StorageError
from toastpay.models.ledger import RunStatus
from toastpay.persistence.s3_backend import S3FileStore
from toastpay.pipeline import process_files

BUCKET = "test-payroll-files"


@pytest.fixture
def s3_backend():
    with mock_aws():
        client = boto3.client("s3", region_name="us-east-1")
        client.create_bucket(Bucket=BUCKET)
        yield S3FileStore(bucket=BUCKET, region="us-east-1")


class TestWrite:
    def test_write_returns_uri(self, s3_backend):
        result = s3_backend.write("exports/ledger.csv", b"a,b,c")
        assert result == f"s3://{BUCKET}/exports/ledger.csv"

    def test_write_stores_bytes(self, s3_backend):
        s3_backend.write("test/data.bin", b"\x00\x01\x02")
        assert s3_backend.read("test/data.bin") == b"\x00\x01\x02"


class TestRead:
    def test_read_returns_bytes(self, s3_backend):
        s3_backend.write("dropzone/labor.csv", b"Employee Id")
        assert s3_backend.read("dropzone/labor.csv") == b"Employee Id"

    def test_read_missing_key_raises(self, s3_backend):
        with pytest.raises(StorageError):
            s3_backend.read("does/not/exist.csv")


class TestProcessFromBucket:
    def test_ledger_written_to_bucket(self, s3_backend, labor_csv, tips_csv):
        s3_backend.write("dropzone/labor.csv", labor_csv.encode("utf-8"))
        s3_backend.write("dropzone/tips.csv", tips_csv.encode("utf-8"))
        result = asyncio.run(process_files(
            s3_backend, "dropzone/labor.csv", "dropzone/tips.csv", "exports/ledger.csv",
        ))
        assert result.status is RunStatus.COMPLETED
        body = s3_backend.read("exports/ledger.csv").decode("utf-8")
        assert body.startswith("employee_id,type,hours,rate,amount,dept\n")
        assert len(body.splitlines()) == 9
