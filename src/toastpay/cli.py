"""Command-line entry point: merge a labor export and a tips export into a ledger CSV.

Usage:
    toastpay --hours labor_summary.csv --tips tips.csv --output processed_payroll.csv
"""

from __future__ import annotations

import argparse
import asyncio
import sys

from toastpay.core.config import AppSettings
from toastpay.core.exceptions import StorageError
from toastpay.core.logging import setup_logging
from toastpay.models.ledger import RunStatus
from toastpay.persistence import create_file_store
from toastpay.pipeline import process_files


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Build a payroll ledger from Toast labor and tips exports")
    parser.add_argument("--hours", required=True, help="Employee labor summary CSV")
    parser.add_argument("--tips", required=True, help="Employee tips & gratuity CSV")
    parser.add_argument("--output", default=None, help="Ledger CSV path (default: processed_payroll.csv)")
    parser.add_argument("--backend", choices=["local", "s3"], default="local", help="Where paths live")
    parser.add_argument("--log-level", default=None, help="Override TOASTPAY_LOG_LEVEL")
    parser.add_argument("--json-logs", action="store_true", help="Emit JSON log lines")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = AppSettings()
    setup_logging(
        log_level=args.log_level or settings.log_level,
        json_output=args.json_logs or settings.json_logs,
    )

    store = create_file_store(settings, backend=args.backend)
    try:
        result = asyncio.run(process_files(store, args.hours, args.tips, args.output, settings))
    except StorageError as exc:
        print(str(exc), file=sys.stderr)
        return 1

    if result.status is RunStatus.FAILED:
        for message in result.errors:
            print(message, file=sys.stderr)
        return 1

    print(result.output_path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
