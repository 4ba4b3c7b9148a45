"""Core scanning entrypoints.

This module MUST NOT contain GitHub-specific dependencies so it can be used by
both the Action wrapper and the standalone CLI. The only Actions integration is
the optional ``$GITHUB_STEP_SUMMARY`` file, written when the variable is set.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from typing import Any

from .config import Settings
from .discovery import discover_lock_files
from .file_system import FileSystem, LocalFileSystem
from .globs import filter_paths
from .report import aggregate, save_report
from .summary import render_console, render_summary
from .validators.report_schema import validate_document

logger = logging.getLogger(__name__)

STEP_SUMMARY_ENV_VAR = "GITHUB_STEP_SUMMARY"


def validate_lock_files(
    target_path: str,
    artifacts_path: str,
    *,
    fs: FileSystem | None = None,
    settings: Settings | None = None,
    include: Iterable[str] | None = None,
) -> dict[str, Any]:
    """Check that every package.json under ``target_path`` has a lock file.

    Params:
        target_path: directory to scan
        artifacts_path: directory receiving the JSON report
        fs: filesystem to use (defaults to the local disk)
        settings: skip set and report file name (defaults to ``Settings()``)
        include: optional glob patterns (``!`` to negate) matched against each
            package.json path, relative to ``target_path``, to restrict the report

    Returns: dict report matching ``schemas/lock-files-report.schema.json``

    Raises:
        ScanRootError: if ``target_path`` cannot be listed.
    """
    fs = fs or LocalFileSystem()
    settings = settings or Settings()
    target_path = os.path.abspath(target_path)
    artifacts_path = os.path.abspath(artifacts_path)

    logger.info("Checking lock files in: %s", target_path)

    records = discover_lock_files(target_path, fs, skip_dirs=settings.skip_directories)

    if include is not None:
        kept = set(filter_paths([r.package_json_path for r in records], include))
        records = [r for r in records if r.package_json_path in kept]

    report = aggregate(records)
    validate_document(report)

    print("\n".join(render_console(report)))

    output_file_path = os.path.join(artifacts_path, settings.report_filename)
    save_report(report, output_file_path, fs)
    print(f"\n✅ Validation report saved to: {output_file_path}")

    _append_step_summary(report)

    return report


def _append_step_summary(report: dict[str, Any]) -> None:
    summary_path = os.getenv(STEP_SUMMARY_ENV_VAR, "").strip()
    if not summary_path:
        return
    try:
        with open(summary_path, "a", encoding="utf-8") as fh:
            fh.write(render_summary(report))
    except OSError as exc:
        # The summary is a convenience; the JSON report is already written
        logger.warning("Could not write step summary to %s: %s", summary_path, exc)
