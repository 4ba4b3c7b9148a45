"""Report aggregation and persistence."""

from __future__ import annotations

import json
import os
from collections.abc import Iterable
from typing import Any

from .file_system import FileSystem
from .models import PackageRecord

LOCK_FILES_REPORT_FILENAME = "lock-files-report.json"


def aggregate(records: Iterable[PackageRecord]) -> dict[str, Any]:
    """Aggregate discovery records into a single schema-compatible report.

    A package is invalid when no lock file governs it. ``validPackageFiles``
    keeps the full records (in discovery order) while ``invalidPackageFiles``
    only lists the manifest paths.
    """
    records = list(records)
    valid = [r for r in records if r.has_lock_file]
    invalid_paths = [r.package_json_path for r in records if not r.has_lock_file]

    report: dict[str, Any] = {
        "succeeded": not invalid_paths,
        "totalPackages": len(records),
        "invalidPackages": len(invalid_paths),
        "validPackageFiles": [r.to_dict() for r in valid],
        "invalidPackageFiles": invalid_paths,
    }

    return report


def save_report(report: dict[str, Any], output_path: str, fs: FileSystem) -> str:
    """Write ``report`` as indented JSON, creating the parent directory first."""
    output_dir = os.path.dirname(output_path)
    if output_dir:
        fs.mkdir(output_dir, parents=True)

    fs.write_file(output_path, json.dumps(report, indent=2, ensure_ascii=False))
    return output_path
