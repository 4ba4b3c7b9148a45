"""Command-line entrypoint for the lock file scanner.

Usage:
  lockfile-scanner --target . [--artifacts artifacts] [--include 'apps/**'] [--warn-only]

Relative paths are resolved against ``$INIT_CWD`` when set (as npm does for
scripts), otherwise against the current directory.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from dataclasses import replace

from .config import ConfigError, load_settings
from .core import validate_lock_files
from .discovery import ScanRootError

EXIT_MISSING_LOCK_FILES = 10


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Check that every package.json has a governing lock file."
    )
    parser.add_argument("--target", default=".", help="Directory to scan")
    parser.add_argument(
        "--artifacts", default="artifacts", help="Directory receiving the JSON report"
    )
    parser.add_argument("--config", default=None, help="Path to a JSON settings file")
    parser.add_argument(
        "--include",
        action="append",
        default=None,
        help="Glob matched against package.json paths; prefix with ! to exclude. Repeatable.",
    )
    parser.add_argument("--warn-only", action="store_true")
    parser.add_argument("--verbose", "-v", action="store_true")
    return parser.parse_args(argv)


def _base_path() -> str:
    return os.environ.get("INIT_CWD") or os.getcwd()


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        settings = load_settings(args.config)
    except ConfigError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1
    if args.warn_only:
        settings = replace(settings, warn_only=True)

    base_path = _base_path()
    target_path = os.path.join(base_path, args.target)
    artifacts_path = os.path.join(base_path, args.artifacts)

    try:
        report = validate_lock_files(
            target_path, artifacts_path, settings=settings, include=args.include
        )
    except ScanRootError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1

    if not report["succeeded"] and not settings.warn_only:
        return EXIT_MISSING_LOCK_FILES

    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
