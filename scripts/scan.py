#!/usr/bin/env python3
"""Local entrypoint to run the scanner outside of GitHub Actions.

Usage:
  python scripts/scan.py --target . [--artifacts artifacts] [--warn-only]

This calls the same ``validate_lock_files`` used by the Action wrapper.
"""

from __future__ import annotations

from lockfile_scanner.cli import main


if __name__ == "__main__":
    raise SystemExit(main())
