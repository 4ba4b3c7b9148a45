"""lockfile-scanner core package.

This package provides reusable lock file discovery that is callable from both
the GitHub Action wrapper and the standalone CLI.
"""

from .discovery import ScanRootError, discover_lock_files
from .models import PackageRecord, WorkspaceInfo

__version__ = "0.1.0"

__all__ = [
    "PackageRecord",
    "ScanRootError",
    "WorkspaceInfo",
    "core",
    "discover_lock_files",
]
