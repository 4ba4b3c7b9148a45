"""Data models produced by lock-file discovery."""

from __future__ import annotations

from .package_record import PackageRecord
from .workspace_info import WorkspaceInfo

__all__ = [
    "PackageRecord",
    "WorkspaceInfo",
]
