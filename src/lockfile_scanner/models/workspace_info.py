"""Workspace root model."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class WorkspaceInfo:
    """A directory that declares workspace patterns and owns a lock file."""

    root_path: str
    patterns: tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.root_path:
            raise ValueError("Workspace root path must be non-empty")
        if any(not isinstance(pattern, str) for pattern in self.patterns):
            raise ValueError("Workspace patterns must be strings")
