"""Workspace-aware lock file discovery.

Walks a source tree depth-first (pre-order) and reports, for every
``package.json``, the lock file(s) that govern it. Workspace roots are
registered as they are visited so that descendants can be matched against their
patterns; a member package without a local lock file inherits the lock files of
its nearest ancestor that has any.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from collections.abc import Collection

from .file_system import FileSystem
from .globs import test_path
from .models import PackageRecord, WorkspaceInfo
from .workspaces import MANIFEST_FILENAME, read_workspace_patterns

logger = logging.getLogger(__name__)

LOCK_FILES = (
    "package-lock.json",  # npm
    "yarn.lock",  # yarn
    "pnpm-lock.yaml",  # pnpm
    "bun.lockb",  # bun
)

SKIP_DIRS = frozenset(
    {"node_modules", ".git", "dist", "build", "out", "coverage", ".next", ".turbo"}
)


class ScanRootError(RuntimeError):
    """Raised when the scan root itself cannot be listed."""


def _lock_files_in(entries: list[str]) -> list[str]:
    return [entry for entry in entries if entry in LOCK_FILES]


def _is_within(path: str, root: str) -> bool:
    if path == root:
        return True
    prefix = root if root.endswith(os.sep) else root + os.sep
    return path.startswith(prefix)


def _relative(path: str, root: str) -> str:
    return os.path.relpath(path, root).replace(os.sep, "/")


def find_lock_files_in_parents(
    fs: FileSystem, dir_path: str, root_path: str
) -> tuple[list[str], list[str]]:
    """Return (names, absolute paths) of the lock files closest to ``dir_path``.

    Walks from ``dir_path`` upwards and stops at the first directory that has
    any lock file, never leaving ``root_path``. Both lists are empty when no
    directory up to and including the root has one.
    """
    current = dir_path
    while _is_within(current, root_path):
        try:
            entries = fs.readdir(current)
        except OSError as exc:
            logger.debug("Cannot list %s while searching for lock files: %s", current, exc)
            entries = []

        locks = _lock_files_in(entries)
        if locks:
            return locks, [os.path.join(current, name) for name in locks]

        parent = os.path.dirname(current)
        if parent == current:
            break
        current = parent

    return [], []


def is_path_in_workspace(package_path: str, workspace: WorkspaceInfo) -> bool:
    """True when the manifest at ``package_path`` is a member of ``workspace``."""
    relative_path = _relative(package_path, workspace.root_path)
    if not relative_path or relative_path == "." or relative_path.startswith("../"):
        return False

    package_dir = relative_path.rsplit("/", 1)[0] if "/" in relative_path else ""
    if not package_dir:
        # The workspace root's own manifest
        return False
    return test_path(package_dir, workspace.patterns)


@dataclass
class _ScanState:
    """Registry and results owned by a single discovery call."""

    root_path: str
    fs: FileSystem
    skip_dirs: Collection[str]
    workspaces: list[WorkspaceInfo] = field(default_factory=list)
    results: list[PackageRecord] = field(default_factory=list)

    def is_workspace_member(self, package_path: str) -> bool:
        return any(is_path_in_workspace(package_path, ws) for ws in self.workspaces)

    def scan_directory(self, dir_path: str) -> None:
        try:
            entries = self.fs.readdir(dir_path)
        except OSError as exc:
            if dir_path == self.root_path:
                raise ScanRootError(f"Cannot read scan root {dir_path}: {exc}") from exc
            logger.warning("Skipping unreadable directory %s: %s", dir_path, exc)
            return

        has_package_json = MANIFEST_FILENAME in entries
        found_lock_files = _lock_files_in(entries)
        found_lock_file_paths = [os.path.join(dir_path, name) for name in found_lock_files]

        if has_package_json and found_lock_files:
            patterns = read_workspace_patterns(self.fs, dir_path, entries)
            if patterns is not None:
                logger.debug("Workspace root %s with patterns %s", dir_path, patterns)
                self.workspaces.append(WorkspaceInfo(root_path=dir_path, patterns=tuple(patterns)))

        if has_package_json:
            self._record(dir_path, found_lock_file_paths)

        for entry in entries:
            if entry in self.skip_dirs:
                continue
            entry_path = os.path.join(dir_path, entry)
            if self.fs.is_directory(entry_path):
                self.scan_directory(entry_path)

    def _record(self, dir_path: str, lock_file_paths: list[str]) -> None:
        package_path = os.path.join(dir_path, MANIFEST_FILENAME)
        is_member = self.is_workspace_member(package_path)

        # Members without their own lock file use the nearest ancestor's
        if is_member and not lock_file_paths:
            _, lock_file_paths = find_lock_files_in_parents(self.fs, dir_path, self.root_path)

        self.results.append(
            PackageRecord.from_paths(
                _relative(package_path, self.root_path),
                [_relative(p, self.root_path) for p in lock_file_paths],
                workspace_package=is_member,
            )
        )


def discover_lock_files(
    root_path: str,
    fs: FileSystem,
    skip_dirs: Collection[str] = SKIP_DIRS,
) -> list[PackageRecord]:
    """Find every package.json under ``root_path`` and the lock files governing it.

    Records are returned in pre-order traversal order, siblings in the order
    the filesystem lists them. Directories named in ``skip_dirs`` are never
    entered.

    Raises:
        ScanRootError: If ``root_path`` itself cannot be listed.
    """
    root_path = os.path.normpath(root_path)
    state = _ScanState(root_path=root_path, fs=fs, skip_dirs=skip_dirs)
    state.scan_directory(root_path)
    return state.results
