"""Read workspace glob patterns from pnpm-workspace.yaml or package.json."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from enum import Enum
from collections.abc import Callable, Sequence
from typing import Any

import yaml

from .file_system import FileSystem

logger = logging.getLogger(__name__)

MANIFEST_FILENAME = "package.json"
WORKSPACE_MANIFEST_FILENAME = "pnpm-workspace.yaml"


class LookupStatus(str, Enum):
    """Outcome of looking for patterns in a single source file."""

    ABSENT = "absent"  # file missing/unreadable, or no workspace field
    INVALID = "invalid"  # file present but could not be parsed
    FOUND = "found"


@dataclass(frozen=True, slots=True)
class PatternLookup:
    status: LookupStatus
    patterns: tuple[str, ...] = ()
    reason: str = ""


def _absent(reason: str = "") -> PatternLookup:
    return PatternLookup(LookupStatus.ABSENT, reason=reason)


def _load(fs: FileSystem, path: str, loader: Callable[[str], Any]) -> tuple[Any, PatternLookup | None]:
    """Read and parse ``path``; on failure return the lookup describing why."""
    try:
        content = fs.read_file(path)
    except (OSError, UnicodeDecodeError) as exc:
        return None, _absent(f"cannot read {path}: {exc}")

    try:
        return loader(content), None
    except (ValueError, yaml.YAMLError) as exc:
        # json.JSONDecodeError is a ValueError
        return None, PatternLookup(LookupStatus.INVALID, reason=f"cannot parse {path}: {exc}")


def _as_patterns(value: Any) -> tuple[str, ...] | None:
    if not isinstance(value, list):
        return None
    return tuple(item for item in value if isinstance(item, str))


def lookup_pnpm_workspace(fs: FileSystem, dir_path: str) -> PatternLookup:
    """Look for a non-empty ``packages`` list in pnpm-workspace.yaml."""
    data, failure = _load(fs, os.path.join(dir_path, WORKSPACE_MANIFEST_FILENAME), yaml.safe_load)
    if failure is not None:
        return failure
    if not isinstance(data, dict):
        return _absent("pnpm-workspace.yaml is not a mapping")

    patterns = _as_patterns(data.get("packages"))
    if not patterns:
        return _absent("pnpm-workspace.yaml has no packages")
    return PatternLookup(LookupStatus.FOUND, patterns)


def lookup_package_json_workspaces(fs: FileSystem, dir_path: str) -> PatternLookup:
    """Look for ``workspaces`` (list, or ``{"packages": [...]}``) in package.json."""
    data, failure = _load(fs, os.path.join(dir_path, MANIFEST_FILENAME), json.loads)
    if failure is not None:
        return failure
    if not isinstance(data, dict):
        return _absent("package.json is not an object")

    workspaces = data.get("workspaces")
    if isinstance(workspaces, dict):
        workspaces = workspaces.get("packages")

    patterns = _as_patterns(workspaces)
    if patterns is None:
        return _absent("package.json declares no workspaces")
    return PatternLookup(LookupStatus.FOUND, patterns)


def read_workspace_patterns(
    fs: FileSystem, dir_path: str, entry_names: Sequence[str]
) -> list[str] | None:
    """Return the workspace patterns declared in ``dir_path``, or None.

    pnpm-workspace.yaml takes precedence over package.json. Read and parse
    failures never propagate: they are logged and the next source is tried.
    None means "not a workspace root"; an empty list means a workspace root
    that declares no patterns.
    """
    sources: list[tuple[str, Callable[[FileSystem, str], PatternLookup]]] = [
        (WORKSPACE_MANIFEST_FILENAME, lookup_pnpm_workspace),
        (MANIFEST_FILENAME, lookup_package_json_workspaces),
    ]
    for filename, lookup in sources:
        if filename not in entry_names:
            continue
        result = lookup(fs, dir_path)
        if result.status is LookupStatus.FOUND:
            return list(result.patterns)
        logger.debug("No workspace patterns from %s (%s): %s", filename, result.status.value, result.reason)

    return None
