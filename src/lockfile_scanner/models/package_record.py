"""Per-manifest discovery result."""

from __future__ import annotations

from dataclasses import dataclass
from collections.abc import Iterable


@dataclass(frozen=True)
class PackageRecord:
    """Lock files governing one ``package.json``.

    Paths are relative to the scan root and use forward slashes.
    """

    package_json_path: str
    lock_file_paths: tuple[str, ...]
    workspace_package: bool = False

    def __post_init__(self) -> None:
        if not self.package_json_path:
            raise ValueError("package_json_path must be non-empty")
        if "\\" in self.package_json_path or any("\\" in p for p in self.lock_file_paths):
            raise ValueError("Paths must use forward slashes")

    @property
    def has_lock_file(self) -> bool:
        return bool(self.lock_file_paths)

    def to_dict(self) -> dict[str, object]:
        return {
            "packageJsonPath": self.package_json_path,
            "lockFilePaths": list(self.lock_file_paths),
            "workspacePackage": self.workspace_package,
        }

    @classmethod
    def from_paths(
        cls,
        package_json_path: str,
        lock_file_paths: Iterable[str],
        *,
        workspace_package: bool = False,
    ) -> PackageRecord:
        return cls(
            package_json_path=package_json_path,
            lock_file_paths=tuple(lock_file_paths),
            workspace_package=workspace_package,
        )
