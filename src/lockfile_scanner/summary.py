"""Human-readable rendering of the lock file report."""

from __future__ import annotations

from typing import Any

WORKSPACE_MARKER = " (🧩 workspace)"


def render_console(report: dict[str, Any]) -> list[str]:
    """Return one line per package, missing lock files first."""
    lines: list[str] = []
    for path in report.get("invalidPackageFiles", []):
        lines.append(f"🟥 {path} - lock file missing")

    for entry in report.get("validPackageFiles", []):
        marker = WORKSPACE_MARKER if entry.get("workspacePackage") else ""
        locks = ", ".join(entry.get("lockFilePaths", []))
        lines.append(f"🟦 {entry.get('packageJsonPath')} - {locks}{marker}")

    invalid = report.get("invalidPackages", 0)
    if invalid > 0:
        lines.append("")
        lines.append(f"🟥 {invalid} package(s) are missing lock files")

    return lines


def render_summary(report: dict[str, Any]) -> str:
    """Return a Markdown string with totals and a table of packages."""
    lines = []
    lines.append("# Lock file Summary")
    lines.append("")
    lines.append(
        f"Total packages: {report.get('totalPackages', 0)} | "
        f"Missing lock files: {report.get('invalidPackages', 0)}"
    )
    lines.append("")
    lines.append("| Package | Lock files | Workspace |")
    lines.append("| --- | --- | --- |")

    has_rows = False

    for path in report.get("invalidPackageFiles", []):
        lines.append(f"| {path} | missing | n/a |")
        has_rows = True

    for entry in report.get("validPackageFiles", []):
        locks = ", ".join(entry.get("lockFilePaths", []))
        workspace = "yes" if entry.get("workspacePackage") else "no"
        lines.append(f"| {entry.get('packageJsonPath')} | {locks} | {workspace} |")
        has_rows = True

    if not has_rows:
        lines.append("| (no packages found) | n/a | n/a |")

    return "\n".join(lines) + "\n"
