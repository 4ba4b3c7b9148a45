"""CLI entrypoint for validating a lock files report against its JSON schema."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from collections.abc import Iterable
from typing import Any

from jsonschema import Draft202012Validator

_PACKAGE_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_SCHEMA = _PACKAGE_ROOT / "schemas" / "lock-files-report.schema.json"


class ReportValidationError(ValueError):
    """Raised when a report does not conform to the schema."""


def _load_json(path: Path) -> Any:
    return json.loads(path.read_text(encoding="utf-8"))


def _format_errors(errors: Iterable) -> str:
    messages = []
    for error in errors:
        pointer = "/".join(str(p) for p in error.path)
        messages.append(f"- {pointer or '<root>'}: {error.message}")
    return "\n".join(messages)


def validate_document(document: Any, schema_path: Path = DEFAULT_SCHEMA) -> None:
    """Validate an in-memory report, raising ReportValidationError on mismatch."""
    schema = _load_json(schema_path)
    validator = Draft202012Validator(schema)
    errors = sorted(validator.iter_errors(document), key=lambda e: list(e.path))
    if errors:
        raise ReportValidationError("\n" + _format_errors(errors))


def validate_report(input_path: Path, schema_path: Path = DEFAULT_SCHEMA) -> None:
    validate_document(_load_json(input_path), schema_path)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "input",
        type=Path,
        help="Path to the lock files report to validate",
    )
    parser.add_argument(
        "--schema",
        type=Path,
        default=DEFAULT_SCHEMA,
        help="Path to the JSON schema used for validation",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    try:
        validate_report(args.input, args.schema)
    except FileNotFoundError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1
    except json.JSONDecodeError as exc:
        print(f"ERROR: Failed to read JSON: {exc}", file=sys.stderr)
        return 1
    except ReportValidationError as exc:
        print(f"ERROR: Report failed validation:{exc}", file=sys.stderr)
        return 1

    print(f"Report {args.input} is valid against {args.schema}")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
