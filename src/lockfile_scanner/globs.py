"""Glob matching for workspace patterns and path filters.

Patterns follow the npm/pnpm workspace conventions: ``**`` crosses directory
separators and ``{a,b}`` expands. Wildcards also match dotfiles. A pattern
without a separator is matched against the whole path, never the basename. A leading ``!``
negates a pattern; negation is resolved by ``test_path``, not by ``match``.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable

from wcmatch import glob as wcglob

logger = logging.getLogger(__name__)

NEGATION = "!"
MATCH_FLAGS = wcglob.GLOBSTAR | wcglob.DOTGLOB | wcglob.BRACE


def _expand_pattern(pattern: str) -> list[str]:
    """Strip leading ``./`` and let a trailing ``/**`` also match its base directory."""
    while pattern.startswith("./"):
        pattern = pattern[2:]
    if pattern.endswith("/**") and len(pattern) > 3:
        return [pattern, pattern[:-3]]
    return [pattern]


def match(path: str, pattern: str) -> bool:
    """Return True when ``path`` matches a single (non-negated) ``pattern``."""
    return wcglob.globmatch(path.replace("\\", "/"), _expand_pattern(pattern), flags=MATCH_FLAGS)


def test_path(path: str, patterns: Iterable[str]) -> bool:
    """Fold ``patterns`` left to right, starting from "no match".

    Positive patterns OR into the result, negated ones AND-NOT, so a later
    ``!`` pattern can only remove what an earlier positive one accepted.
    """
    result = False
    for pattern in patterns:
        if pattern.startswith(NEGATION):
            result = result and not match(path, pattern[len(NEGATION) :])
        else:
            result = result or match(path, pattern)
    return result


def normalize_patterns(patterns: Iterable[str | None] | None) -> list[str] | None:
    """Drop empty entries; return None when nothing is left to filter by."""
    if patterns is None:
        return None
    not_empty = [p for p in patterns if p]
    return not_empty or None


def filter_paths(paths: Iterable[str], patterns: Iterable[str | None] | None) -> list[str]:
    """Keep the paths accepted by ``patterns`` (all of them when there are none)."""
    patterns = list(patterns or [])
    logger.debug("patterns: %s", json.dumps(patterns, indent=2))
    normalized = normalize_patterns(patterns)
    if normalized is None:
        return list(paths)
    filtered = [p for p in paths if test_path(p, normalized)]
    logger.info("%d filtered paths: %s", len(filtered), json.dumps(filtered, indent=2))
    return filtered
