"""Tests for glob matching and path filtering."""

import logging

import pytest

from lockfile_scanner import globs


class TestMatch:
    """Tests for match()."""

    @pytest.mark.parametrize(
        "path, pattern, expected",
        [
            ("packages/app", "packages/*", True),
            ("packages/app/nested", "packages/*", False),
            ("packages/app/nested", "packages/**", True),
            ("packages/.hidden", "packages/*", True),
            ("apps/web", "web", False),
            ("web", "web", True),
            ("apps/web", "apps/{web,docs}", True),
            ("packages/app", "./packages/*", True),
            ("packages", "packages/**", True),
            ("packages/a/b", "packages/**", True),
            ("pack", "packages/**", False),
        ],
    )
    def test_match(self, path, pattern, expected):
        assert globs.match(path, pattern) is expected

    def test_backslashes_are_normalised(self):
        """Test that Windows-style separators in the path are accepted."""
        assert globs.match("packages\\app", "packages/*")


class TestTestPath:
    """Tests for test_path()."""

    def test_no_patterns_never_match(self):
        assert not globs.test_path("packages/app", [])

    def test_any_positive_pattern_matches(self):
        assert globs.test_path("apps/web", ["packages/*", "apps/*"])

    def test_negation_removes_earlier_match(self):
        assert not globs.test_path("packages/internal", ["packages/*", "!packages/internal"])

    def test_negation_only_never_matches(self):
        """Test that a negated pattern alone cannot produce a match."""
        assert not globs.test_path("packages/app", ["!packages/internal"])

    def test_negation_with_dot_slash_prefix(self):
        """Test that ``!./`` patterns exclude like their plain form."""
        assert not globs.test_path("packages/internal", ["./packages/*", "!./packages/internal"])

    def test_positive_after_negation_matches_again(self):
        """Test the left-to-right fold: a later positive pattern re-includes."""
        patterns = ["packages/*", "!packages/internal", "packages/internal"]

        assert globs.test_path("packages/internal", patterns)


class TestFilterPaths:
    """Tests for normalize_patterns() and filter_paths()."""

    def test_normalize_drops_empty_patterns(self):
        assert globs.normalize_patterns(["", None, "a/*"]) == ["a/*"]

    @pytest.mark.parametrize("patterns", [None, [], ["", None]])
    def test_normalize_returns_none_without_patterns(self, patterns):
        assert globs.normalize_patterns(patterns) is None

    def test_filter_without_patterns_keeps_everything(self):
        paths = ["a/package.json", "b/package.json"]

        assert globs.filter_paths(paths, None) == paths

    def test_filter_with_patterns(self, caplog):
        paths = ["apps/web/package.json", "apps/docs/package.json", "libs/ui/package.json"]

        with caplog.at_level(logging.INFO, logger="lockfile_scanner.globs"):
            result = globs.filter_paths(paths, ["apps/**", "!apps/docs/**"])

        assert result == ["apps/web/package.json"]
        assert "1 filtered paths" in caplog.text
