import json

import pytest


@pytest.fixture(autouse=True)
def no_step_summary(monkeypatch):
    monkeypatch.delenv("GITHUB_STEP_SUMMARY", raising=False)
    monkeypatch.delenv("LOCKFILE_SCANNER_CONFIG", raising=False)
    monkeypatch.delenv("LOCKFILE_SCANNER_WARN_ONLY", raising=False)


@pytest.fixture
def monorepo(tmp_path):
    """A yarn workspace with one member and one package lacking a lock file.

    Every directory holds at most one sub-directory so that record order does
    not depend on the host's listing order.
    """
    repo = tmp_path / "repo"
    (repo / "packages" / "app").mkdir(parents=True)
    (repo / "package.json").write_text(json.dumps({"workspaces": ["packages/*"]}), encoding="utf-8")
    (repo / "yarn.lock").write_text("", encoding="utf-8")
    (repo / "packages" / "app" / "package.json").write_text("{}", encoding="utf-8")
    (repo / "packages" / "app" / "node_modules" / "dep").mkdir(parents=True)
    (repo / "packages" / "app" / "node_modules" / "dep" / "package.json").write_text("{}", encoding="utf-8")
    return repo


@pytest.fixture
def broken_repo(tmp_path):
    """A single package without any lock file."""
    repo = tmp_path / "broken"
    repo.mkdir()
    (repo / "package.json").write_text("{}", encoding="utf-8")
    return repo
