"""Tests for configuration from environment variables."""

import pytest

from repokit.env_var import Settings


def test_defaults(monkeypatch):
    for name in ("REPOKIT_REMOTE", "REPOKIT_HOST", "REPOKIT_REPO_LIST_LIMIT"):
        monkeypatch.delenv(name, raising=False)
    assert Settings.from_env() == Settings("origin", "github.com", 100)


def test_overrides(monkeypatch):
    monkeypatch.setenv("REPOKIT_REMOTE", "upstream")
    monkeypatch.setenv("REPOKIT_HOST", "git.example.com")
    monkeypatch.setenv("REPOKIT_REPO_LIST_LIMIT", "25")
    assert Settings.from_env() == Settings("upstream", "git.example.com", 25)


def test_blank_value_uses_default(monkeypatch):
    monkeypatch.setenv("REPOKIT_REMOTE", "  ")
    assert Settings.from_env().remote == "origin"


@pytest.mark.parametrize("value", ["many", "0"])
def test_invalid_limit_exits(monkeypatch, value):
    monkeypatch.setenv("REPOKIT_REPO_LIST_LIMIT", value)
    with pytest.raises(SystemExit):
        Settings.from_env()
