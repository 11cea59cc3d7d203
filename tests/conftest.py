"""Shared fixtures for webterm tests."""

import pytest

WEBTERM_ENV_VARS = (
    "WEBTERM_USER",
    "WEBTERM_HOSTNAME",
    "WEBTERM_THEME",
    "WEBTERM_TREE_SNAPSHOT",
    "WEBTERM_TREE_ROOT",
    "WEBTERM_EXCLUDE",
    "WEBTERM_STATE_FILE",
    "WEBTERM_VOLUME",
    "WEBTERM_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the caller's WEBTERM_* settings out of every test."""
    for name in WEBTERM_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
