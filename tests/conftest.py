"""Shared fixtures for agent usage stats tests."""

import pytest

from config import CONFIG_ENV_VAR, load_config
from helpers import (
    CLAUDE_PROJECT_DIR,
    CLAUDE_SESSION_EVENTS,
    PI_PROJECT_DIR,
    PI_SESSION_EVENTS,
    write_jsonl,
)


@pytest.fixture()
def home(tmp_path, monkeypatch):
    """Fake home directory with no session logs yet."""
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    home_dir = tmp_path / "home"
    home_dir.mkdir()
    return home_dir


@pytest.fixture()
def pi_root(home):
    """pi sessions root holding one project with one session."""
    root = home / ".pi" / "agent" / "sessions"
    write_jsonl(root / PI_PROJECT_DIR / "2025-06-01_pi-001.jsonl", PI_SESSION_EVENTS)
    return root


@pytest.fixture()
def claude_root(home):
    """Claude Code projects root holding one project with one session."""
    root = home / ".claude" / "projects"
    write_jsonl(root / CLAUDE_PROJECT_DIR / "abc-123.jsonl", CLAUDE_SESSION_EVENTS)
    return root


@pytest.fixture()
def app_config(home):
    """AppConfig with every source rooted at the fake home."""
    return load_config(home=home)


@pytest.fixture()
def client(app_config, monkeypatch):
    """FastAPI TestClient using the fake-home config."""
    from fastapi.testclient import TestClient

    import app as app_module

    monkeypatch.setattr(app_module, "CONFIG", app_config)
    with TestClient(app_module.app, raise_server_exceptions=False) as tc:
        yield tc
