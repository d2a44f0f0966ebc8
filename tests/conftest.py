"""Shared fixtures for envstore tests."""

import os
from pathlib import Path

import pytest

from envstore.settings import reset_settings
from envstore.store import reset_store

ENV_FILES = {
    ".env": "testValue=default env loaded\n",
    ".env. dev": "PASS=hunter2\ntestValue=dev env loaded\n",
    ".env.debug": "testValue=debug env loaded\n",
    ".env.prod": "PASS=hunter2\ntestValue=prod env loaded\nURL=https://example.com/?a=1&b=2\n",
}

ALT_ENV_FILES = {
    ".env.other": "testValue=alt path env loaded\n",
    ".env.json": '{"testValue": "json env loaded", "jsonLoadedBool": true, "jsonLoadedNum": 1}',
}


@pytest.fixture(autouse=True)
def clean_state(monkeypatch: pytest.MonkeyPatch):
    """Isolate each test from process env selectors and cached singletons."""
    monkeypatch.delenv("DOTENV", raising=False)
    for name in list(os.environ):
        if name.startswith("ENVSTORE_"):
            monkeypatch.delenv(name, raising=False)
    reset_settings()
    reset_store()
    yield
    reset_store()
    reset_settings()


@pytest.fixture
def env_dir(tmp_path: Path) -> Path:
    """Directory holding a default, dev, debug and prod env file."""
    for name, content in ENV_FILES.items():
        (tmp_path / name).write_text(content, encoding="utf-8")
    return tmp_path


@pytest.fixture
def alt_env_dir(tmp_path: Path) -> Path:
    """Nested directory with a space in its path holding other and json env files."""
    path = tmp_path / "Alternate" / "Dir ectory" / "path"
    path.mkdir(parents=True)
    for name, content in ALT_ENV_FILES.items():
        (path / name).write_text(content, encoding="utf-8")
    return path
