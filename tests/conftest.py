"""Shared fixtures: keep tests away from the real user config and project `.env`."""

import pytest

from core import config


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point the user config dir at a temp dir and pin settings via env vars.

    `load_settings()` resolves the user `.env` at call time, so patching
    `get_user_config_dir` is enough; chdir hides any project `.env`.
    """
    user_dir = tmp_path / "user-config"
    monkeypatch.setattr(config, "get_user_config_dir", lambda: user_dir)
    monkeypatch.chdir(tmp_path)

    monkeypatch.setenv("HELLO_D2_DEFAULT_NAME", "World")
    monkeypatch.setenv("HELLO_D2_DEFAULT_LANGUAGE", "en")
    monkeypatch.setenv("HELLO_D2_SHOW_BANNER", "true")
    monkeypatch.setenv("HELLO_D2_LOG_LEVEL", "WARNING")
    return user_dir
