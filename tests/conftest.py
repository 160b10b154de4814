# tests/conftest.py
from __future__ import annotations
from pathlib import Path

import pytest

from skillport.adapters.fs.path_provider import PathProvider
from skillport.services.app_context import AppContext, set_ctx, clear_ctx
from skillport.services.logging import reset_logging
from skillport.services.settings import Settings
from skillport.services.skill.manager import SkillManager


# ---------- CLI application fixture ----------
@pytest.fixture
def cli_app():
    from skillport.apps.cli.app import app

    return app


@pytest.fixture
def source_dir(tmp_path) -> Path:
    p = tmp_path / "repo"
    p.mkdir()
    return p.resolve()


@pytest.fixture
def home_dir(tmp_path) -> Path:
    p = tmp_path / "home"
    p.mkdir()
    return p


@pytest.fixture
def target_dir(home_dir) -> Path:
    # not created: the manager is responsible for creating it
    return home_dir / ".claude" / "skills"


@pytest.fixture
def make_skill(source_dir):
    """Create ``<source>/<name>`` with (or without) a SKILL.md descriptor."""

    def _make(name: str, descriptor: bool = True) -> Path:
        d = source_dir / name
        d.mkdir(parents=True, exist_ok=True)
        if descriptor:
            (d / "SKILL.md").write_text(f"# {name}\n", encoding="utf-8")
        return d

    return _make


# ---------- autouse: publish an AppContext for every test ----------
@pytest.fixture(autouse=True)
def _autocontext(tmp_path, monkeypatch, source_dir, home_dir, target_dir):
    monkeypatch.chdir(tmp_path)  # keep stray .env files out of Settings.from_sources()
    monkeypatch.setenv("HOME", str(home_dir))
    monkeypatch.setenv("SKILLPORT_SOURCE_DIR", str(source_dir))
    monkeypatch.setenv("SKILLPORT_TARGET_DIR", str(target_dir))
    # plain console output, whatever the CI environment says
    for var in ("SKILLPORT_LOG_LEVEL", "SKILLPORT_LOG_FILE", "SKILLPORT_CLI_DEBUG", "FORCE_COLOR", "TTY_COMPATIBLE"):
        monkeypatch.delenv(var, raising=False)

    settings = Settings.from_sources()
    ctx = AppContext(settings=settings, paths=PathProvider.from_settings(settings))
    set_ctx(ctx)
    try:
        yield ctx
    finally:
        clear_ctx()
        reset_logging()


@pytest.fixture
def mgr(_autocontext) -> SkillManager:
    return SkillManager.from_ctx(_autocontext)
