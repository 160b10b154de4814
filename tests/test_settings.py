"""Settings resolution: environment, .env file and CLI overrides."""

from __future__ import annotations

import os
from pathlib import Path

from skillport.adapters.fs.path_provider import PathProvider
from skillport.services.settings import Settings


def test_default_target_is_under_home(monkeypatch, home_dir, tmp_path):
    monkeypatch.delenv("SKILLPORT_TARGET_DIR")
    monkeypatch.delenv("SKILLPORT_SOURCE_DIR")

    settings = Settings.from_sources()

    assert settings.target_dir == home_dir / ".claude" / "skills"
    assert settings.source_dir == Path(os.getcwd()).resolve()
    assert settings.log_level == "WARNING"
    assert settings.log_file is None


def test_env_file_is_read(monkeypatch, tmp_path):
    monkeypatch.delenv("SKILLPORT_TARGET_DIR")
    env = tmp_path / "custom.env"
    env.write_text(f"SKILLPORT_TARGET_DIR={tmp_path / 'dst'}\nSKILLPORT_LOG_LEVEL=debug\n", encoding="utf-8")

    settings = Settings.from_sources(str(env))

    assert settings.target_dir == tmp_path / "dst"
    assert settings.log_level == "DEBUG"


def test_environment_wins_over_env_file(tmp_path, target_dir):
    env = tmp_path / "custom.env"
    env.write_text(f"SKILLPORT_TARGET_DIR={tmp_path / 'dst'}\n", encoding="utf-8")

    assert Settings.from_sources(str(env)).target_dir == target_dir


def test_overrides_keep_symlinked_target_visible(tmp_path):
    real = tmp_path / "real"
    real.mkdir()
    link = tmp_path / "link"
    os.symlink(str(real), str(link))

    settings = Settings.from_sources().with_overrides(target_dir=link, source_dir=None, profile="ignored")

    assert settings.target_dir == link
    paths = PathProvider.from_settings(settings)
    assert paths.skill_target("alpha") == link / "alpha"
    assert paths.host_dir() == tmp_path
