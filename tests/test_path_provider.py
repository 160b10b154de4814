"""Tests covering path resolution helpers exposed through the global context."""

from __future__ import annotations

from pathlib import Path

from skillport.services.app_context import get_ctx


def test_app_context_exposes_roots_from_settings(source_dir, target_dir):
    ctx = get_ctx()

    assert ctx.paths.source_dir() == source_dir
    assert ctx.paths.target_dir() == target_dir
    assert ctx.paths.host_dir() == target_dir.parent


def test_per_skill_paths(source_dir, target_dir):
    paths = get_ctx().paths

    assert paths.skill_source("alpha") == source_dir / "alpha"
    assert paths.skill_target("alpha") == target_dir / "alpha"
    assert isinstance(paths.skill_target("alpha"), Path)
