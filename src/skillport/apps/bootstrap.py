# src/skillport/apps/bootstrap.py
from __future__ import annotations
from typing import Optional

from skillport.services.settings import Settings
from skillport.services.app_context import AppContext, set_ctx
from skillport.adapters.fs.path_provider import PathProvider
from skillport.services.logging import setup_logging


def _build(settings: Settings) -> AppContext:
    paths = PathProvider.from_settings(settings)
    setup_logging(settings.log_level, settings.log_file)
    return AppContext(settings=settings, paths=paths)


def init_ctx(settings: Optional[Settings] = None) -> AppContext:
    """Build the process context from settings (env/.env by default) and publish it."""
    ctx = _build(settings or Settings.from_sources())
    set_ctx(ctx)
    return ctx
