# src/skillport/services/settings.py
from __future__ import annotations
from dataclasses import dataclass, replace
import os
from pathlib import Path
from typing import Optional, Dict

from dotenv import dotenv_values

from skillport.config import const


def _source_path(value: str | Path) -> Path:
    return Path(value).expanduser().resolve()


def _target_path(value: str | Path) -> Path:
    # the target root is never resolved: a symlinked root must stay visible to the guard
    return Path(os.path.abspath(Path(value).expanduser()))


def default_target_dir() -> Path:
    return Path.home() / const.HOST_DIR_NAME / const.TARGET_DIR_NAME


@dataclass(frozen=True, slots=True)
class Settings:
    source_dir: Path
    target_dir: Path
    log_level: str = const.DEFAULT_LOG_LEVEL
    log_file: Optional[Path] = None
    cli_debug: bool = False

    @staticmethod
    def from_sources(env_file: Optional[str] = ".env") -> "Settings":
        env_file_vars: Dict[str, Optional[str]] = {}
        if env_file and Path(env_file).is_file():
            env_file_vars = dotenv_values(env_file)

        def pick_env(key: str, default: Optional[str] = None) -> str:
            return os.environ.get(key) or env_file_vars.get(key) or (default or "")

        source = pick_env(const.ENV_SOURCE_DIR) or os.getcwd()
        target = pick_env(const.ENV_TARGET_DIR) or default_target_dir()
        log_file = pick_env(const.ENV_LOG_FILE)

        return Settings(
            source_dir=_source_path(source),
            target_dir=_target_path(target),
            log_level=pick_env(const.ENV_LOG_LEVEL, const.DEFAULT_LOG_LEVEL).upper(),
            log_file=Path(log_file).expanduser() if log_file else None,
            cli_debug=pick_env(const.ENV_CLI_DEBUG, "0") == "1",
        )

    def with_overrides(self, **kw) -> "Settings":
        # only the safe fields can be overridden from the command line
        safe = {k: v for k, v in kw.items() if k in {"source_dir", "target_dir", "log_level"} and v is not None}
        if "source_dir" in safe:
            safe["source_dir"] = _source_path(safe["source_dir"])
        if "target_dir" in safe:
            safe["target_dir"] = _target_path(safe["target_dir"])
        if "log_level" in safe:
            safe["log_level"] = str(safe["log_level"]).upper()
        return replace(self, **safe)
