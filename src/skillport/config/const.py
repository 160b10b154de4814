# src/skillport/config/const.py
from __future__ import annotations

# hard defaults (changed by developers in code, not by users)
SKILL_DESCRIPTOR: str = "SKILL.md"

# <home>/.claude/skills
HOST_DIR_NAME: str = ".claude"
TARGET_DIR_NAME: str = "skills"

ENV_PREFIX: str = "SKILLPORT_"
ENV_SOURCE_DIR: str = ENV_PREFIX + "SOURCE_DIR"
ENV_TARGET_DIR: str = ENV_PREFIX + "TARGET_DIR"
ENV_LOG_LEVEL: str = ENV_PREFIX + "LOG_LEVEL"
ENV_LOG_FILE: str = ENV_PREFIX + "LOG_FILE"
ENV_CLI_DEBUG: str = ENV_PREFIX + "CLI_DEBUG"

DEFAULT_LOG_LEVEL: str = "WARNING"
