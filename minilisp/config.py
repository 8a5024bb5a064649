from __future__ import annotations
import os
from typing import Optional


# Defaults
_DEFAULT_LOG_LEVEL = "WARNING"
_DEFAULT_PROMPT = ">>> "
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _from_env(var: str, default: Optional[str]) -> Optional[str]:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    return raw


def get_log_level() -> str:
    level = _from_env("MINILISP_LOG_LEVEL", _DEFAULT_LOG_LEVEL).strip().upper()
    return level if level in _LOG_LEVELS else _DEFAULT_LOG_LEVEL


def get_prompt() -> str:
    return _from_env("MINILISP_PROMPT", _DEFAULT_PROMPT)


def get_recursion_limit() -> Optional[int]:
    """Python recursion limit to install before running programs, if set."""
    raw = _from_env("MINILISP_RECURSION_LIMIT", None)
    if raw is None:
        return None
    try:
        limit = int(raw)
    except ValueError:
        raise ValueError(f"MINILISP_RECURSION_LIMIT must be an integer, got {raw!r}")
    if limit <= 0:
        raise ValueError(f"MINILISP_RECURSION_LIMIT must be positive, got {limit}")
    return limit
