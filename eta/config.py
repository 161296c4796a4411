from __future__ import annotations
import os
from pathlib import Path
from typing import Optional


# Defaults
_DEFAULT_HISTORY_FILE = Path("session.lisp")
_DEFAULT_PROMPT = "* "
_DEFAULT_LOG_LEVEL = "WARNING"
_DEFAULT_SERVER_HOST = "127.0.0.1"
_DEFAULT_SERVER_PORT = 8765


def int_from_env(var: str, default: Optional[int]) -> Optional[int]:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{var} must be an integer, got {raw!r}") from None


def get_history_file() -> Path:
    raw = os.environ.get('ETA_HISTORY_FILE')
    return Path(raw) if raw else _DEFAULT_HISTORY_FILE


def get_prompt() -> str:
    return os.environ.get('ETA_PROMPT', _DEFAULT_PROMPT)


def get_log_level() -> str:
    return os.environ.get('ETA_LOG_LEVEL', _DEFAULT_LOG_LEVEL).upper()


def get_recursion_limit() -> Optional[int]:
    return int_from_env('ETA_RECURSION_LIMIT', None)


def get_server_address() -> tuple[str, int]:
    host = os.environ.get('ETA_SERVER_HOST', _DEFAULT_SERVER_HOST)
    port = int_from_env('ETA_SERVER_PORT', _DEFAULT_SERVER_PORT)
    return host, port
