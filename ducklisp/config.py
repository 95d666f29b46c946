"""Runtime settings read from the process environment.

CLI flags take precedence; these only provide the defaults.
"""
from __future__ import annotations
import os


DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8765
DEFAULT_PROMPT = "> "
DEFAULT_LOG_LEVEL = "WARNING"

_TRUTHY = {"1", "true", "yes", "on"}


def _env_str(var: str, default: str) -> str:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


def _env_int(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{var} must be an integer, got {raw!r}")


def _env_flag(var: str, default: bool = False) -> bool:
    raw = os.environ.get(var)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUTHY


def get_host() -> str:
    return _env_str("DUCKLISP_HOST", DEFAULT_HOST)


def get_port() -> int:
    return _env_int("DUCKLISP_PORT", DEFAULT_PORT)


def get_strict_arity() -> bool:
    return _env_flag("DUCKLISP_STRICT_ARITY")


def get_log_level() -> str:
    return _env_str("DUCKLISP_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()


def get_prompt() -> str:
    # Prompts usually end in whitespace, so do not strip here
    return os.environ.get("DUCKLISP_PROMPT") or DEFAULT_PROMPT
