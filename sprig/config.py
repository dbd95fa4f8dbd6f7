from __future__ import annotations
import logging
import os

_FALSE_VALUES = {'0', 'false', 'no', 'off'}

# Defaults
_DEFAULT_LOG_LEVEL = 'WARNING'


def flag_from_env(var: str, default: bool) -> bool:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() not in _FALSE_VALUES


def stdlib_enabled() -> bool:
    return flag_from_env('SPRIG_STDLIB', True)


def get_log_level() -> int:
    raw = os.environ.get('SPRIG_LOG_LEVEL', _DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(raw)
    # getLevelName returns a "Level x" string for unknown names
    return level if isinstance(level, int) else logging.WARNING


def configure_logging() -> None:
    logging.getLogger('sprig').setLevel(get_log_level())
