from __future__ import annotations
import os


_DEFAULT_LOG_LEVEL = 'WARNING'
_DEFAULT_LOG_FORMAT = '%(levelname)s %(name)s: %(message)s'


def str_from_env(var: str, default: str) -> str:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


def get_log_level() -> str:
    return str_from_env('CONSLISP_LOG_LEVEL', _DEFAULT_LOG_LEVEL).upper()


def get_log_format() -> str:
    return str_from_env('CONSLISP_LOG_FORMAT', _DEFAULT_LOG_FORMAT)
