from __future__ import annotations
import os


_TRUTHY = frozenset({'1', 'true', 'yes', 'on'})
_FALSY = frozenset({'0', 'false', 'no', 'off'})

# Defaults
_DEFAULT_SOURCE_NAME = 'lisp'
FAILURE_MARKER = 'No match: '


def flag_from_env(var: str, default: bool) -> bool:
    raw = os.environ.get(var)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    return default


def evaluate_by_default() -> bool:
    return flag_from_env('SCHEMER_EVALUATE', True)


def strict_apply() -> bool:
    return flag_from_env('SCHEMER_STRICT_APPLY', False)


def get_source_name() -> str:
    raw = os.environ.get('SCHEMER_SOURCE_NAME')
    return raw.strip() if raw and raw.strip() else _DEFAULT_SOURCE_NAME
