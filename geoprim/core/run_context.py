"""Per-run context for geoprim using contextvars.

Holds overrides (such as the active WindingConfig) so that threads or async
tasks classifying rings under different policies do not interfere with each
other.
"""
from __future__ import annotations

from typing import Any, Dict, Optional
import contextvars

_CTX: contextvars.ContextVar[Dict[str, Any]] = contextvars.ContextVar('geoprim_run_ctx', default={})


def set_context(values: Dict[str, Any]) -> contextvars.Token:
    current = dict(_CTX.get())
    current.update(values)
    return _CTX.set(current)


def reset_context(token: contextvars.Token) -> None:
    _CTX.reset(token)


def get_context() -> Dict[str, Any]:
    return dict(_CTX.get())


def get(key: str, default: Optional[Any] = None) -> Any:
    return _CTX.get().get(key, default)


__all__ = ['set_context', 'reset_context', 'get_context', 'get']
