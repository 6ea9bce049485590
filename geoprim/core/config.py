"""Configuration objects for geoprim winding classification."""
from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, replace
from typing import Iterator

from . import run_context

NON_FINITE_RAISE = 'raise'
NON_FINITE_UNDEFINED = 'undefined'
_NON_FINITE_POLICIES = (NON_FINITE_RAISE, NON_FINITE_UNDEFINED)

_CTX_KEY = 'winding_config'


@dataclass(frozen=True)
class WindingConfig:
    """Policy knobs for winding classification.

    Attributes
    ----------
    non_finite : str
        What to do when the shoelace sum is incomparable (NaN coordinates):
        'raise' raises ValueError, 'undefined' reports no winding order.
    log_reversals : bool
        Emit a DEBUG record whenever a canonicalizer reverses a ring.
    """
    non_finite: str = NON_FINITE_RAISE
    log_reversals: bool = True

    def __post_init__(self):
        if self.non_finite not in _NON_FINITE_POLICIES:
            raise ValueError(
                f"non_finite must be one of {_NON_FINITE_POLICIES}, got {self.non_finite!r}"
            )


DEFAULT_WINDING_CONFIG = WindingConfig()


def active_winding_config() -> WindingConfig:
    """Return the WindingConfig in effect for the current context."""
    return run_context.get(_CTX_KEY, DEFAULT_WINDING_CONFIG)


@contextmanager
def winding_config(config: WindingConfig = None, **overrides) -> Iterator[WindingConfig]:
    """Temporarily install a WindingConfig for the current context.

    Either pass a full config, keyword overrides applied to the active one,
    or both (overrides win).
    """
    base = config if config is not None else active_winding_config()
    cfg = replace(base, **overrides) if overrides else base
    token = run_context.set_context({_CTX_KEY: cfg})
    try:
        yield cfg
    finally:
        run_context.reset_context(token)


__all__ = [
    'WindingConfig', 'DEFAULT_WINDING_CONFIG', 'NON_FINITE_RAISE', 'NON_FINITE_UNDEFINED',
    'active_winding_config', 'winding_config',
]
