"""Logging utilities for geoprim.

Provides a consistent logger hierarchy and formatting without modifying the
process root logger. All geoprim code should obtain loggers via get_logger().
"""
from __future__ import annotations

import logging
import sys
from typing import Optional, Union

_FORMAT = logging.Formatter('%(levelname)s %(name)s: %(message)s')
_ROOT_NAME = 'geoprim'


def _ensure_package_root() -> logging.Logger:
    """Ensure the 'geoprim' logger has a single stream handler and is isolated
    from the process root logger. Returns the 'geoprim' logger.
    """
    pkg_root = logging.getLogger(_ROOT_NAME)
    # The package __init__ installs a NullHandler; swap it for a real stream
    for h in list(pkg_root.handlers):
        if isinstance(h, logging.NullHandler):
            pkg_root.removeHandler(h)
    if not pkg_root.handlers:
        handler = logging.StreamHandler(stream=sys.stdout)
        handler.setFormatter(_FORMAT)
        pkg_root.addHandler(handler)
    pkg_root.propagate = False
    return pkg_root


def _to_level(level: Union[str, int, None], default: int = logging.INFO) -> int:
    if level is None:
        return default
    if isinstance(level, int):
        return level
    resolved = getattr(logging, str(level).upper(), None)
    if not isinstance(resolved, int):
        return default
    return resolved


def configure_logging(level: Union[str, int] = 'INFO') -> logging.Logger:
    """Configure the 'geoprim' logger family level.

    This does NOT modify the process root logger.
    """
    pkg_root = _ensure_package_root()
    pkg_root.setLevel(_to_level(level))
    return pkg_root


def get_logger(name: str, level: Optional[Union[str, int]] = None) -> logging.Logger:
    """Return a logger under the 'geoprim' namespace.

    Library modules call this at import time, so it only touches the named
    logger: handlers are attached by configure_logging(). Without an explicit
    level the logger is left at NOTSET and inherits from 'geoprim'.
    """
    if name != _ROOT_NAME and not name.startswith(_ROOT_NAME + '.'):
        name = f'{_ROOT_NAME}.{name}'
    log = logging.getLogger(name)
    log.setLevel(_to_level(level) if level is not None else logging.NOTSET)
    return log


__all__ = ['get_logger', 'configure_logging']
