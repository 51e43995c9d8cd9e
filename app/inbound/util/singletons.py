"""Registry of module-level singletons that tests can reset."""

from __future__ import annotations

import logging
from collections.abc import Callable

logger = logging.getLogger(__name__)

_resetters: list[Callable[[], None]] = []


def register_singleton(reset_fn: Callable[[], None]) -> None:
    """Register *reset_fn* to be called by :func:`reset_all_singletons`."""
    if reset_fn not in _resetters:
        _resetters.append(reset_fn)


def reset_all_singletons() -> None:
    for fn in list(_resetters):
        try:
            fn()
        except Exception:
            logger.warning("Singleton reset failed: %s", fn, exc_info=True)
