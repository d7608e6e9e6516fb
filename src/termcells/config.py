"""Runtime configuration. Reads the Unicode table edition from the environment."""

from __future__ import annotations

import logging
import os
from functools import lru_cache

import wcwidth as _wcwidth

logger = logging.getLogger(__name__)

UNICODE_VERSION_ENV = "TERMCELLS_UNICODE_VERSION"
DEFAULT_UNICODE_VERSION = "15.1.0"


@lru_cache(maxsize=1)
def unicode_version() -> str:
    """Return the Unicode edition used for the East-Asian wide table.

    Taken from ``TERMCELLS_UNICODE_VERSION`` when it names an edition that the
    installed ``wcwidth`` ships, otherwise :data:`DEFAULT_UNICODE_VERSION`.
    """
    requested = os.environ.get(UNICODE_VERSION_ENV, "").strip()
    if not requested:
        return DEFAULT_UNICODE_VERSION

    available = _wcwidth.list_versions()
    if requested not in available:
        logger.warning(
            "Unknown Unicode version %r in %s (available: %s); using %s",
            requested,
            UNICODE_VERSION_ENV,
            ", ".join(available),
            DEFAULT_UNICODE_VERSION,
        )
        return DEFAULT_UNICODE_VERSION
    return requested


def reset_config_cache() -> None:
    """Forget the cached configuration so the environment is read again."""
    unicode_version.cache_clear()
    # Imported lazily: both depend on this module.
    from termcells import table
    from termcells.measure import _measure_cached

    table.clear_caches()
    _measure_cached.cache_clear()
