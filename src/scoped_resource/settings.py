from __future__ import annotations

import functools
import logging
from typing import Literal

from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class ScopedResourceSettings(BaseSettings):
    """Process-wide defaults read from ``SCOPED_RESOURCE_*`` environment variables.

    Examples:
        .. code-block:: bash

            SCOPED_RESOURCE_FIRE_ON_FINALIZE=false python app.py
            SCOPED_RESOURCE_FAULT_LOG_LEVEL=ERROR python app.py

    """

    model_config = SettingsConfigDict(env_prefix="SCOPED_RESOURCE_")

    fire_on_finalize: bool = True
    """Fire still-armed bindings when they are garbage collected."""

    log_disposer_faults: bool = True
    """Log exceptions swallowed while firing a disposer."""

    fault_log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    """Level used for swallowed disposer faults."""


@functools.lru_cache(maxsize=1)
def get_settings() -> ScopedResourceSettings:
    """Return the cached settings; call ``get_settings.cache_clear()`` to reload.

    Raises:
        pydantic.ValidationError: If a ``SCOPED_RESOURCE_*`` variable is invalid.

    """
    return ScopedResourceSettings()


def settings_or_defaults() -> ScopedResourceSettings:
    """Return ``get_settings()``, or the built-in defaults when the environment is invalid.

    Construction and firing read settings through this function so a bad
    environment variable never turns into an exception at scope exit.
    """
    try:
        return get_settings()
    except ValidationError:
        logger.warning(
            "Invalid SCOPED_RESOURCE_* environment; using default settings",
            exc_info=True,
        )
        return ScopedResourceSettings.model_construct()


__all__ = [
    "ScopedResourceSettings",
    "get_settings",
    "settings_or_defaults",
]
