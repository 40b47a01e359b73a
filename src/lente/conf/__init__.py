"""Lazy, Django-style settings for lente.

Defaults live in lente.conf.global_settings. A project overrides them with a
settings module named by the LENTE_SETTINGS_MODULE environment variable
(default: a "settings" module on the import path). Only UPPERCASE names are
read.

Usage:
    # settings.py in your project
    SCREEN_WIDTH = 640
    CAMERA_FOLLOW_STYLE = "platformer"

    # anywhere
    from lente.conf import settings

    settings.CAMERA_FOLLOW_STYLE  # "platformer"

    # tests
    settings.configure(CAMERA_LERP=0.5)
"""

import importlib
import logging
import os
from typing import Any

from lente.conf import global_settings

logger = logging.getLogger(__name__)

SETTINGS_MODULE_ENV = "LENTE_SETTINGS_MODULE"


class LazySettings:
    """Proxy that loads settings on first attribute access.

    Loading order:
    1. global_settings (library defaults)
    2. The project settings module, if it can be imported
    """

    def __init__(self) -> None:
        """Initialize the lazy settings proxy."""
        self._wrapped: Settings | None = None

    def _setup(self) -> None:
        """Load defaults, then overlay the project settings module."""
        module_name = os.environ.get(SETTINGS_MODULE_ENV, "settings")
        self._wrapped = Settings()

        try:
            mod = importlib.import_module(module_name)
        except ModuleNotFoundError as exc:
            # Only a missing settings module is optional; broken imports inside it propagate
            if exc.name != module_name:
                raise
            logger.debug("No settings module '%s', using defaults", module_name)
            return

        for name in dir(mod):
            if name.isupper():
                setattr(self._wrapped, name, getattr(mod, name))
        logger.debug("Loaded settings from '%s'", module_name)

    def _get_wrapped(self) -> "Settings":
        if self._wrapped is None:
            self._setup()
        if self._wrapped is None:
            msg = "Settings could not be loaded"
            raise RuntimeError(msg)
        return self._wrapped

    def __getattr__(self, name: str) -> Any:  # noqa: ANN401
        """Get a setting value, loading settings if not yet loaded."""
        return getattr(self._get_wrapped(), name)

    def __setattr__(self, name: str, value: Any) -> None:  # noqa: ANN401
        """Set a setting value."""
        if name == "_wrapped":
            self.__dict__["_wrapped"] = value
        else:
            setattr(self._get_wrapped(), name, value)

    def configure(self, **options: Any) -> None:  # noqa: ANN401
        """Set settings explicitly, without reading a project module.

        Example:
            settings.configure(SCREEN_WIDTH=640, CAMERA_LERP=0.25)
        """
        if self._wrapped is None:
            self._wrapped = Settings()
        for name, value in options.items():
            setattr(self._wrapped, name, value)

    def is_configured(self) -> bool:
        """Check if settings have been loaded."""
        return self._wrapped is not None

    def reset(self) -> None:
        """Forget loaded settings; the next access loads them again."""
        self._wrapped = None


class Settings:
    """Container for all settings with attribute access."""

    def __init__(self) -> None:
        """Copy every UPPERCASE default from global_settings."""
        for name in dir(global_settings):
            if name.isupper():
                setattr(self, name, getattr(global_settings, name))


settings = LazySettings()

__all__ = ["LazySettings", "Settings", "global_settings", "settings"]
