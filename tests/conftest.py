"""Shared pytest configuration and fixtures."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from lente.conf import settings

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture(autouse=True)
def configure_test_settings() -> Generator[None]:
    """Configure settings for each test and reset them afterwards.

    Yields:
        None
    """
    settings.configure(
        SCREEN_WIDTH=320,
        SCREEN_HEIGHT=180,
        WINDOW_TITLE="Test",
        CAMERA_LERP=1.0,
        CAMERA_FOLLOW_STYLE="center",
        LOG_LEVEL="DEBUG",
    )
    yield
    settings.reset()
