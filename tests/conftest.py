"""Shared test fixtures."""

from __future__ import annotations

import pytest

from npm_registry.config import set_debug


@pytest.fixture(autouse=True)
def _reset_debug_flag() -> None:
    """Reset the process-wide debug flag before each test to prevent cross-test pollution."""
    set_debug(False)
