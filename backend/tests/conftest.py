"""Shared test configuration and fixtures."""

import pytest

from services.compatibility.matcher_registry import clear as clear_registry


@pytest.fixture(autouse=True)
def _reset_registry():
    """Every test starts from unloaded matchers."""
    clear_registry()
    yield
    clear_registry()
