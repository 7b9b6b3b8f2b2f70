"""Shared pytest fixtures."""

import pytest

from objiterate.core.registry import reset_names


@pytest.fixture(autouse=True)
def default_method_names():
    """Run every test against the default bindings and restore them afterwards."""
    reset_names()
    yield
    reset_names()
