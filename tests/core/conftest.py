"""Pytest configuration for core tests."""
import pytest
from gibbons.core.registry import ActivationRegistry


@pytest.fixture(autouse=True)
def reset_registry():
    """
    Reset the activation registry before and after each test.

    Tests may register activations or change the default; this keeps them
    from leaking into each other.
    """
    ActivationRegistry.clear()

    yield

    ActivationRegistry.clear()
