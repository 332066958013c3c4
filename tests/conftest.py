"""Shared fixtures for rbidsl tests."""

import pytest

from rbidsl import Options, RbiGenerator


@pytest.fixture
def options() -> Options:
    """Two-space indentation, default signature breaking."""
    return Options(indent="  ")


@pytest.fixture
def generator() -> RbiGenerator:
    return RbiGenerator(indent=2)
