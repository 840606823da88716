"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest


@pytest.fixture
def siz_code() -> int:
    """Code of '!siz' (kAudioServicesBadPropertySizeError)."""
    return 0x2173697A


@pytest.fixture
def sample_code_string() -> str:
    """Sample four-character code string for testing."""
    return "wht?"
