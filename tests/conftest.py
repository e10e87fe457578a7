"""Shared fixtures for declay tests."""

from pathlib import Path

import pytest

from declay.builder import Builder, MemoryFetcher
from declay.toolkit import HeadlessToolkit

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES


@pytest.fixture
def builder() -> Builder:
    """A headless builder whose image fetcher knows a single source."""
    return Builder(
        HeadlessToolkit(),
        image_fetcher=MemoryFetcher({"logo.png": b"\x89PNG-logo"}),
    )
