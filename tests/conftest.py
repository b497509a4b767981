"""
Pytest configuration and shared fixtures.
"""

import logging
import os
import random
from collections.abc import Generator

import pytest

from bridge_harness.client import ApiClient
from bridge_harness.config import Settings, get_settings
from bridge_harness.fixture import ChainFixture

API_BASE_URL = "http://emily.test"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Ensure no local harness configuration leaks into tests."""
    for var in list(os.environ):
        if var.upper().startswith("BRIDGE_HARNESS_"):
            monkeypatch.delenv(var, raising=False)

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> Settings:
    """Settings pointing at the mocked deposit API."""
    return Settings(api_base_url=API_BASE_URL, request_timeout=5, _env_file=None)


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source for reproducible fixtures."""
    return random.Random(42)


@pytest.fixture
def chain_fixture(rng: random.Random) -> ChainFixture:
    """Ten settlement blocks with 0-3 execution blocks per tenure."""
    return ChainFixture.generate(rng, 10, range(0, 4))


@pytest.fixture
def dense_fixture(rng: random.Random) -> ChainFixture:
    """Six settlement blocks, every tenure holding 1-3 execution blocks."""
    return ChainFixture.generate(rng, 6, range(1, 4))


@pytest.fixture
def api_client(settings: Settings) -> ApiClient:
    """Transport bound to the mocked deposit API."""
    return ApiClient(settings, logging.getLogger("test"))
