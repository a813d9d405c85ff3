"""Pytest fixtures for backend tests."""
import json
from pathlib import Path
from typing import Any, Callable

import pytest

from javarand.config import settings
from javarand.logic.rng import JavaRandom


FIXTURES_DIR = Path(__file__).parent / "fixtures"


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (large statistical samples)"
    )


@pytest.fixture(scope="session")
def known_vectors() -> dict[str, Any]:
    """Load java.util.Random reference output."""
    with open(FIXTURES_DIR / "known_vectors.json") as f:
        return json.load(f)


@pytest.fixture
def make_rng() -> Callable[[int], JavaRandom]:
    """Factory for seeded generators."""

    def _make(seed: int) -> JavaRandom:
        return JavaRandom(seed)

    return _make


@pytest.fixture
def clean_settings(monkeypatch: pytest.MonkeyPatch):
    """Reset settings that change JavaRandom() behaviour."""
    monkeypatch.setattr(settings, "default_seed", None)
    yield settings
