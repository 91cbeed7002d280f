"""Pytest configuration and shared fixtures for extremum tests.

Provides a deterministic numpy RNG so randomized tests are reproducible.
Set ``TEST_RNG_SEED`` to explore other seeds while debugging.
"""

import os

import numpy as np
import pytest


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests."""
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)
