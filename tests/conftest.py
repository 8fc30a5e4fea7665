"""Shared test fixtures for biome map tests."""

import numpy as np
import pytest

from biomegen.terrain.config import GenerationConfig, GenerationParameters
from biomegen.terrain.generator import GenerationContext
from biomegen.terrain.noise import GradientNoiseField


@pytest.fixture
def default_params() -> GenerationParameters:
    """All sliders centred."""
    return GenerationParameters()


@pytest.fixture
def noise_field() -> GradientNoiseField:
    """Noise field with a fixed seed."""
    return GradientNoiseField(42)


@pytest.fixture
def small_config() -> GenerationConfig:
    """12x9 map with a fixed text seed."""
    return GenerationConfig(seed="test-map", cols=12, rows=9)


@pytest.fixture
def seeded_context() -> GenerationContext:
    """Context with reproducible tile choice."""
    return GenerationContext.seeded(7)


@pytest.fixture
def rng() -> np.random.Generator:
    """Seeded random generator."""
    return np.random.default_rng(2024)
