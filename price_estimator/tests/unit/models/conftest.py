"""Shared fixtures for models unit tests."""

from __future__ import annotations

from unittest.mock import MagicMock

import numpy as np
import pytest

from price_estimator.data import FeatureEncoder, SyntheticDataGenerator
from price_estimator.models import PriceEstimator, TrainingConfig


@pytest.fixture
def encoder() -> FeatureEncoder:
    return FeatureEncoder()


@pytest.fixture
def small_config() -> TrainingConfig:
    """Training config small enough for fast tests."""
    return TrainingConfig(sample_count=64, epochs=2, batch_size=16, seed=7)


@pytest.fixture
def generator() -> SyntheticDataGenerator:
    return SyntheticDataGenerator(np.random.default_rng(7))


@pytest.fixture
def mock_estimator() -> MagicMock:
    """Mock PriceEstimator."""
    return MagicMock(spec=PriceEstimator)
