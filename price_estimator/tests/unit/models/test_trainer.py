"""Unit tests for ModelTrainer and TrainingConfig."""

from __future__ import annotations

from unittest.mock import MagicMock

import numpy as np
import pytest

from price_estimator.data import SyntheticDataGenerator, TrainingExample
from price_estimator.models import (
    ModelTrainer,
    PriceEstimator,
    TrainingConfig,
    TrainingError,
)


class TestTrainingConfig:
    """Tests for TrainingConfig defaults and validation."""

    def test_defaults(self) -> None:
        config = TrainingConfig()

        assert config.sample_count == 1000
        assert config.epochs == 50
        assert config.batch_size == 32
        assert config.learning_rate == 0.001
        assert config.validation_split == 0.2
        assert config.shuffle is True
        assert config.seed is None

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"sample_count": 0},
            {"epochs": 0},
            {"batch_size": -1},
            {"learning_rate": 0.0},
            {"validation_split": 1.0},
            {"validation_split": -0.1},
        ],
    )
    def test_invalid_values_rejected(self, kwargs) -> None:
        with pytest.raises(ValueError):
            TrainingConfig(**kwargs)


class TestTrain:
    """Tests for ModelTrainer.train."""

    def test_returns_estimator_with_history(
        self, small_config, encoder, generator
    ) -> None:
        """Training records one entry per epoch and a trailing validation split."""
        estimator = ModelTrainer(small_config, encoder, generator).train()

        assert isinstance(estimator, PriceEstimator)
        assert estimator.input_width == 12

        history = estimator.history
        assert [record.epoch for record in history.epochs] == [1, 2]
        assert history.train_size == 51  # int(64 * 0.8)
        assert history.val_size == 13
        assert history.val_metrics is not None
        assert history.val_metrics.n_samples == 13
        assert history.final_train_loss > 0
        assert history.final_val_loss is not None

    def test_generates_configured_sample_count(self, small_config, encoder) -> None:
        generator = MagicMock(wraps=SyntheticDataGenerator(np.random.default_rng(0)))

        ModelTrainer(small_config, encoder, generator).train()

        generator.generate.assert_called_once_with(64)

    def test_same_seed_reproduces_model(self, small_config, encoder) -> None:
        """Seeded data and seeded torch produce identical predictions."""
        vector = np.full(12, 0.5, dtype=np.float32)

        first = ModelTrainer(
            small_config, encoder, SyntheticDataGenerator(np.random.default_rng(7))
        ).train()
        second = ModelTrainer(
            small_config, encoder, SyntheticDataGenerator(np.random.default_rng(7))
        ).train()

        assert first.predict(vector) == pytest.approx(second.predict(vector))

    def test_no_validation_split(self, encoder, generator) -> None:
        """validation_split of 0 trains on everything and skips metrics."""
        config = TrainingConfig(
            sample_count=32, epochs=1, batch_size=8, validation_split=0.0, seed=1
        )

        history = ModelTrainer(config, encoder, generator).train().history

        assert history.train_size == 32
        assert history.val_size == 0
        assert history.val_metrics is None
        assert history.final_val_loss is None

    def test_empty_training_set_raises(self, small_config, encoder) -> None:
        generator = MagicMock()
        generator.generate.return_value = []

        with pytest.raises(TrainingError, match="no training examples"):
            ModelTrainer(small_config, encoder, generator).train()

    def test_non_finite_loss_raises(
        self, small_config, encoder, mumbai_apartment
    ) -> None:
        """NaN labels make the loss non-finite and abort training."""
        generator = MagicMock()
        generator.generate.return_value = [
            TrainingExample(features=mumbai_apartment, price=float("nan"))
        ] * 64

        with pytest.raises(TrainingError, match="non-finite"):
            ModelTrainer(small_config, encoder, generator).train()

    def test_history_to_dict(self, small_config, encoder, generator) -> None:
        history = ModelTrainer(small_config, encoder, generator).train().history

        result = history.to_dict()

        assert result["epochs"] == 2
        assert result["train_size"] == 51
        assert result["val_metrics"]["n_samples"] == 13
