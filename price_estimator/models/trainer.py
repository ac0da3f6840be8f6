"""Training of the price network on synthetic data."""

from __future__ import annotations

import logging
import math
import time

import numpy as np
import torch
from torch import nn
from torch.utils.data import DataLoader, TensorDataset

from ..data.feature_encoder import FeatureEncoder
from ..data.synthetic import SyntheticDataGenerator
from ..evaluation.errors import MetricsError
from ..evaluation.metrics import MetricsConfig, calculate_metrics, validate_predictions
from .errors import TrainingError
from .estimator import PriceEstimator
from .models import EpochRecord, TrainingConfig, TrainingHistory
from .network import build_price_network

logger = logging.getLogger(__name__)


class ModelTrainer:
    """
    Train a price network from scratch on freshly generated synthetic data.

    Steps:
    1. Generate sample_count labeled examples
    2. Encode features with the shared FeatureEncoder
    3. Hold out the trailing validation_split fraction
    4. Fit with Adam on mean squared error, reshuffling every epoch
    5. Score the held-out split (diagnostic only)

    Usage:
        trainer = ModelTrainer(TrainingConfig(), encoder, generator)
        estimator = trainer.train()
    """

    def __init__(
        self,
        config: TrainingConfig,
        encoder: FeatureEncoder,
        generator: SyntheticDataGenerator,
        metrics_config: MetricsConfig | None = None,
    ):
        self._config = config
        self._encoder = encoder
        self._generator = generator
        self._metrics_config = metrics_config or MetricsConfig()

    @property
    def config(self) -> TrainingConfig:
        return self._config

    def train(self) -> PriceEstimator:
        """
        Run one full training.

        Returns:
            PriceEstimator wrapping the network after the final epoch

        Raises:
            TrainingError: If no examples were produced or training diverged
        """
        config = self._config
        start = time.perf_counter()

        examples = self._generator.generate(config.sample_count)
        if not examples:
            raise TrainingError("Synthetic generator produced no training examples")

        x = self._encoder.encode_batch([example.features for example in examples])
        y = np.array([[example.price] for example in examples], dtype=np.float32)

        if config.seed is not None:
            torch.manual_seed(config.seed)

        input_width = self._encoder.get_feature_count()
        network = build_price_network(input_width)

        logger.info(
            f"Training price network on {len(examples)} synthetic examples "
            f"({config.epochs} epochs, batch size {config.batch_size})"
        )

        history = self._fit(network, x, y)
        history.duration_seconds = time.perf_counter() - start

        logger.info(
            f"Training finished in {history.duration_seconds:.1f}s, "
            f"final loss {history.final_train_loss:.4g}"
            + (
                f", validation MAPE {history.val_metrics.mape:.2%}"
                if history.val_metrics
                else ""
            )
        )

        return PriceEstimator(network, input_width=input_width, history=history)

    def _fit(self, network: nn.Module, x: np.ndarray, y: np.ndarray) -> TrainingHistory:
        """Fit network in place and return collected diagnostics."""
        config = self._config

        # Trailing split, taken before any shuffling
        split_at = int(len(x) * (1.0 - config.validation_split))
        if split_at == 0:
            raise TrainingError(
                f"validation_split {config.validation_split} leaves no training "
                f"examples out of {len(x)}"
            )

        x_train = torch.tensor(x[:split_at])
        y_train = torch.tensor(y[:split_at])
        x_val = torch.tensor(x[split_at:])
        y_val = torch.tensor(y[split_at:])

        loader_generator = torch.Generator()
        if config.seed is not None:
            loader_generator.manual_seed(config.seed)
        loader = DataLoader(
            TensorDataset(x_train, y_train),
            batch_size=config.batch_size,
            shuffle=config.shuffle,
            generator=loader_generator,
        )

        optimizer = torch.optim.Adam(network.parameters(), lr=config.learning_rate)
        loss_fn = nn.MSELoss()

        history = TrainingHistory(train_size=len(x_train), val_size=len(x_val))

        for epoch in range(1, config.epochs + 1):
            network.train()
            total_loss = 0.0
            for batch_x, batch_y in loader:
                optimizer.zero_grad()
                loss = loss_fn(network(batch_x), batch_y)
                loss.backward()
                optimizer.step()
                total_loss += loss.item() * len(batch_x)

            train_loss = total_loss / len(x_train)
            if not math.isfinite(train_loss):
                raise TrainingError(
                    f"Training loss became non-finite at epoch {epoch}: {train_loss}"
                )

            val_loss = None
            if len(x_val) > 0:
                network.eval()
                with torch.inference_mode():
                    val_loss = loss_fn(network(x_val), y_val).item()

            history.epochs.append(
                EpochRecord(epoch=epoch, train_loss=train_loss, val_loss=val_loss)
            )
            logger.debug(
                f"Epoch {epoch}/{config.epochs}: loss={train_loss:.4g} "
                f"val_loss={val_loss if val_loss is None else format(val_loss, '.4g')}"
            )

        network.eval()
        if len(x_val) > 0:
            history.val_metrics = self._score_validation(network, x_val, y_val)

        return history

    def _score_validation(
        self, network: nn.Module, x_val: torch.Tensor, y_val: torch.Tensor
    ):
        """Compute regression metrics on the held-out split."""
        with torch.inference_mode():
            predictions = network(x_val).numpy()

        try:
            predictions = validate_predictions(predictions, expected_length=len(y_val))
        except MetricsError as e:
            raise TrainingError(f"Invalid validation predictions: {e}") from e

        return calculate_metrics(y_val.numpy(), predictions, self._metrics_config)
