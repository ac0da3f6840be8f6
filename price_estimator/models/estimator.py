"""Trained price estimator handle."""

from __future__ import annotations

import logging

import numpy as np
import torch
from torch import nn

from .errors import InferenceError
from .models import TrainingHistory

logger = logging.getLogger(__name__)


class PriceEstimator:
    """
    Read-only wrapper around a trained price network.

    The network is kept in eval mode (dropout disabled) and all forward
    passes run under torch.inference_mode, so concurrent predictions do
    not mutate shared state.
    """

    def __init__(
        self,
        network: nn.Module,
        input_width: int,
        history: TrainingHistory | None = None,
    ):
        self._network = network
        self._network.eval()
        self._input_width = input_width
        self._history = history or TrainingHistory()

    @property
    def input_width(self) -> int:
        return self._input_width

    @property
    def history(self) -> TrainingHistory:
        return self._history

    def predict(self, vector: np.ndarray) -> float:
        """
        Predict the raw, unadjusted price for one encoded vector.

        Args:
            vector: Encoded features, shape (input_width,)

        Returns:
            Raw price

        Raises:
            InferenceError: On wrong width or non-finite output
        """
        vector = np.asarray(vector, dtype=np.float32)
        if vector.ndim != 1:
            raise InferenceError(
                f"Expected a 1D vector, got array of shape {vector.shape}"
            )
        return float(self.predict_batch(vector.reshape(1, -1))[0])

    def predict_batch(self, matrix: np.ndarray) -> np.ndarray:
        """
        Predict raw prices for a batch of encoded vectors.

        Args:
            matrix: Encoded features, shape (N, input_width)

        Returns:
            np.ndarray of shape (N,), dtype float64

        Raises:
            InferenceError: On wrong shape or non-finite output
        """
        matrix = np.ascontiguousarray(matrix, dtype=np.float32)
        if matrix.ndim != 2 or matrix.shape[1] != self._input_width:
            raise InferenceError(
                f"Expected input of shape (N, {self._input_width}), got {matrix.shape}"
            )

        with torch.inference_mode():
            output = self._network(torch.tensor(matrix))
            prices = output.reshape(-1).numpy().astype(np.float64)

        if not np.all(np.isfinite(prices)):
            raise InferenceError(
                f"Network produced {int(np.sum(~np.isfinite(prices)))} non-finite predictions"
            )

        logger.debug(f"Predicted {len(prices)} raw prices")
        return prices
