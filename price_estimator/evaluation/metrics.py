"""
Prediction accuracy metrics for the diagnostic validation split:
- MAE: Mean Absolute Error
- MAPE: Mean Absolute Percentage Error
- RMSE: Root Mean Squared Error
- MdAPE: Median Absolute Percentage Error
- Accuracy@X%: Fraction of predictions within X% of actual
- R²: Coefficient of Determination

All percentage-based metrics are returned as decimals (0.0-1.0 scale).
Ground truth prices are assumed to be strictly positive, which holds for
every synthetic label.
"""

from dataclasses import dataclass

import numpy as np

from .errors import EmptyDatasetError, MetricsError
from .models import PredictionMetrics


@dataclass(frozen=True)
class MetricsConfig:
    """Configuration for metrics calculation."""

    max_pct_error: float | None = None
    """Maximum percentage error cap (e.g., 2.0 = 200%). None = no capping."""

    accuracy_thresholds: tuple[float, ...] = (0.05, 0.10, 0.15)
    """Thresholds for accuracy metrics (as decimals). Default: 5%, 10%, 15%."""


def calculate_metrics(
    y_true: np.ndarray,
    y_pred: np.ndarray,
    config: MetricsConfig | None = None,
) -> PredictionMetrics:
    """
    Calculate all prediction metrics.

    Args:
        y_true: Ground truth prices (1D array)
        y_pred: Predicted prices (1D array)
        config: Metrics configuration. Defaults to MetricsConfig().

    Returns:
        PredictionMetrics with all computed values

    Raises:
        MetricsError: If arrays have different lengths
        EmptyDatasetError: If arrays are empty

    Example:
        >>> y_true = np.array([2_000_000, 5_000_000, 10_000_000])
        >>> y_pred = np.array([2_100_000, 4_500_000, 11_000_000])
        >>> metrics = calculate_metrics(y_true, y_pred)
        >>> print(f"MAPE: {metrics.mape:.4f}")
        MAPE: 0.0833
    """
    config = config or MetricsConfig()

    y_true = np.asarray(y_true, dtype=np.float64).flatten()
    y_pred = np.asarray(y_pred, dtype=np.float64).flatten()

    if len(y_true) != len(y_pred):
        raise MetricsError(
            f"Array length mismatch: y_true={len(y_true)}, y_pred={len(y_pred)}"
        )

    if len(y_true) == 0:
        raise EmptyDatasetError("Empty input arrays")

    accuracy = {
        threshold: _calculate_accuracy_at_threshold(y_true, y_pred, threshold)
        for threshold in config.accuracy_thresholds
    }

    return PredictionMetrics(
        mae=_calculate_mae(y_true, y_pred),
        mape=_calculate_mape(y_true, y_pred, config.max_pct_error),
        rmse=_calculate_rmse(y_true, y_pred),
        mdape=_calculate_mdape(y_true, y_pred),
        accuracy=accuracy,
        r2=_calculate_r2(y_true, y_pred),
        n_samples=len(y_true),
    )


# --- Individual metric functions ---


def _calculate_mae(y_true: np.ndarray, y_pred: np.ndarray) -> float:
    return float(np.mean(np.abs(y_true - y_pred)))


def _calculate_mape(
    y_true: np.ndarray, y_pred: np.ndarray, max_error: float | None = None
) -> float:
    """MAPE = mean(|y_true - y_pred| / y_true), optionally capped per sample."""
    pct_errors = np.abs(y_true - y_pred) / y_true
    if max_error is not None:
        pct_errors = np.clip(pct_errors, 0, max_error)
    return float(np.mean(pct_errors))


def _calculate_rmse(y_true: np.ndarray, y_pred: np.ndarray) -> float:
    return float(np.sqrt(np.mean((y_true - y_pred) ** 2)))


def _calculate_mdape(y_true: np.ndarray, y_pred: np.ndarray) -> float:
    pct_errors = np.abs(y_true - y_pred) / y_true
    return float(np.median(pct_errors))


def _calculate_r2(y_true: np.ndarray, y_pred: np.ndarray) -> float:
    """
    Calculate R² (Coefficient of Determination).

    Returns 1.0 for a perfect fit of constant ground truth and 0.0 for an
    imperfect one, where R² is otherwise undefined.
    """
    ss_res = np.sum((y_true - y_pred) ** 2)
    ss_tot = np.sum((y_true - np.mean(y_true)) ** 2)

    if ss_tot == 0:
        return 1.0 if ss_res == 0 else 0.0

    return float(1 - (ss_res / ss_tot))


def _calculate_accuracy_at_threshold(
    y_true: np.ndarray,
    y_pred: np.ndarray,
    threshold: float,
) -> float:
    pct_errors = np.abs(y_true - y_pred) / y_true
    return float(np.mean(pct_errors < threshold))


def validate_predictions(
    predictions: np.ndarray,
    expected_length: int | None = None,
) -> np.ndarray:
    """
    Validate and normalize prediction array.

    Args:
        predictions: Raw predictions, shape (N,) or (N, 1)
        expected_length: Expected number of predictions (optional)

    Returns:
        Validated 1D float64 array

    Raises:
        MetricsError: On bad shape, length mismatch, NaN or Inf
    """
    predictions = np.asarray(predictions, dtype=np.float64)

    if predictions.ndim == 2 and predictions.shape[1] == 1:
        predictions = predictions.flatten()
    elif predictions.ndim != 1:
        raise MetricsError(
            f"Invalid prediction shape: {predictions.shape}. Expected 1D or (N,1)."
        )

    if expected_length is not None and len(predictions) != expected_length:
        raise MetricsError(
            f"Prediction count mismatch: got {len(predictions)}, expected {expected_length}"
        )

    if np.any(np.isnan(predictions)):
        nan_count = np.sum(np.isnan(predictions))
        raise MetricsError(f"Predictions contain {nan_count} NaN values")

    if np.any(np.isinf(predictions)):
        inf_count = np.sum(np.isinf(predictions))
        raise MetricsError(f"Predictions contain {inf_count} Inf values")

    return predictions
