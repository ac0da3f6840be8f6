"""
Evaluation module for scoring price predictions.

Used by the trainer to report diagnostics on the held-out validation split.

Usage:
    from price_estimator.evaluation import calculate_metrics

    metrics = calculate_metrics(y_true, y_pred)
    print(f"MAPE: {metrics.mape:.2%}, R²: {metrics.r2:.3f}")
"""

from .errors import EmptyDatasetError, EvaluationError, MetricsError
from .metrics import MetricsConfig, calculate_metrics, validate_predictions
from .models import PredictionMetrics

__all__ = [
    "calculate_metrics",
    "validate_predictions",
    "MetricsConfig",
    "PredictionMetrics",
    # Errors
    "EvaluationError",
    "MetricsError",
    "EmptyDatasetError",
]
