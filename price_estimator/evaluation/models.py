"""Data models for evaluation module."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class PredictionMetrics:
    """
    Regression metrics for a set of price predictions.

    All percentage-based metrics are stored as decimals (e.g., 0.085 for 8.5%).
    """

    # Error metrics (lower is better)
    mae: float  # Mean Absolute Error (₹)
    mape: float  # Mean Absolute Percentage Error
    rmse: float  # Root Mean Squared Error (₹)
    mdape: float  # Median Absolute Percentage Error

    # Fraction of predictions within each threshold, keyed by threshold
    accuracy: dict[float, float]

    r2: float  # Coefficient of determination (-inf, 1]

    n_samples: int

    def get_accuracy(self, threshold: float) -> float | None:
        """Get accuracy at a specific threshold, or None if not computed."""
        return self.accuracy.get(threshold)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "mae": round(self.mae, 2),
            "mape": round(self.mape, 6),
            "rmse": round(self.rmse, 2),
            "mdape": round(self.mdape, 6),
            "r2": round(self.r2, 4),
            "n_samples": self.n_samples,
            "accuracy": {
                f"{threshold:.0%}": round(value, 4)
                for threshold, value in sorted(self.accuracy.items())
            },
        }
