"""Custom exceptions for evaluation module."""


class EvaluationError(Exception):
    """Base exception for evaluation-related errors."""

    pass


# --- Metrics errors ---


class MetricsError(EvaluationError):
    """
    Raised when metrics calculation fails.

    This can happen when:
    - Input arrays have different lengths
    - Predictions have an unexpected shape
    - Predictions contain NaN or Inf
    """

    pass


class EmptyDatasetError(MetricsError):
    """
    Raised when dataset is empty.

    This can happen when:
    - validation_split leaves no held-out examples
    """

    pass
