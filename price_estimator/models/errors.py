"""Custom exceptions for model module."""


class ModelError(Exception):
    """Base exception for model-related errors."""

    pass


class TrainingError(ModelError):
    """
    Raised when the price network cannot be trained.

    This can happen when:
    - Synthetic generator produced no examples
    - Loss became NaN or Inf during an epoch
    - Validation predictions are not finite
    """

    pass


class InferenceError(ModelError):
    """
    Raised when a prediction cannot be produced.

    This can happen when:
    - Input vector width doesn't match the network input
    - Network output is NaN or Inf
    """

    pass
