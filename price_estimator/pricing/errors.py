"""Custom exceptions for pricing module."""


class PricingError(Exception):
    """Base exception for pricing-related errors."""

    pass


class PredictionFailedError(PricingError):
    """
    Raised when a price prediction cannot be produced.

    Single generic failure surfaced to callers of the pricing facade.
    The underlying cause (training or inference failure) is chained
    as __cause__. No retry is attempted.
    """

    pass
