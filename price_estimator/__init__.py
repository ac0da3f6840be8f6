"""Residential property price estimation with heuristic confidence scoring.

Usage:
    from price_estimator import PropertyFeatures, create_pricing_service

    service = create_pricing_service()
    result = await service.estimate(features)
"""

from .data import PropertyFeatures
from .pricing import PredictionResult, PricingService, create_pricing_service

__version__ = "0.1.0"

__all__ = [
    "PropertyFeatures",
    "PredictionResult",
    "PricingService",
    "create_pricing_service",
]
