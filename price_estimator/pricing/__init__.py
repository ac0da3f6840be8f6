"""Pricing module: price estimation facade, market adjustments and confidence."""

from .adjustments import (
    MARKET_TREND_MULTIPLIER,
    apply_market_adjustments,
    city_premium,
    seasonal_multiplier,
)
from .confidence import MAX_CONFIDENCE, MIN_CONFIDENCE, calculate_confidence
from .constants import CITY_PREMIUMS, MAJOR_CITIES
from .errors import PredictionFailedError, PricingError
from .factory import create_pricing_service
from .formatting import format_indian_price
from .models import PredictionResult
from .service import PricingService

__all__ = [
    # Factory (main entry point)
    "create_pricing_service",
    "PricingService",
    # Components
    "apply_market_adjustments",
    "city_premium",
    "seasonal_multiplier",
    "calculate_confidence",
    "format_indian_price",
    # Constants
    "CITY_PREMIUMS",
    "MAJOR_CITIES",
    "MARKET_TREND_MULTIPLIER",
    "MIN_CONFIDENCE",
    "MAX_CONFIDENCE",
    # Models
    "PredictionResult",
    # Errors
    "PricingError",
    "PredictionFailedError",
]
