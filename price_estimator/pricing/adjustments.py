"""Post-processing market adjustments applied to raw model output."""

import logging
import math
from datetime import datetime

from ..data.models import PropertyFeatures
from .constants import CITY_PREMIUMS

logger = logging.getLogger(__name__)

MARKET_TREND_MULTIPLIER = 1.1  # Flat assumed 10% growth
SEASONAL_AMPLITUDE = 0.05


def city_premium(city: str) -> float:
    """Premium multiplier for a major city, 1.0 for any other value."""
    return CITY_PREMIUMS.get(city, 1.0)


def seasonal_multiplier(now: datetime) -> float:
    """
    Cyclical multiplier for the calendar month of now.

    1 + 0.05 * sin(2 * pi * month_index / 12) with a 0-based month index,
    so January is neutral and April peaks.
    """
    month_index = now.month - 1
    return 1.0 + SEASONAL_AMPLITUDE * math.sin(2 * math.pi * month_index / 12)


def apply_market_adjustments(
    raw_price: float, features: PropertyFeatures, now: datetime
) -> float:
    """
    Layer city premium, market trend and seasonality onto a raw price.

    Output depends on the month of now, so the same input priced in
    different months differs by up to +/-5%.

    Args:
        raw_price: Unadjusted network output
        features: Property being priced
        now: Evaluation time

    Returns:
        Adjusted price (unrounded)
    """
    adjusted = raw_price * city_premium(features.city)
    adjusted *= MARKET_TREND_MULTIPLIER
    adjusted *= seasonal_multiplier(now)

    logger.debug(f"Adjusted raw price {raw_price:.2f} -> {adjusted:.2f}")
    return adjusted
