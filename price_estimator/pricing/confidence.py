"""Heuristic confidence score, independent of the price network."""

import math
from datetime import datetime

from ..data.models import PropertyFeatures
from .constants import MAJOR_CITIES

BASE_CONFIDENCE = 85
MIN_CONFIDENCE = 70
MAX_CONFIDENCE = 95


def calculate_confidence(features: PropertyFeatures, now: datetime) -> float:
    """
    Score how much an estimate for these features can be trusted.

    Starts at 85, rewards complete inputs and major cities, subtracts one
    point per full decade of age (never a bonus for future years), then
    clamps to [70, 95].

    Args:
        features: Property being priced
        now: Evaluation time, only its year is used

    Returns:
        Confidence in [70, 95]
    """
    confidence = BASE_CONFIDENCE

    # Input completeness
    confidence += 2 if features.size > 0 else -5
    confidence += 2 if features.bedrooms > 0 else -3
    confidence += 2 if features.bathrooms > 0 else -3
    confidence += 2 if features.city else -4
    confidence += 2 if features.state else -4

    confidence += 3 if features.city in MAJOR_CITIES else -2

    age_decades = math.floor((now.year - features.year_built) / 10)
    confidence -= max(0, age_decades)

    return float(min(MAX_CONFIDENCE, max(MIN_CONFIDENCE, confidence)))
