"""Synthetic labeled data for training the price network.

Records are sampled uniformly over the supported feature ranges and
labeled with a fixed pricing formula plus +/-10% multiplicative noise,
so the network relearns a known formula rather than real market data.
"""

from __future__ import annotations

import logging

import numpy as np

from .models import PropertyFeatures, TrainingExample

logger = logging.getLogger(__name__)

LOCATIONS = ("urban", "suburban", "rural")
SUPPORTED_STATES = ("Maharashtra", "Karnataka", "Delhi", "Tamil Nadu", "Gujarat")

SYNTHETIC_CITY = "synthetic"
SYNTHETIC_COUNTRY = "India"

# Sampling bounds (inclusive)
SIZE_RANGE = (100.0, 10000.0)
BEDROOM_RANGE = (1, 10)
BATHROOM_RANGE = (1, 8)
YEAR_BUILT_RANGE = (1900, 2025)
GARAGE_PROBABILITY = 0.5
POOL_PROBABILITY = 0.3

# Pricing formula
BASE_PRICE = 2_500_000
PRICE_PER_SQFT = 2_000
PRICE_PER_BEDROOM = 500_000
PRICE_PER_BATHROOM = 300_000
LOCATION_MULTIPLIERS = {
    "urban": 1.3,
    "suburban": 1.1,
    "rural": 0.9,
}
STATE_MULTIPLIERS = {
    "Maharashtra": 1.5,
    "Karnataka": 1.4,
    "Delhi": 1.6,
    "Tamil Nadu": 1.3,
    "Gujarat": 1.2,
}
DEFAULT_STATE_MULTIPLIER = 1.0
# Fixed reference year for the age term, intentionally not the current year.
PRICING_REFERENCE_YEAR = 2025
PRICE_PER_YEAR_OF_AGE = 20_000
GARAGE_PREMIUM = 400_000
POOL_PREMIUM = 600_000
NOISE_RANGE = (0.9, 1.1)


def calculate_synthetic_price(
    features: PropertyFeatures, rng: np.random.Generator
) -> float:
    """
    Price a property with the synthetic formula, including the noise term.

    Unknown locations fall back to a multiplier of 1.0 the same way unknown
    states do. The age term is not clamped, so a year_built after
    PRICING_REFERENCE_YEAR lowers the price.

    Args:
        features: Property to price
        rng: Random source for the multiplicative noise

    Returns:
        Noisy price label
    """
    price = float(BASE_PRICE)
    price += features.size * PRICE_PER_SQFT
    price += features.bedrooms * PRICE_PER_BEDROOM
    price += features.bathrooms * PRICE_PER_BATHROOM
    price *= LOCATION_MULTIPLIERS.get(features.location, 1.0)
    price *= STATE_MULTIPLIERS.get(features.state, DEFAULT_STATE_MULTIPLIER)
    price += (PRICING_REFERENCE_YEAR - features.year_built) * PRICE_PER_YEAR_OF_AGE
    if features.has_garage:
        price += GARAGE_PREMIUM
    if features.has_pool:
        price += POOL_PREMIUM

    price *= rng.uniform(*NOISE_RANGE)
    return float(price)


class SyntheticDataGenerator:
    """
    Generate randomized training examples.

    Usage:
        generator = SyntheticDataGenerator(np.random.default_rng(42))
        examples = generator.generate(1000)
    """

    def __init__(self, rng: np.random.Generator | None = None):
        """
        Initialize generator.

        Args:
            rng: Random source. A fresh unseeded generator is used if None.
        """
        self._rng = rng if rng is not None else np.random.default_rng()

    def generate(self, count: int) -> list[TrainingExample]:
        """
        Sample count independent labeled examples.

        Args:
            count: Number of examples (0 yields an empty list)

        Returns:
            List of TrainingExample
        """
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")

        examples = []
        for _ in range(count):
            features = self._sample_features()
            price = calculate_synthetic_price(features, self._rng)
            examples.append(TrainingExample(features=features, price=price))

        logger.debug(f"Generated {len(examples)} synthetic examples")
        return examples

    def _sample_features(self) -> PropertyFeatures:
        """Sample one feature record from the configured ranges."""
        rng = self._rng
        return PropertyFeatures(
            size=float(rng.uniform(*SIZE_RANGE)),
            bedrooms=float(rng.integers(BEDROOM_RANGE[0], BEDROOM_RANGE[1] + 1)),
            bathrooms=float(rng.integers(BATHROOM_RANGE[0], BATHROOM_RANGE[1] + 1)),
            location=LOCATIONS[rng.integers(len(LOCATIONS))],
            city=SYNTHETIC_CITY,
            state=SUPPORTED_STATES[rng.integers(len(SUPPORTED_STATES))],
            country=SYNTHETIC_COUNTRY,
            year_built=int(
                rng.integers(YEAR_BUILT_RANGE[0], YEAR_BUILT_RANGE[1] + 1)
            ),
            has_garage=bool(rng.random() < GARAGE_PROBABILITY),
            has_pool=bool(rng.random() < POOL_PROBABILITY),
        )
