"""Pricing facade combining the price network, adjustments and confidence."""

from __future__ import annotations

import asyncio
import logging
import math
from collections.abc import Callable
from datetime import UTC, datetime

from ..data.feature_encoder import FeatureEncoder
from ..data.models import PropertyFeatures
from ..models.cache import ModelCache
from .adjustments import apply_market_adjustments
from .confidence import calculate_confidence
from .errors import PredictionFailedError
from .models import PredictionResult

logger = logging.getLogger(__name__)


def _default_clock() -> datetime:
    """Default clock returning current UTC time."""
    return datetime.now(UTC)


class PricingService:
    """
    Entry point for price and confidence estimation.

    Owns the model cache, so the network is trained at most once per
    service instance, on the first price request.

    Usage:
        service = create_pricing_service()
        price = await service.predict_price(features)
        confidence = service.calculate_confidence(features)
    """

    def __init__(
        self,
        encoder: FeatureEncoder,
        model_cache: ModelCache,
        clock: Callable[[], datetime] | None = None,
    ):
        """
        Initialize pricing service.

        Args:
            encoder: Feature encoder matching the network input layout
            model_cache: Single-flight cache producing the trained estimator
            clock: Returns the evaluation time. Defaults to UTC now.
        """
        self._encoder = encoder
        self._model_cache = model_cache
        self._clock = clock or _default_clock

    @property
    def model_cache(self) -> ModelCache:
        return self._model_cache

    async def predict_price(self, features: PropertyFeatures) -> int:
        """
        Estimate the market price of a property.

        May suspend while the network trains (first call only) and while
        inference runs.

        Args:
            features: Property to price

        Returns:
            Adjusted price rounded to the nearest rupee (halves round up)

        Raises:
            PredictionFailedError: If training or inference fails
        """
        try:
            model = await self._model_cache.get_model()
            vector = self._encoder.encode(features)
            raw_price = await asyncio.to_thread(model.predict, vector)
        except Exception as e:
            logger.error(f"Price prediction failed: {e}")
            raise PredictionFailedError(f"Price prediction failed: {e}") from e

        adjusted = apply_market_adjustments(raw_price, features, self._clock())
        price = math.floor(adjusted + 0.5)

        logger.debug(f"Predicted price {price} (raw {raw_price:.2f})")
        return price

    def calculate_confidence(self, features: PropertyFeatures) -> float:
        """Confidence score in [70, 95] for features, independent of the model."""
        return calculate_confidence(features, self._clock())

    async def estimate(self, features: PropertyFeatures) -> PredictionResult:
        """Price and confidence together."""
        price = await self.predict_price(features)
        return PredictionResult(
            price=price, confidence=self.calculate_confidence(features)
        )
