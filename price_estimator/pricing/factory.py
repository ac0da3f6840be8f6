"""Factory functions for creating pricing components."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from pathlib import Path

import numpy as np

from ..data.feature_encoder import FeatureEncoder
from ..data.synthetic import SyntheticDataGenerator
from ..models.cache import ModelCache
from ..models.models import TrainingConfig
from ..models.trainer import ModelTrainer
from .service import PricingService


def create_pricing_service(
    training_config: TrainingConfig | None = None,
    feature_config_path: Path | None = None,
    clock: Callable[[], datetime] | None = None,
) -> PricingService:
    """
    Create a fully-wired PricingService.

    This is the main entry point for the pricing module.
    Handles all internal wiring of encoder, generator, trainer and cache.
    Nothing is trained until the first price request.

    Args:
        training_config: Optional custom training config (uses defaults if None).
            Its seed, when set, also seeds the synthetic data generator.
        feature_config_path: Optional custom encoder layout
        clock: Optional clock for seasonal and age terms (UTC now if None)

    Returns:
        Ready-to-use PricingService

    Example:
        service = create_pricing_service(TrainingConfig(seed=42))
        result = await service.estimate(features)
    """
    training_config = training_config or TrainingConfig()
    encoder = FeatureEncoder(feature_config_path)
    generator = SyntheticDataGenerator(np.random.default_rng(training_config.seed))
    trainer = ModelTrainer(training_config, encoder, generator)

    return PricingService(
        encoder=encoder,
        model_cache=ModelCache(trainer.train),
        clock=clock,
    )
