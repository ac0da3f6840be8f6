"""Model module for training, caching and running the price network."""

from .cache import ModelCache
from .errors import InferenceError, ModelError, TrainingError
from .estimator import PriceEstimator
from .models import EpochRecord, TrainingConfig, TrainingHistory
from .network import build_price_network
from .trainer import ModelTrainer

__all__ = [
    # Errors
    "ModelError",
    "TrainingError",
    "InferenceError",
    # Config / results
    "TrainingConfig",
    "TrainingHistory",
    "EpochRecord",
    # Components
    "build_price_network",
    "ModelTrainer",
    "PriceEstimator",
    "ModelCache",
]
