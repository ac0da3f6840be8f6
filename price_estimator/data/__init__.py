"""Data module for property features, encoding and synthetic training data."""

from .errors import DataError, FeatureConfigError
from .feature_encoder import DEFAULT_CONFIG_PATH, FeatureEncoder
from .feature_transforms import bool_to_float, lookup_embedding, normalize, one_hot
from .models import EncodedVector, PropertyFeatures, TrainingExample
from .synthetic import (
    LOCATIONS,
    PRICING_REFERENCE_YEAR,
    SUPPORTED_STATES,
    SyntheticDataGenerator,
    calculate_synthetic_price,
)

__all__ = [
    # Errors
    "DataError",
    "FeatureConfigError",
    # Feature encoding
    "FeatureEncoder",
    "DEFAULT_CONFIG_PATH",
    "normalize",
    "one_hot",
    "lookup_embedding",
    "bool_to_float",
    # Models
    "EncodedVector",
    "PropertyFeatures",
    "TrainingExample",
    # Synthetic data
    "SyntheticDataGenerator",
    "calculate_synthetic_price",
    "LOCATIONS",
    "SUPPORTED_STATES",
    "PRICING_REFERENCE_YEAR",
]
