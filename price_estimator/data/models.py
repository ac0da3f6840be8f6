"""Data models for property features and training examples."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

import numpy as np

# Fixed-width numeric representation produced by FeatureEncoder
EncodedVector = np.ndarray


@dataclass(frozen=True)
class PropertyFeatures:
    """
    Raw attributes of a residential property.

    No range validation happens here. Out-of-range values are passed
    through and the encoder degrades softly on them.
    """

    size: float  # Square feet
    bedrooms: float
    bathrooms: float
    location: str  # urban, suburban or rural
    city: str
    state: str
    country: str  # Informational only
    year_built: int
    has_garage: bool
    has_pool: bool

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PropertyFeatures:
        """Create from dictionary (JSON deserialization)."""
        return cls(
            size=float(data["size"]),
            bedrooms=float(data["bedrooms"]),
            bathrooms=float(data["bathrooms"]),
            location=str(data["location"]),
            city=str(data.get("city", "")),
            state=str(data.get("state", "")),
            country=str(data.get("country", "")),
            year_built=int(data["year_built"]),
            has_garage=bool(data.get("has_garage", False)),
            has_pool=bool(data.get("has_pool", False)),
        )


@dataclass(frozen=True)
class TrainingExample:
    """A synthetic property paired with its price label. Never persisted."""

    features: PropertyFeatures
    price: float
