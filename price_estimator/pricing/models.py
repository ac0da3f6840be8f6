"""Data models for pricing results."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class PredictionResult:
    """Final price estimate with its confidence score (70-95)."""

    price: int
    confidence: float

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {"price": self.price, "confidence": self.confidence}
