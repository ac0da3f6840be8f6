"""Feature transform implementations.

Small pure functions used by FeatureEncoder to turn raw property
attributes into numeric components. None of them raise on out-of-domain
input: unknown categories degrade to a zero or default vector and
out-of-range numbers normalize outside [0, 1].
"""

from collections.abc import Mapping, Sequence
from typing import Any


def normalize(value: float, min_value: float, max_value: float) -> float:
    """
    Min-max normalize a value against fixed bounds.

    Values outside the bounds are not clamped, so the result may be
    below 0 or above 1.
    """
    return (float(value) - min_value) / (max_value - min_value)


def one_hot(value: Any, categories: Sequence[str]) -> list[float]:
    """
    One-hot encode a categorical value.

    Matching is exact and case-sensitive. An unknown value encodes as
    an all-zero vector.
    """
    return [1.0 if value == category else 0.0 for category in categories]


def lookup_embedding(
    value: Any,
    embeddings: Mapping[str, Sequence[float]],
    default: Sequence[float],
) -> list[float]:
    """Return the embedding for value, or the default vector if unmatched."""
    if isinstance(value, str) and value in embeddings:
        return [float(x) for x in embeddings[value]]
    return [float(x) for x in default]


def bool_to_float(value: Any) -> float:
    """Convert a truthy/falsy flag to 1.0 / 0.0."""
    return 1.0 if value else 0.0
