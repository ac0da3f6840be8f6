"""Pytest configuration and shared fixtures."""

from datetime import UTC, datetime

import pytest

from price_estimator.data import PropertyFeatures


@pytest.fixture
def fixed_now() -> datetime:
    """
    January 2025 evaluation time.

    January is the neutral month for seasonality (multiplier exactly 1.0),
    which keeps adjusted-price expectations exact.
    """
    return datetime(2025, 1, 15, tzinfo=UTC)


@pytest.fixture
def mumbai_apartment() -> PropertyFeatures:
    """Urban two-bedroom apartment in Mumbai with a garage."""
    return PropertyFeatures(
        size=1200,
        bedrooms=2,
        bathrooms=2,
        location="urban",
        city="Mumbai",
        state="Maharashtra",
        country="India",
        year_built=2015,
        has_garage=True,
        has_pool=False,
    )
