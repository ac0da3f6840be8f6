"""Unit tests for market adjustments."""

from __future__ import annotations

import dataclasses
from datetime import UTC, datetime

import pytest

from price_estimator.pricing import (
    CITY_PREMIUMS,
    apply_market_adjustments,
    city_premium,
    seasonal_multiplier,
)


class TestCityPremium:
    """Tests for city_premium."""

    @pytest.mark.parametrize(
        "city,expected",
        [
            ("Mumbai", 1.4),
            ("Bangalore", 1.3),
            ("Delhi", 1.35),
            ("Pune", 1.25),
            ("Chennai", 1.2),
        ],
    )
    def test_major_cities(self, city: str, expected: float) -> None:
        assert city_premium(city) == expected

    @pytest.mark.parametrize("city", ["", "Springfield", "mumbai", "synthetic"])
    def test_other_cities_are_neutral(self, city: str) -> None:
        """Lookup is exact and case-sensitive."""
        assert city_premium(city) == 1.0

    def test_five_premium_cities(self) -> None:
        assert len(CITY_PREMIUMS) == 5


class TestSeasonalMultiplier:
    """Tests for seasonal_multiplier."""

    def test_january_is_neutral(self) -> None:
        assert seasonal_multiplier(datetime(2025, 1, 31, tzinfo=UTC)) == 1.0

    def test_april_peaks(self) -> None:
        assert seasonal_multiplier(datetime(2025, 4, 1, tzinfo=UTC)) == pytest.approx(
            1.05
        )

    def test_october_troughs(self) -> None:
        assert seasonal_multiplier(
            datetime(2025, 10, 1, tzinfo=UTC)
        ) == pytest.approx(0.95)

    def test_july_is_neutral(self) -> None:
        assert seasonal_multiplier(datetime(2025, 7, 1, tzinfo=UTC)) == pytest.approx(
            1.0
        )

    def test_stays_within_five_percent(self) -> None:
        for month in range(1, 13):
            value = seasonal_multiplier(datetime(2025, month, 1, tzinfo=UTC))
            assert 0.95 - 1e-12 <= value <= 1.05 + 1e-12


class TestApplyMarketAdjustments:
    """Tests for apply_market_adjustments."""

    def test_mumbai_in_january(self, mumbai_apartment, fixed_now) -> None:
        """1.4 city premium times 1.1 market trend, neutral season."""
        result = apply_market_adjustments(1_000_000, mumbai_apartment, fixed_now)

        assert result == pytest.approx(1_540_000)

    def test_unknown_city_only_gets_trend(self, mumbai_apartment, fixed_now) -> None:
        features = dataclasses.replace(mumbai_apartment, city="Springfield")

        result = apply_market_adjustments(1_000_000, features, fixed_now)

        assert result == pytest.approx(1_100_000)

    def test_same_input_differs_by_month(self, mumbai_apartment) -> None:
        april = apply_market_adjustments(
            1_000_000, mumbai_apartment, datetime(2025, 4, 1, tzinfo=UTC)
        )
        october = apply_market_adjustments(
            1_000_000, mumbai_apartment, datetime(2025, 10, 1, tzinfo=UTC)
        )

        assert april == pytest.approx(1_540_000 * 1.05)
        assert october == pytest.approx(1_540_000 * 0.95)

    def test_negative_raw_price_passes_through(
        self, mumbai_apartment, fixed_now
    ) -> None:
        """No clamping of the network output."""
        result = apply_market_adjustments(-100.0, mumbai_apartment, fixed_now)

        assert result == pytest.approx(-154.0)
