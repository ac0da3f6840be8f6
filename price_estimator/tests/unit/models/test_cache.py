"""Unit tests for ModelCache single-flight training."""

from __future__ import annotations

import asyncio
import threading
from unittest.mock import MagicMock

import pytest

from price_estimator.models import ModelCache, TrainingError


def _blocking_train_fn(result, release: threading.Event) -> MagicMock:
    """train_fn that blocks until release is set."""

    def train():
        release.wait(timeout=5)
        if isinstance(result, Exception):
            raise result
        return result

    return MagicMock(side_effect=train)


class TestModelCacheInitial:
    """Tests for cache state before training."""

    def test_not_ready_and_nothing_trained(self, mock_estimator) -> None:
        train_fn = MagicMock(return_value=mock_estimator)

        cache = ModelCache(train_fn)

        assert cache.is_ready is False
        assert cache.training_runs == 0
        train_fn.assert_not_called()


class TestModelCacheGetModel:
    """Tests for ModelCache.get_model."""

    @pytest.mark.asyncio
    async def test_first_call_trains_and_caches(self, mock_estimator) -> None:
        train_fn = MagicMock(return_value=mock_estimator)
        cache = ModelCache(train_fn)

        result = await cache.get_model()

        assert result is mock_estimator
        assert cache.is_ready is True
        assert cache.training_runs == 1

    @pytest.mark.asyncio
    async def test_sequential_calls_reuse_model(self, mock_estimator) -> None:
        train_fn = MagicMock(return_value=mock_estimator)
        cache = ModelCache(train_fn)

        first = await cache.get_model()
        second = await cache.get_model()

        assert first is second
        train_fn.assert_called_once()

    @pytest.mark.asyncio
    async def test_concurrent_calls_share_one_run(self, mock_estimator) -> None:
        """Callers arriving mid-training await the same run."""
        release = threading.Event()
        train_fn = _blocking_train_fn(mock_estimator, release)
        cache = ModelCache(train_fn)

        tasks = [asyncio.create_task(cache.get_model()) for _ in range(5)]
        await asyncio.sleep(0.05)
        release.set()
        results = await asyncio.gather(*tasks)

        assert all(result is mock_estimator for result in results)
        assert train_fn.call_count == 1
        assert cache.training_runs == 1

    @pytest.mark.asyncio
    async def test_failure_reaches_every_waiter(self) -> None:
        release = threading.Event()
        train_fn = _blocking_train_fn(TrainingError("diverged"), release)
        cache = ModelCache(train_fn)

        tasks = [asyncio.create_task(cache.get_model()) for _ in range(3)]
        await asyncio.sleep(0.05)
        release.set()
        results = await asyncio.gather(*tasks, return_exceptions=True)

        assert all(isinstance(result, TrainingError) for result in results)
        assert train_fn.call_count == 1
        assert cache.is_ready is False

    @pytest.mark.asyncio
    async def test_failure_is_not_cached(self, mock_estimator) -> None:
        """Next request after a failed run starts a new one."""
        train_fn = MagicMock(side_effect=[TrainingError("diverged"), mock_estimator])
        cache = ModelCache(train_fn)

        with pytest.raises(TrainingError, match="diverged"):
            await cache.get_model()

        result = await cache.get_model()

        assert result is mock_estimator
        assert cache.training_runs == 2

    @pytest.mark.asyncio
    async def test_cancelled_waiter_does_not_cancel_training(
        self, mock_estimator
    ) -> None:
        release = threading.Event()
        train_fn = _blocking_train_fn(mock_estimator, release)
        cache = ModelCache(train_fn)

        cancelled = asyncio.create_task(cache.get_model())
        survivor = asyncio.create_task(cache.get_model())
        await asyncio.sleep(0.05)

        cancelled.cancel()
        with pytest.raises(asyncio.CancelledError):
            await cancelled

        release.set()
        result = await survivor

        assert result is mock_estimator
        assert cache.training_runs == 1


class TestModelCacheGetModelSync:
    """Tests for ModelCache.get_model_sync."""

    def test_trains_once(self, mock_estimator) -> None:
        train_fn = MagicMock(return_value=mock_estimator)
        cache = ModelCache(train_fn)

        assert cache.get_model_sync() is mock_estimator
        assert cache.get_model_sync() is mock_estimator
        train_fn.assert_called_once()

    @pytest.mark.asyncio
    async def test_shares_model_with_async_callers(self, mock_estimator) -> None:
        train_fn = MagicMock(return_value=mock_estimator)
        cache = ModelCache(train_fn)

        sync_result = await asyncio.to_thread(cache.get_model_sync)
        async_result = await cache.get_model()

        assert sync_result is async_result
        train_fn.assert_called_once()

    def test_propagates_training_error(self) -> None:
        cache = ModelCache(MagicMock(side_effect=TrainingError("diverged")))

        with pytest.raises(TrainingError):
            cache.get_model_sync()
