"""Process-lifetime, single-flight cache for the trained price estimator."""

from __future__ import annotations

import asyncio
import logging
import threading
from collections.abc import Callable
from concurrent.futures import Future, ThreadPoolExecutor

from .estimator import PriceEstimator

logger = logging.getLogger(__name__)


class ModelCache:
    """
    Lazily train the price estimator once and hand the same instance to
    every caller.

    Lifecycle:
    - Empty on construction, nothing is trained up front
    - The first request submits one training run to a dedicated worker
      thread and publishes its Future as the shared pending handle
    - Requests arriving while training runs await that same Future
    - On success the estimator is cached for the lifetime of the cache
      (no invalidation, no retrain)
    - On failure every waiter of that run receives the exception, the
      pending handle is cleared, and the next request starts a new run

    Awaiting callers are shielded, so cancelling one waiter never cancels
    the training run the others depend on.
    """

    def __init__(self, train_fn: Callable[[], PriceEstimator]):
        """
        Initialize model cache.

        Args:
            train_fn: Blocking function producing a trained estimator
        """
        self._train_fn = train_fn
        self._lock = threading.Lock()
        self._model: PriceEstimator | None = None
        self._pending: Future | None = None
        self._training_runs = 0
        self._executor = ThreadPoolExecutor(
            max_workers=1, thread_name_prefix="model-training"
        )

    @property
    def is_ready(self) -> bool:
        """True once a trained estimator is cached."""
        return self._model is not None

    @property
    def training_runs(self) -> int:
        """Number of training runs started so far."""
        return self._training_runs

    async def get_model(self) -> PriceEstimator:
        """
        Get the cached estimator, training it first if needed.

        Returns:
            The shared PriceEstimator

        Raises:
            Exception: Whatever the training run raised
        """
        model = self._model
        if model is not None:
            return model

        future = self._acquire()
        return await asyncio.shield(asyncio.wrap_future(future))

    def get_model_sync(self) -> PriceEstimator:
        """Blocking variant of get_model sharing the same training run."""
        model = self._model
        if model is not None:
            return model

        return self._acquire().result()

    def _acquire(self) -> Future:
        """Return the pending training Future, starting a run if none exists."""
        with self._lock:
            if self._pending is None:
                logger.info("No cached price model, starting training")
                self._pending = self._executor.submit(self._run_training)
            return self._pending

    def _run_training(self) -> PriceEstimator:
        """Execute one training run on the worker thread."""
        with self._lock:
            self._training_runs += 1

        try:
            model = self._train_fn()
        except Exception as e:
            logger.error(f"Price model training failed: {e}")
            with self._lock:
                self._pending = None
            raise

        with self._lock:
            self._model = model
        logger.info("Price model trained and cached")
        return model
