"""Data models for model training."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..evaluation.models import PredictionMetrics


@dataclass(frozen=True)
class TrainingConfig:
    """Configuration for training the price network."""

    sample_count: int = 1000  # Synthetic examples to generate
    epochs: int = 50
    batch_size: int = 32
    learning_rate: float = 0.001
    validation_split: float = 0.2  # Trailing fraction held out, diagnostic only
    shuffle: bool = True  # Reshuffle training examples every epoch
    seed: int | None = None  # Seeds torch weight init and shuffling

    def __post_init__(self) -> None:
        if self.sample_count <= 0:
            raise ValueError(f"sample_count must be positive, got {self.sample_count}")
        if self.epochs <= 0:
            raise ValueError(f"epochs must be positive, got {self.epochs}")
        if self.batch_size <= 0:
            raise ValueError(f"batch_size must be positive, got {self.batch_size}")
        if self.learning_rate <= 0:
            raise ValueError(
                f"learning_rate must be positive, got {self.learning_rate}"
            )
        if not 0.0 <= self.validation_split < 1.0:
            raise ValueError(
                f"validation_split must be in [0, 1), got {self.validation_split}"
            )


@dataclass(frozen=True)
class EpochRecord:
    """Losses observed at the end of one epoch."""

    epoch: int
    train_loss: float
    val_loss: float | None = None


@dataclass
class TrainingHistory:
    """
    Diagnostics collected while training.

    Validation results never influence which weights are kept: the network
    after the final epoch is always the one returned.
    """

    epochs: list[EpochRecord] = field(default_factory=list)
    train_size: int = 0
    val_size: int = 0
    val_metrics: PredictionMetrics | None = None
    duration_seconds: float = 0.0

    @property
    def final_train_loss(self) -> float | None:
        return self.epochs[-1].train_loss if self.epochs else None

    @property
    def final_val_loss(self) -> float | None:
        return self.epochs[-1].val_loss if self.epochs else None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization (excludes per-epoch records)."""
        return {
            "epochs": len(self.epochs),
            "train_size": self.train_size,
            "val_size": self.val_size,
            "final_train_loss": self.final_train_loss,
            "final_val_loss": self.final_val_loss,
            "val_metrics": self.val_metrics.to_dict() if self.val_metrics else None,
            "duration_seconds": round(self.duration_seconds, 3),
        }
