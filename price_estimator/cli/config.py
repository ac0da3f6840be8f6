"""
Shared CLI configuration: options backed by environment variables.
"""

from __future__ import annotations

import argparse
import logging
import os
from pathlib import Path
from typing import Any

from ..models.models import TrainingConfig


def _optional_int(value: str | None) -> int | None:
    return int(value) if value not in (None, "") else None


def add_args(parser: argparse.ArgumentParser) -> None:
    """
    Add shared arguments to the parser.

    Arguments can be overridden by environment variables.
    """

    parser.add_argument(
        "--log_level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level.",
        default=os.environ.get("LOG_LEVEL", "WARNING"),
    )

    parser.add_argument(
        "--training.samples",
        dest="training_samples",
        type=int,
        help="Number of synthetic examples to train on.",
        default=int(os.environ.get("TRAINING_SAMPLES", "1000")),
    )

    parser.add_argument(
        "--training.epochs",
        dest="training_epochs",
        type=int,
        help="Number of training epochs.",
        default=int(os.environ.get("TRAINING_EPOCHS", "50")),
    )

    parser.add_argument(
        "--training.seed",
        dest="training_seed",
        type=int,
        help="Seed for synthetic data and weight initialization (random if unset).",
        default=_optional_int(os.environ.get("TRAINING_SEED")),
    )

    parser.add_argument(
        "--feature_config",
        dest="feature_config",
        type=str,
        help="Path to a custom feature_config.yaml.",
        default=os.environ.get("FEATURE_CONFIG_PATH") or None,
    )


def check_config(config: argparse.Namespace) -> None:
    """
    Validate configuration.

    Raises:
        ValueError: If configuration is invalid.
    """
    if config.training_samples <= 0:
        raise ValueError("--training.samples must be positive (or set TRAINING_SAMPLES)")

    if config.training_epochs <= 0:
        raise ValueError("--training.epochs must be positive (or set TRAINING_EPOCHS)")

    if config.feature_config is not None and not Path(config.feature_config).exists():
        raise ValueError(f"--feature_config file not found: {config.feature_config}")


def training_config_from(config: argparse.Namespace) -> TrainingConfig:
    """Build a TrainingConfig from parsed arguments."""
    return TrainingConfig(
        sample_count=config.training_samples,
        epochs=config.training_epochs,
        seed=config.training_seed,
    )


def config_to_dict(config: argparse.Namespace) -> dict[str, Any]:
    """Convert config to dictionary for logging."""
    return {
        "log_level": config.log_level,
        "training_samples": config.training_samples,
        "training_epochs": config.training_epochs,
        "training_seed": config.training_seed,
        "feature_config": config.feature_config,
    }


def setup_logging(level: str) -> None:
    """Configure logging."""
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
