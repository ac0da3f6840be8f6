"""
Price Estimator CLI - Estimate residential property prices.

Usage:
    price-estimator predict --size 1200 --bedrooms 2 --bathrooms 2 \\
        --location urban --city Mumbai --state Maharashtra --year-built 2015 --garage
    price-estimator train --training.seed 42
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

from ..data.models import PropertyFeatures
from ..pricing.errors import PricingError
from ..pricing.factory import create_pricing_service
from ..pricing.formatting import format_indian_price
from .config import (
    add_args,
    check_config,
    config_to_dict,
    setup_logging,
    training_config_from,
)

logger = logging.getLogger(__name__)


def _features_from_args(args: argparse.Namespace) -> PropertyFeatures:
    return PropertyFeatures(
        size=args.size,
        bedrooms=args.bedrooms,
        bathrooms=args.bathrooms,
        location=args.location,
        city=args.city,
        state=args.state,
        country=args.country,
        year_built=args.year_built,
        has_garage=args.has_garage,
        has_pool=args.has_pool,
    )


def _create_service(args: argparse.Namespace):
    feature_config = Path(args.feature_config) if args.feature_config else None
    return create_pricing_service(
        training_config=training_config_from(args),
        feature_config_path=feature_config,
    )


def cmd_predict(args: argparse.Namespace) -> int:
    """Execute the predict command."""
    features = _features_from_args(args)
    service = _create_service(args)

    result = asyncio.run(service.estimate(features))

    if args.json:
        print(json.dumps(result.to_dict()))
        return 0

    print("Price Estimate:")
    print(f"  Price:      {format_indian_price(result.price)}")
    print(f"  Confidence: {result.confidence:.0f}%")
    return 0


def cmd_train(args: argparse.Namespace) -> int:
    """Execute the train command."""
    service = _create_service(args)

    print("Training price model on synthetic data...")
    estimator = service.model_cache.get_model_sync()
    history = estimator.history

    if args.json:
        print(json.dumps(history.to_dict()))
        return 0

    print()
    print("Training Results:")
    print(f"  Examples:   {history.train_size} train / {history.val_size} validation")
    print(f"  Epochs:     {len(history.epochs)}")
    print(f"  Final loss: {history.final_train_loss:.4g}")
    print(f"  Duration:   {history.duration_seconds:.1f}s")

    metrics = history.val_metrics
    if metrics is not None:
        print()
        print("Validation Metrics (diagnostic):")
        print(f"  MAPE:  {metrics.mape:.2%}")
        print(f"  MAE:   {format_indian_price(metrics.mae)}")
        print(f"  RMSE:  {format_indian_price(metrics.rmse)}")
        print(f"  R²:    {metrics.r2:.4f}")

    return 0


def parse_args(args: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="price-estimator",
        description="Estimate residential property prices with a confidence score",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    common = argparse.ArgumentParser(add_help=False)
    add_args(common)

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        help="Command to execute",
    )

    # ─────────────────────────────────────────────────────────────────────────
    # PREDICT command
    # ─────────────────────────────────────────────────────────────────────────
    predict_parser = subparsers.add_parser(
        "predict",
        parents=[common],
        help="Estimate the price of one property",
        description="Train the model (once) and price the given property.",
    )

    predict_parser.add_argument("--size", type=float, required=True, metavar="SQFT")
    predict_parser.add_argument("--bedrooms", type=float, required=True, metavar="N")
    predict_parser.add_argument("--bathrooms", type=float, required=True, metavar="N")
    predict_parser.add_argument(
        "--location",
        required=True,
        metavar="CLASS",
        help="Location class: urban, suburban or rural",
    )
    predict_parser.add_argument("--city", default="", metavar="CITY")
    predict_parser.add_argument("--state", default="", metavar="STATE")
    predict_parser.add_argument("--country", default="India", metavar="COUNTRY")
    predict_parser.add_argument(
        "--year-built", dest="year_built", type=int, required=True, metavar="YEAR"
    )
    predict_parser.add_argument(
        "--garage", dest="has_garage", action="store_true", help="Property has a garage"
    )
    predict_parser.add_argument(
        "--pool", dest="has_pool", action="store_true", help="Property has a pool"
    )
    predict_parser.add_argument(
        "--json", action="store_true", help="Print the result as JSON"
    )

    # ─────────────────────────────────────────────────────────────────────────
    # TRAIN command
    # ─────────────────────────────────────────────────────────────────────────
    train_parser = subparsers.add_parser(
        "train",
        parents=[common],
        help="Train the price model and report diagnostics",
        description="Train once on synthetic data and print validation metrics.",
    )
    train_parser.add_argument(
        "--json", action="store_true", help="Print the training summary as JSON"
    )

    return parser.parse_args(args)


def main(args: list[str] | None = None) -> int:
    """CLI entry point."""
    config = parse_args(args)
    setup_logging(config.log_level)

    try:
        check_config(config)
        logger.debug(f"Configuration: {config_to_dict(config)}")

        if config.command == "predict":
            return cmd_predict(config)
        elif config.command == "train":
            return cmd_train(config)
        else:
            print(f"ERROR: Unknown command: {config.command}", file=sys.stderr)
            return 2

    except (PricingError, ValueError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nInterrupted")
        return 130
    except Exception as e:
        print(f"ERROR: Unexpected error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
