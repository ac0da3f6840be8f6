"""
Command-line interface for the price estimator.

Usage:
    # Price a property
    price-estimator predict --size 1200 --bedrooms 2 --bathrooms 2 \\
        --location urban --city Mumbai --state Maharashtra --year-built 2015

    # Train once and inspect validation diagnostics
    price-estimator train --training.seed 42
"""

from .cli import main, parse_args

__all__ = ["main", "parse_args"]
