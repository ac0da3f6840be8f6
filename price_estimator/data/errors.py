"""Custom exceptions for data module."""


class DataError(Exception):
    """Base exception for data-related errors."""

    pass


# --- Feature encoding errors ---


class FeatureConfigError(DataError):
    """
    Raised when feature configuration is invalid or cannot be loaded.

    This can happen when:
    - Config file not found
    - Invalid YAML/JSON syntax
    - Missing required keys in config
    - Mapping file not found
    - Field in feature_order not declared in any field group
    - Embedding vectors have inconsistent widths
    """

    pass
