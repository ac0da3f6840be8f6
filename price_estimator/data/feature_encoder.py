"""Feature encoder for converting property features to network input."""

import json
import logging
from collections.abc import Sequence
from pathlib import Path

import numpy as np
import yaml

from .errors import FeatureConfigError
from .feature_transforms import bool_to_float, lookup_embedding, normalize, one_hot
from .models import EncodedVector, PropertyFeatures

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent / "mappings" / "feature_config.yaml"


class FeatureEncoder:
    """
    Encodes PropertyFeatures into fixed-width float32 vectors.

    Loads the layout (normalization bounds, one-hot categories, embedding
    tables, boolean flags and their order) from YAML/JSON files.
    Configuration problems surface at construction time; encoding itself
    never raises for unknown categories or out-of-range numbers.
    """

    def __init__(self, config_path: Path | None = None):
        """
        Initialize encoder with feature configuration.

        Args:
            config_path: Path to feature_config.yaml. If None, uses default location.
        """
        if config_path is None:
            config_path = DEFAULT_CONFIG_PATH

        self._config_path = Path(config_path)
        self._mappings_dir = self._config_path.parent

        self._load_config()
        self._load_embeddings()
        self._validate_feature_order()

        logger.info(
            f"FeatureEncoder initialized with {self.get_feature_count()} features "
            f"from {self._config_path}"
        )

    def _load_config(self) -> None:
        """Load feature configuration from YAML."""
        try:
            with open(self._config_path) as f:
                self._config = yaml.safe_load(f)
        except FileNotFoundError as e:
            raise FeatureConfigError(
                f"Config file not found: {self._config_path}"
            ) from e
        except yaml.YAMLError as e:
            raise FeatureConfigError(f"Invalid YAML in feature config: {e}") from e

        if not isinstance(self._config, dict):
            raise FeatureConfigError(
                f"Feature config must be a mapping: {self._config_path}"
            )

        required_keys = {
            "numeric_fields",
            "one_hot_fields",
            "embedding_fields",
            "boolean_fields",
            "feature_order",
        }
        missing = required_keys - self._config.keys()
        if missing:
            raise FeatureConfigError(
                f"Feature config missing required keys: {sorted(missing)}"
            )

    def _load_embeddings(self) -> None:
        """Load embedding tables from JSON files."""
        self._embeddings: dict[str, dict[str, list[float]]] = {}
        self._embedding_defaults: dict[str, list[float]] = {}

        for field, spec in self._config["embedding_fields"].items():
            mapping_path = self._mappings_dir / spec["mapping"]
            try:
                with open(mapping_path) as f:
                    table = json.load(f)
            except FileNotFoundError as e:
                raise FeatureConfigError(
                    f"Mapping file not found for field '{field}': {mapping_path}"
                ) from e
            except json.JSONDecodeError as e:
                raise FeatureConfigError(
                    f"Invalid JSON in mapping file for field '{field}': {e}"
                ) from e

            default = list(spec["default"])
            widths = {len(vector) for vector in table.values()} | {len(default)}
            if len(widths) != 1:
                raise FeatureConfigError(
                    f"Embedding vectors for field '{field}' have inconsistent "
                    f"widths: {sorted(widths)}"
                )

            self._embeddings[field] = table
            self._embedding_defaults[field] = default

    def _validate_feature_order(self) -> None:
        """Check every ordered field is declared in exactly one field group."""
        declared = (
            set(self._config["numeric_fields"])
            | set(self._config["one_hot_fields"])
            | set(self._config["embedding_fields"])
            | set(self._config["boolean_fields"])
        )
        unknown = [f for f in self._config["feature_order"] if f not in declared]
        if unknown:
            raise FeatureConfigError(
                f"Fields in feature_order are not declared in any field group: {unknown}"
            )

        missing_attrs = [
            f
            for f in self._config["feature_order"]
            if f not in PropertyFeatures.__dataclass_fields__
        ]
        if missing_attrs:
            raise FeatureConfigError(
                f"Fields in feature_order are not PropertyFeatures attributes: "
                f"{missing_attrs}"
            )

    def encode(self, features: PropertyFeatures) -> EncodedVector:
        """
        Encode a single property.

        Args:
            features: Property to encode

        Returns:
            np.ndarray of shape (num_features,), dtype float32
        """
        return np.array(self._encode_single(features), dtype=np.float32)

    def encode_batch(self, batch: Sequence[PropertyFeatures]) -> np.ndarray:
        """
        Encode a batch of properties.

        Args:
            batch: Properties to encode

        Returns:
            np.ndarray of shape (len(batch), num_features), dtype float32
        """
        logger.debug(f"Encoding {len(batch)} properties")

        rows = [self._encode_single(features) for features in batch]
        result = np.array(rows, dtype=np.float32).reshape(
            len(rows), self.get_feature_count()
        )

        logger.debug(f"Encoded to array shape {result.shape}")
        return result

    def _encode_single(self, features: PropertyFeatures) -> list[float]:
        """Encode a single property according to feature_order."""
        values: list[float] = []
        numeric_fields = self._config["numeric_fields"]
        one_hot_fields = self._config["one_hot_fields"]
        boolean_fields = self._config["boolean_fields"]

        for field in self._config["feature_order"]:
            raw = getattr(features, field)

            if field in numeric_fields:
                bounds = numeric_fields[field]
                values.append(normalize(raw, bounds["min"], bounds["max"]))

            elif field in one_hot_fields:
                values.extend(one_hot(raw, one_hot_fields[field]))

            elif field in self._embeddings:
                values.extend(
                    lookup_embedding(
                        raw, self._embeddings[field], self._embedding_defaults[field]
                    )
                )

            elif field in boolean_fields:
                values.append(bool_to_float(raw))

        return values

    def get_feature_names(self) -> list[str]:
        """Return ordered list of expanded feature names."""
        names: list[str] = []
        for field in self._config["feature_order"]:
            if field in self._config["one_hot_fields"]:
                names.extend(
                    f"{field}_{category}"
                    for category in self._config["one_hot_fields"][field]
                )
            elif field in self._embeddings:
                width = len(self._embedding_defaults[field])
                names.extend(f"{field}_{i}" for i in range(width))
            else:
                names.append(field)
        return names

    def get_feature_count(self) -> int:
        """Return total number of components in an encoded vector."""
        return len(self.get_feature_names())

    def get_categories(self, field: str) -> list[str]:
        """Return the one-hot categories for a field."""
        if field not in self._config["one_hot_fields"]:
            raise FeatureConfigError(f"No one-hot categories for field: {field}")
        return list(self._config["one_hot_fields"][field])

    def get_embedding_table(self, field: str) -> dict[str, list[float]]:
        """Return a copy of the embedding table for a field."""
        if field not in self._embeddings:
            raise FeatureConfigError(f"No embedding table for field: {field}")
        return {key: list(vector) for key, vector in self._embeddings[field].items()}
