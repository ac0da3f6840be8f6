"""Shared fixtures for data unit tests."""

import shutil
from pathlib import Path

import pytest
import yaml

from price_estimator.data import DEFAULT_CONFIG_PATH, FeatureEncoder


@pytest.fixture
def encoder() -> FeatureEncoder:
    """Encoder with the packaged default layout."""
    return FeatureEncoder()


@pytest.fixture
def config_dir(tmp_path: Path) -> Path:
    """Temporary copy of the packaged feature config and mappings."""
    target = tmp_path / "mappings"
    shutil.copytree(DEFAULT_CONFIG_PATH.parent, target)
    return target


@pytest.fixture
def write_config(config_dir: Path):
    """Rewrite feature_config.yaml in config_dir with edits applied."""

    def _write(edit) -> Path:
        path = config_dir / "feature_config.yaml"
        with open(path) as f:
            config = yaml.safe_load(f)
        edit(config)
        with open(path, "w") as f:
            yaml.safe_dump(config, f)
        return path

    return _write
