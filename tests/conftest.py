"""Pytest configuration and fixtures."""

import json
import tempfile
from pathlib import Path

import pytest

from json_key_filter.config import AppConfig, set_config


@pytest.fixture(autouse=True)
def reset_config(monkeypatch):
    """Each test starts from default configuration."""
    for field in AppConfig.model_fields:
        monkeypatch.delenv(f"JSON_KEY_FILTER_{field.upper()}", raising=False)
    set_config(None)
    yield
    set_config(None)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def export_config(temp_dir):
    config = AppConfig(export_dir=temp_dir)
    set_config(config)
    return config


@pytest.fixture
def simple_doc():
    return {"a": 1, "b": {"c": 2}}


@pytest.fixture
def users_doc():
    return {"users": [{"name": "Al", "age": 1}, {"name": "Bo", "age": 2}]}


@pytest.fixture
def sample_mixed_json():
    """Sample mixed structure JSON for testing."""
    return {
        "metadata": {
            "version": "1.0",
            "created": "2024-01-01",
            "owner": None,
        },
        "data": [
            {"type": "A", "values": [1, 2, 3]},
            {"type": "B", "values": [4, 5, 6], "extra": {"flag": True}},
        ],
        "config": {
            "enabled": True,
            "settings": {
                "timeout": 30,
                "retries": 3
            },
            "tags": [],
        },
        "matrix": [[1, 2], [3]],
    }


@pytest.fixture
def users_file(temp_dir, users_doc):
    path = temp_dir / "users.json"
    path.write_text(json.dumps(users_doc), encoding="utf-8")
    return path
