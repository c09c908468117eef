"""Shared fixtures for staffgen tests."""

import pytest

from staffgen import config as config_module
from staffgen.config import reset_config

# 2023-11-14T22:13:20.000Z
FIXED_NOW_MS = 1_700_000_000_000

_ENV_VARS = (
    "DEFAULT_COUNT",
    "DEFAULT_MIN_AGE",
    "DEFAULT_MAX_AGE",
    "DEFAULT_OUTPUT_FORMAT",
)


class SequenceSource:
    """Uniform source double that replays fixed draws in order."""

    def __init__(self, values):
        self._values = list(values)
        self.calls = 0

    def random(self) -> float:
        value = self._values[self.calls]
        self.calls += 1
        return value


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point the config file at a temp dir and clear env overrides."""
    config_dir = tmp_path / "config"
    monkeypatch.setattr(config_module, "CONFIG_DIR", config_dir)
    monkeypatch.setattr(config_module, "CONFIG_FILE", config_dir / "config.json")
    for var in _ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    reset_config()
    yield config_dir / "config.json"
    reset_config()


@pytest.fixture
def fixed_clock():
    return lambda: FIXED_NOW_MS


@pytest.fixture
def sequence_source():
    """Factory for SequenceSource doubles."""
    return SequenceSource
