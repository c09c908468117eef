"""Configuration management for staffgen.

Holds the CLI defaults for generation (count, age range, output format).
The library entry point never reads config; only the CLI does.

Config resolution order (highest priority first):
1. Programmatic (StaffgenConfig constructed in code)
2. Environment variables (DEFAULT_COUNT, DEFAULT_MIN_AGE, etc.)
3. Config file (~/.config/staffgen/config.json, managed by `staffgen config`)
4. Hardcoded defaults
"""

import json
import logging
import os
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Any

from .population.sampler.core import OUTPUT_FORMATS


logger = logging.getLogger(__name__)


# =============================================================================
# Config file location
# =============================================================================

CONFIG_DIR = Path.home() / ".config" / "staffgen"
CONFIG_FILE = CONFIG_DIR / "config.json"


# =============================================================================
# Config dataclasses
# =============================================================================


@dataclass
class DefaultsConfig:
    """Defaults used by `staffgen generate` when options are omitted."""

    count: int = 10
    min_age: float = 18.0
    max_age: float = 65.0
    output_format: str = "json"


@dataclass
class StaffgenConfig:
    """Top-level staffgen configuration.

    Examples:
        # Package use — no files needed
        config = StaffgenConfig(defaults=DefaultsConfig(count=100))

        # CLI use — loads from ~/.config/staffgen/config.json
        config = StaffgenConfig.load()
    """

    defaults: DefaultsConfig = field(default_factory=DefaultsConfig)

    @classmethod
    def load(cls) -> "StaffgenConfig":
        """Load config from file + env vars.

        Priority: env var values > config.json values > defaults.
        """
        config = cls()

        # Layer 1: Load from config file if it exists
        if CONFIG_FILE.exists():
            try:
                with open(CONFIG_FILE) as f:
                    data = json.load(f)
                loaded = cls()
                _apply_dict(loaded, data)
                config = loaded
            except (json.JSONDecodeError, OSError, TypeError, ValueError) as exc:
                logger.warning("Failed to load config from %s: %s", CONFIG_FILE, exc)

        # Layer 2: Env var overrides
        if val := os.environ.get("DEFAULT_COUNT"):
            try:
                config.defaults.count = int(val)
            except ValueError:
                logger.warning("Invalid DEFAULT_COUNT=%r, ignoring", val)
        if val := os.environ.get("DEFAULT_MIN_AGE"):
            try:
                config.defaults.min_age = float(val)
            except ValueError:
                logger.warning("Invalid DEFAULT_MIN_AGE=%r, ignoring", val)
        if val := os.environ.get("DEFAULT_MAX_AGE"):
            try:
                config.defaults.max_age = float(val)
            except ValueError:
                logger.warning("Invalid DEFAULT_MAX_AGE=%r, ignoring", val)
        if val := os.environ.get("DEFAULT_OUTPUT_FORMAT"):
            if val in OUTPUT_FORMATS:
                config.defaults.output_format = val
            else:
                logger.warning("Invalid DEFAULT_OUTPUT_FORMAT=%r, ignoring", val)

        return config

    def save(self) -> None:
        """Save config to ~/.config/staffgen/config.json."""
        CONFIG_DIR.mkdir(parents=True, exist_ok=True)
        with open(CONFIG_FILE, "w") as f:
            json.dump(self.to_dict(), f, indent=2)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for display."""
        return {"defaults": asdict(self.defaults)}


# =============================================================================
# Config dict application
# =============================================================================

_FIELD_TYPES = {
    "count": int,
    "min_age": float,
    "max_age": float,
    "output_format": str,
}


def _apply_dict(config: StaffgenConfig, data: dict) -> None:
    """Apply a dict of values onto a StaffgenConfig."""
    if "defaults" in data and isinstance(data["defaults"], dict):
        for k, v in data["defaults"].items():
            if k in _FIELD_TYPES:
                setattr(config.defaults, k, _FIELD_TYPES[k](v))


def coerce_value(key: str, value: str) -> Any:
    """Coerce a raw string for a `defaults.<field>` key.

    Raises:
        KeyError: If the key is unknown
        ValueError: If the value does not fit the field
    """
    zone, _, field_name = key.partition(".")
    if zone != "defaults" or field_name not in _FIELD_TYPES:
        raise KeyError(key)
    if field_name == "output_format" and value not in OUTPUT_FORMATS:
        raise ValueError(
            f"Expected one of {', '.join(OUTPUT_FORMATS)}, got {value!r}"
        )
    return _FIELD_TYPES[field_name](value)


# =============================================================================
# Global config singleton
# =============================================================================

_config: StaffgenConfig | None = None


def get_config() -> StaffgenConfig:
    """Get the global StaffgenConfig instance.

    First call loads from file + env vars. Subsequent calls return cached instance.
    Use configure() to replace the global config programmatically.
    """
    global _config
    if _config is None:
        _config = StaffgenConfig.load()
    return _config


def configure(config: StaffgenConfig) -> None:
    """Set the global StaffgenConfig programmatically."""
    global _config
    _config = config


def reset_config() -> None:
    """Reset the global config (forces reload on next get_config())."""
    global _config
    _config = None
