"""Tests for config loading and resolution."""

import json
import logging

import pytest

from staffgen.config import (
    DefaultsConfig,
    StaffgenConfig,
    coerce_value,
    configure,
    get_config,
    reset_config,
)


class TestLoad:
    def test_defaults(self):
        config = StaffgenConfig.load()
        assert config.defaults == DefaultsConfig()
        assert config.defaults.count == 10
        assert config.defaults.output_format == "json"

    def test_file_values(self, isolated_config):
        isolated_config.parent.mkdir(parents=True)
        isolated_config.write_text(
            json.dumps({"defaults": {"count": 50, "max_age": "70"}})
        )
        config = StaffgenConfig.load()
        assert config.defaults.count == 50
        assert config.defaults.max_age == 70.0
        assert config.defaults.min_age == 18.0

    def test_env_overrides_file(self, isolated_config, monkeypatch):
        isolated_config.parent.mkdir(parents=True)
        isolated_config.write_text(json.dumps({"defaults": {"count": 50}}))
        monkeypatch.setenv("DEFAULT_COUNT", "7")
        monkeypatch.setenv("DEFAULT_MIN_AGE", "21.5")
        monkeypatch.setenv("DEFAULT_OUTPUT_FORMAT", "csv")
        config = StaffgenConfig.load()
        assert config.defaults.count == 7
        assert config.defaults.min_age == 21.5
        assert config.defaults.output_format == "csv"

    def test_invalid_env_ignored(self, monkeypatch, caplog):
        monkeypatch.setenv("DEFAULT_COUNT", "many")
        monkeypatch.setenv("DEFAULT_OUTPUT_FORMAT", "xml")
        with caplog.at_level(logging.WARNING, logger="staffgen.config"):
            config = StaffgenConfig.load()
        assert config.defaults.count == 10
        assert config.defaults.output_format == "json"
        assert "DEFAULT_COUNT" in caplog.text

    def test_corrupt_file_ignored(self, isolated_config, caplog):
        isolated_config.parent.mkdir(parents=True)
        isolated_config.write_text("{not json")
        with caplog.at_level(logging.WARNING, logger="staffgen.config"):
            config = StaffgenConfig.load()
        assert config.defaults == DefaultsConfig()
        assert "Failed to load config" in caplog.text


class TestSave:
    def test_round_trip(self, isolated_config):
        config = StaffgenConfig(defaults=DefaultsConfig(count=3, max_age=40.0))
        config.save()
        assert json.loads(isolated_config.read_text())["defaults"]["count"] == 3
        loaded = StaffgenConfig.load()
        assert loaded.defaults.count == 3
        assert loaded.defaults.max_age == 40.0


class TestSingleton:
    def test_cached(self):
        assert get_config() is get_config()

    def test_configure_and_reset(self):
        custom = StaffgenConfig(defaults=DefaultsConfig(count=99))
        configure(custom)
        assert get_config() is custom
        reset_config()
        assert get_config().defaults.count == 10


class TestCoerceValue:
    def test_int_field(self):
        assert coerce_value("defaults.count", "12") == 12

    def test_float_field(self):
        assert coerce_value("defaults.min_age", "19.5") == 19.5

    def test_format_field(self):
        assert coerce_value("defaults.output_format", "yaml") == "yaml"
        with pytest.raises(ValueError):
            coerce_value("defaults.output_format", "xml")

    def test_unknown_key(self):
        with pytest.raises(KeyError):
            coerce_value("models.fast", "x")

    def test_bad_int(self):
        with pytest.raises(ValueError):
            coerce_value("defaults.count", "abc")


class TestLoadBadValues:
    @pytest.mark.parametrize(
        "defaults",
        [{"count": None}, {"min_age": [18]}, {"count": 5, "max_age": None}],
    )
    def test_bad_file_values_ignored(self, isolated_config, caplog, defaults):
        isolated_config.parent.mkdir(parents=True)
        isolated_config.write_text(json.dumps({"defaults": defaults}))
        with caplog.at_level(logging.WARNING, logger="staffgen.config"):
            config = StaffgenConfig.load()
        assert config.defaults == DefaultsConfig()
        assert "Failed to load config" in caplog.text
