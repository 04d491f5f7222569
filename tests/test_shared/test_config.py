"""Tests for configuration management."""
from __future__ import annotations

import pytest

from src.shared.config import GeneratorConfig, SharedConfig


class TestSharedConfig:
    def test_default_values(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        config = SharedConfig()
        assert config.log_level == "info"

    def test_env_override_log_level(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")
        config = SharedConfig()
        assert config.log_level == "debug"


class TestGeneratorConfig:
    def test_default_values(self, generator_config: GeneratorConfig):
        assert generator_config.boolean_type == "bool"
        assert generator_config.string_type == "string"
        assert generator_config.timestamp_type == "time.Time"
        assert generator_config.number_type == "float64"
        assert generator_config.integer_type == "int"
        assert generator_config.dynamic_type == "interface{}"
        assert generator_config.body_parameter == "o"
        assert generator_config.range_parameter == "lr"
        assert generator_config.range_type == "ListRange"
        assert generator_config.error_type == "error"

    def test_inherits_shared_defaults(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        config = GeneratorConfig()
        assert config.log_level == "info"

    def test_env_override_primitive(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("SCHEMATIC_INTEGER_TYPE", "int64")
        config = GeneratorConfig()
        assert config.integer_type == "int64"

    def test_env_override_error_type(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("SCHEMATIC_ERROR_TYPE", "Exception")
        config = GeneratorConfig()
        assert config.error_type == "Exception"

    def test_populate_by_name(self):
        config = GeneratorConfig(number_type="float32")
        assert config.number_type == "float32"
