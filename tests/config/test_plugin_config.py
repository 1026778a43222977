"""Tests for plugin configuration defaults, merging and validation."""

from __future__ import annotations

import pytest

from chatmt_cli.config import (
    DEFAULT_PLUGIN_CONFIG,
    ConfigValidator,
    ValidationError,
    get_default_config,
    merge_config,
)


class TestDefaults:
    def test_get_default_config_is_deep_copy(self) -> None:
        config = get_default_config()
        config["language"]["ja"] = "Japanese"
        assert DEFAULT_PLUGIN_CONFIG["language"] == {}

    def test_defaults_validate(self) -> None:
        assert ConfigValidator.validate(get_default_config()) == []


class TestMergeConfig:
    def test_override_values(self) -> None:
        merged = merge_config(get_default_config(), {"model": "qwen2.5", "use_stream": "true"})
        assert merged["model"] == "qwen2.5"
        assert merged["use_stream"] == "true"
        assert merged["removeTag"] == "<think>,<help>"

    def test_none_keeps_base(self) -> None:
        merged = merge_config(get_default_config(), {"model": None})
        assert merged["model"] == "gpt-4o-mini"

    def test_nested_language_merge(self) -> None:
        base = merge_config(get_default_config(), {"language": {"ja": "Japanese"}})
        merged = merge_config(base, {"language": {"en": "English"}})
        assert merged["language"] == {"ja": "Japanese", "en": "English"}

    def test_none_override(self) -> None:
        base = get_default_config()
        merged = merge_config(base, None)
        assert merged == base
        assert merged is not base


class TestConfigValidator:
    def test_valid_host_config(self) -> None:
        config = {
            "apiKey": "sk-test",
            "requestPath": "api.openai.com/v1",
            "use_stream": True,
            "language": {"zh_cn": "Simplified Chinese"},
            "timeout": 12.5,
        }
        assert ConfigValidator.validate(config) == []

    def test_unknown_keys_ignored(self) -> None:
        assert ConfigValidator.validate({"icon": 1}) == []

    def test_none_values_ignored(self) -> None:
        assert ConfigValidator.validate({"model": None}) == []

    def test_wrong_scalar_type(self) -> None:
        errors = ConfigValidator.validate({"model": 3})
        assert errors == [ValidationError(path="model", message="Expected str, got int")]

    def test_bool_is_not_a_number(self) -> None:
        errors = ConfigValidator.validate({"timeout": True})
        assert [e.path for e in errors] == ["timeout"]

    def test_literal(self) -> None:
        errors = ConfigValidator.validate({"done_behavior": "later"})
        assert errors[0].path == "done_behavior"
        assert "literal" in errors[0].message

    def test_mapping_values(self) -> None:
        errors = ConfigValidator.validate({"language": {"ja": 1}})
        assert errors == [ValidationError(path="language.ja", message="Expected str, got int")]

    def test_root_must_be_mapping(self) -> None:
        errors = ConfigValidator.validate(["apiKey"])  # type: ignore[arg-type]
        assert errors[0].path == "<root>"

    def test_format_errors(self) -> None:
        errors = ConfigValidator.validate({"parameters": {"temperature": 0.1}})
        message = ConfigValidator.format_errors(errors)
        assert message.startswith("Configuration validation failed:")
        assert "- parameters: Expected str, got dict" in message
