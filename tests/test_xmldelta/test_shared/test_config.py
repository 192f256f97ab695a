"""Tests for DUL encoding configuration."""

import json

import pytest

from xmldelta.shared.config import (
    ConfigError,
    ConfigValidationError,
    DeltaConfig,
    EmissionPolicy,
)


class TestDeltaConfig:
    """Test suite for DeltaConfig."""

    def test_default_configuration(self) -> None:
        """Test default configuration values."""
        config = DeltaConfig()

        assert config.emission_policy is EmissionPolicy.DEFINED
        assert config.update_tag == "update"
        assert config.encoding == "UTF-8"
        assert config.standalone is False
        assert config.pretty_print is False
        assert config.correlation_id is None
        assert not config.is_legacy

    def test_default_preset_equals_constructor(self) -> None:
        """Test default() preset matches a plain instance."""
        assert DeltaConfig.default() == DeltaConfig()

    def test_legacy_preset(self) -> None:
        """Test legacy preset restores truthy emission and the delete tag."""
        config = DeltaConfig.legacy()

        assert config.emission_policy is EmissionPolicy.TRUTHY
        assert config.update_tag == "delete"
        assert config.is_legacy

    def test_configuration_is_immutable(self) -> None:
        """Test that configuration fields cannot be reassigned."""
        config = DeltaConfig()

        with pytest.raises(AttributeError):
            config.update_tag = "delete"  # type: ignore

    def test_invalid_update_tag_raises_error(self) -> None:
        """Test update tag validation."""
        with pytest.raises(ConfigValidationError, match="update_tag must be one of"):
            DeltaConfig(update_tag="modify")

    def test_invalid_emission_policy_raises_error(self) -> None:
        """Test emission policy validation."""
        with pytest.raises(ConfigValidationError) as exc_info:
            DeltaConfig(emission_policy="DEFINED")  # type: ignore

        assert exc_info.value.field_name == "emission_policy"
        assert "EmissionPolicy.TRUTHY" in exc_info.value.suggestions

    def test_empty_encoding_raises_error(self) -> None:
        """Test encoding validation."""
        with pytest.raises(ConfigValidationError, match="encoding cannot be empty"):
            DeltaConfig(encoding="")

    def test_validation_error_is_config_error(self) -> None:
        """Test exception hierarchy."""
        assert issubclass(ConfigValidationError, ConfigError)

    def test_override_creates_new_instance(self) -> None:
        """Test override leaves the original configuration untouched."""
        config = DeltaConfig.legacy()
        overridden = config.override(update_tag="update")

        assert overridden.update_tag == "update"
        assert overridden.emission_policy is EmissionPolicy.TRUTHY
        assert config.update_tag == "delete"

    def test_override_unknown_field_raises_error(self) -> None:
        """Test override rejects unknown fields."""
        with pytest.raises(ConfigValidationError, match="Unknown configuration field"):
            DeltaConfig().override(indent=4)

    def test_override_validates_values(self) -> None:
        """Test override runs validation on the new instance."""
        with pytest.raises(ConfigValidationError):
            DeltaConfig().override(update_tag="")


class TestDeltaConfigSerialization:
    """Test dictionary and JSON conversion."""

    def test_to_dict_uses_enum_names(self) -> None:
        """Test dictionary representation."""
        data = DeltaConfig.legacy().to_dict()

        assert data["emission_policy"] == "TRUTHY"
        assert data["update_tag"] == "delete"
        assert data["standalone"] is False

    def test_to_json_is_valid_json(self) -> None:
        """Test JSON output parses back to the dictionary form."""
        config = DeltaConfig(correlation_id="run-1")

        assert json.loads(config.to_json()) == config.to_dict()

    def test_from_json_restores_configuration(self) -> None:
        """Test JSON input produces an equal configuration."""
        config = DeltaConfig(emission_policy=EmissionPolicy.TRUTHY, pretty_print=True)

        assert DeltaConfig.from_json(config.to_json()) == config

    def test_from_dict_accepts_lowercase_policy(self) -> None:
        """Test enum names are matched case-insensitively."""
        config = DeltaConfig.from_dict({"emission_policy": "truthy"})

        assert config.emission_policy is EmissionPolicy.TRUTHY

    def test_from_dict_unknown_policy_raises_error(self) -> None:
        """Test unknown policy names are rejected with suggestions."""
        with pytest.raises(ConfigValidationError, match="Unknown emission policy") as exc_info:
            DeltaConfig.from_dict({"emission_policy": "sometimes"})

        assert exc_info.value.suggestions == ["DEFINED", "TRUTHY"]

    def test_from_dict_unknown_field_raises_error(self) -> None:
        """Test unknown keys are rejected."""
        with pytest.raises(ConfigValidationError, match="Unknown configuration fields"):
            DeltaConfig.from_dict({"compression": True})
