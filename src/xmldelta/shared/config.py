"""Configuration for DUL encoding.

The encoder output is governed by a single immutable configuration object.
Two presets are provided: the default one, which writes every defined field
and tags updates as ``update``, and a legacy one whose output stays
compatible with consumers of older DUL producers.
"""

import json
from dataclasses import dataclass, replace
from enum import Enum, auto
from typing import Any, Dict, List, Optional


class EmissionPolicy(Enum):
    """Rule deciding whether an optional record field is written as an attribute."""

    DEFINED = auto()   # Write every field that is not None
    TRUTHY = auto()    # Legacy: skip None, 0 and empty strings


_UPDATE_TAGS = ("update", "delete")


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigValidationError(ConfigError):
    """Exception raised when configuration validation fails."""

    def __init__(self, message: str, field_name: Optional[str] = None,
                 suggestions: Optional[List[str]] = None):
        super().__init__(message)
        self.field_name = field_name
        self.suggestions = suggestions or []


@dataclass(frozen=True)
class DeltaConfig:
    """Immutable settings for turning a change log into a DUL document."""

    emission_policy: EmissionPolicy = EmissionPolicy.DEFINED
    update_tag: str = "update"
    encoding: str = "UTF-8"
    standalone: bool = False
    pretty_print: bool = False
    correlation_id: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate the configuration."""
        if not isinstance(self.emission_policy, EmissionPolicy):
            raise ConfigValidationError(
                f"emission_policy must be an EmissionPolicy, "
                f"got {self.emission_policy!r}",
                field_name="emission_policy",
                suggestions=[f"EmissionPolicy.{p.name}" for p in EmissionPolicy],
            )
        if self.update_tag not in _UPDATE_TAGS:
            raise ConfigValidationError(
                f"update_tag must be one of {list(_UPDATE_TAGS)}",
                field_name="update_tag",
                suggestions=list(_UPDATE_TAGS),
            )
        if not self.encoding:
            raise ConfigValidationError(
                "encoding cannot be empty", field_name="encoding"
            )

    @property
    def is_legacy(self) -> bool:
        """Check if the configuration reproduces legacy DUL output."""
        return (
            self.emission_policy is EmissionPolicy.TRUTHY
            and self.update_tag == "delete"
        )

    @classmethod
    def default(cls) -> "DeltaConfig":
        """Create the default configuration."""
        return cls()

    @classmethod
    def legacy(cls) -> "DeltaConfig":
        """Create configuration compatible with legacy DUL consumers.

        Zero and empty field values are dropped and updates are written with
        the ``delete`` tag. Move and update elements still carry their ``node``
        path, so the output is compatible with, not identical to, older producers.
        """
        return cls(emission_policy=EmissionPolicy.TRUTHY, update_tag="delete")

    def override(self, **kwargs: Any) -> "DeltaConfig":
        """Create a new configuration with specific overrides.

        Example:
            >>> DeltaConfig.legacy().override(update_tag="update").update_tag
            'update'
        """
        try:
            return replace(self, **kwargs)
        except TypeError as e:
            raise ConfigValidationError(f"Unknown configuration field: {e}") from e

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary format."""
        return {
            "emission_policy": self.emission_policy.name,
            "update_tag": self.update_tag,
            "encoding": self.encoding,
            "standalone": self.standalone,
            "pretty_print": self.pretty_print,
            "correlation_id": self.correlation_id,
        }

    def to_json(self, indent: int = 2) -> str:
        """Convert configuration to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DeltaConfig":
        """Create configuration from dictionary.

        Unknown keys are rejected; enum fields may be given by name.
        """
        unknown = set(data) - set(cls.__dataclass_fields__)
        if unknown:
            raise ConfigValidationError(
                f"Unknown configuration fields: {sorted(unknown)}"
            )

        values = dict(data)
        policy = values.get("emission_policy")
        if isinstance(policy, str):
            try:
                values["emission_policy"] = EmissionPolicy[policy.upper()]
            except KeyError as e:
                raise ConfigValidationError(
                    f"Unknown emission policy: {policy}",
                    field_name="emission_policy",
                    suggestions=[p.name for p in EmissionPolicy],
                ) from e

        return cls(**values)

    @classmethod
    def from_json(cls, json_str: str) -> "DeltaConfig":
        """Create configuration from JSON string."""
        return cls.from_dict(json.loads(json_str))
