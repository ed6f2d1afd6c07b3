"""
Validator option management.

Models the configuration surface accepted at pipeline construction and
loads it from YAML files. Option values are read leniently: a malformed
override is ignored rather than rejected.
"""

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field


class PatternOverride(BaseModel):
    """
    Override for a pattern-based rule (email or phone).

    Attributes:
        regex: Replacement pattern, a string or compiled re.Pattern.
               Kept raw here; it is compiled when the pipeline is built.
        message: Replacement error message, applied when truthy
    """

    regex: Any = None
    message: Any = None

    class Config:
        frozen = True
        extra = "ignore"

    @classmethod
    def from_value(cls, value: Any) -> "PatternOverride | None":
        """
        Read an override from a configuration value.

        Args:
            value: A PatternOverride, a mapping with regex/message keys, or anything else

        Returns:
            PatternOverride, or None when the value is not a mapping
        """
        if isinstance(value, PatternOverride):
            return value
        if isinstance(value, Mapping):
            return cls.model_validate(dict(value))
        return None


class ValidatorOptions(BaseModel):
    """
    Options for one pipeline instance.

    Accepts the camelCase keys (customEmailValidator, customPhoneValidator,
    isStrongPassword) as well as their snake_case field names. Unknown
    keys are ignored. Values are stored as given; isStrongPassword is
    applied by truthiness, so the string "false" still enables it.
    """

    custom_email_validator: Any = Field(None, alias="customEmailValidator")
    custom_phone_validator: Any = Field(None, alias="customPhoneValidator")
    is_strong_password: Any = Field(False, alias="isStrongPassword")

    class Config:
        frozen = True
        extra = "ignore"
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "customEmailValidator": {
                    "regex": "^.+@example\\.com$",
                    "message": "Please use your example.com address.",
                },
                "customPhoneValidator": {"message": "Please enter a phone number."},
                "isStrongPassword": True,
            }
        }

    @classmethod
    def from_mapping(cls, options: "ValidatorOptions | Mapping[str, Any] | None") -> "ValidatorOptions":
        """
        Coerce options given as a mapping (or nothing) into ValidatorOptions.

        Args:
            options: Existing options, a plain mapping, or None

        Returns:
            ValidatorOptions instance (DEFAULT_OPTIONS for None)
        """
        if options is None:
            return DEFAULT_OPTIONS
        if isinstance(options, ValidatorOptions):
            return options
        if not isinstance(options, Mapping):
            return DEFAULT_OPTIONS
        return cls.model_validate(dict(options))

    @property
    def email_override(self) -> PatternOverride | None:
        """Email override, None when absent or not a mapping."""
        return PatternOverride.from_value(self.custom_email_validator)

    @property
    def phone_override(self) -> PatternOverride | None:
        """Phone override, None when absent or not a mapping."""
        return PatternOverride.from_value(self.custom_phone_validator)

    @property
    def strong_password(self) -> bool:
        """Truthiness of isStrongPassword."""
        return bool(self.is_strong_password)


# Shared, immutable defaults: no overrides
DEFAULT_OPTIONS = ValidatorOptions()


class RuleConfigLoader:
    """
    Loads validator options from YAML configuration files.

    Expected YAML format (keys may also sit under a `validators:` section):
    ```yaml
    customEmailValidator:
      regex: "^.+@example\\.com$"
      message: "Please use your example.com address."
    customPhoneValidator:
      message: "Please enter a phone number."
    isStrongPassword: true
    ```
    """

    def __init__(self, config_path: str | Path):
        """
        Initialize the config loader.

        Args:
            config_path: Path to the YAML configuration file
        """
        self.config_path = Path(config_path)
        if not self.config_path.exists():
            raise FileNotFoundError(f"Validator configuration file not found: {config_path}")

    def load_options(self) -> ValidatorOptions:
        """
        Load and parse validator options from the YAML file.

        Returns:
            ValidatorOptions; an empty file gives DEFAULT_OPTIONS

        Raises:
            ValueError: If the document is not a mapping
        """
        with open(self.config_path) as f:
            config = yaml.safe_load(f)

        if config is None:
            return DEFAULT_OPTIONS

        if not isinstance(config, dict):
            raise ValueError("Configuration file must contain a mapping of validator options")

        section = config.get("validators", config)
        if section is None:
            return DEFAULT_OPTIONS
        if not isinstance(section, dict):
            raise ValueError("'validators' section must be a mapping")

        return ValidatorOptions.from_mapping(section)
