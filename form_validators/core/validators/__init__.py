"""
Validation rule implementations.

Provides validators for required values, checked boxes, and pattern
based email, phone and password rules.
"""

from .base_validator import BaseValidator
from .checked_validator import CheckedValidator
from .regex_validator import (
    EmailValidator,
    PasswordValidator,
    PhoneValidator,
    RegexValidator,
    StrongPasswordValidator,
)
from .required_validator import RequiredValidator

__all__ = [
    "BaseValidator",
    "RequiredValidator",
    "CheckedValidator",
    "RegexValidator",
    "EmailValidator",
    "PhoneValidator",
    "PasswordValidator",
    "StrongPasswordValidator",
]
