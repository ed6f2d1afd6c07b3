"""
Pattern-based validators: email, phone and password rules.
"""

import re
from re import Pattern

from ..models import FormField
from .base_validator import BaseValidator


class RegexValidator(BaseValidator):
    """
    Validates that a field value matches a regular expression.

    The value is searched, not fully matched, so a pattern must carry its
    own anchors. Subclasses provide default_pattern; an explicit pattern
    (string or compiled Pattern) replaces it. An invalid pattern string
    raises re.error from re.compile.
    """

    default_pattern: str = ""
    # Default patterns use ASCII classes for \w and \d, and end in \Z so a
    # trailing newline does not pass
    default_flags: int = re.ASCII

    def __init__(
        self,
        pattern: str | Pattern | None = None,
        message: str | None = None,
        rule_name: str | None = None,
    ):
        super().__init__(message)
        if rule_name:
            self.rule_name = rule_name

        if pattern is None:
            self.pattern: Pattern = re.compile(self.default_pattern, self.default_flags)
        elif isinstance(pattern, Pattern):
            self.pattern = pattern
        else:
            self.pattern = re.compile(str(pattern))

    def is_invalid(self, value: str, field: FormField) -> bool:
        return self.pattern.search(value) is None


class EmailValidator(RegexValidator):
    """Validates an email address (user@domain.tld or user@ip, optional :port)."""

    rule_name = "email"
    default_message = "Please enter a valid email address. For example john@somedomain.com."
    default_pattern = (
        r"^[\w-]+(\.[\w-]+)*@([a-z0-9-]+(\.[a-z0-9-]+)*?\.[a-z]{2,6}|(\d{1,3}\.){3}\d{1,3})(:\d{4})?\Z"
    )


class PhoneValidator(RegexValidator):
    """Validates a US phone number such as (603) 555-5555."""

    rule_name = "phone"
    default_message = "Please enter a valid US phone number. For example (603) 555-5555"
    default_pattern = (
        r"^[01]?[- .]?\(?(?!\d[1]{2})[2-9]\d{2}\)?[- .]?(?!\d[1]{2})\d{3}[- .]?\d{4}\Z"
    )


class PasswordValidator(RegexValidator):
    """Validates a password of 8+ letters and digits with at least one of each."""

    rule_name = "password"
    default_message = (
        "Please enter valid password. Minimum 8 charactes at least 1 alphabet and 1 number."
    )
    default_pattern = r"^(?=.*[A-Za-z])(?=.*\d)[A-Za-z\d]{8,}\Z"


class StrongPasswordValidator(PasswordValidator):
    """
    Validates a strong password.

    Requires a lowercase letter, an uppercase letter, a digit and a special
    character from $@!%*?&, with a minimum of 8 characters.
    """

    default_message = (
        "Please enter valid password. Minimum 8 charactes at least 1 Uppercase Alphabet, "
        "1 Lowercase Alphabet, 1 Number and 1 Special Character."
    )
    default_pattern = r"^(?=.*[a-z])(?=.*[A-Z])(?=.*\d)(?=.*[$@!%*?&])[A-Za-z\d$@!%*?&]{8,}"
