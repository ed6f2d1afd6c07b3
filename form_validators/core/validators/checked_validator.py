"""
CheckedValidator - fails on an unchecked checkbox.
"""

from ..models import FormField
from .base_validator import BaseValidator


class CheckedValidator(BaseValidator):
    """Validates that a checkbox (or radio) is checked."""

    rule_name = "checked"
    default_message = "It is required that you check this check box."

    def is_invalid(self, value: str, field: FormField) -> bool:
        return not field.checked
