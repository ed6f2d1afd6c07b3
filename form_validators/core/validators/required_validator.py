"""
RequiredValidator - fails on an empty value.
"""

from ..models import FormField
from .base_validator import BaseValidator


class RequiredValidator(BaseValidator):
    """
    Validates that a field has a value.

    Only the exact empty string fails; whitespace counts as a value.
    """

    rule_name = "required"
    default_message = "Please enter the appropriate text in this field.."

    def is_invalid(self, value: str, field: FormField) -> bool:
        return value == ""
