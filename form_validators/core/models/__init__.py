"""
Data models for form validation.

All models use Pydantic for runtime validation and type safety.
"""

from .form_field import FormField
from .rule_spec import RulePredicate, RuleSpec
from .validation_result import FieldResult, FormResult

__all__ = [
    "FormField",
    "RuleSpec",
    "RulePredicate",
    "FieldResult",
    "FormResult",
]
