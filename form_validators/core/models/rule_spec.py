"""
RuleSpec model: one named way a form field can be invalid.
"""

from typing import Callable

from pydantic import BaseModel, Field

from .form_field import FormField


RulePredicate = Callable[[str, FormField], bool]


class RuleSpec(BaseModel):
    """
    A named validation rule held in the effective rule sequence.

    The predicate returns True when the field is INVALID under this rule.
    Instances are frozen; configuration overrides produce new instances
    through model_copy(update=...).

    Attributes:
        name: Rule name a field selects with its validator attribute
        predicate: Callable taking (value, field), True means invalid
        message: Error message shown next to a failing field
    """

    name: str = Field(..., min_length=1)
    predicate: RulePredicate
    message: str

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "name": "email",
                "message": "Please enter a valid email address. For example john@somedomain.com.",
            }
        }

    def is_invalid(self, field: FormField) -> bool:
        """Run the predicate against the field's current value."""
        return bool(self.predicate(field.value, field))
