"""
Validation outcome models for single fields and whole forms (ephemeral).
"""

from typing import List, Literal

from pydantic import BaseModel, Field, field_validator

from .form_field import FormField


class FieldResult(BaseModel):
    """
    Outcome of evaluating one field.

    Attributes:
        field: The evaluated field
        valid: Whether the field passed
        rule_name: Name of the failing rule (None when valid)
        message: Error message of the failing rule (None when valid)
    """

    field: FormField
    valid: bool
    rule_name: str | None = None
    message: str | None = None

    @field_validator('message')
    @classmethod
    def check_valid_consistency(cls, v, info):
        """Validate that valid=True carries no error message."""
        if info.data.get('valid') and v is not None:
            raise ValueError("valid=True but message is set")
        return v


class FormResult(BaseModel):
    """
    Outcome of evaluating every field of a form.

    Attributes:
        passed: Overall result, computed according to `aggregate`
        aggregate: "all" (every field passed) or "last" (last field's result)
        field_results: Per-field results in document order
    """

    passed: bool
    aggregate: Literal["all", "last"] = "all"
    field_results: List[FieldResult] = Field(default_factory=list)

    @property
    def errors(self) -> List[FieldResult]:
        """Failing field results, in document order."""
        return [r for r in self.field_results if not r.valid]
