"""
Base validator interface for all form validation rules.

All validators inherit from BaseValidator and implement is_invalid().
"""

from abc import ABC, abstractmethod

from ..models import FormField, RuleSpec


class BaseValidator(ABC):
    """
    Abstract base class for all validators.

    Each validator implements one named rule (required, checked, email,
    phone, password) and can be turned into a RuleSpec for the pipeline.
    """

    rule_name: str = ""
    default_message: str = ""

    def __init__(self, message: str | None = None):
        """
        Initialize validator.

        Args:
            message: Error message override (defaults to default_message)
        """
        self.message = message or self.default_message

    @abstractmethod
    def is_invalid(self, value: str, field: FormField) -> bool:
        """
        Check a field value against this rule.

        Args:
            value: The field's current value
            field: The whole field (checked state, type, name)

        Returns:
            True if the value is INVALID under this rule
        """
        pass

    def as_rule(self) -> RuleSpec:
        """Build the RuleSpec entry for this validator."""
        return RuleSpec(name=self.rule_name, predicate=self.is_invalid, message=self.message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(rule={self.rule_name}, message={self.message!r})"
