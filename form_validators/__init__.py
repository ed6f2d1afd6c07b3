"""
form-validators: rule-based validation for HTML forms.

Attach a validator plugin to a form in a parsed document, submit data,
and get inline error blocks next to failing fields.
"""

from form_validators.core.form import FormDocument, FormValidatorPlugin, SubmitOutcome
from form_validators.core.models import FieldResult, FormField, FormResult, RuleSpec
from form_validators.core.rules import (
    DEFAULT_OPTIONS,
    RuleConfigLoader,
    RulePipeline,
    ValidatorOptions,
    build_rules,
)

__version__ = "0.1.0"

__all__ = [
    "FormDocument",
    "FormValidatorPlugin",
    "SubmitOutcome",
    "FormField",
    "FieldResult",
    "FormResult",
    "RuleSpec",
    "RulePipeline",
    "RuleConfigLoader",
    "ValidatorOptions",
    "DEFAULT_OPTIONS",
    "build_rules",
]
