"""
Rule pipeline for evaluating form fields against the named rules.

The pipeline builds the effective rule sequence once from its options
and then evaluates fields and whole forms against it.
"""

from types import MappingProxyType
from typing import Any, Iterable, Literal, Mapping

from form_validators.core.models import FieldResult, FormField, FormResult, RuleSpec
from form_validators.core.validators import (
    CheckedValidator,
    EmailValidator,
    PasswordValidator,
    PhoneValidator,
    RegexValidator,
    RequiredValidator,
    StrongPasswordValidator,
)
from form_validators.observability.logger import get_logger

from .rule_config import PatternOverride, ValidatorOptions


logger = get_logger(__name__)

RULE_ORDER = ("required", "checked", "email", "phone", "password")

Aggregate = Literal["all", "last"]


def default_rules() -> list[RuleSpec]:
    """Default rule sequence, in precedence order."""
    return [
        RequiredValidator().as_rule(),
        CheckedValidator().as_rule(),
        EmailValidator().as_rule(),
        PhoneValidator().as_rule(),
        PasswordValidator().as_rule(),
    ]


def _apply_pattern_override(rule: RuleSpec, override: PatternOverride | None) -> RuleSpec:
    """Replace predicate then message of a pattern rule, each only if given."""
    if override is None:
        return rule
    if override.regex:
        pattern_rule = RegexValidator(pattern=override.regex, rule_name=rule.name)
        rule = rule.model_copy(update={"predicate": pattern_rule.is_invalid})
    if override.message:
        rule = rule.model_copy(update={"message": str(override.message)})
    return rule


def build_rules(options: ValidatorOptions | Mapping[str, Any] | None = None) -> tuple[RuleSpec, ...]:
    """
    Build the effective rule sequence.

    Overrides are applied in a fixed order: email, then phone, then the
    strong password toggle, which replaces both predicate and message of
    the password rule.

    Args:
        options: Validator options (mapping, ValidatorOptions or None)

    Returns:
        Exactly five RuleSpecs: required, checked, email, phone, password

    Raises:
        re.error: If an override regex string is not a valid pattern
    """
    options = ValidatorOptions.from_mapping(options)
    rules = default_rules()

    rules[2] = _apply_pattern_override(rules[2], options.email_override)
    rules[3] = _apply_pattern_override(rules[3], options.phone_override)

    if options.strong_password:
        rules[4] = StrongPasswordValidator().as_rule()

    return tuple(rules)


class RulePipeline:
    """
    Evaluates form fields against the effective rule sequence.

    A field selects one rule through its declared validator name. Only
    that rule is evaluated; a field without a name, or with a name that
    is not a known rule, is always valid.
    """

    def __init__(self, options: ValidatorOptions | Mapping[str, Any] | None = None):
        """
        Initialize the pipeline and build its rules once.

        Args:
            options: Validator options; see ValidatorOptions
        """
        self.options = ValidatorOptions.from_mapping(options)
        self.rules: tuple[RuleSpec, ...] = build_rules(self.options)
        self._rules_by_name = MappingProxyType({rule.name: rule for rule in self.rules})

    def get_rule(self, name: str | None) -> RuleSpec | None:
        """Look up a rule by name, None when the name is unknown or empty."""
        if not name:
            return None
        return self._rules_by_name.get(name)

    def evaluate(self, field: FormField) -> FieldResult:
        """
        Evaluate one field.

        Args:
            field: The field to check

        Returns:
            FieldResult, with the rule's name and message when invalid
        """
        rule = self.get_rule(field.validator)
        if rule is None:
            return FieldResult(field=field, valid=True)

        if rule.is_invalid(field):
            logger.debug(
                f"Field '{field.name}' failed rule '{rule.name}'",
                extra={"field_name": field.name, "rule": rule.name},
            )
            return FieldResult(field=field, valid=False, rule_name=rule.name, message=rule.message)

        return FieldResult(field=field, valid=True)

    def evaluate_form(self, fields: Iterable[FormField], aggregate: Aggregate = "all") -> FormResult:
        """
        Evaluate every field of a form.

        Args:
            fields: Fields in document order
            aggregate: "all" passes only when every field passes; "last"
                       reports the last field's result (False for no fields)

        Returns:
            FormResult with per-field results
        """
        if aggregate not in ("all", "last"):
            raise ValueError(f"Unknown aggregate mode: {aggregate}")

        results = [self.evaluate(field) for field in fields]

        if aggregate == "all":
            passed = all(r.valid for r in results)
        else:
            passed = results[-1].valid if results else False

        return FormResult(passed=passed, aggregate=aggregate, field_results=results)

    def get_rule_summary(self) -> dict[str, Any]:
        """
        Get summary of the effective rules.

        Returns:
            Dictionary with the rule order and each rule's message
        """
        return {
            "total_rules": len(self.rules),
            "rule_order": [rule.name for rule in self.rules],
            "messages": {rule.name: rule.message for rule in self.rules},
            "strong_password": self.options.strong_password,
        }
