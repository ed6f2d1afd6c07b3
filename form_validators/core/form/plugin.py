"""
Form validator plugin: binds a rule pipeline to one form element.
"""

from typing import Any, Literal, Mapping

from bs4 import Tag
from pydantic import BaseModel

from form_validators.core.models import FormResult
from form_validators.core.rules import RulePipeline
from form_validators.observability import metrics
from form_validators.observability.logger import get_logger

from .document import FormDocument


logger = get_logger(__name__)

Scope = Literal["form", "page"]


class SubmitOutcome(BaseModel):
    """
    Result of handling one submission.

    Attributes:
        default_prevented: Always True; the plugin never submits by itself
        valid: Overall validation result
        result: Per-field details
    """

    default_prevented: bool = True
    valid: bool
    result: FormResult


class FormValidatorPlugin:
    """
    Validates a form on submission and annotates failing fields.

    The rule pipeline is built once here and reused for every submit.

    Scope:
        "form" checks only the inputs inside the bound form; "page" checks
        every input in the document. Error blocks are reset over the same
        scope so repeated submissions never stack them.
    """

    def __init__(
        self,
        document: FormDocument,
        element: Tag,
        options: Any = None,
        scope: Scope = "form",
        aggregate: str = "all",
    ):
        if scope not in ("form", "page"):
            raise ValueError(f"Unknown scope: {scope}")

        self.document = document
        self.element = element
        self.scope = scope
        self.aggregate = aggregate
        self.pipeline = RulePipeline(options)

    @property
    def container(self) -> Tag | None:
        """Element the scan and the reset are limited to (None for the page)."""
        return self.element if self.scope == "form" else None

    def submit(self, data: Mapping[str, Any] | None = None) -> SubmitOutcome:
        """
        Handle a submission.

        Args:
            data: Submitted values to apply before validating

        Returns:
            SubmitOutcome; submission is prevented in every case
        """
        if data is not None:
            self.document.fill(data, self.container)

        self.refresh_form()
        result = self.do_validate()

        metrics.record_submission(result.passed)
        logger.info(
            "Form validated",
            extra={
                "passed": result.passed,
                "fields": len(result.field_results),
                "errors": len(result.errors),
            },
        )
        return SubmitOutcome(valid=result.passed, result=result)

    def do_validate(self) -> FormResult:
        """Evaluate every input in scope and insert error blocks for failures."""
        elements = self.document.input_fields(self.container)
        fields = [self.document.to_field(element) for element in elements]
        result = self.pipeline.evaluate_form(fields, aggregate=self.aggregate)

        for element, field_result in zip(elements, result.field_results):
            metrics.record_field(field_result.valid, field_result.rule_name)
            if not field_result.valid:
                logger.info(field_result.message, extra={"rule": field_result.rule_name})
                self.document.insert_error(element, field_result.message)

        return result

    def refresh_form(self) -> int:
        """Remove error blocks left by a previous submission."""
        return self.document.remove_errors(self.container)
