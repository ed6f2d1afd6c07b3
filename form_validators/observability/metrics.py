"""
Prometheus metrics for form-validators

Counts submissions, evaluated fields and rule failures so a service
rendering forms can expose validation health.
"""
from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    generate_latest,
)


# Registry private to this package
REGISTRY = CollectorRegistry()


submissions_total = Counter(
    name="form_validation_submissions_total",
    documentation="Total number of form submissions validated",
    labelnames=["outcome"],  # outcome: valid, invalid
    registry=REGISTRY,
)

fields_total = Counter(
    name="form_validation_fields_total",
    documentation="Total number of input fields evaluated",
    labelnames=["status"],  # status: valid, invalid
    registry=REGISTRY,
)

failures_total = Counter(
    name="form_validation_failures_total",
    documentation="Total number of field failures by rule",
    labelnames=["rule"],
    registry=REGISTRY,
)


def record_submission(valid: bool) -> None:
    """Record one validated submission"""
    submissions_total.labels(outcome="valid" if valid else "invalid").inc()


def record_field(valid: bool, rule_name: str | None = None) -> None:
    """
    Record one evaluated field

    Args:
        valid: Whether the field passed
        rule_name: The failing rule, if any
    """
    fields_total.labels(status="valid" if valid else "invalid").inc()
    if not valid and rule_name:
        failures_total.labels(rule=rule_name).inc()


def get_metrics() -> bytes:
    """
    Get current metrics in Prometheus exposition format

    Returns:
        Metrics payload
    """
    return generate_latest(REGISTRY)


def get_content_type() -> str:
    """Content type for the metrics payload"""
    return CONTENT_TYPE_LATEST
