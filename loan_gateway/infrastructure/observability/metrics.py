"""Prometheus metrics for monitoring approval rates and granted amounts"""

from typing import Optional
from prometheus_client import Counter, Histogram

# Decision metrics
decision_counter = Counter(
    "loan_decision_total",
    "Total loan decisions made",
    ["outcome", "reason"],  # approved | declined; none | existing_debt | insufficient_capacity
)

loan_amount_bucket_counter = Counter(
    "loan_amount_bucket",
    "Approved loan amounts by bucket",
    ["bucket"],  # €0, €2000-€4000, €4000-€7000, €7000+
)

# Registry metrics
registry_failures_counter = Counter(
    "registry_lookup_failures_total",
    "Failed applicant registry lookups",
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def amount_bucket(amount: int) -> str:
    if amount <= 0:
        return "€0"
    elif amount < 4000:
        return "€2000-€4000"
    elif amount < 7000:
        return "€4000-€7000"
    return "€7000+"


def record_decision(approved: bool, amount: int, reason: Optional[str] = None) -> None:
    """Record decision metrics for monitoring approval rates and amount distribution"""
    outcome = "approved" if approved else "declined"
    decision_counter.labels(outcome=outcome, reason=reason or "none").inc()

    loan_amount_bucket_counter.labels(bucket=amount_bucket(amount if approved else 0)).inc()
