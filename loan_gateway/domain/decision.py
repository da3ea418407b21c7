"""Credit decision engine - core business logic for loan approvals"""

from loan_gateway.domain.models import DecisionOutcome, RejectionReason

MIN_LOAN_AMOUNT = 2000
MAX_LOAN_AMOUNT = 10000
MIN_LOAN_PERIOD = 12
MAX_LOAN_PERIOD = 60


def capacity(modifier: int, period: int) -> int:
    """Maximum sum financeable for an applicant over `period` months"""
    return modifier * period


def find_extended_period(modifier: int, requested_period: int, target_amount: int) -> int | None:
    """
    Return the shortest period above `requested_period` whose capacity
    reaches `target_amount`, or None if nothing up to MAX_LOAN_PERIOD does.
    """
    for period in range(requested_period + 1, MAX_LOAN_PERIOD + 1):
        if capacity(modifier, period) >= target_amount:
            return period
    return None


def decide(modifier: int, requested_amount: int, requested_period: int) -> DecisionOutcome:
    """
    Main entry point: reconcile a loan request against applicant capacity.

    Inputs are assumed to be range-valid (see domain.validation).

    Decision order:
    1. Modifier 0 (existing debt) is an absolute veto
    2. Capacity above MAX_LOAN_AMOUNT is capped at MAX_LOAN_AMOUNT
    3. Capacity covering the request, or at least MIN_LOAN_AMOUNT, is
       granted as-is for the requested period
    4. Otherwise extend the period until the requested amount fits
    5. Failing that, extend the period until MIN_LOAN_AMOUNT fits
    6. Decline with insufficient capacity

    Example:
        decide(100, 10000, 12) → approved 2000 over 20 months
        (6000 at 60 months never covers 10000, 100 * 20 is the first 2000)
    """
    if modifier == 0:
        return DecisionOutcome.reject(RejectionReason.EXISTING_DEBT)

    max_amount = capacity(modifier, requested_period)

    if max_amount > MAX_LOAN_AMOUNT:
        return DecisionOutcome.approve(MAX_LOAN_AMOUNT, requested_period)

    if max_amount >= requested_amount or max_amount >= MIN_LOAN_AMOUNT:
        return DecisionOutcome.approve(max_amount, requested_period)

    # Both scans restart from the requested period; the exact amount wins
    for target in (requested_amount, MIN_LOAN_AMOUNT):
        period = find_extended_period(modifier, requested_period, target)
        if period is not None:
            return DecisionOutcome.approve(capacity(modifier, period), period)

    return DecisionOutcome.reject(RejectionReason.INSUFFICIENT_CAPACITY)
