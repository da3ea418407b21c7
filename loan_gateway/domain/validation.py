"""Request validation applied before the decision engine runs"""

from typing import Optional, Union

from loan_gateway.domain.decision import (
    MAX_LOAN_AMOUNT,
    MAX_LOAN_PERIOD,
    MIN_LOAN_AMOUNT,
    MIN_LOAN_PERIOD,
)
from loan_gateway.domain.exceptions import InvalidLoanRequestError
from loan_gateway.domain.models import LoanRequest, RejectionReason

AMOUNT_ERROR = f"please insert loan sum between €{MIN_LOAN_AMOUNT} and €{MAX_LOAN_AMOUNT}"
PERIOD_ERROR = f"please insert loan period between {MIN_LOAN_PERIOD} and {MAX_LOAN_PERIOD} months"

REJECTION_MESSAGES = {
    RejectionReason.EXISTING_DEBT: "you have debt",
    RejectionReason.INSUFFICIENT_CAPACITY: "your credit score is too low",
}

RawNumber = Optional[Union[int, float, str]]


def parse_bounded(raw: RawNumber, low: int, high: int, field: str, message: str) -> int:
    """
    Parse a form value as an integer within [low, high].

    Unparseable values report the same message as out-of-range ones.
    """
    if isinstance(raw, bool) or (isinstance(raw, float) and not raw.is_integer()):
        raise InvalidLoanRequestError(field, message)
    try:
        value = int(raw)
    except (TypeError, ValueError):
        raise InvalidLoanRequestError(field, message) from None
    if not low <= value <= high:
        raise InvalidLoanRequestError(field, message)
    return value


def validate_loan_amount(amount: RawNumber) -> int:
    return parse_bounded(amount, MIN_LOAN_AMOUNT, MAX_LOAN_AMOUNT, "loan_amount", AMOUNT_ERROR)


def validate_loan_period(period: RawNumber) -> int:
    return parse_bounded(period, MIN_LOAN_PERIOD, MAX_LOAN_PERIOD, "loan_period", PERIOD_ERROR)


def validate_loan_request(amount: RawNumber, period: RawNumber) -> LoanRequest:
    """
    Check a raw request against the program bounds.

    Amount is checked before period, so a request with both invalid
    reports the amount.

    Raises:
        InvalidLoanRequestError: On the first unparseable or out-of-range field
    """
    return LoanRequest(
        requested_amount=validate_loan_amount(amount),
        requested_period=validate_loan_period(period),
    )


def rejection_message(reason: RejectionReason) -> str:
    """User-facing text for an engine rejection"""
    return REJECTION_MESSAGES[reason]
