"""GET /v1/limits - Program bounds for loan requests"""

from fastapi import APIRouter

from loan_gateway.api.v1.schemas import LimitsResponse, RangeSchema
from loan_gateway.domain.decision import (
    MAX_LOAN_AMOUNT,
    MAX_LOAN_PERIOD,
    MIN_LOAN_AMOUNT,
    MIN_LOAN_PERIOD,
)

router = APIRouter()


@router.get("/limits", response_model=LimitsResponse)
def get_limits():
    """Return the accepted amount (euros) and period (months) ranges"""
    return LimitsResponse(
        loan_amount=RangeSchema(min=MIN_LOAN_AMOUNT, max=MAX_LOAN_AMOUNT),
        loan_period=RangeSchema(min=MIN_LOAN_PERIOD, max=MAX_LOAN_PERIOD),
    )
