"""POST /v1/decision - Loan credit decision endpoint"""

import time
import logging
from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import JSONResponse

from loan_gateway.api.v1.schemas import DecisionRequest, DecisionResponse, ErrorResponse
from loan_gateway.api.dependencies import get_applicant_registry, get_request_id
from loan_gateway.infrastructure.registry.applicants import ApplicantRegistry
from loan_gateway.domain.decision import decide
from loan_gateway.domain.validation import validate_loan_request, rejection_message
from loan_gateway.domain.exceptions import (
    InvalidLoanRequestError,
    RegistryUnavailableError,
    UnknownApplicantError,
)
from loan_gateway.infrastructure.observability.metrics import record_decision, registry_failures_counter
from loan_gateway.infrastructure.observability.logging import log_decision, log_rejected_input

router = APIRouter()


def input_error(message: str) -> JSONResponse:
    body = ErrorResponse(error_code=400, message=message)
    return JSONResponse(status_code=400, content=body.model_dump())


@router.post(
    "/decision",
    response_model=DecisionResponse,
    responses={400: {"model": ErrorResponse}},
)
async def create_decision(
    request_body: DecisionRequest,
    request: Request,
    registry: ApplicantRegistry = Depends(get_applicant_registry),
):
    """
    Make a loan decision for an applicant.

    Flow:
    1. Look up the applicant's credit modifier
    2. Parse and range-check the amount, then the period
    3. Run the decision engine
    4. Return the outcome with a user-facing message
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        # 1. Resolve applicant
        modifier = await registry.lookup(str(request_body.personal_code))
        if modifier is None:
            raise UnknownApplicantError("invalid personal code")

        # 2. Validate request bounds
        loan_request = validate_loan_request(request_body.loan_amount, request_body.loan_period)

        # 3. Decide
        outcome = decide(modifier, loan_request.requested_amount, loan_request.requested_period)

    except UnknownApplicantError as e:
        log_rejected_input(request_id, "personal_code", str(e))
        return input_error(str(e))

    except InvalidLoanRequestError as e:
        log_rejected_input(request_id, e.field, e.message)
        return input_error(e.message)

    except RegistryUnavailableError as e:
        registry_failures_counter.inc()
        logging.error(f"Registry error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=503, detail="Applicant registry unavailable")

    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    reason = outcome.reason.code if outcome.reason else None

    # Record metrics and logs
    duration_ms = (time.time() - start_time) * 1000
    record_decision(outcome.approved, outcome.amount, reason)
    log_decision(request_id, outcome.approved, outcome.amount, outcome.period, reason, duration_ms)

    return DecisionResponse(
        approved=outcome.approved,
        loan_amount=outcome.amount,
        loan_period=outcome.period,
        reason=reason,
        message=rejection_message(outcome.reason) if outcome.reason else None,
    )
