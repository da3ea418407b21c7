"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, Field
from typing import Optional, Union

# Form values are checked by domain.validation, in lookup/amount/period order
RawField = Optional[Union[int, float, str]]


class DecisionRequest(BaseModel):
    """Request body for POST /v1/decision"""

    personal_code: Union[str, int] = Field("", description="Applicant personal code")
    loan_amount: RawField = Field(None, description="Requested loan amount in euros")
    loan_period: RawField = Field(None, description="Requested loan period in months")


class DecisionResponse(BaseModel):
    """Response for POST /v1/decision"""

    approved: bool
    loan_amount: int
    loan_period: int
    reason: Optional[str] = None
    message: Optional[str] = None


class ErrorResponse(BaseModel):
    """Error body for rejected input"""

    error_code: int
    message: str


class RangeSchema(BaseModel):
    min: int
    max: int


class LimitsResponse(BaseModel):
    """Response for GET /v1/limits"""

    loan_amount: RangeSchema
    loan_period: RangeSchema
