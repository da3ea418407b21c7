"""Domain models - pure Python dataclasses representing loan decisions"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class RejectionReason(str, Enum):
    """Why an applicant was declined"""

    EXISTING_DEBT = "existing debt"
    INSUFFICIENT_CAPACITY = "credit score too low"

    @property
    def code(self) -> str:
        return self.name.lower()


@dataclass(frozen=True)
class LoanRequest:
    """Validated loan request (amount in euros, period in months)"""

    requested_amount: int
    requested_period: int


@dataclass(frozen=True)
class DecisionOutcome:
    """Output of the credit decision engine"""

    approved: bool
    amount: int
    period: int
    reason: Optional[RejectionReason] = None

    @classmethod
    def approve(cls, amount: int, period: int) -> "DecisionOutcome":
        return cls(approved=True, amount=amount, period=period)

    @classmethod
    def reject(cls, reason: RejectionReason) -> "DecisionOutcome":
        # Rejections carry no amount or period
        return cls(approved=False, amount=-1, period=0, reason=reason)
