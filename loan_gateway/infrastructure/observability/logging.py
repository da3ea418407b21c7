"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional
from pythonjsonlogger import jsonlogger

from loan_gateway.config import settings

logger = logging.getLogger("loan_gateway")


class ServiceJsonFormatter(jsonlogger.JsonFormatter):
    """JSON formatter stamping each record with UTC time, level and service name"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: str = "INFO") -> None:
    """Route the root logger to stdout as JSON, replacing any prior handlers"""
    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(ServiceJsonFormatter("%(timestamp)s %(level)s %(name)s %(message)s"))
    root.addHandler(handler)


def log_request(request_id: str, method: str, endpoint: str, status: int, duration_ms: float) -> None:
    logger.info(
        "Request handled",
        extra={
            "request_id": request_id,
            "method": method,
            "endpoint": endpoint,
            "status": status,
            "duration_ms": round(duration_ms, 3),
        },
    )


def log_rejected_input(request_id: str, field: str, message: str) -> None:
    """Log caller-side input errors (unknown applicant, out-of-range values)"""
    logger.warning(
        "Input rejected",
        extra={"request_id": request_id, "step": "validation", "field": field, "reason": message},
    )


def log_decision(
    request_id: str,
    approved: bool,
    amount: int,
    period: int,
    reason: Optional[str],
    duration_ms: float,
) -> None:
    """Log structured decision outcome for analysis"""
    logger.info(
        "Decision completed",
        extra={
            "request_id": request_id,
            "step": "decision_complete",
            "approval_outcome": "approved" if approved else "declined",
            "loan_amount": amount,
            "loan_period": period,
            "rejection_reason": reason,
            "duration_ms": duration_ms,
        },
    )
