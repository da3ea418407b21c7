"""Dependency injection for FastAPI endpoints"""

from functools import lru_cache
from fastapi import Request
from loan_gateway.infrastructure.registry.applicants import ApplicantRegistry, build_registry


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


@lru_cache
def get_applicant_registry() -> ApplicantRegistry:
    """Provide the configured applicant registry"""
    return build_registry()
