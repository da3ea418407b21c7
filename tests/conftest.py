"""Pytest fixtures for testing"""

import pytest
from fastapi.testclient import TestClient
from loan_gateway.api.main import create_app
from loan_gateway.api.dependencies import get_applicant_registry
from loan_gateway.infrastructure.registry.applicants import InMemoryApplicantRegistry


@pytest.fixture
def registry() -> InMemoryApplicantRegistry:
    """Applicant registry with the default modifier table plus a low-capacity applicant"""
    return InMemoryApplicantRegistry(
        {
            "49002010965": 0,
            "49002010976": 100,
            "49002010987": 300,
            "49002010998": 1000,
            "low_capacity": 10,
        }
    )


@pytest.fixture
def client(registry: InMemoryApplicantRegistry) -> TestClient:
    """Create FastAPI test client with an in-memory registry"""
    app = create_app()
    app.dependency_overrides[get_applicant_registry] = lambda: registry
    return TestClient(app)
