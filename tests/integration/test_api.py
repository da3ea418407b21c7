"""Integration tests for API endpoints"""

from unittest.mock import AsyncMock, patch
from fastapi.testclient import TestClient
from prometheus_client import REGISTRY
from loan_gateway.domain.exceptions import RegistryUnavailableError
from loan_gateway.infrastructure.registry.applicants import InMemoryApplicantRegistry

DEBTOR_CODE = "49002010965"
SEGMENT_1_CODE = "49002010976"
SEGMENT_3_CODE = "49002010998"


def post_decision(client: TestClient, personal_code: str, amount, period):
    return client.post(
        "/v1/decision",
        json={"personal_code": personal_code, "loan_amount": amount, "loan_period": period},
    )


def test_health_endpoint(client: TestClient):
    """Test health check endpoint"""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_metrics_endpoint(client: TestClient):
    """Test Prometheus metrics endpoint"""
    response = client.get("/metrics")
    assert response.status_code == 200
    assert "loan_decision_total" in response.text


def test_limits_endpoint(client: TestClient):
    response = client.get("/v1/limits")

    assert response.status_code == 200
    assert response.json() == {
        "loan_amount": {"min": 2000, "max": 10000},
        "loan_period": {"min": 12, "max": 60},
    }


def test_decision_endpoint_approval(client: TestClient):
    """Test POST /v1/decision capped at the ceiling"""
    response = post_decision(client, SEGMENT_3_CODE, 5000, 24)

    assert response.status_code == 200
    assert response.json() == {
        "approved": True,
        "loan_amount": 10000,
        "loan_period": 24,
        "reason": None,
        "message": None,
    }


def test_decision_endpoint_extended_period(client: TestClient):
    """Test POST /v1/decision settling for the floor over a longer period"""
    response = post_decision(client, SEGMENT_1_CODE, 10000, 12)

    assert response.status_code == 200
    data = response.json()
    assert data["approved"] is True
    assert data["loan_amount"] == 2000
    assert data["loan_period"] == 20


def test_decision_endpoint_existing_debt(client: TestClient):
    """Test POST /v1/decision for an applicant with debt"""
    response = post_decision(client, DEBTOR_CODE, 5000, 24)

    assert response.status_code == 200
    assert response.json() == {
        "approved": False,
        "loan_amount": -1,
        "loan_period": 0,
        "reason": "existing_debt",
        "message": "you have debt",
    }


def test_decision_endpoint_low_capacity(client: TestClient):
    response = post_decision(client, "low_capacity", 10000, 12)

    assert response.status_code == 200
    data = response.json()
    assert data["approved"] is False
    assert data["reason"] == "insufficient_capacity"
    assert data["message"] == "your credit score is too low"


def test_decision_endpoint_unknown_applicant(client: TestClient):
    response = post_decision(client, "12345678901", 5000, 24)

    assert response.status_code == 400
    assert response.json() == {"error_code": 400, "message": "invalid personal code"}


def test_decision_endpoint_invalid_amount(client: TestClient):
    response = post_decision(client, SEGMENT_1_CODE, 15000, 24)

    assert response.status_code == 400
    assert response.json()["message"] == "please insert loan sum between €2000 and €10000"


def test_decision_endpoint_invalid_period(client: TestClient):
    response = post_decision(client, SEGMENT_1_CODE, 5000, 6)

    assert response.status_code == 400
    assert response.json()["message"] == "please insert loan period between 12 and 60 months"


def test_unknown_applicant_checked_before_amount(client: TestClient):
    response = post_decision(client, "nobody", 1, 1)

    assert response.status_code == 400
    assert response.json()["message"] == "invalid personal code"


def test_unknown_applicant_checked_before_unparseable_amount(client: TestClient):
    response = post_decision(client, "nobody", "lots", 24)

    assert response.status_code == 400
    assert response.json() == {"error_code": 400, "message": "invalid personal code"}


def test_decision_endpoint_non_numeric_amount(client: TestClient):
    response = post_decision(client, SEGMENT_1_CODE, "lots", 24)

    assert response.status_code == 400
    assert response.json()["message"] == "please insert loan sum between €2000 and €10000"


def test_decision_endpoint_non_numeric_period(client: TestClient):
    response = post_decision(client, SEGMENT_1_CODE, 5000, "two years")

    assert response.status_code == 400
    assert response.json()["message"] == "please insert loan period between 12 and 60 months"


def test_decision_endpoint_numeric_strings(client: TestClient):
    """Form-style string values are parsed like numbers"""
    response = post_decision(client, SEGMENT_3_CODE, "5000", "24")

    assert response.status_code == 200
    assert response.json()["loan_amount"] == 10000


def test_decision_endpoint_empty_personal_code(client: TestClient):
    response = post_decision(client, "", 5000, 24)

    assert response.status_code == 400
    assert response.json()["message"] == "invalid personal code"


def test_decision_endpoint_missing_fields(client: TestClient):
    """Missing amount reports the amount message, as an empty form field would"""
    response = client.post("/v1/decision", json={"personal_code": SEGMENT_1_CODE})

    assert response.status_code == 400
    assert response.json()["message"] == "please insert loan sum between €2000 and €10000"


@patch.object(InMemoryApplicantRegistry, "lookup", new_callable=AsyncMock)
def test_decision_endpoint_registry_unavailable(mock_lookup: AsyncMock, client: TestClient):
    mock_lookup.side_effect = RegistryUnavailableError("Registry timeout after 5.0s")

    response = post_decision(client, SEGMENT_1_CODE, 5000, 24)

    assert response.status_code == 503
    assert response.json()["detail"] == "Applicant registry unavailable"


def test_request_id_header(client: TestClient):
    response = client.get("/health", headers={"X-Request-ID": "req-123"})
    assert response.headers["X-Request-ID"] == "req-123"

    generated = client.get("/health")
    assert generated.headers["X-Request-ID"]


def test_wrong_method_and_unknown_route(client: TestClient):
    assert client.get("/v1/decision").status_code == 405
    assert client.get("/nope").status_code == 404


def sample(name: str, **labels) -> float:
    return REGISTRY.get_sample_value(name, labels) or 0.0


def test_decision_metrics_labelled_by_outcome_and_reason(client: TestClient):
    """One approval and one rejection land in their labelled series"""
    approved_before = sample("loan_decision_total", outcome="approved", reason="none")
    debt_before = sample("loan_decision_total", outcome="declined", reason="existing_debt")
    top_bucket_before = sample("loan_amount_bucket_total", bucket="€7000+")
    zero_bucket_before = sample("loan_amount_bucket_total", bucket="€0")

    post_decision(client, SEGMENT_3_CODE, 5000, 24)  # capped at 10000
    post_decision(client, DEBTOR_CODE, 5000, 24)

    assert sample("loan_decision_total", outcome="approved", reason="none") == approved_before + 1
    assert sample("loan_decision_total", outcome="declined", reason="existing_debt") == debt_before + 1
    assert sample("loan_amount_bucket_total", bucket="€7000+") == top_bucket_before + 1
    assert sample("loan_amount_bucket_total", bucket="€0") == zero_bucket_before + 1


def test_request_metrics_use_route_template(client: TestClient):
    """Unknown paths share one series instead of one per raw path"""
    unmatched_before = sample(
        "http_request_duration_seconds_count", method="GET", endpoint="unmatched", status="404"
    )
    decision_before = sample(
        "http_request_duration_seconds_count", method="POST", endpoint="/v1/decision", status="200"
    )

    client.get("/no-such-page/123")
    post_decision(client, SEGMENT_1_CODE, 5000, 24)

    assert sample(
        "http_request_duration_seconds_count", method="GET", endpoint="unmatched", status="404"
    ) == unmatched_before + 1
    assert sample(
        "http_request_duration_seconds_count", method="POST", endpoint="/v1/decision", status="200"
    ) == decision_before + 1
    assert REGISTRY.get_sample_value(
        "http_request_duration_seconds_count",
        {"method": "GET", "endpoint": "/no-such-page/123", "status": "404"},
    ) is None
