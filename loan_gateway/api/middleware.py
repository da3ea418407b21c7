"""Per-request context: request IDs, latency metrics and access logs"""

import time
import uuid
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from loan_gateway.infrastructure.observability.logging import log_request
from loan_gateway.infrastructure.observability.metrics import request_duration_histogram

REQUEST_ID_HEADER = "X-Request-ID"
UNMATCHED_ROUTE = "unmatched"


def route_template(request: Request) -> str:
    """Path template of the matched route, so metric labels stay bounded"""
    route = request.scope.get("route")
    return getattr(route, "path", UNMATCHED_ROUTE)


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Tag each request with an ID (the caller's when supplied) and record its latency"""

    async def dispatch(self, request: Request, call_next):
        request.state.request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        started = time.perf_counter()

        response = await call_next(request)

        elapsed = time.perf_counter() - started
        endpoint = route_template(request)
        request_duration_histogram.labels(
            method=request.method,
            endpoint=endpoint,
            status=response.status_code,
        ).observe(elapsed)
        log_request(request.state.request_id, request.method, endpoint, response.status_code, elapsed * 1000)

        response.headers[REQUEST_ID_HEADER] = request.state.request_id
        return response
