"""FastAPI application factory"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from loan_gateway.api.middleware import RequestContextMiddleware
from loan_gateway.api.v1 import decision, limits
from loan_gateway.infrastructure.observability.logging import setup_logging
from loan_gateway.config import settings

V1_ROUTERS = (
    (decision.router, "decisions"),
    (limits.router, "limits"),
)


def create_app() -> FastAPI:
    """Build the loan gateway: ops endpoints plus the versioned decision API"""
    setup_logging(settings.log_level)

    app = FastAPI(
        title="Loan Gateway",
        description="Decides loan amount and period for registered applicants",
        version="0.1.0",
    )
    app.add_middleware(RequestContextMiddleware)

    @app.get("/health", tags=["ops"])
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    @app.get("/metrics", tags=["ops"])
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    for router, tag in V1_ROUTERS:
        app.include_router(router, prefix="/v1", tags=[tag])

    return app


app = create_app()
