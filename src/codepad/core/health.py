"""Health check and metrics endpoints."""

import secrets

from fastapi import Depends, FastAPI, HTTPException, Request, status
from fastapi.responses import JSONResponse
from fastapi.security import APIKeyHeader
from prometheus_fastapi_instrumentator import Instrumentator

from src.codepad.core.config import Settings


def setup_health_endpoint(app: FastAPI) -> None:
    """Configure the liveness endpoint.

    Liveness only: database reachability is reported by ``/db-test``.
    """

    @app.get("/health", tags=["system"])
    async def health(request: Request) -> JSONResponse:
        tracker = request.app.state.request_tracker
        if tracker.is_shutting_down:
            return JSONResponse(
                content={
                    "status": "draining",
                    "in_flight_requests": tracker.in_flight_count,
                },
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            )
        return JSONResponse(content={"status": "Backend running OK"})


def setup_metrics(app: FastAPI, settings: Settings) -> None:
    """Configure Prometheus metrics with optional API key protection."""
    instrumentator = Instrumentator(excluded_handlers=["/health", "/metrics"]).instrument(app)

    if settings.metrics_api_key:
        api_key_header = APIKeyHeader(name="X-Metrics-Key", auto_error=False)

        async def verify_metrics_key(
            api_key: str | None = Depends(api_key_header),
        ) -> None:
            if (
                api_key is None
                or settings.metrics_api_key is None
                or not secrets.compare_digest(api_key, settings.metrics_api_key)
            ):
                raise HTTPException(
                    status_code=status.HTTP_401_UNAUTHORIZED,
                    detail="Invalid or missing metrics API key",
                )

        instrumentator.expose(app, endpoint="/metrics", dependencies=[Depends(verify_metrics_key)])
    else:
        instrumentator.expose(app, endpoint="/metrics")
