# 📄 File: app/api/v1/health.py
# 🧭 Purpose (Layman Explanation):
# This file provides health check endpoints that tell us if the oyster review app is working,
# like a quick checkup confirming the service is up and the database answers.
# 🧪 Purpose (Technical Summary):
# Health check endpoints for load balancers and orchestrators: liveness, readiness (database
# connectivity) and a combined status with the database check.
# 🔗 Dependencies:
# FastAPI, app.shared.infrastructure.database.connection, datetime
# 🔄 Connected Modules / Calls From:
# app.api.v1.router, monitoring systems, load balancers

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Response
from fastapi.responses import JSONResponse

from app.shared.config.settings import get_settings
from app.shared.infrastructure.database.connection import database_health_check as db_health_check

logger = logging.getLogger(__name__)

# Create router for health endpoints
health_router = APIRouter()

# Application start time for uptime calculation
_app_start_time = datetime.now(timezone.utc)


@health_router.get("/health",
                  summary="Health Check",
                  description="Service status including database connectivity",
                  tags=["Health Check"])
async def health_check() -> JSONResponse:
    """
    Health check endpoint

    Always answers 200 while the process is alive; the database section
    reports whether storage is reachable.
    """
    settings = get_settings()
    database = await db_health_check()
    uptime = (datetime.now(timezone.utc) - _app_start_time).total_seconds()

    return JSONResponse(
        status_code=200,
        content={
            "status": "healthy" if database["status"] == "healthy" else "degraded",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "service": "oyster-review-api",
            "version": settings.APP_VERSION,
            "environment": settings.ENVIRONMENT,
            "uptime_seconds": round(uptime, 1),
            "database": database,
        }
    )


@health_router.get("/health/live",
                  summary="Liveness Probe",
                  description="Kubernetes liveness probe endpoint",
                  tags=["Health Check"])
async def liveness_probe() -> Response:
    """
    Returns 200 if the application is alive and running.
    """
    return Response(status_code=200, content="OK")


@health_router.get("/health/ready",
                  summary="Readiness Probe",
                  description="Kubernetes readiness probe endpoint",
                  tags=["Health Check"])
async def readiness_probe() -> JSONResponse:
    """
    Returns 200 if the application is ready to serve traffic (database reachable), 503 otherwise.
    """
    db_health = await db_health_check()

    if db_health["status"] == "healthy":
        return JSONResponse(
            status_code=200,
            content={"status": "ready", "timestamp": datetime.now(timezone.utc).isoformat()}
        )

    logger.warning(f"Readiness probe failed: {db_health.get('error')}")
    return JSONResponse(
        status_code=503,
        content={
            "status": "not_ready",
            "reason": "database_unhealthy",
            "timestamp": datetime.now(timezone.utc).isoformat()
        }
    )
