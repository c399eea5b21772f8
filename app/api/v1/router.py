# 📄 File: app/api/v1/router.py
# 🧭 Purpose (Layman Explanation):
# This file acts like a traffic director for all API version 1 requests, sending review requests to the
# review handlers and profile requests to the profile handlers.
# 🧪 Purpose (Technical Summary):
# Main API v1 router aggregation that combines module routers under their route prefixes.
# 🔗 Dependencies:
# FastAPI, app.api.v1.health, module presentation routers
# 🔄 Connected Modules / Calls From:
# app.main.py

import logging

from fastapi import APIRouter

from app.modules.review_management.presentation.api.v1.reviews import reviews_router
from app.modules.user_management.presentation.api.v1.profiles import profiles_router

from . import COMMON_RESPONSES, ROUTE_PREFIXES, get_api_info
from .health import health_router

logger = logging.getLogger(__name__)

# Create main API v1 router
api_v1_router = APIRouter(responses=COMMON_RESPONSES)

# Include health check router (no prefix - direct access)
api_v1_router.include_router(
    health_router,
    tags=["Health Check"]
)

# =========================================================================
# API V1 INFO ENDPOINT
# =========================================================================

@api_v1_router.get("/",
                  summary="API v1 Information",
                  description="Get API v1 version information and available endpoints",
                  tags=["API Info"])
async def api_v1_info() -> dict:
    """
    API v1 information endpoint
    """
    return {
        **get_api_info(),
        "documentation": {
            "openapi_schema": "/openapi.json",
            "swagger_ui": "/docs",
            "redoc": "/redoc"
        },
    }


# =========================================================================
# MODULE ROUTER INCLUDES
# =========================================================================

api_v1_router.include_router(
    reviews_router,
    prefix=ROUTE_PREFIXES["reviews"],
    tags=["Reviews"]
)

api_v1_router.include_router(
    profiles_router,
    prefix=ROUTE_PREFIXES["users"],
    tags=["Profiles"]
)
