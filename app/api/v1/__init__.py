# 📄 File: app/api/v1/__init__.py
# 🧭 Purpose (Layman Explanation):
# This file organizes version 1 of our API, so new versions can be added later without breaking
# existing apps.
# 🧪 Purpose (Technical Summary):
# Package initialization for API version 1: version metadata, route prefixes and OpenAPI tags.
# 🔗 Dependencies:
# typing
# 🔄 Connected Modules / Calls From:
# app.api.v1.router, app.main.py

"""
Oyster Review Application API Version 1

Structure:
    v1/
    ├── __init__.py          # This file
    ├── router.py            # Main v1 router aggregation
    └── health.py            # Health check endpoints

Module routers (reviews, public profiles) live in their modules'
presentation packages and are mounted by router.py.
"""

from typing import Any, Dict

# API v1 metadata
__version__ = "1.0.0"
__api_version__ = "v1"
__status__ = "stable"

API_V1_CONFIG = {
    "version": __version__,
    "api_version": __api_version__,
    "status": __status__,
    "description": "Oyster Review API Version 1",
    "features": [
        "review_submission",
        "duplicate_review_resolution",
        "subject_scores",
        "public_profiles",
        "friends_privacy",
    ],
}

# API v1 route prefixes
ROUTE_PREFIXES = {
    "reviews": "/reviews",
    "users": "/users",
}

# API v1 tags for OpenAPI documentation
API_TAGS = [
    {
        "name": "Reviews",
        "description": "Submit, update and list oyster reviews",
    },
    {
        "name": "Profiles",
        "description": "Public user profiles and friends lists",
    },
    {
        "name": "Health Check",
        "description": "System health and status monitoring",
    },
]

# Response schemas for common API responses
COMMON_RESPONSES = {
    401: {"description": "Unauthorized - authentication required"},
    429: {"description": "Too many requests - rate limit exceeded"},
    500: {"description": "Internal server error"},
    503: {"description": "Service unavailable"},
}


def get_api_info() -> Dict[str, Any]:
    """
    Get API v1 information and configuration

    Returns:
        Dictionary with API v1 metadata and configuration
    """
    return {
        "api_info": API_V1_CONFIG,
        "route_prefixes": ROUTE_PREFIXES,
        "tags": API_TAGS,
    }
