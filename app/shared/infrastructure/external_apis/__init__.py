# 📄 File: app/shared/infrastructure/external_apis/__init__.py

# 🧭 Purpose (Layman Explanation):
# The shared foundation for talking to the review web service over the network.

# 🧪 Purpose (Technical Summary):
# External API infrastructure: the httpx/tenacity APIClient used by the HTTP store implementations.

# 🔗 Dependencies:
# - api_client: HTTP client with retry logic and error translation

# 🔄 Connected Modules / Calls From:
# Used by: HttpReviewStore, HttpProfileStore

from .api_client import APIClient

__all__ = ["APIClient"]
