# 📄 File: app/modules/review_management/infrastructure/external/__init__.py
# 🧭 Purpose (Layman Explanation):
# Groups the code that reaches reviews over the network instead of our own database.
#
# 🧪 Purpose (Technical Summary):
# External integrations for review management: the HTTP API ReviewStore client.
#
# 🔗 Dependencies:
# - httpx, tenacity
#
# 🔄 Connected Modules / Calls From:
# - Remote clients driving ReviewFlowController

from app.modules.review_management.infrastructure.external.review_api_client import HttpReviewStore

__all__ = ["HttpReviewStore"]
