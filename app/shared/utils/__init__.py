# 📄 File: app/shared/utils/__init__.py

# 🧭 Purpose (Layman Explanation):
# Helpful tools the rest of the app shares, mainly writing useful log messages.

# 🧪 Purpose (Technical Summary):
# Utilities package; exposes the structured logging setup and request context helpers.

# 🔗 Dependencies:
# - logging: Structured logging utilities

# 🔄 Connected Modules / Calls From:
# Used by: app.main, middleware, shared dependencies

from .logging import bind_user, get_request_id, log_context, setup_logging

__all__ = [
    "setup_logging",
    "log_context",
    "bind_user",
    "get_request_id",
]
