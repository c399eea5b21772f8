# 📄 File: app/shared/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Marks the 'shared' folder as a Python package containing common tools that every part of the
# oyster review app uses, like settings, database connections, errors and logging.
#
# 🧪 Purpose (Technical Summary):
# Shared kernel package for configuration, infrastructure and cross-cutting concerns.
#
# 🔗 Dependencies:
# - Python packaging system
#
# 🔄 Connected Modules / Calls From:
# - All application modules importing shared utilities

"""
Shared Kernel - Common Utilities and Infrastructure

- Configuration management (pydantic-settings)
- Database infrastructure (SQLAlchemy async)
- Security (JWT bearer tokens) and the exception hierarchy
- HTTP client for the review API
- Structured logging
"""

__all__ = []
