# 📄 File: app/shared/config/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Contains the settings that tell the oyster review app how to connect to its database,
# how to check logins and how to behave in each environment.
#
# 🧪 Purpose (Technical Summary):
# Configuration package exporting settings management.
#
# 🔗 Dependencies:
# - settings.py (application settings)
# - database.py (engine arguments and declarative base)
#
# 🔄 Connected Modules / Calls From:
# - app.main (application startup)
# - All modules requiring configuration

"""
Configuration Management Package

Handles all application configuration including:
- Environment-based settings
- Database connection configuration
- Review API client settings
"""

from .settings import get_settings, Settings

__all__ = [
    "get_settings",
    "Settings",
]
