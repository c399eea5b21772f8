# 📄 File: app/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# The main entry point that tells Python this 'app' folder contains our Oyster Review application code
# and sets up the basic version and package information.
#
# 🧪 Purpose (Technical Summary):
# Application package initialization with version info and package metadata
# for the Oyster Review FastAPI application.
#
# 🔗 Dependencies:
# - Python packaging system
#
# 🔄 Connected Modules / Calls From:
# - main.py (application entry point)
# - pyproject.toml (version)

"""
Oyster Review Application

Backend API for rating oysters: one review per person per oyster (later
submissions update it after confirmation), subject scores, and public
profiles whose friends list can be kept private.
"""

__version__ = "1.0.0"
__title__ = "Oyster Review API"
__description__ = "Oyster reviews with duplicate resolution and privacy-gated profiles"
__license__ = "MIT"

# Application metadata
__all__ = [
    "__version__",
    "__title__",
    "__description__",
    "__license__",
]
