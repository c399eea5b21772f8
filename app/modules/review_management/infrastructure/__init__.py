# 📄 File: app/modules/review_management/infrastructure/__init__.py
# 🧭 Purpose (Layman Explanation):
# Where reviews are actually stored: our database, or the review web service.
#
# 🧪 Purpose (Technical Summary):
# Infrastructure layer of review management providing ReviewStore implementations.
#
# 🔗 Dependencies:
# - SQLAlchemy (database store), httpx (API client store)
#
# 🔄 Connected Modules / Calls From:
# - Review API dependencies, remote clients
