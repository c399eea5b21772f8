# 📄 File: app/modules/user_management/infrastructure/__init__.py
# 🧭 Purpose (Layman Explanation):
# Where profile data actually comes from: our database, or the profile web service.
#
# 🧪 Purpose (Technical Summary):
# Infrastructure layer of user management providing ProfileStore implementations.
#
# 🔗 Dependencies:
# - SQLAlchemy (database store), app.shared.infrastructure.external_apis (API client store)
#
# 🔄 Connected Modules / Calls From:
# - Profile API dependencies, remote clients
