# 📄 File: app/modules/user_management/infrastructure/external/__init__.py
# 🧭 Purpose (Layman Explanation):
# Groups the code that reads profiles over the network instead of our own database.
#
# 🧪 Purpose (Technical Summary):
# External integrations for user management: the HTTP API ProfileStore client.
#
# 🔗 Dependencies:
# - app.shared.infrastructure.external_apis
#
# 🔄 Connected Modules / Calls From:
# - Remote clients driving FriendsViewLoader

from app.modules.user_management.infrastructure.external.profile_api_client import HttpProfileStore

__all__ = ["HttpProfileStore"]
