# 📄 File: app/modules/user_management/domain/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the core rules for user profiles - who a user is, what their profile shows, and when their
# friends list stays hidden
# 🧪 Purpose (Technical Summary):
# Domain layer for user management: entities, the ProfileStore interface and the friends privacy gate
# 🔗 Dependencies:
# Domain models, repositories, services from subpackages
# 🔄 Connected Modules / Calls From:
# Infrastructure layer, Presentation layer

"""
User Management Domain Layer

Domain Models:
- User: public identity of a reviewer
- PublicProfile / ProfileStats: profile page data and its privacy flag

Repository Interfaces:
- ProfileStore: public profile reads

Domain Services:
- ProfileVisibilityGate: friends list visible or private
- FriendsViewLoader: loading / loaded / not found / error states of a friends page

Business Rules Enforced:
- A private friends list is never loaded by stores nor shown by the gate
- "Private" and "failed to load" are reported differently
"""
