# 📄 File: app/modules/review_management/application/__init__.py
# 🧭 Purpose (Layman Explanation):
# The part of reviews that coordinates what happens when a user submits one.
#
# 🧪 Purpose (Technical Summary):
# Application layer of review management; hosts the submission flow.
#
# 🔗 Dependencies:
# - review_management.domain
#
# 🔄 Connected Modules / Calls From:
# - presentation layer
