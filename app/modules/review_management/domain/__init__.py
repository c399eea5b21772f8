# 📄 File: app/modules/review_management/domain/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the core business rules for oyster reviews - what a review is, how duplicates are found,
# and how ratings add up to a score
# 🧪 Purpose (Technical Summary):
# Domain layer for review management: entities, the ReviewStore interface and domain services
# 🔗 Dependencies:
# Domain models, repositories, services from subpackages
# 🔄 Connected Modules / Calls From:
# Application layer, Infrastructure layer, Presentation layer

"""
Review Management Domain Layer

Domain Models:
- Review: one author's review of one subject
- ReviewDraft / ReviewContent: user input before and after validation
- ReviewRating: LOVE_IT, LIKE_IT, MEH, WHATEVER

Repository Interfaces:
- ReviewStore: review persistence contract

Domain Services:
- DuplicateResolver: prior-review lookup for an (author, subject) pair
- SubjectRatingService: per-subject score aggregation

Business Rules Enforced:
- At most one review per (author, subject), guarded by the store
- Rating must be one of the recognized reactions
- Review text trimmed, blank text stored as none
"""
