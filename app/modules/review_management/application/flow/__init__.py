# 📄 File: app/modules/review_management/application/flow/__init__.py
# 🧭 Purpose (Layman Explanation):
# The step-by-step "write or update a review" process.
#
# 🧪 Purpose (Technical Summary):
# Review submission state machine: flow states and the ReviewFlowController.
#
# 🔗 Dependencies:
# - review_management.domain
#
# 🔄 Connected Modules / Calls From:
# - Review API endpoints, remote clients, tests

from .controller import ReviewFlowController
from .states import (
    Composing,
    DuplicateDetected,
    Failed,
    FailedDuring,
    FlowState,
    PersistOutcome,
    Persisted,
    Resolving,
    Submitting,
    flow_label,
    is_busy,
    submit_label,
)

__all__ = [
    "ReviewFlowController",
    "FlowState",
    "Composing",
    "Submitting",
    "DuplicateDetected",
    "Resolving",
    "Persisted",
    "Failed",
    "PersistOutcome",
    "FailedDuring",
    "flow_label",
    "submit_label",
    "is_busy",
]
