from fixflow.models.session import (
    Company,
    PlanType,
    SessionEnvelope,
    SessionUser,
    Subscription,
    SubscriptionStatus,
    UserRole,
)
from fixflow.models.toast import ToastRecord, ToastVariant
from fixflow.models.trial import TrialBanner, TrialDisplayState

__all__ = [
    "Company",
    "PlanType",
    "SessionEnvelope",
    "SessionUser",
    "Subscription",
    "SubscriptionStatus",
    "UserRole",
    "ToastRecord",
    "ToastVariant",
    "TrialBanner",
    "TrialDisplayState",
]
