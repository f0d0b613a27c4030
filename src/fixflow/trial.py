"""
Trial status: pure derivation from the session's company subscription.
"""

import math
from datetime import datetime, timezone
from typing import Optional

from fixflow.models.session import SessionEnvelope, SubscriptionStatus
from fixflow.models.trial import TrialBanner, TrialDisplayState

SECONDS_PER_DAY = 86400
DEFAULT_ENDING_SOON_DAYS = 3


def _aware(dt: datetime) -> datetime:
    return dt if dt.tzinfo is not None else dt.replace(tzinfo=timezone.utc)


def days_remaining(trial_end: datetime, now: Optional[datetime] = None) -> int:
    """Whole days until trial_end, floored; an ended trial gives 0."""
    now = _aware(now) if now else datetime.now(timezone.utc)
    delta = (_aware(trial_end) - now).total_seconds()
    return max(0, math.floor(delta / SECONDS_PER_DAY))


def derive_trial_status(session: Optional[SessionEnvelope], now: Optional[datetime] = None) -> TrialDisplayState:
    company = session.user.company if session and session.user else None
    if company is None or company.subscription is None:
        return TrialDisplayState()

    subscription = company.subscription
    trial_end = subscription.trial_end
    return TrialDisplayState(
        status=subscription.status,
        days_remaining=days_remaining(trial_end, now) if trial_end else None,
        trial_end_date=trial_end,
        company=company,
    )


def is_trial_ending_soon(state: TrialDisplayState, threshold: int = DEFAULT_ENDING_SOON_DAYS) -> bool:
    return state.ending_soon(threshold)


def format_trial_end_date(trial_end: datetime) -> str:
    return f"{trial_end:%B} {trial_end.day}, {trial_end.year}"


def trial_banner(
    state: TrialDisplayState,
    company_name: Optional[str] = None,
    threshold: int = DEFAULT_ENDING_SOON_DAYS,
) -> Optional[TrialBanner]:
    """Banner text for a trialing company; None for every other status."""
    if state.status != SubscriptionStatus.TRIALING:
        return None
    name = (state.company.name if state.company else None) or company_name

    if state.ending_soon(threshold):
        days = state.days_remaining
        return TrialBanner(
            title="Trial Ending Soon!",
            message=f"Your trial for {name or 'your company'} ends in {days} day{'' if days == 1 else 's'}.",
            button_text="Upgrade Now",
            urgent=True,
        )

    return TrialBanner(
        title=f"{name}'s Free Trial" if name else "Your Free Trial",
        message=(
            f"{state.days_remaining} days left to unlock full potential."
            if state.days_remaining else "Your trial has ended."
        ),
        button_text="Upgrade Plan",
    )
