"""
Session state: holds the envelope supplied by the identity provider and
exposes read-only views derived from it.
"""

import logging
from datetime import datetime
from typing import Any, Callable, Optional, Union

from pydantic import ValidationError

from fixflow.models.session import PlanType, SessionEnvelope, SubscriptionStatus, UserRole
from fixflow.models.trial import TrialDisplayState
from fixflow.trial import derive_trial_status

logger = logging.getLogger(__name__)

SessionListener = Callable[[Optional[SessionEnvelope]], None]


class SessionState:
    def __init__(self, envelope: Optional[SessionEnvelope] = None):
        self._envelope = envelope
        self._listeners: list[SessionListener] = []

    @property
    def envelope(self) -> Optional[SessionEnvelope]:
        return self._envelope

    def set_session(self, envelope: Union[SessionEnvelope, dict[str, Any], None]) -> None:
        if isinstance(envelope, dict):
            try:
                envelope = SessionEnvelope.model_validate(envelope)
            except ValidationError as e:
                logger.warning(f"Discarding malformed session: {e.error_count()} invalid field(s)")
                envelope = None
        self._envelope = envelope
        for listener in list(self._listeners):
            listener(envelope)

    def sign_out(self) -> None:
        if self._envelope is not None:
            logger.info("Signed out")
        self.set_session(None)

    def subscribe(self, listener: SessionListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            try:
                self._listeners.remove(listener)
            except ValueError:
                pass
        return unsubscribe

    @property
    def is_authenticated(self) -> bool:
        user = self._envelope.user if self._envelope else None
        return user is not None and bool(user.id)

    @property
    def user_role(self) -> Optional[UserRole]:
        user = self._envelope.user if self._envelope else None
        return user.role if user else None

    @property
    def company_id(self) -> Optional[str]:
        user = self._envelope.user if self._envelope else None
        if user is None:
            return None
        return user.company_id or (user.company.id if user.company else None)

    @property
    def company_name(self) -> Optional[str]:
        company = self._company()
        return company.name if company else None

    @property
    def company_plan_type(self) -> Optional[PlanType]:
        company = self._company()
        return company.plan_type if company else None

    @property
    def company_subscription_status(self) -> Optional[SubscriptionStatus]:
        company = self._company()
        return company.subscription.status if company and company.subscription else None

    def trial(self, now: Optional[datetime] = None) -> TrialDisplayState:
        """Recomputed on every call; 'now' keeps moving."""
        return derive_trial_status(self._envelope, now)

    def _company(self):
        user = self._envelope.user if self._envelope else None
        return user.company if user else None
