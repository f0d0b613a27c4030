"""
Trial display state: derived on every read, never persisted.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict

from fixflow.models.session import Company, SubscriptionStatus


class TrialDisplayState(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: SubscriptionStatus = SubscriptionStatus.INACTIVE
    days_remaining: Optional[int] = None
    trial_end_date: Optional[datetime] = None
    company: Optional[Company] = None

    @property
    def is_trial(self) -> bool:
        return self.status == SubscriptionStatus.TRIALING

    def ending_soon(self, threshold: int) -> bool:
        return self.days_remaining is not None and self.days_remaining <= threshold


class TrialBanner(BaseModel):
    """Text content of the trial banner."""
    model_config = ConfigDict(frozen=True)

    title: str
    message: str
    button_text: str
    urgent: bool = False
