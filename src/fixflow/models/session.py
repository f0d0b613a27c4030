"""
Session envelope models: identity provider session plus tenant role/company metadata.

Models are frozen: consumers derive display state, they never mutate the envelope.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class UserRole(str, Enum):
    OWNER = "OWNER"
    MANAGER = "MANAGER"
    EMPLOYEE = "EMPLOYEE"
    ADMIN = "ADMIN"
    TECHNICIAN = "TECHNICIAN"
    CLIENT = "CLIENT"
    SOLO = "SOLO"
    FIELD_WORKER = "FIELD_WORKER"


class SubscriptionStatus(str, Enum):
    TRIALING = "TRIALING"
    ACTIVE = "ACTIVE"
    PAST_DUE = "PAST_DUE"
    CANCELED = "CANCELED"
    INACTIVE = "INACTIVE"


class PlanType(str, Enum):
    SOLO = "SOLO"
    TEAM = "TEAM"
    BUSINESS = "BUSINESS"
    ENTERPRISE = "ENTERPRISE"


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class Subscription(_Frozen):
    status: SubscriptionStatus = SubscriptionStatus.INACTIVE
    trial_end: Optional[datetime] = Field(default=None, alias="trialEnd")


class Company(_Frozen):
    id: Optional[str] = None
    name: Optional[str] = None
    plan_type: Optional[PlanType] = Field(default=None, alias="planType")
    subscription: Optional[Subscription] = None


class SessionUser(_Frozen):
    id: Optional[str] = None
    email: Optional[str] = None
    name: Optional[str] = None
    role: Optional[UserRole] = None
    company_id: Optional[str] = Field(default=None, alias="companyId")
    company: Optional[Company] = None


class SessionEnvelope(_Frozen):
    user: Optional[SessionUser] = None
    expires_at: Optional[datetime] = Field(default=None, alias="expiresAt")
