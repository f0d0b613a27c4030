"""Session envelope parsing and derived session state."""

from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from fixflow.models.session import PlanType, SessionEnvelope, SubscriptionStatus, UserRole
from fixflow.session import SessionState

PAYLOAD = {
    "user": {
        "id": "u1",
        "email": "ann@example.com",
        "name": "Ann",
        "role": "MANAGER",
        "companyId": "c1",
        "company": {
            "id": "c1",
            "name": "Fix-It Co",
            "planType": "BUSINESS",
            "subscription": {"status": "TRIALING", "trial_end": "2026-10-29T00:00:00Z"},
        },
    },
}


def test_envelope_accepts_camel_case():
    env = SessionEnvelope.model_validate(PAYLOAD)
    assert env.user.company_id == "c1"
    assert env.user.company.plan_type == PlanType.BUSINESS
    assert env.user.company.subscription.trial_end.tzinfo is not None


def test_envelope_is_read_only():
    env = SessionEnvelope.model_validate(PAYLOAD)
    with pytest.raises(ValidationError):
        env.user.role = UserRole.OWNER


def test_unauthenticated_defaults():
    state = SessionState()
    assert not state.is_authenticated
    assert state.user_role is None
    assert state.company_id is None
    assert state.company_subscription_status is None
    assert state.trial().status == SubscriptionStatus.INACTIVE


def test_derived_fields():
    state = SessionState()
    state.set_session(PAYLOAD)
    assert state.is_authenticated
    assert state.user_role == UserRole.MANAGER
    assert state.company_id == "c1"
    assert state.company_name == "Fix-It Co"
    assert state.company_plan_type == PlanType.BUSINESS
    assert state.company_subscription_status == SubscriptionStatus.TRIALING
    now = datetime(2026, 10, 19, tzinfo=timezone.utc)
    assert state.trial(now).days_remaining == 10
    assert state.trial(now + timedelta(days=4)).days_remaining == 6


def test_listeners_and_sign_out():
    state = SessionState()
    seen = []
    unsubscribe = state.subscribe(seen.append)
    state.set_session(PAYLOAD)
    state.sign_out()
    unsubscribe()
    state.set_session(PAYLOAD)
    assert len(seen) == 2
    assert seen[1] is None


def test_user_without_id_is_signed_out():
    state = SessionState()
    state.set_session({"user": {"email": "ann@example.com"}})
    assert state.envelope is not None
    assert not state.is_authenticated
    assert state.trial().status == SubscriptionStatus.INACTIVE


def test_malformed_session_is_discarded():
    state = SessionState()
    state.set_session({"user": {"id": "u1", "role": "JANITOR"}})
    assert state.envelope is None
    assert not state.is_authenticated
    assert state.user_role is None
