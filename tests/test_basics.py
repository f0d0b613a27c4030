"""Basic unit tests for the fixflow package."""

from fixflow import (
    FixFlow,
    FixFlowError,
    TranslationError,
    ConfigError,
    ProviderScopeError,
    SubscriptionStatus,
    UserRole,
    __version__,
)


def test_version():
    assert __version__ == "0.1.0"


def test_public_exports():
    assert FixFlow is not None


def test_error_hierarchy():
    assert issubclass(TranslationError, FixFlowError)
    assert issubclass(ConfigError, FixFlowError)
    assert issubclass(ProviderScopeError, FixFlowError)


def test_error_attributes():
    err = FixFlowError(code="test_code", message="something broke")
    assert err.code == "test_code"
    assert str(err) == "something broke"
    assert err.details is None

    err = TranslationError("quota exceeded", status_code=429)
    assert err.code == "translation_error"
    assert err.status_code == 429
    assert err.details == {"status_code": 429}


def test_enum_values():
    assert SubscriptionStatus.TRIALING == "TRIALING"
    assert UserRole.FIELD_WORKER == "FIELD_WORKER"
    assert len(UserRole) == 8
