"""
fixflow: client-side session state for the FixFlow service-business app.

Toast queue, translation cache, trial status and role navigation derived
from the identity provider's session envelope.
"""

from fixflow.client import FixFlow
from fixflow.config import Settings, get_settings
from fixflow.errors import FixFlowError, TranslationError, ConfigError, ProviderScopeError
from fixflow.models.session import SessionEnvelope, SubscriptionStatus, UserRole, PlanType
from fixflow.navigation import Experience, get_nav_config
from fixflow.session import SessionState
from fixflow.toasts import ToastStore
from fixflow.translation import LanguageContext, TranslatedText, TranslationCache
from fixflow.trial import derive_trial_status

__version__ = "0.1.0"
__all__ = [
    "FixFlow",
    "Settings",
    "get_settings",
    "FixFlowError",
    "TranslationError",
    "ConfigError",
    "ProviderScopeError",
    "SessionEnvelope",
    "SubscriptionStatus",
    "UserRole",
    "PlanType",
    "Experience",
    "get_nav_config",
    "SessionState",
    "ToastStore",
    "LanguageContext",
    "TranslatedText",
    "TranslationCache",
    "derive_trial_status",
]
