"""
FixFlow error types.
"""

from typing import Any, Optional


class FixFlowError(Exception):
    def __init__(self, code: str, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.details = details


class TranslationError(FixFlowError):
    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__("translation_error", message, {"status_code": status_code} if status_code else None)
        self.status_code = status_code


class ConfigError(FixFlowError):
    def __init__(self, message: str):
        super().__init__("config_error", message)


class ProviderScopeError(FixFlowError):
    """Raised when a consumer is used outside the lifetime of its provider."""

    def __init__(self, message: str):
        super().__init__("provider_scope_error", message)
