"""
FixFlow: application container.

Built once at start-up, owns the toast queue, session state and language
context, and tears them down on close().
"""

from typing import Any, Optional

import httpx

from fixflow.config import Settings, get_settings
from fixflow.errors import ProviderScopeError
from fixflow.navigation import NavConfig, get_nav_config
from fixflow.session import SessionState
from fixflow.storage import LanguageStore
from fixflow.toasts import ToastStore
from fixflow.translation import LanguageContext
from fixflow.transport.http import HttpClient

CONFIG_FILENAME = "config.json"


class FixFlow:
    def __init__(
        self,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        store: Optional[LanguageStore] = None,
    ):
        self.settings = settings or get_settings()
        self.http = HttpClient(
            base_url=self.settings.base_url,
            timeout=self.settings.http_timeout,
            transport=transport,
        )
        self._toasts = ToastStore(
            limit=self.settings.toast_limit,
            remove_delay=self.settings.toast_remove_delay,
        )
        self.session = SessionState()
        self._language = LanguageContext(
            self.http,
            store or LanguageStore(self.settings.state_dir / CONFIG_FILENAME),
            self.settings,
            notify=self._toasts.notify,
        )
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def toasts(self) -> ToastStore:
        self._ensure_open("toasts")
        return self._toasts

    @property
    def language(self) -> LanguageContext:
        self._ensure_open("language")
        return self._language

    async def translate(self, text: str, source_language: Optional[str] = None) -> str:
        return await self.language.translate(text, source_language)

    def nav_config(self) -> NavConfig:
        return get_nav_config(self.session.user_role, self.session.company_plan_type)

    def trial_ending_soon(self) -> bool:
        return self.session.trial().ending_soon(self.settings.trial_ending_soon_days)

    async def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._toasts.close()
        await self.http.close()

    async def __aenter__(self) -> "FixFlow":
        return self

    async def __aexit__(self, *exc: Any) -> None:
        await self.close()

    def _ensure_open(self, name: str) -> None:
        if self._closed:
            raise ProviderScopeError(f"FixFlow.{name} used after close()")
