"""
REST HTTP client for the FixFlow host application.
"""

from typing import Any, Optional

import httpx

from fixflow.config import DEFAULT_BASE_URL
from fixflow.errors import FixFlowError, TranslationError

TRANSLATE_PATH = "/api/translate"


class HttpClient:
    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._client = httpx.AsyncClient(
            base_url=self._base_url,
            headers={"User-Agent": "fixflow/0.1.0", "Accept": "application/json"},
            timeout=timeout,
            transport=transport,
        )

    @property
    def closed(self) -> bool:
        return self._client.is_closed

    @staticmethod
    def _error_message(resp: httpx.Response) -> str:
        """Error payloads look like {"error": "..."}; fall back to the raw body."""
        try:
            body = resp.json()
        except ValueError:
            body = None
        if isinstance(body, dict) and body.get("error"):
            return str(body["error"])
        return f"HTTP {resp.status_code}: {resp.text[:200]}"

    async def post(self, path: str, body: Optional[dict[str, Any]] = None) -> Any:
        try:
            resp = await self._client.post(path, json=body, headers={"Content-Type": "application/json"})
        except httpx.HTTPError as e:
            raise FixFlowError("http_error", f"Request to {path} failed: {e}")
        if resp.status_code >= 400:
            raise FixFlowError("http_error", self._error_message(resp), {"status_code": resp.status_code})
        try:
            return resp.json()
        except ValueError:
            raise FixFlowError("http_error", f"Invalid JSON from {path}", {"status_code": resp.status_code})

    async def translate(self, text: str, target_language: str, source_language: str) -> str:
        """POST /api/translate -> {"translatedText": "..."}"""
        try:
            data = await self.post(TRANSLATE_PATH, {
                "text": text,
                "targetLanguage": target_language,
                "sourceLanguage": source_language,
            })
        except FixFlowError as e:
            raise TranslationError(str(e), status_code=(e.details or {}).get("status_code")) from e
        translated = data.get("translatedText") if isinstance(data, dict) else None
        if not isinstance(translated, str):
            raise TranslationError("Translation response missing translatedText")
        return translated

    async def close(self) -> None:
        await self._client.aclose()
