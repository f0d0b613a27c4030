"""
Language context: active language selection plus a memoized translate().

translate() resolution order:
1. target language == source language -> text unchanged, no network call
2. LRU cache hit on (text, target)
3. in-flight request for the same (text, target) -> share its task
4. POST /api/translate; on failure notify the user and return the original text
"""

import asyncio
import logging
from collections import OrderedDict
from typing import Callable, Optional

from fixflow.config import Settings
from fixflow.errors import TranslationError
from fixflow.storage import LanguageStore
from fixflow.transport.http import HttpClient

logger = logging.getLogger(__name__)

NotificationSink = Callable[[str, str], None]


class Language:
    __slots__ = ("code", "name")

    def __init__(self, code: str, name: str):
        self.code = code
        self.name = name

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Language) and (self.code, self.name) == (other.code, other.name)

    def __repr__(self) -> str:
        return f"Language(code={self.code!r}, name={self.name!r})"


class TranslationCache:
    """(text, language) -> translation, least recently used pair evicted first."""

    def __init__(self, maxsize: int = 1024):
        if maxsize < 1:
            raise ValueError("maxsize must be at least 1")
        self._maxsize = maxsize
        self._entries: OrderedDict[tuple[str, str], str] = OrderedDict()

    @property
    def maxsize(self) -> int:
        return self._maxsize

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: tuple[str, str]) -> bool:
        return key in self._entries

    def get(self, text: str, language: str) -> Optional[str]:
        key = (text, language)
        value = self._entries.get(key)
        if value is not None:
            self._entries.move_to_end(key)
        return value

    def set(self, text: str, language: str, value: str) -> None:
        key = (text, language)
        self._entries[key] = value
        self._entries.move_to_end(key)
        while len(self._entries) > self._maxsize:
            self._entries.popitem(last=False)

    def languages_for(self, text: str) -> dict[str, str]:
        return {lang: v for (t, lang), v in self._entries.items() if t == text}

    def clear(self) -> None:
        self._entries.clear()


class LanguageContext:
    def __init__(
        self,
        http: HttpClient,
        store: LanguageStore,
        settings: Settings,
        notify: Optional[NotificationSink] = None,
    ):
        self._http = http
        self._store = store
        self._default_language = settings.default_language
        self._languages = [Language(code, name) for code, name in settings.languages.items()]
        self._notify = notify
        self._cache = TranslationCache(settings.translation_cache_size)
        self._in_flight: dict[tuple[str, str], asyncio.Task[str]] = {}

        stored = store.get()
        if stored and self.is_supported(stored):
            self._current = stored
        else:
            if stored:
                logger.warning(f"Ignoring stored unsupported language: {stored}")
            self._current = self._default_language

    @property
    def current_language(self) -> str:
        return self._current

    @property
    def default_language(self) -> str:
        return self._default_language

    @property
    def available_languages(self) -> list[Language]:
        return list(self._languages)

    @property
    def cache(self) -> TranslationCache:
        return self._cache

    def is_supported(self, code: str) -> bool:
        return any(lang.code == code for lang in self._languages)

    def set_language(self, code: str) -> None:
        if not self.is_supported(code):
            logger.warning(f"Attempted to set unsupported language: {code}")
            return
        self._current = code
        self._store.set(code)

    def cache_info(self) -> tuple[int, int]:
        return len(self._cache), self._cache.maxsize

    def clear_cache(self) -> None:
        self._cache.clear()

    async def translate(self, text: str, source_language: Optional[str] = None) -> str:
        source = source_language or self._default_language
        target = self._current
        if target == source or not text.strip():
            return text

        cached = self._cache.get(text, target)
        if cached is not None:
            logger.debug(f"Translation cache hit ({target}): {text[:40]!r}")
            return cached

        key = (text, target)
        task = self._in_flight.get(key)
        if task is None:
            task = asyncio.ensure_future(self._fetch(text, target, source))
            self._in_flight[key] = task
            task.add_done_callback(lambda done: self._forget(key, done))
        # each caller only cancels its own wait, never the shared request
        return await asyncio.shield(task)

    def _forget(self, key: tuple[str, str], task: "asyncio.Task[str]") -> None:
        if self._in_flight.get(key) is task:
            del self._in_flight[key]

    async def _fetch(self, text: str, target: str, source: str) -> str:
        try:
            translated = await self._http.translate(text, target, source)
        except TranslationError as e:
            logger.warning(f"Translation error ({source} -> {target}): {e}")
            self._surface(f"Translation failed: {e}")
            return text
        self._cache.set(text, target, translated)
        return translated

    def _surface(self, message: str) -> None:
        if self._notify is None:
            return
        try:
            self._notify(message, "destructive")
        except Exception as e:
            logger.error(f"Notification sink failed: {e}")


class TranslatedText:
    """A piece of text that follows the active language.

    `value` shows the original text until a translation lands. After close(),
    late results are discarded.
    """

    def __init__(self, context: LanguageContext, text: str, source_language: Optional[str] = None):
        self._context = context
        self.text = text
        self.source_language = source_language
        self.value = text
        self.translating = False
        self.alive = True

    async def refresh(self) -> str:
        if not self.alive:
            return self.value
        self.translating = True
        try:
            result = await self._context.translate(self.text, self.source_language)
        finally:
            if self.alive:
                self.translating = False
        if self.alive:
            self.value = result
        return self.value

    def close(self) -> None:
        self.alive = False
        self.translating = False
