"""
Toast queue: bounded set of visible notifications with timed removal.

Lifecycle of a toast:
- add: prepended, queue truncated to `limit` (oldest evicted)
- dismiss: open=False, removal scheduled `remove_delay` seconds later
- remove: deleted immediately, pending timer cancelled

One removal timer per toast id; dismissing again resets it rather than stacking.
Listeners are called synchronously, in registration order, after every mutation.
"""

import asyncio
import logging
import random
import string
from typing import Any, Callable, Optional, Union

from fixflow.errors import ProviderScopeError
from fixflow.models.toast import ToastRecord, ToastVariant

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 1
DEFAULT_REMOVE_DELAY_S = 1000.0

_ID_ALPHABET = string.ascii_lowercase + string.digits
_UPDATABLE = {"title", "description", "variant", "duration", "open"}

Listener = Callable[[tuple[ToastRecord, ...]], None]


class ToastHandle:
    __slots__ = ("id", "_store")

    def __init__(self, id: str, store: "ToastStore"):
        self.id = id
        self._store = store

    def update(self, **fields: Any) -> None:
        self._store.update(self.id, **fields)

    def dismiss(self) -> None:
        self._store.dismiss(self.id)

    def __repr__(self) -> str:
        return f"ToastHandle(id={self.id!r})"


class ToastStore:
    def __init__(self, limit: int = DEFAULT_LIMIT, remove_delay: float = DEFAULT_REMOVE_DELAY_S):
        if limit < 1:
            raise ValueError("toast limit must be at least 1")
        self._limit = limit
        self._remove_delay = remove_delay
        self._toasts: list[ToastRecord] = []
        self._listeners: list[Listener] = []
        self._timers: dict[str, asyncio.TimerHandle] = {}
        self._closed = False

    @property
    def limit(self) -> int:
        return self._limit

    @property
    def toasts(self) -> tuple[ToastRecord, ...]:
        return tuple(self._toasts)

    @property
    def pending_removals(self) -> frozenset[str]:
        return frozenset(self._timers)

    @property
    def closed(self) -> bool:
        return self._closed

    def get(self, toast_id: str) -> Optional[ToastRecord]:
        for t in self._toasts:
            if t.id == toast_id:
                return t
        return None

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener. Returns a function that removes it."""
        self._ensure_open()
        self._listeners.append(listener)

        def unsubscribe() -> None:
            try:
                self._listeners.remove(listener)
            except ValueError:
                pass
        return unsubscribe

    def add(
        self,
        title: Optional[str] = None,
        description: Optional[str] = None,
        variant: Union[ToastVariant, str] = ToastVariant.DEFAULT,
        duration: Optional[float] = None,
    ) -> ToastHandle:
        self._ensure_open()
        record = ToastRecord(
            id=self._new_id(),
            title=title,
            description=description,
            variant=ToastVariant(variant),
            duration=duration,
        )
        queue = [record, *self._toasts]
        for evicted in queue[self._limit:]:
            self._cancel_timer(evicted.id)
        self._toasts = queue[:self._limit]
        self._dispatch()
        return ToastHandle(record.id, self)

    def notify(self, message: str, variant: Union[ToastVariant, str] = ToastVariant.DEFAULT) -> None:
        """Notification sink: fire-and-forget toast."""
        self.add(title=message, variant=variant)

    def update(self, toast_id: str, **fields: Any) -> None:
        self._ensure_open()
        unknown = set(fields) - _UPDATABLE
        if unknown:
            raise TypeError(f"Cannot update toast fields: {', '.join(sorted(unknown))}")
        for i, t in enumerate(self._toasts):
            if t.id == toast_id:
                self._toasts[i] = ToastRecord.model_validate({**t.model_dump(), **fields})
                self._dispatch()
                return

    def dismiss(self, toast_id: Optional[str] = None) -> None:
        self._ensure_open()
        if toast_id is not None:
            targets = [t.id for t in self._toasts if t.id == toast_id]
        else:
            targets = [t.id for t in self._toasts if t.open]
        if not targets:
            return
        for tid in targets:
            self._schedule_removal(tid)
        self._toasts = [
            t.model_copy(update={"open": False}) if t.id in targets else t
            for t in self._toasts
        ]
        self._dispatch()

    def remove(self, toast_id: Optional[str] = None) -> None:
        self._ensure_open()
        if toast_id is None:
            for tid in list(self._timers):
                self._cancel_timer(tid)
            self._toasts = []
            self._dispatch()
            return
        self._cancel_timer(toast_id)
        remaining = [t for t in self._toasts if t.id != toast_id]
        if len(remaining) == len(self._toasts):
            return
        self._toasts = remaining
        self._dispatch()

    def close(self) -> None:
        """Cancel all pending removals and drop listeners."""
        for tid in list(self._timers):
            self._cancel_timer(tid)
        self._listeners.clear()
        self._closed = True

    def _dispatch(self) -> None:
        snapshot = tuple(self._toasts)
        for listener in list(self._listeners):
            listener(snapshot)

    def _schedule_removal(self, toast_id: str) -> None:
        self._cancel_timer(toast_id)
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            logger.debug(f"No running event loop; toast {toast_id} stays until removed")
            return
        self._timers[toast_id] = loop.call_later(self._remove_delay, self._on_timer, toast_id)
        logger.debug(f"Toast {toast_id} removal scheduled in {self._remove_delay}s")

    def _on_timer(self, toast_id: str) -> None:
        self._timers.pop(toast_id, None)
        if not self._closed:
            self.remove(toast_id)

    def _cancel_timer(self, toast_id: str) -> None:
        timer = self._timers.pop(toast_id, None)
        if timer:
            timer.cancel()

    def _new_id(self) -> str:
        taken = {t.id for t in self._toasts}
        while True:
            candidate = "".join(random.choices(_ID_ALPHABET, k=7))
            if candidate not in taken:
                return candidate

    def _ensure_open(self) -> None:
        if self._closed:
            raise ProviderScopeError("ToastStore used after close()")
