"""Synchronous change notification shared by enum values and enum sets."""
from __future__ import annotations

import logging
from typing import Any, Callable, List, Mapping

from enumium.core.types import WatcherCallback
from enumium.telemetry.events import WatcherFailure

logger = logging.getLogger("enumium.model")

WatcherErrorHook = Callable[[WatcherFailure], Any]


class Observable:
    """Ordered watcher list with failure-swallowing dispatch.

    ``trigger`` never raises: exceptions from watchers are logged, reported to
    the optional diagnostic hook and discarded, and the remaining watchers
    still run in registration order.
    """

    def _init_watchers(self) -> None:
        self._watchers: List[WatcherCallback] = []
        self._watcher_error_hook: WatcherErrorHook | None = None

    def _observable_label(self) -> str:
        return type(self).__name__

    def watch(self, callback: WatcherCallback) -> None:
        self._watchers.append(callback)

    def unwatch(self, callback: WatcherCallback) -> None:
        """Remove the first registered watcher equal to ``callback`` (no-op if absent)."""

        try:
            self._watchers.remove(callback)
        except ValueError:
            pass

    def get_watchers(self) -> List[WatcherCallback]:
        return list(self._watchers)

    def clear_watchers(self) -> None:
        self._watchers = []

    def set_watcher_error_hook(self, hook: WatcherErrorHook | None) -> None:
        """Install a callable receiving a :class:`WatcherFailure` for each dropped error."""

        self._watcher_error_hook = hook

    def trigger(self, event: str, data: Any = None) -> None:
        payload = {} if data is None else data
        event_name = getattr(event, "value", event)
        # Snapshot so watchers may (un)register during dispatch.
        for watcher in list(self._watchers):
            try:
                watcher(event_name, payload)
            except Exception as exc:
                self._report_watcher_failure(event_name, watcher, exc, payload)

    def _report_watcher_failure(
        self,
        event: str,
        watcher: WatcherCallback,
        exc: Exception,
        payload: Any,
    ) -> None:
        failure = WatcherFailure(
            source=self._observable_label(),
            event=event,
            callback=getattr(watcher, "__qualname__", repr(watcher)),
            error=exc,
            data=dict(payload) if isinstance(payload, Mapping) else payload,
        )
        logger.warning(
            "Watcher raised during dispatch; error discarded",
            exc_info=exc,
            extra=failure.to_dict(),
        )
        hook = self._watcher_error_hook
        if hook is None:
            return
        try:
            hook(failure)
        except Exception:
            logger.exception("Watcher error hook failed", extra={"source": failure.source, "event": event})
