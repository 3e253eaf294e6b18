"""Config-changed broadcast channel with ordered, failure-isolated delivery."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable

from intervue_coder.l1_entities.config import AppConfig

log = logging.getLogger('ivc.notify')

ConfigSubscriber = Callable[[AppConfig], None]


class ChangeNotifier:
    """Fire-and-forget observer list.

    Subscribers run in subscription order on the thread that calls emit().
    A subscriber that raises is logged and skipped; emit() never raises.
    """

    def __init__(self) -> None:
        self._subscribers: list[ConfigSubscriber] = []
        self._lock = threading.Lock()

    def subscribe(self, callback: ConfigSubscriber) -> Callable[[], None]:
        """Register *callback*. Returns a function that removes it again."""
        with self._lock:
            self._subscribers.append(callback)

        def _unsubscribe() -> None:
            with self._lock:
                if callback in self._subscribers:
                    self._subscribers.remove(callback)

        return _unsubscribe

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def emit(self, config: AppConfig) -> None:
        with self._lock:
            subscribers = list(self._subscribers)
        log.debug('Emitting config change to %d subscriber(s)', len(subscribers))
        for callback in subscribers:
            try:
                callback(config)
            except Exception:
                log.error('Config subscriber %r failed', callback, exc_info=True)
