"""Observer guard enforcing the single-result contract."""

import logging
import threading
from typing import TypeVar

from reactivex.abc import DisposableBase, ObserverBase

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SingleResultObserver(ObserverBase[T], DisposableBase):
    """Forward at most one value and exactly one terminal signal downstream.

    Native callbacks are free to fire late, twice, or after the subscriber has
    gone away. Anything past the first value, the first terminal signal, or a
    call to dispose() is dropped here. Signals are forwarded while holding a
    reentrant lock, so a value always reaches the observer before a terminal
    signal raised concurrently on another thread.
    """

    def __init__(self, observer: ObserverBase[T]) -> None:
        self._observer = observer
        self._lock = threading.RLock()
        self._has_value = False
        self._stopped = False

    @property
    def is_stopped(self) -> bool:
        return self._stopped

    def on_next(self, value: T) -> None:
        with self._lock:
            if self._stopped or self._has_value:
                logger.debug("dropping value on finished subscription: %r", value)
                return
            self._has_value = True
            self._observer.on_next(value)

    def on_error(self, error: Exception) -> None:
        with self._lock:
            if self._stop():
                self._observer.on_error(error)
            else:
                logger.debug("dropping error on finished subscription: %r", error)

    def on_completed(self) -> None:
        with self._lock:
            if self._stop():
                self._observer.on_completed()
            else:
                logger.debug("dropping completion on finished subscription")

    def dispose(self) -> None:
        # The wrapped call cannot be interrupted, only silenced.
        with self._lock:
            self._stopped = True

    def _stop(self) -> bool:
        with self._lock:
            if self._stopped:
                return False
            self._stopped = True
            return True
