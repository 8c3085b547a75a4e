"""Completion-handler-to-Observable bridge for RxPy."""

from collections.abc import Callable
from typing import TypeVar, cast

import reactivex
from reactivex import Observable
from reactivex.abc import DisposableBase, ObserverBase, SchedulerBase

from streams.single_result import SingleResultObserver

T = TypeVar("T")

Completion = Callable[[T | None, Exception | None], None]


def from_callback(fn: Callable[[Completion[T]], None]) -> Observable[T]:
    """Convert an API that reports through a (value, error) completion handler.

    fn receives the handler and is expected to call it once, from any thread and
    at any later time. A non-None error is forwarded to on_error; otherwise the
    value is emitted and the stream completes. Extra or late handler calls are
    ignored. Disposing only silences the subscription since the underlying call
    has no way to be interrupted.
    """

    def subscribe(obs: ObserverBase[T], _scheduler: SchedulerBase | None = None) -> DisposableBase:
        guard = SingleResultObserver(obs)

        def completion(value: T | None, error: Exception | None) -> None:
            if error is not None:
                guard.on_error(error)
            else:
                guard.on_next(cast("T", value))
                guard.on_completed()

        try:
            fn(completion)
        except Exception as e:
            guard.on_error(e)
        return guard

    return reactivex.create(subscribe)
