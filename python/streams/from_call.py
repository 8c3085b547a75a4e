"""Blocking-call-to-Observable bridge for RxPy."""

import logging
from collections.abc import Callable
from concurrent.futures import Executor
from typing import TypeVar

import reactivex
from reactivex import Observable
from reactivex import operators as ops
from reactivex.abc import DisposableBase, ObserverBase, SchedulerBase
from reactivex.disposable import Disposable

from streams.single_result import SingleResultObserver

logger = logging.getLogger(__name__)

T = TypeVar("T")


def from_call(
    fn: Callable[[], T],
    executor: Executor | None = None,
) -> Observable[T]:
    """Invoke fn() once per subscription and emit its result.

    The return value is emitted followed by completion. Any exception raised by
    fn() is forwarded unchanged to on_error. Without an executor fn() runs inline
    on the subscribing thread; with one it is submitted to the executor and
    disposing before it starts cancels the call.

    Example:
        >>> from_call(lambda: 42).subscribe(on_next=print)
        42
    """

    def subscribe(
        obs: ObserverBase[T],
        _scheduler: SchedulerBase | None = None,
    ) -> DisposableBase:
        guard = SingleResultObserver(obs)

        def task() -> None:
            try:
                result = fn()
            except Exception as e:
                logger.debug("call %r failed: %s", fn, type(e).__name__)
                guard.on_error(e)
                return
            guard.on_next(result)
            guard.on_completed()

        if executor is None:
            task()
            return guard

        future = executor.submit(task)

        def dispose() -> None:
            guard.dispose()
            future.cancel()

        return Disposable(dispose)

    return reactivex.create(subscribe)


def from_action(
    fn: Callable[[], object],
    executor: Executor | None = None,
) -> Observable[None]:
    """Invoke fn() once per subscription and complete without emitting."""
    return from_call(fn, executor).pipe(ops.ignore_elements())
