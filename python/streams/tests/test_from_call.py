"""Tests for from_call and from_action."""

import threading
from concurrent.futures import ThreadPoolExecutor
from unittest.mock import Mock

from reactivex.testing import ReactiveTest, TestScheduler

from streams import from_action, from_call

on_next = ReactiveTest.on_next
on_completed = ReactiveTest.on_completed
on_error = ReactiveTest.on_error


def test_from_call_emits_and_completes() -> None:
    """Value is emitted on subscribe, followed by completion."""
    scheduler = TestScheduler()
    results = scheduler.start(lambda: from_call(lambda: 42))

    assert results.messages == [on_next(200, 42), on_completed(200)]


def test_from_call_emits_error() -> None:
    """Exceptions from the call are forwarded unchanged."""
    error = ValueError("boom")

    def fail() -> int:
        raise error

    scheduler = TestScheduler()
    results = scheduler.start(lambda: from_call(fail))

    assert results.messages == [on_error(200, error)]


def test_from_call_is_lazy_and_reinvoked_per_subscription() -> None:
    """Nothing runs until subscribe, and every subscribe calls fn again."""
    spy = Mock(side_effect=[1, 2])
    obs = from_call(spy)
    spy.assert_not_called()

    results: list[int] = []
    obs.subscribe(on_next=results.append)
    obs.subscribe(on_next=results.append)

    assert spy.call_count == 2
    assert results == [1, 2]


def test_from_call_runs_inline_on_subscribing_thread() -> None:
    threads: list[threading.Thread] = []
    from_call(lambda: threads.append(threading.current_thread())).subscribe()

    assert threads == [threading.current_thread()]


def test_from_call_dispose_after_completion_is_noop() -> None:
    results: list[int] = []
    completed: list[bool] = []

    subscription = from_call(lambda: 7).subscribe(
        on_next=results.append,
        on_completed=lambda: completed.append(True),
    )
    subscription.dispose()
    subscription.dispose()

    assert results == [7]
    assert completed == [True]


def test_from_call_with_executor_emits_result() -> None:
    """Call runs in the executor and the result still arrives."""
    results: list[str] = []
    done = threading.Event()

    with ThreadPoolExecutor(max_workers=1) as executor:
        from_call(lambda: "hello", executor).subscribe(
            on_next=results.append,
            on_completed=done.set,
        )
        done.wait(timeout=1.0)

    assert results == ["hello"]


def test_from_call_with_executor_emits_error() -> None:
    errors: list[Exception] = []
    done = threading.Event()

    def fail() -> str:
        raise ValueError("boom")

    def record(e: Exception) -> None:
        errors.append(e)
        done.set()

    with ThreadPoolExecutor(max_workers=1) as executor:
        from_call(fail, executor).subscribe(on_error=record)
        done.wait(timeout=1.0)

    assert len(errors) == 1
    assert "boom" in str(errors[0])


def test_from_call_dispose_cancels_queued_call() -> None:
    """A call still waiting in the executor never runs once disposed."""
    release = threading.Event()
    spy = Mock(return_value=1)
    results: list[int] = []

    executor = ThreadPoolExecutor(max_workers=1)
    executor.submit(release.wait)  # occupy the only worker
    subscription = from_call(spy, executor).subscribe(on_next=results.append)
    subscription.dispose()
    release.set()
    executor.shutdown(wait=True)

    spy.assert_not_called()
    assert results == []


def test_from_call_dispose_silences_running_call() -> None:
    """A call already running completes, but its result is not delivered."""
    started = threading.Event()
    release = threading.Event()
    results: list[int] = []
    completed: list[bool] = []

    def slow() -> int:
        started.set()
        release.wait()  # Semaphore semantics, drive test w/ release.set()
        return 42

    executor = ThreadPoolExecutor(max_workers=1)
    subscription = from_call(slow, executor).subscribe(
        on_next=results.append,
        on_completed=lambda: completed.append(True),
    )
    started.wait(timeout=1.0)
    subscription.dispose()
    release.set()
    executor.shutdown(wait=True)

    assert results == []
    assert completed == []


def test_from_action_completes_without_value() -> None:
    spy = Mock(return_value="ignored")
    scheduler = TestScheduler()
    results = scheduler.start(lambda: from_action(spy))

    spy.assert_called_once()
    assert results.messages == [on_completed(200)]


def test_from_action_emits_error() -> None:
    error = RuntimeError("store offline")
    scheduler = TestScheduler()
    results = scheduler.start(lambda: from_action(Mock(side_effect=error)))

    assert results.messages == [on_error(200, error)]
