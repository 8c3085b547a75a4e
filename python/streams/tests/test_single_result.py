"""Tests for SingleResultObserver."""

import threading
from unittest.mock import Mock, call

from streams import SingleResultObserver


def test_forwards_value_then_completion() -> None:
    downstream = Mock()
    guard = SingleResultObserver(downstream)

    guard.on_next("a")
    guard.on_completed()

    assert downstream.mock_calls == [call.on_next("a"), call.on_completed()]
    assert guard.is_stopped


def test_drops_second_value() -> None:
    downstream = Mock()
    guard = SingleResultObserver(downstream)

    guard.on_next("a")
    guard.on_next("b")

    downstream.on_next.assert_called_once_with("a")


def test_never_delivers_both_error_and_completion() -> None:
    downstream = Mock()
    guard = SingleResultObserver(downstream)
    error = ValueError("boom")

    guard.on_error(error)
    guard.on_completed()
    guard.on_error(ValueError("again"))

    assert downstream.mock_calls == [call.on_error(error)]


def test_dispose_silences_everything() -> None:
    downstream = Mock()
    guard = SingleResultObserver(downstream)

    guard.dispose()
    guard.on_next("a")
    guard.on_completed()
    guard.on_error(ValueError("boom"))

    assert downstream.mock_calls == []
    assert guard.is_stopped


def test_dispose_after_terminal_is_noop() -> None:
    downstream = Mock()
    guard = SingleResultObserver(downstream)

    guard.on_completed()
    guard.dispose()
    guard.dispose()

    assert downstream.mock_calls == [call.on_completed()]


def test_value_reaches_observer_before_concurrent_completion() -> None:
    """A completion raced from another thread waits for the value in flight."""
    entered = threading.Event()
    release = threading.Event()
    order: list[str] = []

    def slow_next(_value: str) -> None:
        entered.set()
        release.wait()  # Semaphore semantics, drive test w/ release.set()
        order.append("next")

    downstream = Mock()
    downstream.on_next.side_effect = slow_next
    downstream.on_completed.side_effect = lambda: order.append("completed")
    guard = SingleResultObserver(downstream)

    producer = threading.Thread(target=guard.on_next, args=("a",))
    producer.start()
    assert entered.wait(timeout=1.0)

    completer = threading.Thread(target=guard.on_completed)
    completer.start()
    completer.join(timeout=0.05)
    assert completer.is_alive()

    release.set()
    producer.join(timeout=1.0)
    completer.join(timeout=1.0)

    assert order == ["next", "completed"]


def test_dispose_from_within_callback_does_not_deadlock() -> None:
    downstream = Mock()
    guard = SingleResultObserver(downstream)
    downstream.on_next.side_effect = lambda _value: guard.dispose()

    guard.on_next("a")
    guard.on_completed()

    downstream.on_next.assert_called_once_with("a")
    downstream.on_completed.assert_not_called()
