"""Shared stream infrastructure for RxPy-based reactive patterns."""

from streams.from_call import from_action, from_call
from streams.from_callback import from_callback
from streams.single_result import SingleResultObserver

__all__ = [
    "SingleResultObserver",
    "from_action",
    "from_call",
    "from_callback",
]
