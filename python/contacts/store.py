"""Interfaces of the host collaborators this package drives.

The contact database, telephony hardware checks and URL handling all belong to
the host platform. Operations receive implementations of these protocols as
arguments, so tests can hand in fakes or mocks.
"""

from collections.abc import Callable, Iterable
from typing import Protocol

from contacts.types import (
    AuthorizationStatus,
    Contact,
    ContactKey,
    FetchRequest,
    Group,
    Predicate,
    SaveRequest,
)

AccessCompletion = Callable[[bool, Exception | None], None]


class ContactStore(Protocol):
    """A contact database. Failures are reported by raising."""

    def authorization_status(self) -> AuthorizationStatus: ...

    def request_access(self, completion: AccessCompletion) -> None:
        """Ask the user for access; completion may run later, on any thread."""
        ...

    def enumerate_contacts(self, request: FetchRequest) -> Iterable[Contact]: ...

    def unified_contacts(
        self, predicate: Predicate, keys_to_fetch: frozenset[ContactKey]
    ) -> list[Contact]: ...

    def groups(self, predicate: Predicate | None = None) -> list[Group]: ...

    def execute(self, request: SaveRequest) -> None: ...


class TelephonyProbe(Protocol):
    def can_open_url(self, url: str) -> bool: ...

    def has_cellular_provider(self) -> bool: ...


class UrlOpener(Protocol):
    def open_url(self, url: str) -> None: ...
