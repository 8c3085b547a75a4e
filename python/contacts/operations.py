"""Observable contact operations.

Every function wraps a single call on an injected collaborator and returns a
cold Observable. Nothing runs until subscribe, and each subscription runs the
call again. Results are one value followed by completion, completion alone for
mutations, or the collaborator's exception forwarded unchanged.

Example:
    >>> search_contacts(store, "Appleseed").subscribe(
    ...     on_next=lambda found: print([c.full_name for c in found]),
    ...     on_error=lambda e: print(f"search failed: {e}"),
    ... )
"""

import logging
from collections.abc import Callable, Iterable
from concurrent.futures import Executor

from reactivex import Observable
from streams import from_action, from_call, from_callback
from streams.from_callback import Completion

from contacts import archive, telephony, vcard
from contacts.store import ContactStore, TelephonyProbe, UrlOpener
from contacts.types import (
    GROUP_MEMBER_KEYS,
    VCARD_KEYS,
    AuthorizationStatus,
    Contact,
    FetchRequest,
    Group,
    InGroup,
    MatchingName,
    PhoneNumber,
    SaveRequest,
    SortOrder,
    WithIdentifiers,
)

logger = logging.getLogger(__name__)


def _save(
    store: ContactStore,
    build: Callable[[SaveRequest], None],
    executor: Executor | None,
) -> Observable[None]:
    def run() -> None:
        request = SaveRequest()
        build(request)
        logger.debug("executing %s", [m.kind for m in request.mutations])
        store.execute(request)

    return from_action(run, executor)


# Authorization


def authorization_status(store: ContactStore) -> Observable[AuthorizationStatus]:
    """Current authorization status. Does not touch the contact data."""
    return from_call(store.authorization_status)


def request_access(store: ContactStore) -> Observable[bool]:
    """Prompt for access, emitting whether it was granted."""

    def ask(completion: Completion[bool]) -> None:
        store.request_access(completion)

    return from_callback(ask)


# Fetch and search


def fetch_contacts(
    store: ContactStore,
    sort_order: SortOrder | None = None,
    executor: Executor | None = None,
) -> Observable[list[Contact]]:
    """Every contact in the store, unified and sorted when sort_order is given."""
    if sort_order is None:
        request = FetchRequest(keys_to_fetch=VCARD_KEYS)
    else:
        request = FetchRequest(keys_to_fetch=VCARD_KEYS, sort_order=sort_order, unify_results=True)
    return from_call(lambda: list(store.enumerate_contacts(request)), executor)


def search_contacts(
    store: ContactStore,
    name: str,
    executor: Executor | None = None,
) -> Observable[list[Contact]]:
    return from_call(lambda: store.unified_contacts(MatchingName(name), VCARD_KEYS), executor)


def contacts_from_ids(
    store: ContactStore,
    identifiers: Iterable[str],
    executor: Executor | None = None,
) -> Observable[list[Contact]]:
    predicate = WithIdentifiers(tuple(identifiers))
    return from_call(lambda: store.unified_contacts(predicate, VCARD_KEYS), executor)


# Contact mutations


def add_contact(
    store: ContactStore,
    contact: Contact,
    container_identifier: str | None = None,
    executor: Executor | None = None,
) -> Observable[None]:
    """Add contact to a container (the store's default when None)."""
    return _save(store, lambda r: r.add_contact(contact, container_identifier), executor)


def update_contact(
    store: ContactStore, contact: Contact, executor: Executor | None = None
) -> Observable[None]:
    return _save(store, lambda r: r.update_contact(contact), executor)


def delete_contact(
    store: ContactStore, contact: Contact, executor: Executor | None = None
) -> Observable[None]:
    return _save(store, lambda r: r.delete_contact(contact), executor)


# Groups


def fetch_groups(store: ContactStore, executor: Executor | None = None) -> Observable[list[Group]]:
    return from_call(lambda: store.groups(None), executor)


def create_group(
    store: ContactStore,
    name: str,
    container_identifier: str | None = None,
    executor: Executor | None = None,
) -> Observable[None]:
    return _save(store, lambda r: r.add_group(Group(name), container_identifier), executor)


def update_group(
    store: ContactStore, group: Group, name: str, executor: Executor | None = None
) -> Observable[None]:
    """Rename group. The caller's Group instance is left unchanged."""
    return _save(store, lambda r: r.update_group(group.renamed(name)), executor)


def remove_group(
    store: ContactStore, group: Group, executor: Executor | None = None
) -> Observable[None]:
    return _save(store, lambda r: r.delete_group(group), executor)


def add_contact_to_group(
    store: ContactStore, group: Group, contact: Contact, executor: Executor | None = None
) -> Observable[None]:
    return _save(store, lambda r: r.add_member(contact, group), executor)


def remove_contact_from_group(
    store: ContactStore, group: Group, contact: Contact, executor: Executor | None = None
) -> Observable[None]:
    return _save(store, lambda r: r.remove_member(contact, group), executor)


def fetch_contacts_in_group(
    store: ContactStore, group: Group, executor: Executor | None = None
) -> Observable[list[Contact]]:
    """Members of group. An empty group emits an empty list."""
    predicate = InGroup(group.identifier)
    return from_call(lambda: store.unified_contacts(predicate, GROUP_MEMBER_KEYS), executor)


# Converters


def contacts_to_vcard(contacts: Iterable[Contact], version: str = "3.0") -> Observable[bytes]:
    snapshot = list(contacts)
    return from_call(lambda: vcard.encode(snapshot, version))


def vcard_to_contacts(data: bytes) -> Observable[list[Contact]]:
    return from_call(lambda: vcard.decode(data))


def archive_contacts(contacts: Iterable[Contact]) -> Observable[bytes]:
    snapshot = list(contacts)
    return from_call(lambda: archive.archive(snapshot))


def unarchive_contacts(data: bytes) -> Observable[list[Contact]]:
    """Restore archived contacts; malformed data is reported as ArchiveDecodeError."""
    return from_call(lambda: archive.unarchive(data))


# Telephony


def phone_number_to_string(number: PhoneNumber) -> Observable[str]:
    """Dialable digits of number; empty when it has none."""
    return from_call(lambda: number.digits)


def is_capable_to_call(probe: TelephonyProbe) -> Observable[bool]:
    """Whether the device can dial and has a cellular provider."""
    return from_call(
        lambda: probe.can_open_url(telephony.CALL_SCHEME) and probe.has_cellular_provider()
    )


def is_capable_to_sms(probe: TelephonyProbe) -> Observable[bool]:
    return from_call(lambda: probe.can_open_url(telephony.SMS_SCHEME))


def make_call(opener: UrlOpener, number: PhoneNumber) -> None:
    telephony.make_call(opener, number)
