"""Value types shared by the contact store, the codecs and the operations."""

import re
import uuid
from dataclasses import dataclass, field, replace
from enum import StrEnum
from typing import Generic, Literal, Self, TypeVar


class AuthorizationStatus(StrEnum):
    """Access the user has granted to the contact store."""

    NOT_DETERMINED = "not_determined"
    RESTRICTED = "restricted"
    DENIED = "denied"
    AUTHORIZED = "authorized"


class SortOrder(StrEnum):
    NONE = "none"
    USER_DEFAULT = "user_default"
    GIVEN_NAME = "given_name"
    FAMILY_NAME = "family_name"


class ContactKey(StrEnum):
    """Contact properties a fetch can ask the store to populate."""

    IDENTIFIER = "identifier"
    GIVEN_NAME = "given_name"
    FAMILY_NAME = "family_name"
    ORGANIZATION_NAME = "organization_name"
    PHONE_NUMBERS = "phone_numbers"
    EMAIL_ADDRESSES = "email_addresses"
    URL_ADDRESSES = "url_addresses"
    POSTAL_ADDRESSES = "postal_addresses"
    NOTE = "note"
    IMAGE_DATA = "image_data"


# Everything needed to serialize a contact as a vCard
VCARD_KEYS: frozenset[ContactKey] = frozenset(ContactKey)

GROUP_MEMBER_KEYS: frozenset[ContactKey] = frozenset(
    {
        ContactKey.GIVEN_NAME,
        ContactKey.FAMILY_NAME,
        ContactKey.ORGANIZATION_NAME,
        ContactKey.PHONE_NUMBERS,
        ContactKey.URL_ADDRESSES,
        ContactKey.EMAIL_ADDRESSES,
        ContactKey.POSTAL_ADDRESSES,
        ContactKey.NOTE,
        ContactKey.IMAGE_DATA,
    }
)


def new_identifier() -> str:
    return str(uuid.uuid4()).upper()


T = TypeVar("T")


@dataclass(frozen=True)
class LabeledValue(Generic[T]):
    """A value with an optional label such as "home", "work" or "mobile"."""

    value: T
    label: str | None = None


@dataclass(frozen=True)
class PhoneNumber:
    string_value: str

    @property
    def digits(self) -> str:
        """Dialable form: digits plus a leading "+" if present."""
        stripped = self.string_value.strip()
        digits = re.sub(r"\D", "", stripped)
        if digits and stripped.startswith("+"):
            return "+" + digits
        return digits


@dataclass(frozen=True)
class PostalAddress:
    street: str = ""
    city: str = ""
    state: str = ""
    postal_code: str = ""
    country: str = ""


@dataclass
class Contact:
    """A contact record as held by the store.

    Attributes:
        identifier: Store-assigned unique id, stable across fetches
        phone_numbers: Labelled phone numbers, in display order
        image_data: Raw image bytes (JPEG/PNG), if any
    """

    identifier: str = field(default_factory=new_identifier)
    given_name: str = ""
    family_name: str = ""
    organization_name: str = ""
    phone_numbers: list[LabeledValue[PhoneNumber]] = field(default_factory=list)
    email_addresses: list[LabeledValue[str]] = field(default_factory=list)
    url_addresses: list[LabeledValue[str]] = field(default_factory=list)
    postal_addresses: list[LabeledValue[PostalAddress]] = field(default_factory=list)
    note: str = ""
    image_data: bytes | None = None

    @property
    def full_name(self) -> str:
        name = " ".join(part for part in (self.given_name, self.family_name) if part)
        return name or self.organization_name


@dataclass
class Group:
    name: str
    identifier: str = field(default_factory=new_identifier)

    def renamed(self, name: str) -> Self:
        return replace(self, name=name)


@dataclass(frozen=True)
class MatchingName:
    """Contacts whose name contains the given text."""

    name: str


@dataclass(frozen=True)
class WithIdentifiers:
    identifiers: tuple[str, ...]


@dataclass(frozen=True)
class InGroup:
    group_identifier: str


Predicate = MatchingName | WithIdentifiers | InGroup


@dataclass(frozen=True)
class FetchRequest:
    keys_to_fetch: frozenset[ContactKey] = VCARD_KEYS
    sort_order: SortOrder = SortOrder.NONE
    unify_results: bool = False


MutationKind = Literal[
    "add_contact",
    "update_contact",
    "delete_contact",
    "add_group",
    "update_group",
    "delete_group",
    "add_member",
    "remove_member",
]


@dataclass(frozen=True)
class Mutation:
    kind: MutationKind
    target: Contact | Group
    container_identifier: str | None = None
    group: Group | None = None


@dataclass
class SaveRequest:
    """An ordered batch of changes handed to ContactStore.execute()."""

    mutations: list[Mutation] = field(default_factory=list)

    def add_contact(self, contact: Contact, container_identifier: str | None = None) -> None:
        self.mutations.append(Mutation("add_contact", contact, container_identifier))

    def update_contact(self, contact: Contact) -> None:
        self.mutations.append(Mutation("update_contact", contact))

    def delete_contact(self, contact: Contact) -> None:
        self.mutations.append(Mutation("delete_contact", contact))

    def add_group(self, group: Group, container_identifier: str | None = None) -> None:
        self.mutations.append(Mutation("add_group", group, container_identifier))

    def update_group(self, group: Group) -> None:
        self.mutations.append(Mutation("update_group", group))

    def delete_group(self, group: Group) -> None:
        self.mutations.append(Mutation("delete_group", group))

    def add_member(self, contact: Contact, group: Group) -> None:
        self.mutations.append(Mutation("add_member", contact, group=group))

    def remove_member(self, contact: Contact, group: Group) -> None:
        self.mutations.append(Mutation("remove_member", contact, group=group))
