"""Observable API over a contact store and telephony capability checks."""

from contacts.exceptions import (
    ArchiveDecodeError,
    AuthorizationDeniedError,
    ContactsError,
    InvalidContainerError,
    QueryExecutionError,
    SerializationError,
    StoreAccessError,
)
from contacts.operations import (
    add_contact,
    add_contact_to_group,
    archive_contacts,
    authorization_status,
    contacts_from_ids,
    contacts_to_vcard,
    create_group,
    delete_contact,
    fetch_contacts,
    fetch_contacts_in_group,
    fetch_groups,
    is_capable_to_call,
    is_capable_to_sms,
    make_call,
    phone_number_to_string,
    remove_contact_from_group,
    remove_group,
    request_access,
    search_contacts,
    unarchive_contacts,
    update_contact,
    update_group,
    vcard_to_contacts,
)
from contacts.store import ContactStore, TelephonyProbe, UrlOpener
from contacts.types import (
    AuthorizationStatus,
    Contact,
    Group,
    LabeledValue,
    PhoneNumber,
    PostalAddress,
    SortOrder,
)

__all__ = [
    "ArchiveDecodeError",
    "AuthorizationDeniedError",
    "AuthorizationStatus",
    "Contact",
    "ContactStore",
    "ContactsError",
    "Group",
    "InvalidContainerError",
    "LabeledValue",
    "PhoneNumber",
    "PostalAddress",
    "QueryExecutionError",
    "SerializationError",
    "SortOrder",
    "StoreAccessError",
    "TelephonyProbe",
    "UrlOpener",
    "add_contact",
    "add_contact_to_group",
    "archive_contacts",
    "authorization_status",
    "contacts_from_ids",
    "contacts_to_vcard",
    "create_group",
    "delete_contact",
    "fetch_contacts",
    "fetch_contacts_in_group",
    "fetch_groups",
    "is_capable_to_call",
    "is_capable_to_sms",
    "make_call",
    "phone_number_to_string",
    "remove_contact_from_group",
    "remove_group",
    "request_access",
    "search_contacts",
    "unarchive_contacts",
    "update_contact",
    "update_group",
    "vcard_to_contacts",
]
