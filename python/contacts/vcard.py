"""vCard interchange codec built on vobject."""

import logging
from collections.abc import Iterable

import vobject
from vobject.base import Component, ContentLine, VObjectError

from contacts.exceptions import SerializationError
from contacts.types import Contact, LabeledValue, PhoneNumber, PostalAddress, new_identifier

logger = logging.getLogger(__name__)


def _text(value: str | list[str]) -> str:
    # vobject splits comma separated structured fields into lists
    if isinstance(value, list):
        return " ".join(value)
    return value


# vCard 2.1 bare parameters that describe the encoding or priority, not a label
_NOT_LABELS = {"PREF", "BASE64", "QUOTED-PRINTABLE", "8BIT", "7BIT"}


def _label(line: ContentLine) -> str | None:
    types = line.params.get("TYPE", [])
    if types:
        return types[0]
    bare = [p for p in line.singletonparams if p.upper() not in _NOT_LABELS]
    return bare[0] if bare else None


def _add_labeled(card: Component, name: str, value: object, label: str | None) -> None:
    line = card.add(name)
    line.value = value
    if label:
        line.type_param = label


def _to_vcard(contact: Contact, version: str) -> Component:
    card = vobject.vCard()
    card.add("version").value = version
    card.add("uid").value = contact.identifier
    card.add("n").value = vobject.vcard.Name(family=contact.family_name, given=contact.given_name)
    card.add("fn").value = contact.full_name
    if contact.organization_name:
        card.add("org").value = [contact.organization_name]
    for phone in contact.phone_numbers:
        _add_labeled(card, "tel", phone.value.string_value, phone.label)
    for email in contact.email_addresses:
        _add_labeled(card, "email", email.value, email.label)
    for url in contact.url_addresses:
        _add_labeled(card, "url", url.value, url.label)
    for address in contact.postal_addresses:
        a = address.value
        adr = vobject.vcard.Address(
            street=a.street, city=a.city, region=a.state, code=a.postal_code, country=a.country
        )
        _add_labeled(card, "adr", adr, address.label)
    if contact.note:
        card.add("note").value = contact.note
    if contact.image_data:
        photo = card.add("photo")
        photo.encoding_param = "b"
        photo.value = contact.image_data
    return card


def _from_vcard(card: Component) -> Contact:
    uid = getattr(card, "uid", None)
    contact = Contact(identifier=uid.value if uid is not None and uid.value else new_identifier())

    n = getattr(card, "n", None)
    if n is not None:
        contact.given_name = _text(n.value.given)
        contact.family_name = _text(n.value.family)
    org = getattr(card, "org", None)
    if org is not None and org.value:
        contact.organization_name = _text(org.value[0])

    contents = card.contents
    contact.phone_numbers = [
        LabeledValue(PhoneNumber(line.value), _label(line)) for line in contents.get("tel", [])
    ]
    contact.email_addresses = [
        LabeledValue(line.value, _label(line)) for line in contents.get("email", [])
    ]
    contact.url_addresses = [
        LabeledValue(line.value, _label(line)) for line in contents.get("url", [])
    ]
    contact.postal_addresses = [
        LabeledValue(
            PostalAddress(
                street=_text(line.value.street),
                city=_text(line.value.city),
                state=_text(line.value.region),
                postal_code=_text(line.value.code),
                country=_text(line.value.country),
            ),
            _label(line),
        )
        for line in contents.get("adr", [])
    ]
    note = getattr(card, "note", None)
    if note is not None:
        contact.note = note.value
    photo = getattr(card, "photo", None)
    if photo is not None and isinstance(photo.value, bytes):
        contact.image_data = photo.value
    return contact


def encode(contacts: Iterable[Contact], version: str = "3.0") -> bytes:
    """Serialize contacts as concatenated vCards, UTF-8 encoded."""
    try:
        text = "".join(_to_vcard(c, version).serialize() for c in contacts)
    except VObjectError as e:
        raise SerializationError(str(e)) from e
    return text.encode("utf-8")


def decode(data: bytes) -> list[Contact]:
    """Parse every vCard in data into a Contact. Blank data holds no contacts."""
    if not data.strip():
        return []
    try:
        text = data.decode("utf-8")
        cards = [c for c in vobject.readComponents(text) if c.name == "VCARD"]
    except (ValueError, VObjectError) as e:
        raise SerializationError(f"malformed vCard data: {e}") from e
    if not cards:
        raise SerializationError("no vCard found in data")

    contacts = [_from_vcard(card) for card in cards]
    logger.debug("decoded %d contacts from %d bytes", len(contacts), len(data))
    return contacts
