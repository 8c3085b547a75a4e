"""Exceptions for contact store and conversion operations."""


class ContactsError(Exception):
    """Base exception for contact operations."""


class AuthorizationDeniedError(ContactsError):
    """The user has not granted access to the contact store."""


class StoreAccessError(ContactsError):
    """The contact store could not be opened or written."""


class InvalidContainerError(StoreAccessError):
    """No container exists with the requested identifier."""


class QueryExecutionError(ContactsError):
    """A fetch or search request failed inside the store."""


class SerializationError(ContactsError):
    """Contacts could not be converted to or from vCard data."""


class ArchiveDecodeError(ContactsError):
    """Archived bytes are malformed or do not hold a list of contacts."""
