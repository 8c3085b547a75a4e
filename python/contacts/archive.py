"""Opaque binary archive of contacts.

The archive is pickle based and only meant to be read back by this package.
Decoding is restricted to the contact value types so that loading foreign
bytes cannot construct arbitrary objects.
"""

import io
import pickle
from collections.abc import Iterable

from contacts.exceptions import ArchiveDecodeError
from contacts.types import Contact, LabeledValue, PhoneNumber, PostalAddress

_ALLOWED = {
    (cls.__module__, cls.__qualname__): cls
    for cls in (Contact, LabeledValue, PhoneNumber, PostalAddress)
}


class _ContactUnpickler(pickle.Unpickler):
    def find_class(self, module: str, name: str) -> type:
        try:
            return _ALLOWED[(module, name)]
        except KeyError:
            raise pickle.UnpicklingError(f"{module}.{name} is not an archivable type") from None


def archive(contacts: Iterable[Contact]) -> bytes:
    return pickle.dumps(list(contacts), protocol=pickle.HIGHEST_PROTOCOL)


def unarchive(data: bytes) -> list[Contact]:
    """Restore contacts written by archive().

    Raises ArchiveDecodeError for malformed data or a payload that is not a list
    of contacts.
    """
    try:
        decoded = _ContactUnpickler(io.BytesIO(data)).load()
    except Exception as e:
        # Corrupt pickles fail with arbitrary builtin errors (OverflowError, AttributeError, ...)
        raise ArchiveDecodeError(f"cannot decode archive: {e}") from e

    if not isinstance(decoded, list) or not all(isinstance(c, Contact) for c in decoded):
        raise ArchiveDecodeError(f"archive holds {type(decoded).__name__}, not a list of contacts")
    return decoded
