"""Phone number helpers and the fire-and-forget call action."""

import logging

from contacts.store import UrlOpener
from contacts.types import PhoneNumber

logger = logging.getLogger(__name__)

CALL_SCHEME = "tel://"
SMS_SCHEME = "sms:"


def call_url(number: PhoneNumber) -> str:
    """Build the URL that dials number."""
    digits = number.digits
    if not digits:
        raise ValueError(f"phone number {number.string_value!r} has no digits")
    return CALL_SCHEME + digits


def make_call(opener: UrlOpener, number: PhoneNumber) -> None:
    """Ask the host to dial number. Nothing is reported back to the caller."""
    try:
        url = call_url(number)
    except ValueError:
        logger.error("Error in making call to %r", number.string_value)
        return
    logger.debug("opening %s", url)
    opener.open_url(url)
