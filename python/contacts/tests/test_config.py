"""Tests for contacts configuration."""

import logging

from contacts.config import ContactsConfig, LogLevel, configure_logging


def test_defaults() -> None:
    cfg = ContactsConfig()

    assert cfg.log_level == LogLevel.INFO
    assert cfg.vcard_version == "3.0"


def test_configure_logging_sets_package_levels() -> None:
    configure_logging(ContactsConfig(log_level=LogLevel.DEBUG))

    assert logging.getLogger("contacts").level == logging.DEBUG
    assert logging.getLogger("streams").level == logging.DEBUG

    configure_logging(ContactsConfig(log_level=LogLevel.NOTSET))
