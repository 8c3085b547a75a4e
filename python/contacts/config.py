"""Configuration types for the contacts package."""

import logging
from dataclasses import dataclass
from enum import IntEnum


class LogLevel(IntEnum):
    """Log levels mirroring Python's logging module."""

    NOTSET = logging.NOTSET
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL


@dataclass(frozen=True)
class ContactsConfig:
    """Static application configuration."""

    log_level: LogLevel = LogLevel.INFO

    # vCard output
    vcard_version: str = "3.0"


def configure_logging(cfg: ContactsConfig) -> None:
    """Apply cfg.log_level to the contacts and streams package loggers."""
    for name in ("contacts", "streams"):
        logging.getLogger(name).setLevel(cfg.log_level)
