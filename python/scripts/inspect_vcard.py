#!/usr/bin/env python3
"""Read a vCard file and print the contacts it holds."""

import argparse
import logging
import sys
import threading
from pathlib import Path

import reactivex.operators as ops
from contacts import Contact, contacts_to_vcard, vcard_to_contacts
from contacts.config import ContactsConfig, LogLevel, configure_logging


def print_contacts(contacts: list[Contact]) -> None:
    for contact in contacts:
        numbers = ", ".join(p.value.string_value for p in contact.phone_numbers)
        print(f"{contact.full_name or '(no name)'}\t{numbers}")


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("path", type=Path, help="Path to a .vcf file")
    parser.add_argument("--export", type=Path, help="Re-encode the contacts to this file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    cfg = ContactsConfig(log_level=LogLevel.DEBUG if args.verbose else LogLevel.INFO)
    logging.basicConfig()
    configure_logging(cfg)

    failed: list[Exception] = []
    done = threading.Event()

    def on_error(e: Exception) -> None:
        print(f"Error: {e}", file=sys.stderr)
        failed.append(e)
        done.set()

    decoded = vcard_to_contacts(args.path.read_bytes()).pipe(ops.do_action(print_contacts))
    if args.export is not None:
        pipeline = decoded.pipe(
            ops.flat_map(lambda contacts: contacts_to_vcard(contacts, cfg.vcard_version)),
            ops.do_action(args.export.write_bytes),
        )
    else:
        pipeline = decoded

    pipeline.subscribe(on_error=on_error, on_completed=done.set)
    done.wait()

    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
