"""
In‑memory contact store.

``ContactStore`` is the address book behind the API: a mapping from
email address to ``Contact`` guarded by a single lock.  Every
operation, reads included, holds the lock for its full duration, so
a caller never observes a half‑applied change.  The store performs no
I/O while locked.

Creating a contact whose email is already present replaces the
existing record.  Lookups and deletes of an unknown email raise
``ContactNotFoundError``; the HTTP layer turns that into a 404.
"""

from __future__ import annotations

import logging
import threading
from datetime import datetime
from typing import Dict, List

from contact_directory_api.app.schemas.contact import Contact

logger = logging.getLogger(__name__)


class ContactNotFoundError(ValueError):
    """Raised when no contact is stored under the requested email."""

    def __init__(self, email: str) -> None:
        super().__init__(f"Contact with email={email} not found")
        self.email = email


class ContactStore:
    """Address book safe to access from concurrent request handlers."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._contacts: Dict[str, Contact] = {}

    def __len__(self) -> int:
        with self._lock:
            return len(self._contacts)

    def create_contact(
        self,
        name: str,
        email: str,
        address: str,
        mobile: str,
        created_at: datetime,
    ) -> str:
        """Store a contact under ``email`` and return the key.

        An existing record with the same email is replaced.  The email
        is treated as an opaque string and is not validated.
        """
        contact = Contact(
            name=name,
            email=email,
            address=address,
            mobile=mobile,
            created_at=created_at,
        )
        with self._lock:
            replaced = email in self._contacts
            self._contacts[email] = contact
        if replaced:
            logger.info("Replaced contact %s", email)
        else:
            logger.info("Created contact %s", email)
        return email

    def get_contact(self, email: str) -> Contact:
        """Return a copy of the contact stored under ``email``."""
        with self._lock:
            contact = self._contacts.get(email)
            if contact is None:
                raise ContactNotFoundError(email)
            return contact.model_copy()

    def delete_contact(self, email: str) -> None:
        """Remove the contact stored under ``email``."""
        with self._lock:
            if email not in self._contacts:
                raise ContactNotFoundError(email)
            del self._contacts[email]
        logger.info("Deleted contact %s", email)

    def delete_all_contacts(self) -> None:
        with self._lock:
            count = len(self._contacts)
            self._contacts = {}
        logger.info("Deleted all contacts (%d)", count)

    def get_all_contacts(self) -> List[Contact]:
        """Return every stored contact.  Order is not defined."""
        with self._lock:
            return [contact.model_copy() for contact in self._contacts.values()]

    def get_contacts_by_created_date(self, year: int, month: int, day: int) -> List[Contact]:
        """Return contacts created on the given calendar date.

        The date of each ``created_at`` is taken in the timestamp's own
        timezone; the time of day is ignored.  An empty list is
        returned when nothing matches.
        """
        with self._lock:
            return [
                contact.model_copy()
                for contact in self._contacts.values()
                if (contact.created_at.year, contact.created_at.month, contact.created_at.day)
                == (year, month, day)
            ]
