"""Tests for the in-memory contact store.

This module tests:
- Upsert semantics keyed by email
- Lookup and delete of missing contacts
- Bulk delete and listing
- Filtering by creation date
- Concurrent writers
"""
from __future__ import annotations

import threading
from datetime import datetime, timedelta, timezone

import pytest

from contact_directory_api.app.services.contact_service import ContactNotFoundError, ContactStore


def _ts(year, month, day, hour=12, minute=0):
    return datetime(year, month, day, hour, minute, tzinfo=timezone.utc)


# =============================================================================
# Create / Get
# =============================================================================

def test_create_returns_email_key(store):
    key = store.create_contact("Ann", "ann@x.com", "1 Road", "555", _ts(2021, 5, 4))
    assert key == "ann@x.com"

    contact = store.get_contact("ann@x.com")
    assert contact.name == "Ann"
    assert contact.address == "1 Road"
    assert contact.mobile == "555"
    assert contact.created_at == _ts(2021, 5, 4)


def test_create_same_email_replaces_record(store):
    store.create_contact("Ann", "ann@x.com", "1 Road", "555", _ts(2021, 5, 4))
    store.create_contact("Annie", "ann@x.com", "2 Street", "777", _ts(2022, 1, 1))

    assert len(store) == 1
    contact = store.get_contact("ann@x.com")
    assert contact.name == "Annie"
    assert contact.address == "2 Street"
    assert contact.mobile == "777"
    assert contact.created_at == _ts(2022, 1, 1)


def test_email_is_not_validated(store):
    assert store.create_contact("", "not an email", "", "", _ts(2021, 1, 1)) == "not an email"
    assert store.get_contact("not an email").email == "not an email"


def test_get_missing_contact_raises(store):
    with pytest.raises(ContactNotFoundError) as excinfo:
        store.get_contact("missing@x.com")
    assert str(excinfo.value) == "Contact with email=missing@x.com not found"
    assert excinfo.value.email == "missing@x.com"


def test_get_returns_copy(store):
    store.create_contact("Ann", "ann@x.com", "1 Road", "555", _ts(2021, 5, 4))
    contact = store.get_contact("ann@x.com")
    contact.name = "Changed"
    assert store.get_contact("ann@x.com").name == "Ann"


# =============================================================================
# Delete
# =============================================================================

def test_delete_then_get_raises(store):
    store.create_contact("Ann", "ann@x.com", "1 Road", "555", _ts(2021, 5, 4))
    store.delete_contact("ann@x.com")

    with pytest.raises(ContactNotFoundError):
        store.get_contact("ann@x.com")


def test_repeated_delete_raises(store):
    store.create_contact("Ann", "ann@x.com", "1 Road", "555", _ts(2021, 5, 4))
    store.delete_contact("ann@x.com")

    for _ in range(2):
        with pytest.raises(ContactNotFoundError):
            store.delete_contact("ann@x.com")


def test_delete_all_clears_listing(store):
    for i in range(5):
        store.create_contact(f"C{i}", f"c{i}@x.com", "", "", _ts(2021, 5, i + 1))

    store.delete_all_contacts()

    assert store.get_all_contacts() == []
    assert len(store) == 0


def test_delete_all_on_empty_store(store):
    store.delete_all_contacts()
    assert store.get_all_contacts() == []


# =============================================================================
# Listing / date filter
# =============================================================================

def test_get_all_returns_exactly_stored_contacts(store):
    emails = {f"c{i}@x.com" for i in range(3)}
    for email in emails:
        store.create_contact("C", email, "", "", _ts(2021, 5, 4))

    contacts = store.get_all_contacts()

    assert len(contacts) == 3
    assert {c.email for c in contacts} == emails


def test_filter_by_created_date_ignores_time_of_day(store):
    store.create_contact("Early", "early@x.com", "", "", _ts(2021, 5, 4, 0, 1))
    store.create_contact("Late", "late@x.com", "", "", _ts(2021, 5, 4, 23, 59))
    store.create_contact("Next", "next@x.com", "", "", _ts(2021, 5, 5, 0, 0))
    store.create_contact("Month", "month@x.com", "", "", _ts(2021, 6, 4))
    store.create_contact("Year", "year@x.com", "", "", _ts(2020, 5, 4))

    matches = store.get_contacts_by_created_date(2021, 5, 4)

    assert {c.email for c in matches} == {"early@x.com", "late@x.com"}


def test_filter_uses_timestamp_timezone(store):
    tz = timezone(timedelta(hours=-5))
    store.create_contact("Ann", "ann@x.com", "", "", datetime(2021, 5, 4, 22, 0, tzinfo=tz))

    assert [c.email for c in store.get_contacts_by_created_date(2021, 5, 4)] == ["ann@x.com"]
    assert store.get_contacts_by_created_date(2021, 5, 5) == []


def test_filter_without_matches_returns_empty_list(store):
    store.create_contact("Ann", "ann@x.com", "", "", _ts(2021, 5, 4))

    assert store.get_contacts_by_created_date(1999, 1, 1) == []
    assert store.get_contacts_by_created_date(2021, 5, 40) == []


# =============================================================================
# Concurrency
# =============================================================================

def test_concurrent_creates_are_all_applied(store):
    def worker(n):
        for i in range(50):
            store.create_contact("C", f"w{n}-{i}@x.com", "", "", _ts(2021, 5, 4))

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(store) == 400
    assert len(store.get_all_contacts()) == 400
