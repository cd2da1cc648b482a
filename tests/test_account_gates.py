"""Tests for account availability and collection visibility rules."""
from __future__ import annotations

import os

import pytest

os.environ.setdefault("DATABASE_URL", "sqlite+pysqlite:///./test_follow_collections.db")

from app.models import Account, AccountStatus  # noqa: E402
from app.services import Availability, CollectionVisibility, check_availability, resolve_visibility  # noqa: E402


def _account(**fields) -> Account:
    fields.setdefault("username", "alice")
    fields.setdefault("status", AccountStatus.ACTIVE.value)
    fields.setdefault("hide_collections", False)
    return Account(**fields)


@pytest.mark.parametrize(
    "account_status, expected, status_code",
    [
        (AccountStatus.ACTIVE, Availability.PROCEED, 200),
        (AccountStatus.SUSPENDED_TEMPORARY, Availability.FORBIDDEN, 403),
        (AccountStatus.SUSPENDED_PERMANENT, Availability.GONE, 410),
    ],
)
def test_check_availability_follows_account_status(account_status, expected, status_code):
    availability = check_availability(_account(status=account_status.value))
    assert availability is expected
    assert availability.status_code == status_code


def test_check_availability_treats_unset_status_as_active():
    assert check_availability(_account(status=None)) is Availability.PROCEED


def test_check_availability_rejects_unknown_status():
    with pytest.raises(ValueError):
        check_availability(_account(status="deleted-ish"))


def test_visible_collections_disclose_everything():
    assert resolve_visibility(_account()) == CollectionVisibility(disclose_count=True, disclose_items=True)


def test_hidden_collections_keep_the_count():
    visibility = resolve_visibility(_account(hide_collections=True))
    assert visibility.disclose_count is True
    assert visibility.disclose_items is False
