"""Account lookup plus the lifecycle and privacy checks that gate collections."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from fastapi import HTTPException, status
from sqlalchemy import select
from sqlalchemy.orm import Session

from ..constants import ACCOUNT_NOT_FOUND_DETAIL
from ..models import Account, AccountStatus

logger = logging.getLogger(__name__)


class Availability(Enum):
    PROCEED = status.HTTP_200_OK
    GONE = status.HTTP_410_GONE
    FORBIDDEN = status.HTTP_403_FORBIDDEN

    @property
    def status_code(self) -> int:
        return int(self.value)


@dataclass(slots=True, frozen=True)
class CollectionVisibility:
    disclose_count: bool = True
    disclose_items: bool = True


_STATUS_AVAILABILITY = {
    AccountStatus.ACTIVE: Availability.PROCEED,
    AccountStatus.SUSPENDED_TEMPORARY: Availability.FORBIDDEN,
    AccountStatus.SUSPENDED_PERMANENT: Availability.GONE,
}


def get_local_account(db: Session, username: str) -> Account:
    """Return the local account whose canonical username is exactly ``username``."""

    account = db.scalar(select(Account).where(Account.username == username, Account.domain.is_(None)))
    if account is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=ACCOUNT_NOT_FOUND_DETAIL)
    return account


def check_availability(account: Account) -> Availability:
    """Map the account lifecycle status onto the response it allows."""

    account_status = AccountStatus(account.status or AccountStatus.ACTIVE)
    availability = _STATUS_AVAILABILITY[account_status]
    if availability is not Availability.PROCEED:
        logger.debug("Account %s unavailable (%s)", account.username, account_status.value)
    return availability


def resolve_visibility(account: Account) -> CollectionVisibility:
    # The count stays public even when the listing is hidden.
    if account.hide_collections:
        return CollectionVisibility(disclose_count=True, disclose_items=False)
    return CollectionVisibility()


__all__ = [
    "Availability",
    "CollectionVisibility",
    "check_availability",
    "get_local_account",
    "resolve_visibility",
]
