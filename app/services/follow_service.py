"""Read access to follow relationships, one provider per collection direction."""
from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Protocol

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from ..models import Account, Follow


class FollowDirection(StrEnum):
    """Which side of the follow edge a collection lists; doubles as the URL segment."""

    FOLLOWERS = "followers"
    FOLLOWING = "following"


class FollowSetProvider(Protocol):
    def count(self, account: Account) -> int:
        """Return the number of follow edges in this collection."""

    def slice(self, account: Account, *, offset: int, limit: int) -> list[Account]:
        """Return accounts on the far side of the edges, oldest follow first."""


@dataclass(slots=True)
class SqlFollowSet:
    """SQLAlchemy-backed provider for one direction of an account's follows."""

    db: Session
    direction: FollowDirection

    def _columns(self):
        if self.direction is FollowDirection.FOLLOWERS:
            return Follow.target_account_id, Follow.account_id
        return Follow.account_id, Follow.target_account_id

    def count(self, account: Account) -> int:
        owner_column, _ = self._columns()
        stmt = select(func.count()).select_from(Follow).where(owner_column == account.id)
        return int(self.db.scalar(stmt) or 0)

    def slice(self, account: Account, *, offset: int, limit: int) -> list[Account]:
        owner_column, other_column = self._columns()
        stmt = (
            select(Account)
            .join(Follow, other_column == Account.id)
            .where(owner_column == account.id)
            .order_by(Follow.id.asc())
            .offset(offset)
            .limit(limit)
        )
        return list(self.db.scalars(stmt))


def get_follow_set(db: Session, direction: FollowDirection) -> SqlFollowSet:
    return SqlFollowSet(db=db, direction=direction)


__all__ = ["FollowDirection", "FollowSetProvider", "SqlFollowSet", "get_follow_set"]
