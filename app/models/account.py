"""SQLAlchemy ORM model for local and remote accounts."""
from __future__ import annotations

import uuid
from enum import StrEnum

from sqlalchemy import Boolean, Column, DateTime, String, UniqueConstraint
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
from sqlalchemy.sql import expression, func

from app.database import Base
from .follow import Follow


class AccountStatus(StrEnum):
    """Lifecycle state written by the suspension and deletion workflows."""

    ACTIVE = "active"
    SUSPENDED_TEMPORARY = "suspended_temporary"
    SUSPENDED_PERMANENT = "suspended_permanent"


class Account(Base):
    __tablename__ = "accounts"
    __table_args__ = (UniqueConstraint("username", "domain", name="uq_accounts_username_domain"),)

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    username = Column(String(150), nullable=False, index=True)
    # NULL for accounts hosted on this server
    domain = Column(String(255), nullable=True)
    uri = Column(String(1024), nullable=True)
    display_name = Column(String(150), nullable=True)
    status = Column(
        String(32),
        nullable=False,
        server_default=AccountStatus.ACTIVE.value,
        default=AccountStatus.ACTIVE.value,
    )
    hide_collections = Column(Boolean, nullable=False, server_default=expression.false(), default=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    follower_relations = relationship(
        "Follow",
        foreign_keys=[Follow.target_account_id],
        back_populates="target_account",
        cascade="all, delete-orphan",
    )
    following_relations = relationship(
        "Follow",
        foreign_keys=[Follow.account_id],
        back_populates="account",
        cascade="all, delete-orphan",
    )

    @property
    def is_local(self) -> bool:
        return self.domain is None

    @property
    def acct(self) -> str:
        if self.is_local:
            return str(self.username)
        return f"{self.username}@{self.domain}"

    def __repr__(self) -> str:  # pragma: no cover - debugging helper
        return f"<Account {self.acct} status={self.status}>"


__all__ = ["Account", "AccountStatus"]
