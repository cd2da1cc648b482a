"""SQLAlchemy ORM model for follow relationships."""
from __future__ import annotations

from sqlalchemy import Column, DateTime, ForeignKey, Integer, UniqueConstraint
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from app.database import Base


class Follow(Base):
    """Directed edge: ``account`` follows ``target_account``.

    ``id`` grows strictly with creation order and is the pagination key.
    """

    __tablename__ = "follows"
    __table_args__ = (UniqueConstraint("account_id", "target_account_id", name="uq_follows_account_target"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    account_id = Column(UUID(as_uuid=True), ForeignKey("accounts.id", ondelete="CASCADE"), nullable=False, index=True)
    target_account_id = Column(
        UUID(as_uuid=True),
        ForeignKey("accounts.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    account = relationship("Account", foreign_keys=[account_id], back_populates="following_relations")
    target_account = relationship("Account", foreign_keys=[target_account_id], back_populates="follower_relations")


__all__ = ["Follow"]
