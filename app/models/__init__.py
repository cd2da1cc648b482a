"""Convenience exports for ORM models."""
from .follow import Follow
from .account import Account, AccountStatus

__all__ = [
    "Account",
    "AccountStatus",
    "Follow",
]
