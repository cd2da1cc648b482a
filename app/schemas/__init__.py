"""Convenience exports for schema layer."""
from .collections import OrderedCollectionPage, OrderedCollectionSummary

__all__ = [
    "OrderedCollectionPage",
    "OrderedCollectionSummary",
]
