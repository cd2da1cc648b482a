"""Convenience exports for service layer."""
from .account_service import (
    Availability,
    CollectionVisibility,
    check_availability,
    get_local_account,
    resolve_visibility,
)
from .collection_service import (
    actor_url,
    assemble_collection,
    build_collection_page,
    build_collection_summary,
    collection_url,
    load_page_accounts,
)
from .follow_service import FollowDirection, FollowSetProvider, SqlFollowSet, get_follow_set
from .pagination import PageWindow, page_count, page_window, parse_page, summary_bounds

__all__ = [
    "Availability",
    "CollectionVisibility",
    "check_availability",
    "get_local_account",
    "resolve_visibility",
    "actor_url",
    "assemble_collection",
    "build_collection_page",
    "build_collection_summary",
    "collection_url",
    "load_page_accounts",
    "FollowDirection",
    "FollowSetProvider",
    "SqlFollowSet",
    "get_follow_set",
    "PageWindow",
    "page_count",
    "page_window",
    "parse_page",
    "summary_bounds",
]
