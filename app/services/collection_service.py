"""Assemble ActivityStreams follow collections from account state and follow data."""
from __future__ import annotations

import logging
from urllib.parse import quote

from ..models import Account
from ..schemas import OrderedCollectionPage, OrderedCollectionSummary
from .account_service import CollectionVisibility
from .follow_service import FollowDirection, FollowSetProvider
from .pagination import PageWindow, page_window, summary_bounds

logger = logging.getLogger(__name__)


def actor_url(base_url: str, account: Account) -> str:
    """Return the actor URI used to reference ``account`` inside collections."""

    if account.uri:
        return str(account.uri)
    return f"{base_url}/accounts/{quote(str(account.username), safe='')}"


def collection_url(base_url: str, account: Account, direction: FollowDirection, page: int | None = None) -> str:
    url = f"{actor_url(base_url, account)}/{direction.value}"
    if page is None:
        return url
    return f"{url}?page={page}"


def load_page_accounts(
    account: Account,
    provider: FollowSetProvider,
    window: PageWindow,
    visibility: CollectionVisibility,
) -> list[Account]:
    """Fetch the accounts on ``window``; hidden collections and pages past the end skip the provider."""

    if not visibility.disclose_items or window.is_past_end:
        return []
    return provider.slice(account, offset=window.offset, limit=window.limit)


def build_collection_summary(
    account: Account,
    direction: FollowDirection,
    *,
    provider: FollowSetProvider,
    visibility: CollectionVisibility,
    page_size: int,
    base_url: str,
) -> OrderedCollectionSummary:
    """Return the root collection document advertising ``first``/``last`` pages."""

    total_items = provider.count(account)
    first, last = summary_bounds(total_items, page_size, disclose_items=visibility.disclose_items)

    return OrderedCollectionSummary(
        id=collection_url(base_url, account, direction),
        total_items=total_items if visibility.disclose_count else None,
        first=collection_url(base_url, account, direction, first) if first is not None else None,
        last=collection_url(base_url, account, direction, last) if last is not None else None,
    )


def build_collection_page(
    account: Account,
    direction: FollowDirection,
    *,
    page: int,
    provider: FollowSetProvider,
    visibility: CollectionVisibility,
    page_size: int,
    base_url: str,
) -> OrderedCollectionPage:
    """Return one page of the collection, linked back to its summary via ``partOf``."""

    total_items = provider.count(account)
    window = page_window(total_items, page_size, page)
    members = load_page_accounts(account, provider, window, visibility)

    links: dict[str, str] = {}
    if visibility.disclose_items:
        if window.has_next:
            links["next"] = collection_url(base_url, account, direction, window.number + 1)
        if window.has_prev:
            links["prev"] = collection_url(base_url, account, direction, window.number - 1)

    return OrderedCollectionPage(
        id=collection_url(base_url, account, direction, window.number),
        total_items=total_items if visibility.disclose_count else None,
        part_of=collection_url(base_url, account, direction),
        ordered_items=[actor_url(base_url, member) for member in members],
        **links,
    )


def assemble_collection(
    account: Account,
    direction: FollowDirection,
    *,
    page: int | None,
    provider: FollowSetProvider,
    visibility: CollectionVisibility,
    page_size: int,
    base_url: str,
) -> OrderedCollectionSummary | OrderedCollectionPage:
    """Dispatch to the summary (``page is None``) or page document."""

    logger.debug("Assembling %s collection for %s (page=%s)", direction.value, account.username, page)
    if page is None:
        return build_collection_summary(
            account,
            direction,
            provider=provider,
            visibility=visibility,
            page_size=page_size,
            base_url=base_url,
        )
    return build_collection_page(
        account,
        direction,
        page=page,
        provider=provider,
        visibility=visibility,
        page_size=page_size,
        base_url=base_url,
    )


__all__ = [
    "actor_url",
    "assemble_collection",
    "build_collection_page",
    "build_collection_summary",
    "collection_url",
    "load_page_accounts",
]
