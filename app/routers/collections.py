"""Federation follow collection routes (followers / following)."""
from __future__ import annotations

import logging
from enum import StrEnum

from fastapi import APIRouter, Depends, Query, Request, Response
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from ..config import Settings, get_settings
from ..constants import ACTIVITY_JSON_MEDIA_TYPE, LD_JSON_MEDIA_TYPE
from ..database import get_session
from ..models import Account
from ..services import (
    Availability,
    CollectionVisibility,
    FollowDirection,
    FollowSetProvider,
    actor_url,
    assemble_collection,
    check_availability,
    collection_url,
    get_follow_set,
    get_local_account,
    load_page_accounts,
    page_window,
    parse_page,
    resolve_visibility,
)
from ..ui.template_helpers import render_template

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/accounts", tags=["collections"])


class ResponseFormat(StrEnum):
    HTML = "html"
    JSON = "json"


_JSON_FORMAT_NAMES = {"json", "activity", "activity+json", "ld+json"}


def negotiate_format(request: Request, requested: str | None) -> ResponseFormat:
    """Pick HTML or ActivityStreams JSON; an explicit ``format`` parameter wins."""

    if requested:
        name = requested.strip().lower()
        if name == ResponseFormat.HTML.value:
            return ResponseFormat.HTML
        if name in _JSON_FORMAT_NAMES:
            return ResponseFormat.JSON

    accept = request.headers.get("accept", "").lower()
    if "text/html" in accept and ACTIVITY_JSON_MEDIA_TYPE not in accept and LD_JSON_MEDIA_TYPE not in accept:
        return ResponseFormat.HTML
    return ResponseFormat.JSON


def _html_page_url(base_url: str, account: Account, direction: FollowDirection, page: int) -> str:
    return f"{collection_url(base_url, account, direction, page)}&format=html"


def _render_collection_html(
    request: Request,
    account: Account,
    direction: FollowDirection,
    *,
    page: int | None,
    provider: FollowSetProvider,
    visibility: CollectionVisibility,
    settings: Settings,
) -> Response:
    base_url = settings.base_url
    total_items = provider.count(account)
    window = page_window(total_items, settings.follows_page_size, page or 1)
    members = load_page_accounts(account, provider, window, visibility)
    collection_id = collection_url(base_url, account, direction)

    context = {
        "page_title": f"@{account.username} · {direction.value.capitalize()}",
        "direction_label": direction.value,
        "collection_id": collection_id,
        "total_items": total_items if visibility.disclose_count else None,
        "items_hidden": not visibility.disclose_items,
        "members": [
            {"acct": member.acct, "display_name": member.display_name, "url": actor_url(base_url, member)}
            for member in members
        ],
        "prev_url": _html_page_url(base_url, account, direction, window.number - 1) if window.has_prev else None,
        "next_url": _html_page_url(base_url, account, direction, window.number + 1) if window.has_next else None,
    }
    return render_template(request, "follow_collection.html", context)


def serve_collection(
    request: Request,
    db: Session,
    settings: Settings,
    *,
    username: str,
    direction: FollowDirection,
    page: str | None,
    response_format: str | None,
) -> Response:
    """Run lookup, availability gate, visibility and assembly for one collection request."""

    account = get_local_account(db, username)

    availability = check_availability(account)
    if availability is not Availability.PROCEED:
        logger.info("Refusing %s of %s with HTTP %d", direction.value, username, availability.status_code)
        return Response(status_code=availability.status_code)

    visibility = resolve_visibility(account)
    provider = get_follow_set(db, direction)
    page_number = parse_page(page)

    if negotiate_format(request, response_format) is ResponseFormat.HTML:
        return _render_collection_html(
            request,
            account,
            direction,
            page=page_number,
            provider=provider,
            visibility=visibility,
            settings=settings,
        )

    document = assemble_collection(
        account,
        direction,
        page=page_number,
        provider=provider,
        visibility=visibility,
        page_size=settings.follows_page_size,
        base_url=settings.base_url,
    )
    return JSONResponse(
        content=document.to_activity_json(),
        media_type=ACTIVITY_JSON_MEDIA_TYPE,
        headers={
            "Vary": "Accept",
            "Cache-Control": f"public, max-age={settings.collection_cache_seconds}",
        },
    )


@router.get("/{username}/followers")
async def followers_collection(
    request: Request,
    username: str,
    page: str | None = Query(default=None),
    response_format: str | None = Query(default=None, alias="format"),
    db: Session = Depends(get_session),
    settings: Settings = Depends(get_settings),
) -> Response:
    return serve_collection(
        request,
        db,
        settings,
        username=username,
        direction=FollowDirection.FOLLOWERS,
        page=page,
        response_format=response_format,
    )


@router.get("/{username}/following")
async def following_collection(
    request: Request,
    username: str,
    page: str | None = Query(default=None),
    response_format: str | None = Query(default=None, alias="format"),
    db: Session = Depends(get_session),
    settings: Settings = Depends(get_settings),
) -> Response:
    return serve_collection(
        request,
        db,
        settings,
        username=username,
        direction=FollowDirection.FOLLOWING,
        page=page,
        response_format=response_format,
    )


__all__ = ["ResponseFormat", "negotiate_format", "router", "serve_collection"]
