"""Project-wide constant values."""
from __future__ import annotations

ACTIVITY_STREAMS_CONTEXT = "https://www.w3.org/ns/activitystreams"

ACTIVITY_JSON_MEDIA_TYPE = "application/activity+json"  # served for every structured response
LD_JSON_MEDIA_TYPE = "application/ld+json"

ACCOUNT_NOT_FOUND_DETAIL = "Account not found"

__all__ = [
    "ACTIVITY_STREAMS_CONTEXT",
    "ACTIVITY_JSON_MEDIA_TYPE",
    "LD_JSON_MEDIA_TYPE",
    "ACCOUNT_NOT_FOUND_DETAIL",
]
