"""ActivityStreams documents for the follow collections."""
from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from ..constants import ACTIVITY_STREAMS_CONTEXT


class _ActivityDocument(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    context: str = Field(default=ACTIVITY_STREAMS_CONTEXT, alias="@context")
    id: str
    total_items: int | None = Field(default=None, alias="totalItems")

    def to_activity_json(self) -> dict[str, Any]:
        """Serialize with ActivityStreams property names, dropping unset links."""

        return self.model_dump(by_alias=True, exclude_none=True)


class OrderedCollectionSummary(_ActivityDocument):
    type: Literal["OrderedCollection"] = "OrderedCollection"
    first: str | None = None
    last: str | None = None


class OrderedCollectionPage(_ActivityDocument):
    type: Literal["OrderedCollectionPage"] = "OrderedCollectionPage"
    part_of: str = Field(alias="partOf")
    ordered_items: list[str] = Field(default_factory=list, alias="orderedItems")
    next: str | None = None
    prev: str | None = None


__all__ = ["OrderedCollectionSummary", "OrderedCollectionPage"]
