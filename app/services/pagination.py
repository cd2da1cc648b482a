"""Page arithmetic for ordered collections.

Everything here is pure: callers supply the total item count and page size,
and receive page numbers and slice bounds. Page numbers are 1-based.
"""
from __future__ import annotations

from dataclasses import dataclass

MAX_PAGE_DIGITS = 32


@dataclass(slots=True, frozen=True)
class PageWindow:
    number: int
    offset: int
    limit: int
    total_pages: int

    @property
    def has_prev(self) -> bool:
        return self.number > 1

    @property
    def has_next(self) -> bool:
        return self.number < self.total_pages

    @property
    def is_past_end(self) -> bool:
        return self.number > self.total_pages


def parse_page(raw: str | int | None) -> int | None:
    """Return the requested page number, or ``None`` when no valid page was asked for.

    Missing, non-numeric, zero, negative and absurdly long values all fall back
    to ``None`` so the caller serves the collection summary instead of failing.
    Large but plausible pages parse normally and land past the end.
    """

    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw if raw > 0 else None

    candidate = raw.strip()
    if not candidate.isascii() or not candidate.isdigit() or len(candidate) > MAX_PAGE_DIGITS:
        return None
    page = int(candidate)
    return page if page > 0 else None


def page_count(total_items: int, page_size: int) -> int:
    if page_size < 1:
        raise ValueError("page_size must be positive")
    if total_items <= 0:
        return 0
    return -(-total_items // page_size)


def summary_bounds(total_items: int, page_size: int, *, disclose_items: bool = True) -> tuple[int | None, int | None]:
    """Return the ``(first, last)`` page numbers advertised on a collection summary.

    ``first`` is set whenever there are disclosed items; ``last`` only when the
    collection spans more than one page.
    """

    pages = page_count(total_items, page_size)
    if not disclose_items or pages == 0:
        return None, None
    return 1, (pages if pages > 1 else None)


def page_window(total_items: int, page_size: int, page: int) -> PageWindow:
    """Describe the slice for ``page``; pages past the end produce an empty slice."""

    if page < 1:
        raise ValueError("page must be a positive integer")
    return PageWindow(
        number=page,
        offset=(page - 1) * page_size,
        limit=page_size,
        total_pages=page_count(total_items, page_size),
    )


__all__ = ["MAX_PAGE_DIGITS", "PageWindow", "page_count", "page_window", "parse_page", "summary_bounds"]
