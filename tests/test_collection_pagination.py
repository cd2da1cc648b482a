"""Unit tests for the follow collection page arithmetic."""
from __future__ import annotations

import os

import pytest

os.environ.setdefault("DATABASE_URL", "sqlite+pysqlite:///./test_follow_collections.db")

from app.services.pagination import page_count, page_window, parse_page, summary_bounds  # noqa: E402


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("1", 1),
        ("12", 12),
        (" 3 ", 3),
        (4, 4),
        (None, None),
        ("", None),
        ("abc", None),
        ("0", None),
        ("-1", None),
        ("1.5", None),
        ("²", None),
        (0, None),
        (-7, None),
        (True, None),
        ("99999999999999999999", 99999999999999999999),
        ("9" * 5000, None),
    ],
)
def test_parse_page_is_lenient(raw, expected):
    assert parse_page(raw) == expected


@pytest.mark.parametrize(
    "total, size, expected",
    [(0, 12, 0), (1, 12, 1), (12, 12, 1), (13, 12, 2), (25, 12, 3), (5, 1, 5)],
)
def test_page_count(total, size, expected):
    assert page_count(total, size) == expected


def test_page_count_rejects_non_positive_page_size():
    with pytest.raises(ValueError):
        page_count(3, 0)


def test_summary_bounds_empty_collection_has_no_links():
    assert summary_bounds(0, 12) == (None, None)


def test_summary_bounds_single_page_only_exposes_first():
    assert summary_bounds(2, 12) == (1, None)
    assert summary_bounds(12, 12) == (1, None)


def test_summary_bounds_multi_page_exposes_last():
    assert summary_bounds(13, 12) == (1, 2)
    assert summary_bounds(5, 2) == (1, 3)


def test_summary_bounds_hidden_items_never_link():
    assert summary_bounds(30, 12, disclose_items=False) == (None, None)


def test_page_window_first_page():
    window = page_window(5, 2, 1)
    assert (window.offset, window.limit, window.total_pages) == (0, 2, 3)
    assert window.has_prev is False
    assert window.has_next is True


def test_page_window_last_page():
    window = page_window(5, 2, 3)
    assert window.offset == 4
    assert window.has_prev is True
    assert window.has_next is False


def test_page_window_past_the_end_is_not_an_error():
    window = page_window(2, 12, 4)
    assert window.offset == 36
    assert window.total_pages == 1
    assert window.has_next is False
    assert window.is_past_end is True


def test_page_window_empty_collection():
    window = page_window(0, 12, 1)
    assert window.total_pages == 0
    assert window.has_next is False
    assert window.has_prev is False


def test_page_window_rejects_non_positive_page():
    with pytest.raises(ValueError):
        page_window(3, 12, 0)


def test_page_window_within_range_is_not_past_end():
    assert page_window(5, 2, 3).is_past_end is False
    assert page_window(0, 12, 1).is_past_end is True
