"""
Pagination Helpers

List endpoints receive 'page' and 'limit' as strings. Both the services
(when computing the OFFSET/LIMIT window) and the routers (when building
the response metadata) go through resolve_window(), so the two always
agree on the effective page size.
"""

import math
from typing import NamedTuple

from library_api.config import get_settings
from library_api.schemas.common import PageMeta

DEFAULT_PAGE = 1
# Upper bound on page numbers; keeps the OFFSET within 64-bit integer range
MAX_PAGE = 1_000_000


class PageWindow(NamedTuple):
    """A normalized page request."""

    page: int
    limit: int
    offset: int


def parse_positive_int(value: str | int | None, default: int) -> int:
    """
    Parse a value as a positive integer, falling back to a default.

    Examples:
        parse_positive_int("3", 10) -> 3
        parse_positive_int("abc", 10) -> 10
        parse_positive_int("0", 10) -> 10
        parse_positive_int(None, 10) -> 10
    """
    if value is None or isinstance(value, bool):
        return default
    try:
        parsed = int(str(value).strip())
    except ValueError:
        return default
    return parsed if parsed > 0 else default


def resolve_window(
    page: str | int | None,
    limit: str | int | None,
) -> PageWindow:
    """
    Normalize page/limit and compute the row offset.

    Invalid, zero or negative values become the defaults. Limits above
    the configured maximum are clamped, and pages above MAX_PAGE are
    clamped to MAX_PAGE.

    Returns:
        PageWindow with offset = (page - 1) * limit
    """
    settings = get_settings()
    page_number = min(parse_positive_int(page, DEFAULT_PAGE), MAX_PAGE)
    page_size = min(
        parse_positive_int(limit, settings.default_page_size),
        settings.max_page_size,
    )
    return PageWindow(
        page=page_number,
        limit=page_size,
        offset=(page_number - 1) * page_size,
    )


def total_pages(total: int, limit: int) -> int:
    """Number of pages needed to show `total` rows, `limit` per page."""
    if limit <= 0:
        limit = get_settings().default_page_size
    return math.ceil(total / limit)


def build_page_meta(
    total: int,
    page: str | int | None,
    limit: str | int | None,
) -> PageMeta:
    """
    Build the 'meta' block of a list response.

    page and limit are the raw request values; they are normalized the
    same way the service normalized them before querying.

    Example:
        build_page_meta(23, "1", "10") -> total=23, page=1, limit=10, total_pages=3
    """
    window = resolve_window(page, limit)
    return PageMeta(
        total=total,
        page=window.page,
        limit=window.limit,
        total_pages=total_pages(total, window.limit),
    )
