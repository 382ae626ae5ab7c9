"""
Cursor pagination.

Pages are chained through a cursor: the next page starts after the id of
the last item on the previous page. Traversal is a plain loop, one request
at a time, so arbitrarily long result sets do not grow the call stack.
"""

from __future__ import annotations
import logging
from typing import Any, Callable, Iterator, List, Mapping

from .options import MAX_PAGINATION_LIMIT, PaginationParams
from .results import merge_fields
from .runtime.errors import EmptyPageError, PaginationError

logger = logging.getLogger(__name__)

FetchNext = Callable[[Any], Any]


def page_field(page: Any, name: str, default: Any = None) -> Any:
    """Read a page attribute from a model or a mapping."""
    if isinstance(page, Mapping):
        return page.get(name, default)
    return getattr(page, name, default)


def _item_id(item: Any) -> Any:
    if isinstance(item, Mapping):
        return item.get("id")
    return getattr(item, "id", None)


def next_page_params(page: Any) -> PaginationParams:
    """
    Derive the parameters of the page following ``page``.

    Raises:
        EmptyPageError: If ``page`` has no items to take a cursor from
        PaginationError: If the last item carries no ``id``
    """
    data = page_field(page, "data") or []
    if not data:
        raise EmptyPageError(details={"url": page_field(page, "url")})
    cursor = _item_id(data[-1])
    if cursor is None:
        raise PaginationError("Last item on the page has no id to use as a cursor",
                              details={"url": page_field(page, "url")})
    return PaginationParams(starting_after=cursor, limit=page_field(page, "limit"))


def first_page_params() -> PaginationParams:
    """Parameters for the first page of a full traversal."""
    return PaginationParams(limit=MAX_PAGINATION_LIMIT)


def iter_pages(first_page: Any, fetch_next: FetchNext) -> Iterator[Any]:
    """
    Yield ``first_page`` and every page after it.

    ``fetch_next`` receives the previous page and returns the next one; it is
    only called while the previous page reports ``has_more``.
    """
    page = first_page
    yield page
    while page_field(page, "has_more", False):
        page = fetch_next(page)
        yield page


def aggregate_pages(first_page: Any, fetch_next: FetchNext) -> Any:
    """
    Follow the page chain to the end and collect every item.

    Returns:
        The last page with ``data`` replaced by the items of all pages, in
        page order
    """
    items: List[Any] = []
    last_page = first_page
    page_count = 0
    for page in iter_pages(first_page, fetch_next):
        items.extend(page_field(page, "data") or [])
        last_page = page
        page_count += 1
    logger.debug("Aggregated %d items from %d pages of %s",
                 len(items), page_count, page_field(last_page, "url"))
    return merge_fields(last_page, {"data": items})


__all__ = [
    "FetchNext",
    "page_field",
    "next_page_params",
    "first_page_params",
    "iter_pages",
    "aggregate_pages",
]
