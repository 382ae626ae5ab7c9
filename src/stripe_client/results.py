"""
Normalization of transport outcomes.

The transport returns a decoded payload on success and raises
:class:`~stripe_client.runtime.errors.ApiError` on failure. Failures are not
caught here: they propagate to the caller unchanged, and materialization
only ever runs on a success payload.
"""

from __future__ import annotations
from typing import Any, Callable, Mapping, Optional, Union

from pydantic import BaseModel

from .converter import stripe_map_to_object
from .options import PaginationParams

Materializer = Callable[[Any], Any]


def merge_fields(value: Any, updates: Mapping[str, Any]) -> Any:
    """Return ``value`` with ``updates`` merged in, leaving other fields as they are."""
    if isinstance(value, BaseModel):
        return value.model_copy(update=dict(updates))
    if isinstance(value, Mapping):
        merged = dict(value)
        merged.update(updates)
        return merged
    raise TypeError(f"cannot merge fields into {type(value).__name__}")


def handle_result(payload: Any, materialize: Optional[Materializer] = None) -> Any:
    """Materialize a successful payload."""
    return (materialize or stripe_map_to_object)(payload)


def handle_result_list(payload: Any,
                       pagination_params: Union[PaginationParams, Mapping[str, Any], None],
                       endpoint: str,
                       materialize: Optional[Materializer] = None) -> Any:
    """
    Materialize a list payload and attach the pagination metadata.

    ``limit`` comes from the params the page was requested with and ``url``
    is the endpoint it was fetched from, so the page alone is enough to ask
    for the next one.
    """
    page = handle_result(payload, materialize)
    params = PaginationParams.coerce(pagination_params)
    return merge_fields(page, {"limit": params.limit, "url": endpoint})


__all__ = ["Materializer", "merge_fields", "handle_result", "handle_result_list"]
