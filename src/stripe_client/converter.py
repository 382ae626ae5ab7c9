"""
Default response materialization.

Turns a decoded JSON payload into :class:`StripeObject` / :class:`StripeList`
values, recursing into nested objects and lists.
"""

from __future__ import annotations
from typing import Any, Mapping

from pydantic import BaseModel

from .models import StripeList, StripeObject


def stripe_map_to_object(payload: Any) -> Any:
    """
    Materialize a raw payload.

    Mappings tagged ``object: "list"`` become :class:`StripeList`, other
    mappings with an ``object`` tag become :class:`StripeObject`, untagged
    mappings stay dictionaries. Values that are already materialized are
    returned unchanged.
    """
    if isinstance(payload, BaseModel):
        return payload
    if isinstance(payload, Mapping):
        converted = {key: stripe_map_to_object(value) for key, value in payload.items()}
        tag = converted.get("object")
        if tag == "list":
            return StripeList(**converted)
        if tag is not None:
            return StripeObject(**converted)
        return converted
    if isinstance(payload, list):
        return [stripe_map_to_object(item) for item in payload]
    return payload


__all__ = ["stripe_map_to_object"]
