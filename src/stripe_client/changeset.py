"""
Parameter casting against a schema.

A schema maps each field name to the intents it may be sent with, or to a
nested schema for sub-objects::

    CUSTOMER_SCHEMA = {
        "email": ["create", "update"],
        "metadata": ["create", "update"],
        "shipping": {"name": ["create"], "phone": ["create", "update"]},
    }

Only fields that permit the requested intent survive the cast.
"""

from __future__ import annotations
from typing import Any, Dict, Mapping, Sequence, Union

Schema = Mapping[str, Union[Sequence[str], "Schema"]]

CREATE = "create"
RETRIEVE = "retrieve"
UPDATE = "update"
LIST = "list"


def cast(changes: Mapping[str, Any], schema: Schema, intent: str) -> Dict[str, Any]:
    """
    Keep the changes the schema allows for ``intent``.

    Args:
        changes: Caller supplied fields
        schema: Field rules
        intent: Operation the changes are for, e.g. ``"create"``

    Returns:
        New dictionary; unknown fields and fields not allowed for the intent are dropped
    """
    result: Dict[str, Any] = {}
    for key, rule in schema.items():
        if key not in changes:
            continue
        value = changes[key]
        if isinstance(rule, Mapping):
            if isinstance(value, Mapping):
                nested = cast(value, rule, intent)
                if nested:
                    result[key] = nested
        elif intent in rule:
            result[key] = value
    return result


__all__ = ["Schema", "CREATE", "RETRIEVE", "UPDATE", "LIST", "cast"]
