"""
Stripe Parameter Encoding

Flattens nested request parameters into the bracketed form-encoding the
Stripe API expects, e.g. ``metadata[order]=6735`` and
``items[0][price]=price_123``.
"""

from __future__ import annotations
from typing import Any, List, Mapping, Optional, Tuple
from enum import Enum
from urllib.parse import urlencode

from pydantic import BaseModel


def _encode_scalar(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def flatten_params(params: Mapping[str, Any], prefix: Optional[str] = None) -> List[Tuple[str, str]]:
    """
    Flatten a parameter mapping into ordered key/value pairs.

    Args:
        params: Parameters, possibly nested mappings and sequences
        prefix: Key prefix for nested values

    Returns:
        List of (key, value) string pairs; ``None`` values are dropped
    """
    pairs: List[Tuple[str, str]] = []
    for key, value in params.items():
        full_key = f"{prefix}[{key}]" if prefix else str(key)
        pairs.extend(_flatten_value(full_key, value))
    return pairs


def _flatten_value(key: str, value: Any) -> List[Tuple[str, str]]:
    if value is None:
        return []
    if isinstance(value, BaseModel):
        value = value.model_dump(exclude_none=True)
    if isinstance(value, Mapping):
        return flatten_params(value, key)
    if isinstance(value, (list, tuple)):
        pairs: List[Tuple[str, str]] = []
        for index, item in enumerate(value):
            pairs.extend(_flatten_value(f"{key}[{index}]", item))
        return pairs
    return [(key, _encode_scalar(value))]


def encode_params(params: Mapping[str, Any]) -> str:
    """Encode parameters as an ``application/x-www-form-urlencoded`` string."""
    return urlencode(flatten_params(params))


__all__ = ["flatten_params", "encode_params"]
