"""
Materialized API objects.

Stripe payloads are open-ended, so both models accept any extra fields the
API returns and expose them as attributes.
"""

from __future__ import annotations
from typing import Any, Dict, List, Optional
from pydantic import BaseModel


class StripeObject(BaseModel):
    """A single API resource (customer, charge, country spec, ...)."""

    id: Optional[Any] = None
    object: Optional[Any] = None

    model_config = {"extra": "allow", "frozen": True}

    def get(self, key: str, default: Any = None) -> Any:
        """Dictionary-style field lookup."""
        return getattr(self, key, default)

    def __getitem__(self, key: str) -> Any:
        try:
            return getattr(self, key)
        except AttributeError:
            raise KeyError(key) from None

    def to_dict(self) -> Dict[str, Any]:
        """Convert back to a plain dictionary."""
        return self.model_dump(exclude_none=True)


class StripeList(StripeObject):
    """
    One page of a list endpoint.

    ``limit`` and ``url`` are attached after the page is fetched so the next
    page can be requested from the page alone.
    """

    object: Optional[str] = "list"
    data: List[Any] = []
    has_more: bool = False
    url: Optional[str] = None
    limit: Optional[int] = None


__all__ = ["StripeObject", "StripeList"]
