"""
Request option and pagination parameter classes.

Typed per-call options and the transient pagination parameters sent with
list requests.
"""

from __future__ import annotations
from typing import Optional, Any, Dict, Mapping, Union
from pydantic import BaseModel, Field

MAX_PAGINATION_LIMIT = 100


class RequestOptions(BaseModel):
    """
    Per-call options.

    Each set field overrides the client configuration for a single request.
    """
    api_key: Optional[str] = Field(default=None, description="API key to use instead of the configured one")
    connect_account: Optional[str] = Field(
        default=None,
        alias="stripeAccount",
        description="Connected account to act on behalf of"
    )
    api_version: Optional[str] = Field(default=None, description="Stripe API version override")
    idempotency_key: Optional[str] = Field(default=None, description="Idempotency key for safe retries")

    model_config = {"populate_by_name": True, "frozen": True}

    @classmethod
    def coerce(cls, value: Union[RequestOptions, Mapping[str, Any], None]) -> RequestOptions:
        """Accept an options instance, a plain mapping or ``None``."""
        if value is None:
            return cls()
        if isinstance(value, cls):
            return value
        return cls.model_validate(dict(value))

    def to_headers(self) -> Dict[str, str]:
        """Convert to the HTTP headers Stripe reads these options from."""
        headers: Dict[str, str] = {}
        if self.api_key is not None:
            headers["Authorization"] = f"Bearer {self.api_key}"
        if self.connect_account is not None:
            headers["Stripe-Account"] = self.connect_account
        if self.api_version is not None:
            headers["Stripe-Version"] = self.api_version
        if self.idempotency_key is not None:
            headers["Idempotency-Key"] = self.idempotency_key
        return headers


class PaginationParams(BaseModel):
    """
    Parameters for one page of a list endpoint.

    Extra keys (list filters such as ``customer``) are carried through to the
    request unchanged.
    """
    limit: Optional[int] = Field(
        default=None,
        ge=1,
        le=MAX_PAGINATION_LIMIT,
        description="Maximum number of items on the page"
    )
    starting_after: Optional[Any] = Field(
        default=None,
        description="Cursor: id of the item the page starts after"
    )

    model_config = {"extra": "allow", "frozen": True}

    @classmethod
    def coerce(cls, value: Union[PaginationParams, Mapping[str, Any], None]) -> PaginationParams:
        """Accept a params instance, a plain mapping or ``None``."""
        if value is None:
            return cls()
        if isinstance(value, cls):
            return value
        return cls.model_validate(dict(value))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to API-compatible dictionary."""
        return self.model_dump(exclude_none=True)


__all__ = ["MAX_PAGINATION_LIMIT", "RequestOptions", "PaginationParams"]
