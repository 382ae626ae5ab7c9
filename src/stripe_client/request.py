"""
Immutable request descriptors.

A :class:`RequestDescriptor` describes one API call that has not been sent
yet. Every builder method returns a new descriptor, so partially built
descriptors can be shared and extended without aliasing::

    base = RequestDescriptor.new().put_endpoint("charges").put_method("post")
    charge = base.put_param("amount", 2000).put_param("customer", customer)
    charge = charge.cast_to_id(["customer"])
"""

from __future__ import annotations
from dataclasses import dataclass, field, replace
from enum import Enum
from types import MappingProxyType
from typing import Any, Callable, FrozenSet, Iterable, Mapping, Optional, Union

from .options import RequestOptions
from .runtime.errors import InvalidMethodError


class HttpMethod(str, Enum):
    """HTTP verbs the API accepts."""

    GET = "get"
    POST = "post"
    PUT = "put"
    PATCH = "patch"
    DELETE = "delete"

    @classmethod
    def parse(cls, method: Union[HttpMethod, str]) -> HttpMethod:
        """
        Resolve a verb given as enum member or case-insensitive string.

        Raises:
            InvalidMethodError: If the verb is not one of the five supported
        """
        if isinstance(method, cls):
            return method
        if isinstance(method, str):
            try:
                return cls(method.lower())
            except ValueError:
                pass
        raise InvalidMethodError(method)


@dataclass(frozen=True)
class LiteralPath:
    """Endpoint known up front."""

    path: str

    def resolve(self, params: Mapping[str, Any]) -> str:
        return self.path


@dataclass(frozen=True)
class DeferredPath:
    """Endpoint computed from the final parameters just before dispatch."""

    build: Callable[[Mapping[str, Any]], str]

    def resolve(self, params: Mapping[str, Any]) -> str:
        return self.build(params)


Endpoint = Union[LiteralPath, DeferredPath]


def _frozen(mapping: Optional[Mapping[str, Any]] = None) -> Mapping[str, Any]:
    return MappingProxyType(dict(mapping or {}))


def cast_value_to_id(value: Any) -> Any:
    """Replace a structured value carrying an ``id`` with that id."""
    if isinstance(value, Mapping):
        return value["id"] if "id" in value else value
    if isinstance(value, (str, bytes, int, float, bool)) or value is None:
        return value
    object_id = getattr(value, "id", None)
    return value if object_id is None else object_id


@dataclass(frozen=True)
class RequestDescriptor:
    """
    Description of one not-yet-sent API call.

    Attributes:
        endpoint: Literal or deferred endpoint, ``None`` until set
        method: HTTP verb, ``None`` until set
        params: Parameters to send, keyed by name
        cast_keys: Parameter names whose values are reduced to their ``id`` before dispatch
        headers: Extra HTTP headers
        options: Per-call options
    """

    endpoint: Optional[Endpoint] = None
    method: Optional[HttpMethod] = None
    params: Mapping[str, Any] = field(default_factory=_frozen)
    cast_keys: FrozenSet[str] = frozenset()
    headers: Mapping[str, str] = field(default_factory=_frozen)
    options: RequestOptions = field(default_factory=RequestOptions)

    # Read-only mapping views are not hashable; descriptors compare by value only.
    __hash__ = None

    @classmethod
    def new(cls, options: Union[RequestOptions, Mapping[str, Any], None] = None,
            headers: Optional[Mapping[str, str]] = None) -> RequestDescriptor:
        """Start an empty descriptor carrying per-call options and headers."""
        return cls(headers=_frozen(headers), options=RequestOptions.coerce(options))

    def put_endpoint(self, endpoint: Union[str, Callable[[Mapping[str, Any]], str], LiteralPath, DeferredPath]) -> RequestDescriptor:
        """
        Specify the endpoint for the request.

        The endpoint is a path relative to the API base (``"charges"``), or a
        function taking the final parameters and returning such a path. The
        function is not evaluated until just before the request is made, so
        parameters can still be added after the endpoint.
        """
        if isinstance(endpoint, (LiteralPath, DeferredPath)):
            resolved: Endpoint = endpoint
        elif isinstance(endpoint, str):
            resolved = LiteralPath(endpoint)
        elif callable(endpoint):
            resolved = DeferredPath(endpoint)
        else:
            raise TypeError(f"endpoint must be a string or a callable, got {type(endpoint).__name__}")
        return replace(self, endpoint=resolved)

    def put_method(self, method: Union[HttpMethod, str]) -> RequestDescriptor:
        """
        Specify the HTTP method.

        Raises:
            InvalidMethodError: If ``method`` is not GET, POST, PUT, PATCH or DELETE
        """
        return replace(self, method=HttpMethod.parse(method))

    def put_param(self, key: str, value: Any) -> RequestDescriptor:
        """Specify a single parameter; an existing value for ``key`` is replaced."""
        params = dict(self.params)
        params[key] = value
        return replace(self, params=_frozen(params))

    def put_params(self, params: Mapping[str, Any]) -> RequestDescriptor:
        """Specify several parameters at once; later values win."""
        merged = dict(self.params)
        merged.update(params)
        return replace(self, params=_frozen(merged))

    def cast_to_id(self, keys: Iterable[str]) -> RequestDescriptor:
        """
        Mark parameters to be cast to a plain ID before dispatch.

        Callers may pass whole objects (say, the customer to charge) where the
        API only wants the ID. Repeated calls merge their keys.
        """
        if isinstance(keys, str):
            keys = [keys]
        return replace(self, cast_keys=self.cast_keys | frozenset(keys))

    def resolved_params(self) -> dict:
        """Parameters as they will be sent, with ``cast_keys`` reduced to ids."""
        params = dict(self.params)
        for key in self.cast_keys:
            if key in params:
                params[key] = cast_value_to_id(params[key])
        return params

    def resolve_endpoint(self, params: Mapping[str, Any]) -> Optional[str]:
        if self.endpoint is None:
            return None
        return self.endpoint.resolve(params)


__all__ = [
    "HttpMethod",
    "LiteralPath",
    "DeferredPath",
    "Endpoint",
    "RequestDescriptor",
    "cast_value_to_id",
]
