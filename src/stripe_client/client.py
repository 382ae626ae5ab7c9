"""
Stripe request client.

Dispatches request descriptors and list requests through a transport,
materializes the results, and walks cursor-paginated list endpoints.
"""

from __future__ import annotations
import logging
from typing import Any, Callable, Iterator, Mapping, Optional, Union

from . import changeset
from .changeset import Schema
from .config import ClientConfig
from .converter import stripe_map_to_object
from .options import PaginationParams, RequestOptions
from .pagination import aggregate_pages, first_page_params, iter_pages, next_page_params, page_field
from .request import HttpMethod, RequestDescriptor
from .results import Materializer, handle_result, handle_result_list
from .transport import Transport

Options = Union[RequestOptions, Mapping[str, Any], None]
Caster = Callable[[Mapping[str, Any], Schema, str], Mapping[str, Any]]


class StripeClient:
    """
    Client for the Stripe REST API.

    Each call blocks until its transport request completes. List traversal
    is strictly sequential: the next page is requested only once the
    previous page, and with it the cursor, is known.

    Example:
        ```python
        with StripeClient("sk_test_...") as client:
            page = client.retrieve_many({"limit": 10}, "customers")
            following = client.retrieve_next(page)
            everything = client.retrieve_all("country_specs")
        ```
    """

    def __init__(self, config: Union[str, ClientConfig, None] = None,
                 transport: Optional[Any] = None,
                 materialize: Optional[Materializer] = None,
                 caster: Optional[Caster] = None):
        """
        Initialize the client.

        Args:
            config: API key string, a ClientConfig, or ``None`` to read the environment
            transport: Object providing ``request`` and ``request_file_upload``;
                defaults to an HTTP :class:`Transport`
            materialize: Payload to value conversion (default: stripe_map_to_object)
            caster: Changes to params conversion used by :meth:`create`
                (default: :func:`stripe_client.changeset.cast`)
        """
        if isinstance(config, str):
            self.config = ClientConfig(api_key=config)
        elif config is None:
            self.config = ClientConfig.from_env()
        else:
            self.config = config

        self.logger = logging.getLogger(__name__)
        if self.config.debug:
            self.logger.setLevel(logging.DEBUG)

        self._owns_transport = transport is None
        self.transport = transport if transport is not None else Transport(self.config)
        self.materialize = materialize or stripe_map_to_object
        self.caster = caster or changeset.cast

    def close(self) -> None:
        """Close the transport if owned by this client."""
        if self._owns_transport:
            self.transport.close()

    def __enter__(self) -> StripeClient:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    # =========================================================================
    # Single requests
    # =========================================================================

    def execute(self, descriptor: RequestDescriptor) -> Any:
        """
        Dispatch a built request descriptor.

        ID casting is applied to the parameters first; a deferred endpoint is
        then resolved once, from those final parameters.

        Raises:
            ApiError: As raised by the transport, unchanged
        """
        params = descriptor.resolved_params()
        endpoint = descriptor.resolve_endpoint(params)
        self.logger.debug("Executing request to %s", endpoint)
        payload = self.transport.request(params, descriptor.method, endpoint,
                                         dict(descriptor.headers), descriptor.options)
        return handle_result(payload, self.materialize)

    def create(self, endpoint: str, changes: Mapping[str, Any], schema: Schema,
               options: Options = None) -> Any:
        """
        Create a resource.

        Args:
            endpoint: Collection endpoint, e.g. ``"customers"``
            changes: Fields of the new resource
            schema: Field rules; only fields allowed for ``create`` are sent
            options: Per-call options

        Returns:
            The created resource, materialized
        """
        params = self.caster(changes, schema, changeset.CREATE)
        self.logger.debug("Creating %s", endpoint)
        payload = self.transport.request(params, HttpMethod.POST, endpoint, {}, options)
        return handle_result(payload, self.materialize)

    def retrieve_file_upload(self, endpoint: str, options: Options = None) -> Any:
        """Retrieve a file upload resource through the file upload API."""
        # File upload reads never take parameters.
        payload = self.transport.request_file_upload({}, HttpMethod.GET, endpoint, {}, options)
        return handle_result(payload, self.materialize)

    # =========================================================================
    # Pagination
    # =========================================================================

    def retrieve_many(self, pagination_params: Union[PaginationParams, Mapping[str, Any], None],
                      endpoint: str, options: Options = None) -> Any:
        """
        Fetch one page of a list endpoint.

        Args:
            pagination_params: ``limit``, ``starting_after`` and any list filters
            endpoint: List endpoint, e.g. ``"country_specs"``
            options: Per-call options

        Returns:
            The page, carrying ``limit`` and ``url`` for follow-up requests

        For more information on pagination parameters read the Stripe docs:
        https://stripe.com/docs/api#pagination
        """
        params = PaginationParams.coerce(pagination_params)
        self.logger.debug("Fetching page of %s (%s)", endpoint, params.to_dict())
        payload = self.transport.request(params.to_dict(), HttpMethod.GET, endpoint, {}, options)
        return handle_result_list(payload, params, endpoint, self.materialize)

    def retrieve_next(self, previous_page: Any, options: Options = None) -> Any:
        """
        Fetch the page following ``previous_page``.

        Raises:
            EmptyPageError: If ``previous_page`` has no items to continue after
        """
        params = next_page_params(previous_page)
        return self.retrieve_many(params, page_field(previous_page, "url"), options)

    def retrieve_all(self, endpoint: str, options: Options = None) -> Any:
        """
        Fetch every item of a list endpoint.

        Pages are requested at the maximum page size. Any failed page aborts
        the traversal with that page's error; no partial result is returned.

        Returns:
            The last page with ``data`` holding the items of all pages, in order
        """
        first_page = self.retrieve_many(first_page_params(), endpoint, options)
        return aggregate_pages(first_page, lambda page: self.retrieve_next(page, options))

    def iter_pages(self, endpoint: str,
                   pagination_params: Union[PaginationParams, Mapping[str, Any], None] = None,
                   options: Options = None) -> Iterator[Any]:
        """Lazily yield the pages of a list endpoint, fetching each on demand."""
        first_page = self.retrieve_many(pagination_params, endpoint, options)
        return iter_pages(first_page, lambda page: self.retrieve_next(page, options))

    def iter_items(self, endpoint: str,
                   pagination_params: Union[PaginationParams, Mapping[str, Any], None] = None,
                   options: Options = None) -> Iterator[Any]:
        """Lazily yield the items of a list endpoint across pages."""
        for page in self.iter_pages(endpoint, pagination_params, options):
            yield from page_field(page, "data") or []


__all__ = ["StripeClient"]
