"""
HTTP transport for the Stripe API.

Sends one request per call over a ``requests.Session`` and returns the
decoded JSON payload. Every failure is raised as an
:class:`~stripe_client.runtime.errors.ApiError`; nothing is retried.
"""

from __future__ import annotations
import json
import logging
from typing import Any, Dict, Mapping, Optional, Union

import requests

from .config import ClientConfig
from .options import RequestOptions
from .request import HttpMethod
from .runtime.encoding import encode_params
from .runtime.errors import (
    ApiError, ErrorCode, NetworkError, RequestBuilderError, error_from_response
)

logger = logging.getLogger(__name__)

_BODY_METHODS = (HttpMethod.POST, HttpMethod.PUT, HttpMethod.PATCH)


class Transport:
    """
    ``requests`` based transport.

    Example:
        ```python
        transport = Transport(ClientConfig(api_key="sk_test_..."))
        payload = transport.request({"limit": 3}, "get", "customers")
        ```
    """

    def __init__(self, config: ClientConfig, session: Optional[requests.Session] = None):
        """
        Initialize the transport.

        Args:
            config: Client configuration (base URLs, key, timeout)
            session: Optional requests.Session for connection pooling
        """
        self.config = config
        self._session = session or requests.Session()
        self._owns_session = session is None

    def close(self) -> None:
        """Close the HTTP session if owned by this transport."""
        if self._owns_session:
            self._session.close()

    def request(self, params: Mapping[str, Any], method: Union[HttpMethod, str, None],
                endpoint: Optional[str], headers: Optional[Mapping[str, str]] = None,
                options: Union[RequestOptions, Mapping[str, Any], None] = None) -> Any:
        """Send a request to the main API."""
        return self._send(self.config.api_base_url, params, method, endpoint, headers, options)

    def request_file_upload(self, params: Mapping[str, Any], method: Union[HttpMethod, str, None],
                            endpoint: Optional[str], headers: Optional[Mapping[str, str]] = None,
                            options: Union[RequestOptions, Mapping[str, Any], None] = None) -> Any:
        """Send a request to the file upload API."""
        return self._send(self.config.upload_base_url, params, method, endpoint, headers, options)

    def build_headers(self, headers: Optional[Mapping[str, str]],
                      options: RequestOptions) -> Dict[str, str]:
        """Merge default, per-call option and caller supplied headers, in that order."""
        result = {
            "Accept": "application/json",
            "User-Agent": self.config.user_agent,
        }
        if self.config.api_key:
            result["Authorization"] = f"Bearer {self.config.api_key}"
        if self.config.api_version:
            result["Stripe-Version"] = self.config.api_version
        result.update(options.to_headers())
        result.update(headers or {})
        return result

    def _send(self, base_url: str, params: Mapping[str, Any], method: Union[HttpMethod, str, None],
              endpoint: Optional[str], headers: Optional[Mapping[str, str]],
              options: Union[RequestOptions, Mapping[str, Any], None]) -> Any:
        if method is None:
            raise RequestBuilderError("Request has no HTTP method")
        if not endpoint:
            raise RequestBuilderError("Request has no endpoint")

        verb = HttpMethod.parse(method)
        url = f"{base_url.rstrip('/')}/{endpoint.lstrip('/')}"
        request_headers = self.build_headers(headers, RequestOptions.coerce(options))
        encoded = encode_params(params or {})

        kwargs: Dict[str, Any] = {
            "headers": request_headers,
            "timeout": self.config.timeout,
            "verify": self.config.verify_ssl,
        }
        if verb in _BODY_METHODS:
            request_headers["Content-Type"] = "application/x-www-form-urlencoded"
            kwargs["data"] = encoded
        elif encoded:
            url = f"{url}?{encoded}"

        logger.debug("%s %s", verb.value.upper(), url)

        try:
            response = self._session.request(verb.value.upper(), url, **kwargs)
        except requests.exceptions.RequestException as e:
            raise NetworkError(f"HTTP request failed: {e}", cause=e)

        try:
            body = response.json()
        except (json.JSONDecodeError, ValueError) as e:
            if response.status_code >= 400:
                raise error_from_response(response.status_code, None, response.headers)
            raise ApiError(f"Invalid JSON response: {e}", ErrorCode.INVALID_RESPONSE,
                           cause=e, status=response.status_code,
                           request_id=response.headers.get("Request-Id"))

        if response.status_code >= 400:
            raise error_from_response(response.status_code, body, response.headers)

        return body


__all__ = ["Transport"]
