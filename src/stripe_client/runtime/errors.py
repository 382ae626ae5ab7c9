"""
Stripe Client Error Model

This module provides the error handling framework for the Stripe request
client: local builder and pagination errors, and the API errors produced by
the transport when Stripe (or the network) rejects a call.
"""

from __future__ import annotations
from typing import Optional, Dict, Any, Mapping
from enum import IntEnum


class ErrorCode(IntEnum):
    """Error categories used across the client."""

    # General errors (1-99)
    UNKNOWN = 1
    INVALID_METHOD = 2
    INCOMPLETE_REQUEST = 3
    EMPTY_PAGE = 4
    MISSING_CURSOR = 5
    INVALID_RESPONSE = 6

    # Network errors (200-299)
    NETWORK_ERROR = 200

    # HTTP status derived errors
    BAD_REQUEST = 400
    UNAUTHORIZED = 401
    REQUEST_FAILED = 402
    FORBIDDEN = 403
    NOT_FOUND = 404
    CONFLICT = 409
    TOO_MANY_REQUESTS = 429
    SERVER_ERROR = 500


class StripeError(Exception):
    """
    Base class for all errors raised by the client.

    Provides structured error information alongside the message.
    """

    def __init__(self, message: str, code: ErrorCode = ErrorCode.UNKNOWN,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        """
        Initialize a client error.

        Args:
            message: Error message
            code: Error code
            details: Additional error details
            cause: Underlying exception that caused this error
        """
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}
        self.cause = cause

    def __str__(self) -> str:
        parts = [f"[{self.code.name}] {self.message}"]
        if self.details:
            parts.append(f"Details: {self.details}")
        if self.cause:
            parts.append(f"Caused by: {self.cause}")
        return " | ".join(parts)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary representation."""
        result = {
            "code": self.code.value,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        if self.cause:
            result["cause"] = str(self.cause)
        return result


# =============================================================================
# Local errors
# =============================================================================

class RequestBuilderError(StripeError, ValueError):
    """Request descriptor specific errors."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.INCOMPLETE_REQUEST,
                 details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code, details)


class InvalidMethodError(RequestBuilderError):
    """An HTTP verb outside GET, POST, PUT, PATCH and DELETE was supplied."""

    def __init__(self, method: Any):
        super().__init__(f"Invalid HTTP method: {method!r}", ErrorCode.INVALID_METHOD,
                         {"method": repr(method)})
        self.method = method


class PaginationError(StripeError):
    """A next-page cursor could not be derived."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.MISSING_CURSOR,
                 details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code, details)


class EmptyPageError(PaginationError):
    """The previous page holds no items, so there is no cursor to continue from."""

    def __init__(self, message: str = "Cannot derive a cursor from an empty page",
                 details: Optional[Dict[str, Any]] = None):
        super().__init__(message, ErrorCode.EMPTY_PAGE, details)


# =============================================================================
# API errors
# =============================================================================

class ApiError(StripeError):
    """
    Failure reported by the transport.

    The client core never inspects or rewrites these; they reach the caller
    exactly as the transport raised them.
    """

    def __init__(self, message: str, code: ErrorCode = ErrorCode.UNKNOWN,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None,
                 status: Optional[int] = None, error_type: Optional[str] = None,
                 stripe_code: Optional[str] = None, param: Optional[str] = None,
                 request_id: Optional[str] = None, source: str = "stripe"):
        super().__init__(message, code, details, cause)
        self.status = status
        self.error_type = error_type
        self.stripe_code = stripe_code
        self.param = param
        self.request_id = request_id
        self.source = source

    def __str__(self) -> str:
        text = super().__str__()
        if self.status is not None:
            text = f"{text} | HTTP {self.status}"
        if self.request_id:
            text = f"{text} | Request-Id: {self.request_id}"
        return text

    def to_dict(self) -> Dict[str, Any]:
        result = super().to_dict()
        result["source"] = self.source
        for key in ("status", "error_type", "stripe_code", "param", "request_id"):
            value = getattr(self, key)
            if value is not None:
                result[key] = value
        return result


class NetworkError(ApiError):
    """The request never produced an HTTP response."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None,
                 cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.NETWORK_ERROR, details, cause, source="network")


class AuthenticationError(ApiError):
    """Missing or invalid API key."""


class CardError(ApiError):
    """The card could not be charged."""


class InvalidRequestError(ApiError):
    """Stripe rejected the parameters of the request."""


class RateLimitError(ApiError):
    """Too many requests hit the API too quickly."""


class IdempotencyError(ApiError):
    """An idempotency key was reused with different parameters."""


_STATUS_CODES = {
    400: ErrorCode.BAD_REQUEST,
    401: ErrorCode.UNAUTHORIZED,
    402: ErrorCode.REQUEST_FAILED,
    403: ErrorCode.FORBIDDEN,
    404: ErrorCode.NOT_FOUND,
    409: ErrorCode.CONFLICT,
    429: ErrorCode.TOO_MANY_REQUESTS,
}

_TYPE_CLASSES = {
    "card_error": CardError,
    "invalid_request_error": InvalidRequestError,
    "authentication_error": AuthenticationError,
    "rate_limit_error": RateLimitError,
    "idempotency_error": IdempotencyError,
}

_STATUS_CLASSES = {
    401: AuthenticationError,
    402: CardError,
    429: RateLimitError,
}


def code_for_status(status: int) -> ErrorCode:
    """Map an HTTP status to an error code."""
    if status in _STATUS_CODES:
        return _STATUS_CODES[status]
    if status >= 500:
        return ErrorCode.SERVER_ERROR
    return ErrorCode.UNKNOWN


def error_from_response(status: int, body: Any,
                        headers: Optional[Mapping[str, str]] = None) -> ApiError:
    """
    Create an appropriate error from a failed API response.

    Args:
        status: HTTP status code
        body: Decoded response body (the Stripe error envelope when present)
        headers: Response headers

    Returns:
        ApiError subclass matching the error type, or the status when the type is unknown
    """
    request_id = (headers or {}).get("Request-Id")

    error_data: Dict[str, Any] = {}
    if isinstance(body, Mapping) and isinstance(body.get("error"), Mapping):
        error_data = dict(body["error"])

    error_type = error_data.get("type")
    message = error_data.get("message") or f"HTTP {status} error from Stripe"
    error_cls = _TYPE_CLASSES.get(error_type) or _STATUS_CLASSES.get(status, ApiError)

    details = {key: value for key, value in error_data.items()
               if key not in ("type", "code", "message", "param")}

    return error_cls(
        message,
        code_for_status(status),
        details,
        status=status,
        error_type=error_type,
        stripe_code=error_data.get("code"),
        param=error_data.get("param"),
        request_id=request_id,
    )


__all__ = [
    "ErrorCode",
    "StripeError",
    "RequestBuilderError",
    "InvalidMethodError",
    "PaginationError",
    "EmptyPageError",
    "ApiError",
    "NetworkError",
    "AuthenticationError",
    "CardError",
    "InvalidRequestError",
    "RateLimitError",
    "IdempotencyError",
    "code_for_status",
    "error_from_response",
]
