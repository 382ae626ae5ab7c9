"""
Stripe Request Client

Immutable request descriptors, result materialization and cursor
pagination for the Stripe REST API.
"""

from .config import ClientConfig
from .options import MAX_PAGINATION_LIMIT, RequestOptions, PaginationParams
from .models import StripeObject, StripeList
from .request import HttpMethod, LiteralPath, DeferredPath, RequestDescriptor
from .results import handle_result, handle_result_list
from .client import StripeClient
from .transport import Transport
from .runtime.errors import *

__version__ = "0.4.0"
__all__ = [
    # Client
    "StripeClient",
    "Transport",
    "ClientConfig",

    # Requests
    "RequestDescriptor",
    "HttpMethod",
    "LiteralPath",
    "DeferredPath",
    "RequestOptions",
    "PaginationParams",
    "MAX_PAGINATION_LIMIT",

    # Results
    "StripeObject",
    "StripeList",
    "handle_result",
    "handle_result_list",

    # Errors
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
]
