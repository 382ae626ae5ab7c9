"""Runtime helpers for the Stripe request client"""

from .errors import StripeError, ApiError, ErrorCode, error_from_response
from .encoding import encode_params, flatten_params

__all__ = [
    "StripeError",
    "ApiError",
    "ErrorCode",
    "error_from_response",
    "encode_params",
    "flatten_params",
]
