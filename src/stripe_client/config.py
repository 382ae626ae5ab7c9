"""
Client configuration.

Holds the settings shared by every call a client makes. Per-call overrides
live in :class:`stripe_client.options.RequestOptions`.
"""

from __future__ import annotations
import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_API_BASE_URL = "https://api.stripe.com/v1"
DEFAULT_UPLOAD_BASE_URL = "https://files.stripe.com/v1"


@dataclass
class ClientConfig:
    """Configuration for the Stripe request client."""

    api_key: Optional[str] = None
    api_base_url: str = DEFAULT_API_BASE_URL
    upload_base_url: str = DEFAULT_UPLOAD_BASE_URL
    api_version: Optional[str] = None
    timeout: float = 30.0
    verify_ssl: bool = True
    debug: bool = False
    user_agent: str = "stripe-request-client/0.4.0"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> ClientConfig:
        """
        Build a configuration from ``STRIPE_*`` environment variables.

        Args:
            environ: Mapping to read from (defaults to ``os.environ``)

        Returns:
            ClientConfig with unset variables left at their defaults
        """
        env = os.environ if environ is None else environ
        config = cls(api_key=env.get("STRIPE_API_KEY") or None)
        if env.get("STRIPE_API_BASE_URL"):
            config.api_base_url = env["STRIPE_API_BASE_URL"]
        if env.get("STRIPE_UPLOAD_BASE_URL"):
            config.upload_base_url = env["STRIPE_UPLOAD_BASE_URL"]
        if env.get("STRIPE_API_VERSION"):
            config.api_version = env["STRIPE_API_VERSION"]
        if env.get("STRIPE_TIMEOUT"):
            config.timeout = float(env["STRIPE_TIMEOUT"])
        config.debug = env.get("STRIPE_DEBUG", "").strip().lower() in ("1", "true", "yes", "on")
        return config
