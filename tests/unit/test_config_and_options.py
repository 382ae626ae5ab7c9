"""
Tests for client configuration and per-call option models.
"""

import pytest
from pydantic import ValidationError

from stripe_client.config import DEFAULT_API_BASE_URL, ClientConfig
from stripe_client.options import MAX_PAGINATION_LIMIT, PaginationParams, RequestOptions


class TestClientConfig:
    """Tests for ClientConfig."""

    def test_defaults(self):
        """Test default values."""
        config = ClientConfig()
        assert config.api_key is None
        assert config.api_base_url == DEFAULT_API_BASE_URL
        assert config.timeout == 30.0
        assert config.debug is False

    def test_from_env(self):
        """Test values are read from STRIPE_* variables."""
        config = ClientConfig.from_env({
            "STRIPE_API_KEY": "sk_env",
            "STRIPE_API_BASE_URL": "http://localhost:12111/v1",
            "STRIPE_API_VERSION": "2024-06-20",
            "STRIPE_TIMEOUT": "7.5",
            "STRIPE_DEBUG": "true",
        })
        assert config.api_key == "sk_env"
        assert config.api_base_url == "http://localhost:12111/v1"
        assert config.api_version == "2024-06-20"
        assert config.timeout == 7.5
        assert config.debug is True

    def test_from_env_empty(self):
        """Test an empty environment leaves defaults."""
        assert ClientConfig.from_env({}) == ClientConfig()


class TestRequestOptions:
    """Tests for RequestOptions."""

    def test_to_headers(self):
        """Test options map to Stripe headers."""
        options = RequestOptions(api_key="sk", connect_account="acct_1",
                                 api_version="2024-06-20", idempotency_key="k")
        assert options.to_headers() == {
            "Authorization": "Bearer sk",
            "Stripe-Account": "acct_1",
            "Stripe-Version": "2024-06-20",
            "Idempotency-Key": "k",
        }

    def test_empty_headers(self):
        """Test unset options add no headers."""
        assert RequestOptions().to_headers() == {}

    def test_alias(self):
        """Test the stripeAccount alias is accepted."""
        assert RequestOptions.coerce({"stripeAccount": "acct_2"}).connect_account == "acct_2"

    def test_coerce(self):
        """Test coerce accepts None, instances and mappings."""
        options = RequestOptions(api_key="sk")
        assert RequestOptions.coerce(options) is options
        assert RequestOptions.coerce(None) == RequestOptions()
        assert RequestOptions.coerce({"api_key": "sk"}) == options


class TestPaginationParams:
    """Tests for PaginationParams."""

    def test_to_dict_drops_unset(self):
        """Test unset fields are not sent."""
        assert PaginationParams(limit=10).to_dict() == {"limit": 10}
        assert PaginationParams().to_dict() == {}

    def test_limit_bounds(self):
        """Test limit must be between 1 and the maximum page size."""
        PaginationParams(limit=MAX_PAGINATION_LIMIT)
        with pytest.raises(ValidationError):
            PaginationParams(limit=0)
        with pytest.raises(ValidationError):
            PaginationParams(limit=MAX_PAGINATION_LIMIT + 1)

    def test_extra_filters(self):
        """Test list filters are carried through."""
        params = PaginationParams.coerce({"limit": 3, "created": {"gte": 1}})
        assert params.to_dict() == {"limit": 3, "created": {"gte": 1}}
