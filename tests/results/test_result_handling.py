"""
Unit tests for result normalization and materialization.
"""

from unittest.mock import Mock

import pytest

from stripe_client.converter import stripe_map_to_object
from stripe_client.models import StripeList, StripeObject
from stripe_client.options import PaginationParams
from stripe_client.results import handle_result, handle_result_list, merge_fields


class TestHandleResult:
    """Tests for handle_result."""

    def test_materializes_payload(self):
        """Test the payload goes through the materializer."""
        materialize = Mock(return_value="materialized")
        assert handle_result({"name": "x"}, materialize) == "materialized"
        materialize.assert_called_once_with({"name": "x"})

    def test_default_materializer(self):
        """Test the default materializer builds StripeObject values."""
        result = handle_result({"id": "cus_1", "object": "customer", "email": "a@b.c"})
        assert isinstance(result, StripeObject)
        assert result.id == "cus_1"
        assert result.email == "a@b.c"

    def test_default_materializer_accepts_non_string_id(self):
        """Test ids and object tags are not required to be strings."""
        result = handle_result({"object": "thing", "id": 42})
        assert isinstance(result, StripeObject)
        assert result.id == 42
        assert result.object == "thing"

    def test_idempotent_on_materialized_values(self):
        """Test an already materialized value comes back unchanged."""
        value = StripeObject(id="cus_1", object="customer")
        assert handle_result(value) is value


class TestHandleResultList:
    """Tests for handle_result_list enrichment."""

    def test_attaches_limit_and_url(self):
        """Test limit and url are merged into the page."""
        payload = {"object": "list", "data": [{"id": "a", "object": "thing"}],
                   "has_more": True, "url": "/v1/things"}
        page = handle_result_list(payload, {"limit": 10}, "things")
        assert isinstance(page, StripeList)
        assert page.limit == 10
        assert page.url == "things"
        assert page.has_more is True
        assert [item.id for item in page.data] == ["a"]

    def test_keeps_other_fields(self):
        """Test extra page fields survive the merge."""
        payload = {"object": "list", "data": [], "has_more": False, "total_count": 7}
        page = handle_result_list(payload, PaginationParams(limit=5), "things")
        assert page.total_count == 7
        assert page.object == "list"

    def test_without_limit(self):
        """Test a missing limit is attached as None."""
        page = handle_result_list({"object": "list", "data": []}, None, "things")
        assert page.limit is None

    def test_custom_materializer_returning_dict(self):
        """Test a materializer producing plain dicts is merged as a dict."""
        page = handle_result_list({"data": [], "has_more": False}, {"limit": 3}, "things",
                                  materialize=dict)
        assert page == {"data": [], "has_more": False, "limit": 3, "url": "things"}


class TestMergeFields:
    """Tests for merge_fields."""

    def test_does_not_mutate_model(self):
        """Test the original model is left as it was."""
        page = StripeList(data=[1], has_more=False)
        merged = merge_fields(page, {"url": "things"})
        assert page.url is None
        assert merged.url == "things"

    def test_does_not_mutate_mapping(self):
        """Test the original mapping is left as it was."""
        original = {"a": 1}
        assert merge_fields(original, {"b": 2}) == {"a": 1, "b": 2}
        assert original == {"a": 1}

    def test_rejects_scalars(self):
        """Test values without fields cannot be merged into."""
        with pytest.raises(TypeError):
            merge_fields("page", {"url": "x"})


class TestStripeMapToObject:
    """Tests for the default materializer."""

    def test_list_payload(self):
        """Test list payloads become StripeList with materialized items."""
        result = stripe_map_to_object({
            "object": "list",
            "has_more": False,
            "data": [{"id": "a", "object": "charge", "amount": 100}],
        })
        assert isinstance(result, StripeList)
        assert isinstance(result.data[0], StripeObject)
        assert result.data[0].amount == 100

    def test_nested_objects(self):
        """Test nested tagged objects are materialized too."""
        result = stripe_map_to_object({
            "id": "ch_1",
            "object": "charge",
            "source": {"id": "card_1", "object": "card"},
            "metadata": {"order": "6735"},
        })
        assert isinstance(result.source, StripeObject)
        assert result.source.id == "card_1"
        assert result.metadata == {"order": "6735"}

    def test_untagged_mapping_stays_dict(self):
        """Test mappings without an object tag stay dictionaries."""
        assert stripe_map_to_object({"deleted": True}) == {"deleted": True}

    def test_scalars_and_lists(self):
        """Test scalars pass through and lists convert element-wise."""
        assert stripe_map_to_object(5) == 5
        assert stripe_map_to_object([{"object": "x", "id": "1"}])[0].id == "1"

    def test_dictionary_access(self):
        """Test materialized objects support dictionary-style access."""
        result = stripe_map_to_object({"id": "cus_1", "object": "customer", "email": "e"})
        assert result["email"] == "e"
        assert result.get("phone", "none") == "none"
        with pytest.raises(KeyError):
            result["phone"]
        assert result.to_dict() == {"id": "cus_1", "object": "customer", "email": "e"}
