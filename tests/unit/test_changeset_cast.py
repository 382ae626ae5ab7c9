"""
Tests for casting changes against a schema.
"""

from stripe_client.changeset import CREATE, UPDATE, cast

SCHEMA = {
    "email": [CREATE, UPDATE],
    "balance": [UPDATE],
    "shipping": {
        "name": [CREATE],
        "phone": [CREATE, UPDATE],
    },
}


def test_keeps_fields_allowed_for_intent():
    """Test only fields permitted for the intent survive."""
    assert cast({"email": "a@b.c", "balance": 5}, SCHEMA, CREATE) == {"email": "a@b.c"}
    assert cast({"email": "a@b.c", "balance": 5}, SCHEMA, UPDATE) == {"email": "a@b.c", "balance": 5}


def test_drops_unknown_fields():
    """Test fields missing from the schema are dropped."""
    assert cast({"unknown": 1}, SCHEMA, CREATE) == {}


def test_nested_schema():
    """Test nested mappings are cast recursively."""
    changes = {"shipping": {"name": "Jenny", "phone": "555", "extra": 1}}
    assert cast(changes, SCHEMA, CREATE) == {"shipping": {"name": "Jenny", "phone": "555"}}
    assert cast(changes, SCHEMA, UPDATE) == {"shipping": {"phone": "555"}}


def test_empty_nested_result_is_dropped():
    """Test a nested mapping with nothing left is omitted."""
    assert cast({"shipping": {"name": "Jenny"}}, SCHEMA, UPDATE) == {}


def test_does_not_mutate_changes():
    """Test the input mapping is left untouched."""
    changes = {"email": "a@b.c", "balance": 5}
    cast(changes, SCHEMA, CREATE)
    assert changes == {"email": "a@b.c", "balance": 5}
