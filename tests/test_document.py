import pytest

from cwget.errors import SchemaError
from cwget.parsers.document import expect, get_optional_str, get_typed, walk

DOC = {"a": {"b": [{"c": "value"}], "n": 3, "flag": True}}


def test_walk_follows_keys_and_indices():
    value, path = walk(DOC, ["a", "b", 0, "c"])

    assert value == "value"
    assert path == "$.a.b[0].c"


def test_missing_field_names_the_path():
    with pytest.raises(SchemaError) as exc_info:
        get_typed(DOC, ["a", "missing", "c"], str)

    assert exc_info.value.path == "$.a.missing"


def test_index_out_of_range():
    with pytest.raises(SchemaError) as exc_info:
        walk(DOC, ["a", "b", 3])

    assert exc_info.value.path == "$.a.b[3]"


def test_wrong_container_type():
    with pytest.raises(SchemaError, match="expected array, got object"):
        walk(DOC, ["a", 0])


def test_wrong_leaf_type():
    with pytest.raises(SchemaError, match="expected string, got integer"):
        get_typed(DOC, ["a", "n"], str)


def test_boolean_is_not_an_integer():
    with pytest.raises(SchemaError, match="got boolean"):
        expect(True, int, "$.flag")


def test_null_is_reported():
    with pytest.raises(SchemaError, match="got null"):
        expect(None, dict, "$")


def test_optional_string():
    assert get_optional_str({"h": None}, "h", "$") is None
    assert get_optional_str({}, "h", "$") is None
    assert get_optional_str({"h": "00ff"}, "h", "$") == "00ff"
    with pytest.raises(SchemaError):
        get_optional_str({"h": 12}, "h", "$")
