import json

import pytest

from gqlcore.ids import ID, Unmarshaler, parse_id


def test_parse_id_from_string():
    value = parse_id("1234")
    assert value == "1234"
    assert isinstance(value, ID)


def test_parse_id_from_int():
    assert parse_id(1234) == "1234"


@pytest.mark.parametrize("bad", [True, 1.5, None, ["1"], 2**40])
def test_parse_id_rejects_wrong_types(bad):
    with pytest.raises(TypeError, match="wrong type for ID"):
        parse_id(bad)


def test_implements_graphql_type():
    value = ID("2000")
    assert value.implements_graphql_type("ID")
    assert not value.implements_graphql_type("String")


def test_to_json_quotes_value():
    assert ID("2001").to_json() == '"2001"'


def test_to_json_round_trip_with_escapes():
    raw = 'say "hi"\\ there'
    assert json.loads(ID(raw).to_json()) == raw


def test_unmarshaler_is_abstract():
    with pytest.raises(TypeError):
        Unmarshaler()


def test_id_is_unmarshaler():
    value = parse_id("x")
    assert isinstance(value, Unmarshaler)
    assert value == "x"
    assert value.implements_graphql_type("ID")
    assert value.to_json() == '"x"'