"""Tests for the JSON adapter."""

from __future__ import annotations

import json

import pytest

from encoded_bytes import (
    DecodingConfig,
    DecodingError,
    EncodedBytesJSONEncoder,
    JsonCodec,
    dumps,
    wrap,
)


def test_value_encodes_as_json_string() -> None:
    """A value is a JSON string holding the base64url text."""
    codec = JsonCodec()
    assert codec.encode(wrap(b"foobar")) == '"Zm9vYmFy"'
    assert codec.encode(wrap(b"aa\xbf")) == '"YWG_"'
    assert codec.to_json(wrap(b"foobar")) == "Zm9vYmFy"


def test_value_decodes_from_json_string() -> None:
    """Decoding a JSON string gives back the value."""
    codec = JsonCodec()
    assert codec.decode('"Zm9vYmFy"') == wrap(b"foobar")
    assert codec.from_json("YWG_") == wrap(b"aa\xbf")


def test_values_inside_structures() -> None:
    """Values nested in lists and objects are written as text."""
    document = dumps([wrap(b"f"), {"k": [wrap(b"fo")], "n": 1}])
    assert document == '["Zg",{"k":["Zm8"],"n":1}]'


def test_values_as_object_keys() -> None:
    """Keys use the same text form as values."""
    assert dumps({wrap(b"foobar"): wrap(b"aa\xbf")}) == '{"Zm9vYmFy":"YWG_"}'
    assert JsonCodec().to_json_key(wrap(b"foobar")) == "Zm9vYmFy"


def test_decode_keys() -> None:
    """String keys of a parsed object become values."""
    codec = JsonCodec()
    mapping = codec.decode_keys(json.loads('{"Zm9vYmFy":1,"":2}'))
    assert mapping == {wrap(b"foobar"): 1, wrap(b""): 2}


def test_bad_key_fails() -> None:
    """Keys are decoded with the same rules as values."""
    with pytest.raises(DecodingError, match="invalid character"):
        JsonCodec().from_json_key("not-valid-base64!")


def test_encoder_with_json_dumps() -> None:
    """The encoder class can be passed to json.dumps directly."""
    document = json.dumps({"a": wrap(b"f")}, cls=EncodedBytesJSONEncoder)
    assert document == '{"a": "Zg"}'


def test_unsupported_types_still_fail() -> None:
    """Objects the encoder does not know are rejected as usual."""
    with pytest.raises(TypeError):
        dumps(object())


def test_invalid_base64_is_a_parse_failure() -> None:
    """Malformed base64url raises DecodingError."""
    with pytest.raises(DecodingError, match="invalid character at offset: 16"):
        JsonCodec().decode('"not-valid-base64!"')


@pytest.mark.parametrize(
    ("obj", "kind"),
    [(3, "Number"), (1.5, "Number"), (None, "Null"), (True, "Boolean"), ([], "Array"), ({}, "Object")],
)
def test_non_string_json_fails(obj: object, kind: str) -> None:
    """Only JSON strings can hold a value."""
    with pytest.raises(DecodingError, match=f"expected String, but encountered {kind}"):
        JsonCodec().from_json(obj)


def test_malformed_json_fails() -> None:
    """A document that is not JSON is a parse failure."""
    with pytest.raises(DecodingError, match="invalid JSON") as excinfo:
        JsonCodec().decode("Zm9vYmFy")
    assert isinstance(excinfo.value.__cause__, json.JSONDecodeError)


def test_config_is_applied() -> None:
    """A strict codec rejects padded input the default codec accepts."""
    assert JsonCodec().from_json("Zg==") == wrap(b"f")
    with pytest.raises(DecodingError, match="invalid padding"):
        JsonCodec(DecodingConfig.strict()).from_json("Zg==")


def test_lone_surrogate_is_a_parse_failure() -> None:
    """JSON escapes for lone surrogates decode to text that is rejected cleanly."""
    codec = JsonCodec()
    with pytest.raises(DecodingError, match="invalid character at offset: 0"):
        codec.decode('"\\ud800"')
    with pytest.raises(DecodingError, match="invalid character"):
        codec.from_json_key("Zm9v\udcff")


def test_colliding_keys_fail() -> None:
    """A value key and a string key with the same text are not merged."""
    with pytest.raises(ValueError, match="duplicate object key"):
        dumps({wrap(b"foobar"): 1, "Zm9vYmFy": 2})


def test_circular_structure_fails() -> None:
    """Circular structures are reported as by json itself."""
    cycle: list = [wrap(b"f")]
    cycle.append(cycle)
    with pytest.raises(ValueError, match="Circular reference detected"):
        dumps(cycle)


def test_shared_substructures_are_not_circular() -> None:
    """The same list may appear twice without forming a cycle."""
    shared = [wrap(b"f")]
    assert dumps({"a": shared, "b": shared}) == '{"a":["Zg"],"b":["Zg"]}'
