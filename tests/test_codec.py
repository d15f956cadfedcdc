from __future__ import annotations

from typing import Optional

import pytest
from pydantic import BaseModel

from kvstore import CodecError, JsonMappingCodec


class Point(BaseModel):
    x: int
    y: int


def test_encode_is_one_sorted_json_object():
    codec = JsonMappingCodec(str)

    assert codec.encode({"US": "United States", "CA": "Canada"}) == (
        '{\n  "CA": "Canada",\n  "US": "United States"\n}\n'
    )


def test_encode_empty_mapping():
    assert JsonMappingCodec(int).encode({}) == "{}\n"


def test_decode_accepts_bytes_and_str():
    codec = JsonMappingCodec(int)

    assert codec.decode(b'{"answer": 42}') == {"answer": 42}
    assert codec.decode('{"answer": 42}') == {"answer": 42}


def test_decode_models():
    codec = JsonMappingCodec(Point)
    raw = codec.encode({"origin": Point(x=0, y=0)})

    assert codec.decode(raw) == {"origin": Point(x=0, y=0)}


@pytest.mark.parametrize(
    "raw",
    [
        "",
        "   ",
        "{",
        "null",
        '"just a string"',
        '{"answer": "42"}',
        '{"answer": 4.2}',
    ],
)
def test_decode_rejects_bad_documents_for_int(raw: str):
    with pytest.raises(CodecError):
        JsonMappingCodec(int).decode(raw)


def test_encode_unserializable_value_fails():
    with pytest.raises(CodecError):
        JsonMappingCodec(str).encode({"bad": object()})


@pytest.mark.parametrize(
    "value_type, expected",
    [
        (str, ""),
        (int, 0),
        (float, 0.0),
        (bool, False),
        (list[str], []),
        (Point, None),
        (Optional[int], None),
    ],
)
def test_zero_value(value_type, expected):
    assert JsonMappingCodec(value_type).zero_value() == expected
