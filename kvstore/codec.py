from __future__ import annotations

import json
from typing import Any, Generic, Mapping, TypeVar

from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from .errors import CodecError

T = TypeVar("T")


class JsonMappingCodec(Generic[T]):
    """
    Converts a whole store mapping to and from a single JSON document:

      { "<key>": <value encoded as JSON>, ... }

    Values are validated against `value_type` on decode, so a store opened for
    `int` refuses a file holding strings.
    """

    def __init__(self, value_type: Any = str, *, indent: int = 2, sort_keys: bool = True):
        self._value_type = value_type
        self._adapter: TypeAdapter[dict[str, T]] = TypeAdapter(dict[str, value_type])
        self._indent = indent
        self._sort_keys = sort_keys

    @property
    def value_type(self) -> Any:
        return self._value_type

    def encode(self, mapping: Mapping[str, T]) -> str:
        try:
            doc = self._adapter.dump_python(dict(mapping), mode="json")
            return json.dumps(doc, indent=self._indent, sort_keys=self._sort_keys) + "\n"
        except (PydanticSerializationError, TypeError, ValueError) as e:
            raise CodecError(f"could not encode mapping of {self._value_type!r}: {e}") from e

    def decode(self, raw: str | bytes) -> dict[str, T]:
        try:
            return self._adapter.validate_json(raw, strict=True)
        except ValidationError as e:
            raise CodecError(f"could not decode mapping of {self._value_type!r}: {e}") from e

    def zero_value(self) -> T | None:
        """Default returned for a missing key: `value_type()` if that works, else None."""
        try:
            return self._value_type()
        except (TypeError, ValidationError):
            return None
