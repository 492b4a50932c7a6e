"""
JSON value algebra.

Tagged-union representation of arbitrary JSON (string, integer, double,
boolean, null, array, object) that encodes to and decodes from plain JSON
text without any type-wrapper envelope.

Dependencies: pydantic, json (stdlib)
System role: Foundation value type for every catalogue document
"""

import json
import math
from abc import abstractmethod
from typing import Any, Union

from pydantic import BaseModel, ConfigDict

from catalogue.core.exceptions import (
    JSONValueDecodeError,
    JSONValueEncodeError,
    UnsupportedJSONTypeError,
)

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


class JSONNode(BaseModel):
    """
    Abstract base for every JSON value variant; only the concrete variants
    below are instantiated.

    Accessors never raise for a value of the wrong shape; they return None
    so callers can probe server-controlled documents safely.
    """

    model_config = ConfigDict(frozen=True, strict=True)

    def get(self, key: str) -> "JSONValue | None":
        """Return the value stored under key, or None if this is not an object."""
        return None

    def at(self, index: int) -> "JSONValue | None":
        """Return the element at index, or None if this is not an array."""
        return None

    def __getitem__(self, key: str | int) -> "JSONValue | None":
        if isinstance(key, bool):
            return None
        if isinstance(key, str):
            return self.get(key)
        if isinstance(key, int):
            return self.at(key)
        return None

    @property
    def string_value(self) -> str | None:
        return None

    @property
    def int_value(self) -> int | None:
        return None

    @property
    def double_value(self) -> float | None:
        return None

    @property
    def bool_value(self) -> bool | None:
        return None

    @property
    def array_value(self) -> "list[JSONValue] | None":
        return None

    @property
    def dictionary_value(self) -> "dict[str, JSONValue] | None":
        return None

    @property
    def is_null(self) -> bool:
        return False

    @abstractmethod
    def to_python(self) -> Any:
        """Convert to plain Python objects (dict, list, str, int, float, bool, None)."""

    def without_private_keys(self) -> "JSONValue":
        """
        Return a copy with every object key starting with "_" removed.

        Descends through nested objects and arrays. Scalars are returned unchanged.
        """
        return self  # type: ignore[return-value]

    def encode(self, pretty: bool = False) -> str:
        """Encode this value as standard JSON text."""
        return encode(self, pretty=pretty)  # type: ignore[arg-type]


class JSONString(JSONNode):
    """JSON string."""

    value: str

    @property
    def string_value(self) -> str | None:
        return self.value

    def to_python(self) -> Any:
        return self.value


class JSONInt(JSONNode):
    """JSON number without a fractional part."""

    value: int

    @property
    def int_value(self) -> int | None:
        return self.value

    @property
    def double_value(self) -> float | None:
        return float(self.value)

    def to_python(self) -> Any:
        return self.value


class JSONDouble(JSONNode):
    """JSON number with a fractional part."""

    value: float

    @property
    def double_value(self) -> float | None:
        return self.value

    def to_python(self) -> Any:
        return self.value


class JSONBool(JSONNode):
    """JSON boolean."""

    value: bool

    @property
    def bool_value(self) -> bool | None:
        return self.value

    def to_python(self) -> Any:
        return self.value


class JSONNull(JSONNode):
    """JSON null."""

    @property
    def is_null(self) -> bool:
        return True

    def to_python(self) -> Any:
        return None


class JSONArray(JSONNode):
    """Ordered list of JSON values."""

    value: tuple["JSONValue", ...] = ()

    def at(self, index: int) -> "JSONValue | None":
        if -len(self.value) <= index < len(self.value):
            return self.value[index]
        return None

    @property
    def array_value(self) -> "list[JSONValue] | None":
        return list(self.value)

    def to_python(self) -> Any:
        return [item.to_python() for item in self.value]

    def without_private_keys(self) -> "JSONValue":
        return JSONArray(value=tuple(item.without_private_keys() for item in self.value))


class JSONObject(JSONNode):
    """Mapping of string keys to JSON values. Equality ignores key order."""

    value: dict[str, "JSONValue"] = {}

    def get(self, key: str) -> "JSONValue | None":
        return self.value.get(key)

    @property
    def dictionary_value(self) -> "dict[str, JSONValue] | None":
        return dict(self.value)

    def to_python(self) -> Any:
        return {key: item.to_python() for key, item in self.value.items()}

    def without_private_keys(self) -> "JSONValue":
        return JSONObject(
            value={
                key: item.without_private_keys()
                for key, item in self.value.items()
                if not key.startswith("_")
            }
        )


JSONValue = Union[JSONString, JSONInt, JSONDouble, JSONBool, JSONNull, JSONArray, JSONObject]

JSONArray.model_rebuild()
JSONObject.model_rebuild()


def from_python(obj: Any) -> JSONValue:
    """
    Convert a plain Python object into a JSON value.

    Trial order is null, bool, int, float, str, list/tuple, dict so the most
    specific type wins. A float holding an exact integer within the signed
    64-bit range becomes JSONInt.

    Args:
        obj: Python object as produced by json.loads or built by hand

    Returns:
        JSONValue: Equivalent JSON value

    Raises:
        UnsupportedJSONTypeError: If obj (or anything nested in it) has no JSON form
    """
    if obj is None:
        return JSONNull()
    if isinstance(obj, JSONNode):
        return obj  # type: ignore[return-value]
    if isinstance(obj, bool):
        return JSONBool(value=obj)
    if isinstance(obj, int):
        return JSONInt(value=int(obj))
    if isinstance(obj, float):
        if math.isfinite(obj) and obj.is_integer() and _INT64_MIN <= obj <= _INT64_MAX:
            return JSONInt(value=int(obj))
        return JSONDouble(value=float(obj))
    if isinstance(obj, str):
        return JSONString(value=str(obj))
    if isinstance(obj, (list, tuple)):
        return JSONArray(value=tuple(from_python(item) for item in obj))
    if isinstance(obj, dict):
        items: dict[str, JSONValue] = {}
        for key, item in obj.items():
            if not isinstance(key, str):
                raise UnsupportedJSONTypeError(
                    type(key).__name__, details={"reason": "object keys must be strings"}
                )
            items[key] = from_python(item)
        return JSONObject(value=items)
    raise UnsupportedJSONTypeError(type(obj).__name__)


def _reject_constant(name: str) -> Any:
    raise JSONValueDecodeError(f"Non-standard JSON constant: {name}")


def _parse_float(text: str) -> float:
    number = float(text)
    if not math.isfinite(number):
        raise JSONValueDecodeError(f"Number out of range: {text}")
    return number


def decode(text: str | bytes) -> JSONValue:
    """
    Decode JSON text into a JSON value.

    Args:
        text: JSON document

    Returns:
        JSONValue: Decoded value

    Raises:
        JSONValueDecodeError: If text is not standard JSON
    """
    try:
        raw = json.loads(text, parse_constant=_reject_constant, parse_float=_parse_float)
    except json.JSONDecodeError as e:
        raise JSONValueDecodeError(
            "Malformed JSON document", position=e.pos, details={"reason": e.msg}
        ) from e
    except UnicodeDecodeError as e:
        raise JSONValueDecodeError(
            "JSON document is not valid UTF-8", position=e.start
        ) from e
    return from_python(raw)


def try_decode(text: str | bytes) -> JSONValue | None:
    """Decode JSON text, returning None instead of raising on malformed input."""
    try:
        return decode(text)
    except JSONValueDecodeError:
        return None


def encode(value: JSONValue, pretty: bool = False) -> str:
    """
    Encode a JSON value as standard JSON text.

    Doubles are written as JSON numbers, never wrapped in a type envelope.

    Args:
        value: Value to encode
        pretty: Indent nested structures for humans

    Returns:
        str: JSON text

    Raises:
        JSONValueEncodeError: If value holds a NaN or infinite double
    """
    try:
        return json.dumps(
            value.to_python(),
            ensure_ascii=False,
            allow_nan=False,
            indent=2 if pretty else None,
            separators=None if pretty else (",", ":"),
        )
    except ValueError as e:
        raise JSONValueEncodeError(
            "JSON value cannot be encoded", details={"reason": str(e)}
        ) from e
