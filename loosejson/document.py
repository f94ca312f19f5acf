"""A loosely typed JSON document with chainable lookups and lenient accessors."""

from __future__ import annotations

import base64
import json
import math
import re
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Iterable

_VERSION = "0.5.1"

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1
_UINT64_MAX = 2**64 - 1
_UINT64_MOD = 2**64

_SIGNED_RE = re.compile(r"[+-]?[0-9]+")
_UNSIGNED_RE = re.compile(r"[0-9]+")
_INFINITY_RE = re.compile(r"[+-]?(?:inf|infinity)", re.IGNORECASE)
_NUMBER_LITERAL_RE = re.compile(r"-?(?:0|[1-9][0-9]*)(?:\.[0-9]+)?(?:[eE][+-]?[0-9]+)?")
_SHORT_NEGATIVE_EXPONENT_RE = re.compile(r"e-0([0-9])$")

_JSON_WHITESPACE = " \t\n\r"
_HTML_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


def version() -> str:
    """Return the implementation version."""
    return _VERSION


class JsonTypeError(TypeError):
    """Raised when a value does not have the type an accessor asks for."""


@dataclass(frozen=True)
class JsonNumber:
    """A JSON number kept as the literal text it was decoded from."""

    text: str

    def __str__(self) -> str:
        return self.text

    def __int__(self) -> int:
        """Parse the literal as a signed 64-bit integer."""
        if not _SIGNED_RE.fullmatch(self.text):
            raise ValueError(f"invalid integer syntax: {self.text!r}")
        value = int(self.text)
        if not _INT64_MIN <= value <= _INT64_MAX:
            raise ValueError(f"integer out of range: {self.text!r}")
        return value

    def __float__(self) -> float:
        text = self.text
        if not text or "_" in text or text != text.strip():
            raise ValueError(f"invalid float syntax: {text!r}")
        try:
            value = float(text)
        except ValueError:
            raise ValueError(f"invalid float syntax: {text!r}") from None
        if math.isinf(value) and not _INFINITY_RE.fullmatch(text):
            raise ValueError(f"float out of range: {text!r}")
        return value


def _parse_uint64(text: str) -> int:
    if not _UNSIGNED_RE.fullmatch(text):
        raise ValueError(f"invalid unsigned integer syntax: {text!r}")
    value = int(text)
    if value > _UINT64_MAX:
        raise ValueError(f"unsigned integer out of range: {text!r}")
    return value


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid JSON literal {name!r}")


_DECODER = json.JSONDecoder(
    parse_float=JsonNumber,
    parse_int=JsonNumber,
    parse_constant=_reject_constant,
)


def _decode(body: str | bytes | bytearray) -> Any:
    """Decode the first JSON value in ``body``; anything after it is ignored."""
    if isinstance(body, (bytes, bytearray)):
        text = bytes(body).decode("utf-8", "replace")
    else:
        text = body
    start = len(text) - len(text.lstrip(_JSON_WHITESPACE))
    if start == len(text):
        raise json.JSONDecodeError("Expecting value", text, start)
    value, _ = _DECODER.raw_decode(text, start)
    return value


def _format_float(value: float) -> str:
    if not math.isfinite(value):
        raise ValueError(f"unsupported float value: {value!r}")
    magnitude = abs(value)
    if magnitude == 0 or 1e-6 <= magnitude < 1e21:
        return format(Decimal(repr(value)).normalize(), "f")
    return _SHORT_NEGATIVE_EXPONENT_RE.sub(r"e-\1", repr(value))


def _quote(text: str) -> str:
    cleaned = text.encode("utf-16", "surrogatepass").decode("utf-16", "replace")
    quoted = json.dumps(cleaned, ensure_ascii=False)
    return "".join(_HTML_ESCAPES.get(char, char) for char in quoted)


def _encode_key(key: Any) -> str:
    if isinstance(key, str):
        return key
    if isinstance(key, int) and not isinstance(key, bool):
        return str(key)
    raise TypeError(f"unsupported map key type: {type(key).__name__}")


def _encode(value: Any, indent: str | None, depth: int = 0) -> str:
    if isinstance(value, Json):
        value = value.data
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, JsonNumber):
        if not value.text:
            return "0"
        if not _NUMBER_LITERAL_RE.fullmatch(value.text):
            raise ValueError(f"invalid number literal {value.text!r}")
        return value.text
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _format_float(value)
    if isinstance(value, str):
        return _quote(value)
    if isinstance(value, (bytes, bytearray)):
        return _quote(base64.b64encode(bytes(value)).decode("ascii"))
    if isinstance(value, dict):
        entries = sorted((_encode_key(key), item) for key, item in value.items())
        parts = [
            (_quote(key), _encode(item, indent, depth + 1)) for key, item in entries
        ]
        separator = ":" if indent is None else ": "
        return _wrap("{", "}", [key + separator + item for key, item in parts], indent, depth)
    if isinstance(value, (list, tuple)):
        parts = [_encode(item, indent, depth + 1) for item in value]
        return _wrap("[", "]", parts, indent, depth)
    raise TypeError(f"unsupported type: {type(value).__name__}")


def _wrap(opening: str, closing: str, parts: list[str], indent: str | None, depth: int) -> str:
    if not parts:
        return opening + closing
    if indent is None:
        return opening + ",".join(parts) + closing
    inner = "\n" + indent * (depth + 1)
    outer = "\n" + indent * depth
    return opening + ",".join(inner + part for part in parts) + outer + closing


class Json:
    """A wrapper around decoded JSON data with forgiving navigation."""

    def __init__(self, data: Any = None) -> None:
        self._data = data

    def __repr__(self) -> str:
        return f"Json({self._data!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Json):
            return NotImplemented
        return self._data == other._data

    __hash__ = None  # type: ignore[assignment]

    @property
    def data(self) -> Any:
        """The underlying data."""
        return self._data

    def encode(self) -> bytes:
        """Serialise the data compactly, with object keys sorted."""
        return _encode(self._data, None).encode("utf-8")

    def encode_pretty(self) -> bytes:
        """Serialise the data with two-space indentation."""
        return _encode(self._data, "  ").encode("utf-8")

    def unmarshal_json(self, body: str | bytes | bytearray) -> None:
        """Replace the data with the decoded contents of ``body``."""
        self._data = _decode(body)

    def set(self, key: str, value: Any) -> None:
        """Set ``key`` when the data is an object; otherwise do nothing."""
        if isinstance(self._data, dict):
            self._data[key] = value

    def set_path(self, branch: Iterable[str], value: Any) -> None:
        """Write ``value`` at ``branch``, creating or replacing objects on the way."""
        keys = list(branch)
        if not keys:
            self._data = value
            return
        if not isinstance(self._data, dict):
            self._data = {}
        current = self._data
        *parents, last = keys
        for key in parents:
            child = current.get(key)
            if not isinstance(child, dict):
                child = current[key] = {}
            current = child
        current[last] = value

    def delete(self, key: str) -> None:
        """Remove ``key`` if the data is an object holding it."""
        if isinstance(self._data, dict):
            self._data.pop(key, None)

    def get(self, key: str) -> Json:
        """Return the member ``key``, or an empty Json when there is none."""
        if isinstance(self._data, dict) and key in self._data:
            return Json(self._data[key])
        return Json(None)

    def get_path(self, *args: str) -> Json:
        """Follow a chain of object keys."""
        current = self
        for key in args:
            current = current.get(key)
        return current

    def get_index(self, index: int) -> Json:
        """Return the array element at ``index``, or an empty Json when out of range."""
        if index < 0:
            raise IndexError(f"index out of range: {index}")
        if isinstance(self._data, list) and index < len(self._data):
            return Json(self._data[index])
        return Json(None)

    def check_get(self, key: str) -> Json | None:
        """Return the member ``key``, or None when the data has no such member."""
        if isinstance(self._data, dict) and key in self._data:
            return Json(self._data[key])
        return None

    def as_map(self) -> dict:
        if isinstance(self._data, dict):
            return self._data
        raise JsonTypeError("value is not an object")

    def as_array(self) -> list:
        if isinstance(self._data, list):
            return self._data
        raise JsonTypeError("value is not an array")

    def as_bool(self) -> bool:
        if isinstance(self._data, bool):
            return self._data
        raise JsonTypeError("value is not a bool")

    def as_str(self) -> str:
        if isinstance(self._data, str):
            return self._data
        raise JsonTypeError("value is not a string")

    def as_bytes(self) -> bytes:
        if isinstance(self._data, str):
            return self._data.encode("utf-8")
        raise JsonTypeError("value is not a string")

    def as_string_list(self) -> list[str]:
        """Return the array as strings, with nulls turned into empty strings."""
        result = []
        for item in self.as_array():
            if item is None:
                result.append("")
            elif isinstance(item, str):
                result.append(item)
            else:
                raise JsonTypeError("array holds a value that is not a string")
        return result

    def _numeric(self) -> JsonNumber | int | float:
        value = self._data
        if isinstance(value, bool) or not isinstance(value, (JsonNumber, int, float)):
            raise JsonTypeError("invalid value type")
        return value

    def as_float(self) -> float:
        return float(self._numeric())

    def as_int(self) -> int:
        """Coerce to an integer; same rules as :meth:`as_int64`."""
        return self.as_int64()

    def as_int64(self) -> int:
        value = self._numeric()
        if isinstance(value, float):
            try:
                return int(value)
            except OverflowError as exc:
                raise ValueError(str(exc)) from None
        return int(value)

    def as_uint64(self) -> int:
        value = self._numeric()
        if isinstance(value, JsonNumber):
            return _parse_uint64(value.text)
        if isinstance(value, float):
            try:
                return int(value) % _UINT64_MOD
            except OverflowError as exc:
                raise ValueError(str(exc)) from None
        return value % _UINT64_MOD

    def must_array(self, default: list | None = None) -> list | None:
        try:
            return self.as_array()
        except JsonTypeError:
            return default

    def must_map(self, default: dict | None = None) -> dict | None:
        try:
            return self.as_map()
        except JsonTypeError:
            return default

    def must_str(self, default: str = "") -> str:
        try:
            return self.as_str()
        except JsonTypeError:
            return default

    def must_string_list(self, default: list[str] | None = None) -> list[str] | None:
        try:
            return self.as_string_list()
        except JsonTypeError:
            return default

    def must_int(self, default: int = 0) -> int:
        try:
            return self.as_int()
        except (JsonTypeError, ValueError):
            return default

    def must_float(self, default: float = 0.0) -> float:
        try:
            return self.as_float()
        except (JsonTypeError, ValueError):
            return default

    def must_bool(self, default: bool = False) -> bool:
        try:
            return self.as_bool()
        except JsonTypeError:
            return default

    def must_int64(self, default: int = 0) -> int:
        try:
            return self.as_int64()
        except (JsonTypeError, ValueError):
            return default

    def must_uint64(self, default: int = 0) -> int:
        try:
            return self.as_uint64()
        except (JsonTypeError, ValueError):
            return default


def loads(body: str | bytes | bytearray) -> Json:
    """Decode ``body`` into a new Json; numbers are kept as JsonNumber."""
    return Json(_decode(body))


def from_reader(reader: Any) -> Json:
    """Decode the first JSON value read from a file-like object."""
    return Json(_decode(reader.read()))


def from_object(obj: Any) -> Json:
    """Wrap an existing Python object."""
    return Json(obj)


def new() -> Json:
    """Return a Json holding an empty object."""
    return Json({})