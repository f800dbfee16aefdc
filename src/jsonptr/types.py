from __future__ import annotations

from enum import Enum
from typing import Any


class JsonKind(str, Enum):
    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"


class ErrorKind(str, Enum):
    DEREF_PRIMITIVE = "deref_primitive"
    NUM_PARSE = "num_parse"
    INDEX_OUT_OF_BOUNDS = "index_out_of_bounds"
    NO_SUCH_PROPERTY = "no_such_property"
    PARSE = "parse"
    NOT_JSON = "not_json"


def json_kind(value: Any) -> JsonKind | None:
    """Classify a decoded JSON value, or return ``None`` for anything else.

    ``bool`` is checked before numbers since it subclasses ``int``.
    """
    if value is None:
        return JsonKind.NULL
    if isinstance(value, bool):
        return JsonKind.BOOLEAN
    if isinstance(value, (int, float)):
        return JsonKind.NUMBER
    if isinstance(value, str):
        return JsonKind.STRING
    if isinstance(value, list):
        return JsonKind.ARRAY
    if isinstance(value, dict):
        return JsonKind.OBJECT
    return None
