from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("jsonptr")
except PackageNotFoundError:  # pragma: no cover - local source tree without installed metadata
    __version__ = "0.1.0"

from .codec import decode_from_text, encode_to_text
from .errors import (
    DerefPrimitiveError,
    EvalError,
    IndexOutOfBoundsError,
    InvalidPointerError,
    JsonPointerError,
    NoSuchPropertyError,
    NotJSONError,
    NumParseError,
    ParseError,
)
from .evaluate import EvalOptions, NonCanonicalIndexWarning
from .pointer import Pointer, escape_token, evaluate, parse, resolve, unescape_token
from .types import ErrorKind, JsonKind, json_kind

__all__ = [
    "DerefPrimitiveError",
    "ErrorKind",
    "EvalError",
    "EvalOptions",
    "IndexOutOfBoundsError",
    "InvalidPointerError",
    "JsonKind",
    "JsonPointerError",
    "NoSuchPropertyError",
    "NonCanonicalIndexWarning",
    "NotJSONError",
    "NumParseError",
    "ParseError",
    "Pointer",
    "decode_from_text",
    "encode_to_text",
    "escape_token",
    "evaluate",
    "json_kind",
    "parse",
    "resolve",
    "unescape_token",
]
