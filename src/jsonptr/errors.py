"""Error model for JSON Pointer parsing and evaluation.

Every failure is one of six kinds (see :class:`~jsonptr.types.ErrorKind`),
each with its own exception class carrying the offending token, index, or
value.  The classes are grouped under two categories:

* :class:`InvalidPointerError` -- the pointer text itself is malformed.
* :class:`EvalError` -- the pointer is well-formed but cannot be evaluated
  against a particular document.

Callers that need to branch should use ``isinstance`` checks, ``kind``, or
the ``is_*`` predicates rather than matching on the message text.
"""

from __future__ import annotations

from typing import Any, ClassVar

from .types import ErrorKind


class JsonPointerError(Exception):
    """Base exception for all JSON Pointer errors."""

    kind: ClassVar[ErrorKind]

    def __new__(cls, *args: Any, **kwargs: Any) -> JsonPointerError:
        if not hasattr(cls, "kind"):
            raise TypeError(f"{cls.__name__} is an error category and cannot be instantiated")
        return super().__new__(cls, *args, **kwargs)

    @property
    def message(self) -> str:
        raise NotImplementedError

    def _payload(self) -> tuple[Any, ...]:
        return self.args

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(repr(a) for a in self._payload())})"

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._payload() == other._payload()  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self), self._payload()))

    @property
    def is_deref_primitive(self) -> bool:
        return self.kind is ErrorKind.DEREF_PRIMITIVE

    @property
    def is_num_parse_error(self) -> bool:
        return self.kind is ErrorKind.NUM_PARSE

    @property
    def is_index_out_of_bounds(self) -> bool:
        return self.kind is ErrorKind.INDEX_OUT_OF_BOUNDS

    @property
    def is_no_such_property(self) -> bool:
        return self.kind is ErrorKind.NO_SUCH_PROPERTY

    @property
    def is_parse_error(self) -> bool:
        return self.kind is ErrorKind.PARSE

    @property
    def is_not_json(self) -> bool:
        return self.kind is ErrorKind.NOT_JSON


# ---------------------------------------------------------------------------
# Syntax errors
# ---------------------------------------------------------------------------


class InvalidPointerError(JsonPointerError, ValueError):
    """The input string does not represent any JSON Pointer."""


class ParseError(InvalidPointerError):
    """A non-empty pointer string that does not start with ``/``."""

    kind = ErrorKind.PARSE

    def __init__(self, text: str) -> None:
        super().__init__(text)
        self.text = text

    @property
    def message(self) -> str:
        return f"invalid JSON Pointer: {self.text!r}"


# ---------------------------------------------------------------------------
# Evaluation errors
# ---------------------------------------------------------------------------


class EvalError(JsonPointerError):
    """The pointer refers to a nonexistent value, or the data is not JSON."""


class DerefPrimitiveError(EvalError):
    kind = ErrorKind.DEREF_PRIMITIVE

    def __init__(self, token: str) -> None:
        super().__init__(token)
        self.token = token

    @property
    def message(self) -> str:
        return f"cannot dereference primitive value with token {self.token!r}"


class NumParseError(EvalError):
    kind = ErrorKind.NUM_PARSE

    def __init__(self, token: str) -> None:
        super().__init__(token)
        self.token = token

    @property
    def message(self) -> str:
        return f"cannot parse array index from token {self.token!r}"


class IndexOutOfBoundsError(EvalError):
    kind = ErrorKind.INDEX_OUT_OF_BOUNDS

    def __init__(self, index: int) -> None:
        super().__init__(index)
        self.index = index

    @property
    def message(self) -> str:
        return f"array index out of bounds: {self.index}"


class NoSuchPropertyError(EvalError):
    kind = ErrorKind.NO_SUCH_PROPERTY

    def __init__(self, token: str) -> None:
        super().__init__(token)
        self.token = token

    @property
    def message(self) -> str:
        return f"no such property: {self.token!r}"


class NotJSONError(EvalError):
    """Raised with the offending value itself, which may be unhashable."""

    kind = ErrorKind.NOT_JSON

    def __init__(self, value: Any) -> None:
        super().__init__(value)
        self.value = value

    @property
    def message(self) -> str:
        return f"value is not JSON: {type(self.value).__name__}"

    def __hash__(self) -> int:
        return hash(type(self))


__all__ = [
    "DerefPrimitiveError",
    "EvalError",
    "IndexOutOfBoundsError",
    "InvalidPointerError",
    "JsonPointerError",
    "NoSuchPropertyError",
    "NotJSONError",
    "NumParseError",
    "ParseError",
]
