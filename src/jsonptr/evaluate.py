"""Evaluate JSON Pointer tokens against a decoded JSON document.

The evaluator is read-only: it returns the located object itself rather than
a copy, so a returned ``list`` or ``dict`` is the same object stored in the
document.
"""

from __future__ import annotations

import re
import warnings
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from .errors import (
    DerefPrimitiveError,
    IndexOutOfBoundsError,
    NoSuchPropertyError,
    NotJSONError,
    NumParseError,
)
from .types import JsonKind, json_kind

_LOOSE_INDEX_RE = re.compile(r"[+-]?[0-9]+")
_RFC_INDEX_RE = re.compile(r"0|[1-9][0-9]*")


class NonCanonicalIndexWarning(UserWarning):
    """An array index token was accepted that RFC 6901 does not allow."""


@dataclass(frozen=True, slots=True)
class EvalOptions:
    """Evaluation settings.

    Attributes
    ----------
    strict_indices : bool
        When ``True``, array index tokens must follow the RFC 6901 grammar
        (``0`` or a digit sequence without leading zeros).  When ``False``
        (the default) an optional sign and leading zeros are accepted, and
        negative values fail as out of bounds rather than as parse errors.
    """

    strict_indices: bool = False


def _array_index(token: str, array: list[Any], *, strict: bool) -> int:
    pattern = _RFC_INDEX_RE if strict else _LOOSE_INDEX_RE
    if pattern.fullmatch(token) is None:
        raise NumParseError(token)
    try:
        idx = int(token)
    except ValueError:
        raise NumParseError(token) from None
    if idx < 0 or idx >= len(array):
        raise IndexOutOfBoundsError(idx)
    if not strict and _RFC_INDEX_RE.fullmatch(token) is None:
        warnings.warn(
            f"Array index token {token!r} is not in canonical RFC 6901 form",
            NonCanonicalIndexWarning,
            stacklevel=4,
        )
    return idx


def evaluate_tokens(
    tokens: Sequence[str], document: Any, *, options: EvalOptions | None = None
) -> Any:
    """Walk *document* following *tokens* and return the referenced value.

    Raises
    ------
    DerefPrimitiveError
        A token was applied to null, a boolean, a number, or a string.
    NumParseError
        A token applied to an array is not an integer.
    IndexOutOfBoundsError
        An array index is negative or past the end of the array.
    NoSuchPropertyError
        A token applied to an object is not one of its keys.
    NotJSONError
        A token was applied to a value outside the JSON data model.
    """
    opts = options or EvalOptions()
    current = document
    for token in tokens:
        match json_kind(current):
            case JsonKind.NULL | JsonKind.BOOLEAN | JsonKind.NUMBER | JsonKind.STRING:
                raise DerefPrimitiveError(token)
            case JsonKind.ARRAY:
                current = current[_array_index(token, current, strict=opts.strict_indices)]
            case JsonKind.OBJECT:
                if token not in current:
                    raise NoSuchPropertyError(token)
                current = current[token]
            case None:
                raise NotJSONError(current)
    return current


__all__ = ["EvalOptions", "NonCanonicalIndexWarning", "evaluate_tokens"]
