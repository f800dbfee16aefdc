"""JSON text encoding of pointers (RFC 6901 section 5).

A pointer is carried in JSON as an ordinary string literal.  Decoding the
literal is delegated to pydantic; its ``ValidationError`` is propagated as-is
when the input is not valid JSON or not a JSON string.
"""

from __future__ import annotations

from pydantic import TypeAdapter

from .pointer import Pointer

_STR_ADAPTER: TypeAdapter[str] = TypeAdapter(str)


def decode_from_text(data: str | bytes) -> Pointer:
    """Decode a JSON string literal holding a pointer.

    Raises
    ------
    pydantic.ValidationError
        If *data* is not a JSON string literal.
    ParseError
        If the decoded string is not a valid JSON Pointer.
    """
    text = _STR_ADAPTER.validate_json(data, strict=True)
    return Pointer.parse(text)


def encode_to_text(pointer: Pointer) -> bytes:
    """Encode *pointer* as a JSON string literal."""
    return _STR_ADAPTER.dump_json(pointer.serialize())


__all__ = ["decode_from_text", "encode_to_text"]
