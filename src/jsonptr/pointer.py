"""RFC 6901 JSON Pointer parsing, serialization and evaluation.

A :class:`Pointer` is an immutable sequence of already-unescaped reference
tokens.  The empty pointer ``""`` has no tokens and refers to the whole
document.

Escaping follows RFC 6901 section 4: ``~1`` decodes to ``/`` and ``~0`` to
``~``.  Decoding replaces ``~1`` first so that ``~01`` becomes ``~1`` and not
``/``; encoding replaces ``~`` first for the same reason.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import CoreSchema, core_schema

from .errors import ParseError
from .evaluate import EvalOptions, evaluate_tokens


def escape_token(token: str) -> str:
    """Escape a single JSON Pointer token (RFC 6901)."""
    return token.replace("~", "~0").replace("/", "~1")


def unescape_token(token: str) -> str:
    """Unescape a single JSON Pointer token (RFC 6901)."""
    return token.replace("~1", "/").replace("~0", "~")


@dataclass(frozen=True, slots=True, repr=False)
class Pointer:
    """A parsed JSON Pointer.

    Build one with :meth:`parse` from its string form, or directly from
    unescaped tokens::

        Pointer.parse("/a~1b/0").tokens  # ("a/b", "0")
        str(Pointer(("a/b", "0")))       # "/a~1b/0"

    ``Pointer`` can also be used as a pydantic field type; it validates from
    and serializes to the string form.
    """

    tokens: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if isinstance(self.tokens, str):
            raise TypeError("JSON Pointer tokens must be a sequence of str, not a str")
        tokens = tuple(self.tokens)
        for token in tokens:
            if not isinstance(token, str):
                raise TypeError(
                    f"JSON Pointer tokens must be str, got {type(token).__name__}"
                )
        object.__setattr__(self, "tokens", tokens)

    @classmethod
    def from_tokens(cls, tokens: Iterable[str]) -> Pointer:
        if isinstance(tokens, str):
            raise TypeError("JSON Pointer tokens must be an iterable of str, not a str")
        return cls(tuple(tokens))

    @classmethod
    def parse(cls, text: str) -> Pointer:
        """Parse the string form of a JSON Pointer.

        The root pointer ``""`` yields no tokens.  Any other string must start
        with ``/``; a trailing ``/`` or ``//`` yields empty-string tokens.

        Raises
        ------
        ParseError
            If *text* is non-empty and does not start with ``/``.
        """
        if not isinstance(text, str):
            raise TypeError(f"JSON Pointer must be a str, got {type(text).__name__}")
        if text == "":
            return cls()
        if not text.startswith("/"):
            raise ParseError(text)
        return cls(tuple(unescape_token(tok) for tok in text[1:].split("/")))

    def serialize(self) -> str:
        """Return the string form; the inverse of :meth:`parse`."""
        if not self.tokens:
            return ""
        return "/" + "/".join(escape_token(token) for token in self.tokens)

    def eval(self, document: Any, *, options: EvalOptions | None = None) -> Any:
        """Return the value this pointer refers to within *document*.

        The located object is returned as stored, not copied.  With no
        tokens, *document* itself is returned without inspecting its type.

        Raises
        ------
        EvalError
            One of its subclasses, classifying the first failing step.
        """
        return evaluate_tokens(self.tokens, document, options=options)

    def __str__(self) -> str:
        return self.serialize()

    def __repr__(self) -> str:
        return f"Pointer({self.serialize()!r})"

    # -- pydantic integration -------------------------------------------------

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> CoreSchema:
        from_str = core_schema.no_info_after_validator_function(cls.parse, core_schema.str_schema())
        return core_schema.json_or_python_schema(
            json_schema=from_str,
            python_schema=core_schema.union_schema([core_schema.is_instance_schema(cls), from_str]),
            serialization=core_schema.plain_serializer_function_ser_schema(
                cls.serialize,
                return_schema=core_schema.str_schema(),
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return {"type": "string", "format": "json-pointer"}


def parse(text: str) -> Pointer:
    """Parse *text* into a :class:`Pointer`.  See :meth:`Pointer.parse`."""
    return Pointer.parse(text)


def evaluate(pointer: Pointer, document: Any, *, options: EvalOptions | None = None) -> Any:
    """Evaluate *pointer* against *document*.  See :meth:`Pointer.eval`."""
    return evaluate_tokens(pointer.tokens, document, options=options)


def resolve(document: Any, text: str, *, options: EvalOptions | None = None) -> Any:
    """Parse *text* and evaluate it against *document* in one step."""
    return evaluate_tokens(Pointer.parse(text).tokens, document, options=options)


__all__ = [
    "Pointer",
    "escape_token",
    "evaluate",
    "parse",
    "resolve",
    "unescape_token",
]
