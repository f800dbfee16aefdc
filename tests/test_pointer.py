"""Tests for jsonptr.pointer: parsing, serialization and token escaping."""

from __future__ import annotations

import pytest

from jsonptr import InvalidPointerError, ParseError, Pointer, escape_token, parse, unescape_token

# RFC 6901, section 5.
RFC_EXAMPLES: list[tuple[str, tuple[str, ...]]] = [
    ("", ()),
    ("/foo", ("foo",)),
    ("/foo/0", ("foo", "0")),
    ("/", ("",)),
    ("/a~1b", ("a/b",)),
    ("/c%d", ("c%d",)),
    ("/e^f", ("e^f",)),
    ("/g|h", ("g|h",)),
    ("/i\\j", ("i\\j",)),
    ('/k"l', ('k"l',)),
    ("/ ", (" ",)),
    ("/m~0n", ("m~n",)),
    ("/o~0~1p/q~1~0r", ("o~/p", "q/~r")),
]


# ===================================================================
# Parsing
# ===================================================================


class TestParse:
    def test_rfc_examples(self):
        for text, tokens in RFC_EXAMPLES:
            assert parse(text).tokens == tokens, text

    def test_empty_string_is_root(self):
        ptr = parse("")
        assert ptr.tokens == ()
        assert ptr == Pointer()

    def test_trailing_and_double_slashes_yield_empty_tokens(self):
        assert parse("/a/").tokens == ("a", "")
        assert parse("//").tokens == ("", "")
        assert parse("/a//b").tokens == ("a", "", "b")

    def test_escape_order(self):
        assert parse("/~01").tokens == ("~1",)
        assert parse("/~10").tokens == ("/0",)
        assert parse("/m~0n").tokens == ("m~n",)
        assert parse("/a~1b").tokens == ("a/b",)

    def test_unknown_escapes_are_kept(self):
        assert parse("/a~2b").tokens == ("a~2b",)
        assert parse("/~").tokens == ("~",)

    def test_missing_leading_slash_raises(self):
        for text in (" ", "foo", "foo/bar", "#/foo", "~1"):
            with pytest.raises(ParseError) as excinfo:
                parse(text)
            assert excinfo.value.text == text

    def test_parse_error_is_value_error(self):
        with pytest.raises(ValueError, match="invalid JSON Pointer"):
            Pointer.parse("foo")
        with pytest.raises(InvalidPointerError):
            Pointer.parse("foo")

    def test_non_string_input_raises_type_error(self):
        with pytest.raises(TypeError, match="must be a str"):
            parse(None)  # type: ignore[arg-type]
        with pytest.raises(TypeError):
            parse(b"/foo")  # type: ignore[arg-type]


# ===================================================================
# Serialization
# ===================================================================


class TestSerialize:
    def test_round_trip_rfc_examples(self):
        for text, _ in RFC_EXAMPLES:
            assert str(parse(text)) == text

    def test_round_trip_awkward_pointers(self):
        for text in ("/", "//", "/a/", "/~01", "/~0~1~1~0", "/~1/~0/", "/0/-/01"):
            assert parse(text).serialize() == text

    def test_root_serializes_to_empty_string(self):
        assert Pointer().serialize() == ""
        assert str(Pointer(())) == ""

    def test_tokens_are_escaped(self):
        assert str(Pointer(("a/b", "m~n"))) == "/a~1b/m~0n"
        assert str(Pointer(("~1",))) == "/~01"
        assert str(Pointer(("",))) == "/"

    def test_repr(self):
        assert repr(parse("/a~1b/0")) == "Pointer('/a~1b/0')"


class TestTokenEscaping:
    def test_escape(self):
        assert escape_token("a/b") == "a~1b"
        assert escape_token("m~n") == "m~0n"
        assert escape_token("~/") == "~0~1"

    def test_unescape(self):
        assert unescape_token("a~1b") == "a/b"
        assert unescape_token("m~0n") == "m~n"
        assert unescape_token("~01") == "~1"


# ===================================================================
# Value semantics
# ===================================================================


class TestPointerValue:
    def test_tokens_normalised_to_tuple(self):
        ptr = Pointer(["a", "b"])  # type: ignore[arg-type]
        assert ptr.tokens == ("a", "b")
        assert isinstance(ptr.tokens, tuple)

    def test_from_tokens(self):
        assert Pointer.from_tokens(iter(["foo", "0"])) == parse("/foo/0")

    def test_non_string_token_raises(self):
        with pytest.raises(TypeError, match="tokens must be str"):
            Pointer(("a", 0))  # type: ignore[arg-type]

    def test_bare_string_tokens_rejected(self):
        with pytest.raises(TypeError, match="not a str"):
            Pointer("/a/b")  # type: ignore[arg-type]
        with pytest.raises(TypeError, match="not a str"):
            Pointer.from_tokens("ab")

    def test_repeated_tokens_kept_in_order(self):
        assert parse("/a/b/a").tokens == ("a", "b", "a")

    def test_equality_and_hash(self):
        assert parse("/a/b") == Pointer(("a", "b"))
        assert parse("/a/b") != parse("/b/a")
        assert len({parse("/a"), Pointer(("a",)), parse("/b")}) == 2

    def test_immutable(self):
        ptr = parse("/a")
        with pytest.raises(AttributeError):
            ptr.tokens = ("b",)  # type: ignore[misc]
