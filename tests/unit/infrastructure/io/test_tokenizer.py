"""Unit tests for the pull tokenizer."""

from __future__ import annotations

import io

import pytest

from prelude_native.domain.exceptions import ParsingError, ParsingErrorKind
from prelude_native.infrastructure.io.tokenizer import (
    EmptyElement,
    EndElement,
    StartElement,
    Text,
    XmlTokenizer,
    local_name,
    tokenize,
)


def _shapes(events):
    shapes = []
    for event in events:
        match event:
            case StartElement(name, attributes):
                shapes.append(("start", name, attributes))
            case EmptyElement(name, attributes):
                shapes.append(("empty", name, attributes))
            case Text(content):
                shapes.append(("text", content))
            case EndElement(name):
                shapes.append(("end", name))
    return shapes


def _merged(events):
    """Join adjacent text events, which chunk boundaries may split."""
    merged = []
    for shape in _shapes(events):
        if shape[0] == "text" and merged and merged[-1][0] == "text":
            merged[-1] = ("text", merged[-1][1] + shape[1])
        else:
            merged.append(shape)
    return merged


class TestEvents:
    def test_basic_sequence(self):
        events = list(tokenize('<a><b x="1" y="2"/>hello</a>'))

        assert _shapes(events) == [
            ("start", "a", []),
            ("empty", "b", ["x", "1", "y", "2"]),
            ("text", "hello"),
            ("end", "a"),
        ]

    def test_start_immediately_closed_is_empty(self):
        assert _shapes(tokenize("<a><b></b></a>")) == [
            ("start", "a", []),
            ("empty", "b", []),
            ("end", "a"),
        ]

    def test_whitespace_content_is_not_empty(self):
        assert _shapes(tokenize("<a><b> </b></a>")) == [
            ("start", "a", []),
            ("start", "b", []),
            ("text", " "),
            ("end", "b"),
            ("end", "a"),
        ]

    def test_positions_are_reported(self):
        events = list(tokenize("<a>\n  <b/>\n</a>"))
        empty = next(e for e in events if isinstance(e, EmptyElement))

        assert empty.line == 2
        assert empty.column == 2

    def test_namespace_prefix_is_kept_for_local_name(self):
        events = list(tokenize('<ns:a xmlns:ns="urn:x"/>'))

        assert isinstance(events[0], EmptyElement)
        assert local_name(events[0].name) == "a"


class TestInput:
    @pytest.mark.parametrize("chunk_size", [1, 3, 64 * 1024])
    def test_chunk_size_does_not_change_structure(self, chunk_size):
        xml = '<a><value by="x">Labrador retriever</value><state v="1"/></a>'

        assert _merged(tokenize(xml, chunk_size=chunk_size)) == _merged(tokenize(xml))

    def test_bytes_and_binary_stream(self):
        xml = '<a k="é">ü</a>'.encode()

        from_bytes = _merged(tokenize(xml))
        from_stream = _merged(tokenize(io.BytesIO(xml), chunk_size=1))

        assert from_bytes == from_stream == [
            ("start", "a", ["k", "é"]),
            ("text", "ü"),
            ("end", "a"),
        ]

    def test_invalid_utf8_is_replaced(self):
        assert _merged(tokenize(b"<a>caf\xe9</a>"))[1] == ("text", "caf\ufffd")

    def test_byte_order_mark_is_tolerated(self):
        assert _shapes(tokenize(b"\xef\xbb\xbf<a/>")) == [("empty", "a", [])]

    def test_text_stream(self):
        assert _shapes(tokenize(io.StringIO("<a/>"))) == [("empty", "a", [])]

    def test_rejects_non_positive_chunk_size(self):
        with pytest.raises(ValueError, match="chunk_size must be positive"):
            XmlTokenizer("<a/>", chunk_size=0)


class TestErrors:
    def test_mismatched_tag(self):
        with pytest.raises(ParsingError) as excinfo:
            list(tokenize("<a>\n<b></a>"))

        error = excinfo.value
        assert error.kind is ParsingErrorKind.TOKENIZER
        assert error.line == 2
        assert "mismatched tag" in str(error)

    def test_unclosed_document(self):
        with pytest.raises(ParsingError) as excinfo:
            list(tokenize("<a><b>"))
        assert excinfo.value.kind is ParsingErrorKind.TOKENIZER

    def test_empty_input(self):
        with pytest.raises(ParsingError):
            list(tokenize(""))

    def test_error_chains_expat(self):
        with pytest.raises(ParsingError) as excinfo:
            list(tokenize("<a x=1/>"))
        assert excinfo.value.__cause__ is not None
