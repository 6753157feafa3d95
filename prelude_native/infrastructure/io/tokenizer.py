"""Pull tokenizer over a buffered byte or character stream.

Wraps expat and turns its callbacks into a flat iterator of structural events:
``StartElement``, ``Text``, ``EndElement`` and ``EmptyElement`` (a start tag
immediately followed by its end tag, as produced by ``<state .../>``). Input is
read in fixed-size chunks and decoded as UTF-8 with replacement characters, so
invalid byte sequences never abort tokenization; malformed markup does.
"""

from __future__ import annotations

import codecs
from collections import deque
from dataclasses import dataclass
import io
from typing import IO, TYPE_CHECKING
from xml.parsers import expat

from ...constants import Defaults
from ...domain.exceptions import ParsingError, ParsingErrorKind

if TYPE_CHECKING:
    from collections.abc import Iterator

type XmlSource = str | bytes | IO[str] | IO[bytes]


@dataclass(frozen=True, slots=True)
class StartElement:
    name: str
    attributes: list[str]
    line: int = 0
    column: int = 0


@dataclass(frozen=True, slots=True)
class EmptyElement:
    name: str
    attributes: list[str]
    line: int = 0
    column: int = 0


@dataclass(frozen=True, slots=True)
class Text:
    content: str
    line: int = 0
    column: int = 0


@dataclass(frozen=True, slots=True)
class EndElement:
    name: str
    line: int = 0
    column: int = 0


type XmlEvent = StartElement | EmptyElement | Text | EndElement


def local_name(name: str) -> str:
    return name.rpartition(":")[2]


class XmlTokenizer:
    """Single-use iterator of ``XmlEvent`` for one document."""

    def __init__(self, source: XmlSource, *, chunk_size: int = Defaults.CHUNK_SIZE) -> None:
        if chunk_size < 1:
            raise ValueError(f"chunk_size must be positive, got {chunk_size}")
        self._stream = _as_stream(source)
        self._chunk_size = chunk_size
        self._decoder = codecs.getincrementaldecoder("utf-8-sig")(errors="replace")
        self._events: deque[XmlEvent] = deque()
        self._pending: StartElement | None = None
        self._parser = expat.ParserCreate()
        self._parser.ordered_attributes = True
        self._parser.buffer_text = True
        self._parser.StartElementHandler = self._on_start
        self._parser.EndElementHandler = self._on_end
        self._parser.CharacterDataHandler = self._on_text

    def __iter__(self) -> Iterator[XmlEvent]:
        while True:
            chunk = self._stream.read(self._chunk_size)
            if not chunk:
                break
            self._feed(self._decode(chunk), final=False)
            yield from self._drain()
        self._feed(self._decoder.decode(b"", final=True), final=True)
        yield from self._drain()

    def _decode(self, chunk: str | bytes) -> str:
        if isinstance(chunk, str):
            return chunk
        return self._decoder.decode(chunk)

    def _feed(self, data: str, *, final: bool) -> None:
        try:
            self._parser.Parse(data, final)
        except expat.ExpatError as e:
            raise ParsingError(
                f"Malformed XML: {expat.ErrorString(e.code)}",
                kind=ParsingErrorKind.TOKENIZER,
                line=e.lineno,
                column=e.offset,
            ) from e
        if final:
            self._flush_pending()

    def _drain(self) -> Iterator[XmlEvent]:
        while self._events:
            yield self._events.popleft()

    def _position(self) -> tuple[int, int]:
        return self._parser.CurrentLineNumber, self._parser.CurrentColumnNumber

    def _flush_pending(self) -> None:
        if self._pending is not None:
            self._events.append(self._pending)
            self._pending = None

    def _on_start(self, name: str, attributes: list[str]) -> None:
        self._flush_pending()
        line, column = self._position()
        self._pending = StartElement(name, attributes, line, column)

    def _on_end(self, name: str) -> None:
        pending = self._pending
        if pending is not None and pending.name == name:
            self._pending = None
            self._events.append(
                EmptyElement(pending.name, pending.attributes, pending.line, pending.column)
            )
            return
        self._flush_pending()
        line, column = self._position()
        self._events.append(EndElement(name, line, column))

    def _on_text(self, content: str) -> None:
        self._flush_pending()
        line, column = self._position()
        self._events.append(Text(content, line, column))


def _as_stream(source: XmlSource) -> IO[str] | IO[bytes]:
    if isinstance(source, str):
        return io.StringIO(source)
    if isinstance(source, (bytes, bytearray)):
        return io.BytesIO(source)
    return source


def tokenize(source: XmlSource, *, chunk_size: int = Defaults.CHUNK_SIZE) -> Iterator[XmlEvent]:
    return iter(XmlTokenizer(source, chunk_size=chunk_size))
