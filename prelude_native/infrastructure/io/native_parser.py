"""Streaming parser for Prelude native exports.

The parser consumes tokenizer events in a single pass and keeps a stack of
typed frames, one per element that is open and waiting for its end tag. The
frame on top of the stack is the only context used to decide whether a start
tag is meaningful; anything else is skipped together with its subtree.

    export_from_vision_EDC
      patient | site | user
        form
          state
          category
            field
              entry
                value   (text)
                reason  (text)
              comment
                value   (text)
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, override

from ...config import ParserConfig
from ...constants import Tags
from ...domain.entities.native import (
    Category,
    Comment,
    Entry,
    Field,
    Form,
    NativeDialect,
    NativeDocument,
    NativeRecord,
    Reason,
    State,
    Value,
    build_document,
    record_label,
)
from ...domain.exceptions import ParsingError, ParsingErrorKind
from ...domain.services.coercion import extract_attributes
from ...domain.services.node_builders import (
    build_category,
    build_comment,
    build_entry,
    build_field,
    build_form,
    build_patient,
    build_reason,
    build_site,
    build_state,
    build_user,
    build_value,
)
from ..logging.null_logger import NullLogger
from .tokenizer import (
    EmptyElement,
    EndElement,
    StartElement,
    Text,
    XmlSource,
    local_name,
    tokenize,
)

if TYPE_CHECKING:
    from ...application.ports.services import LoggerPort

_RECORD_BUILDERS: dict[NativeDialect, Callable[[Mapping[str, str]], NativeRecord]] = {
    NativeDialect.SUBJECT: build_patient,
    NativeDialect.SITE: build_site,
    NativeDialect.USER: build_user,
}


class _Frame:
    tag: str = ""

    def add(self, node: object) -> None:
        raise TypeError(f"<{self.tag}> does not take {type(node).__name__} children")

    def finish(self) -> object:
        raise NotImplementedError


@dataclass(slots=True)
class DocumentFrame(_Frame):
    tag: str = Tags.DOCUMENT
    records: list[NativeRecord] = field(default_factory=list)

    @override
    def add(self, node: object) -> None:
        self.records.append(node)  # type: ignore[arg-type]

    @override
    def finish(self) -> list[NativeRecord]:
        return self.records


@dataclass(slots=True)
class RecordFrame(_Frame):
    node: NativeRecord
    tag: str = Tags.PATIENT
    forms: list[Form] = field(default_factory=list)

    @override
    def add(self, node: object) -> None:
        if isinstance(node, Form):
            self.forms.append(node)
        else:
            _Frame.add(self, node)

    @override
    def finish(self) -> NativeRecord:
        return replace(self.node, forms=self.forms or None)


@dataclass(slots=True)
class FormFrame(_Frame):
    node: Form
    tag: str = Tags.FORM
    states: list[State] = field(default_factory=list)
    categories: list[Category] = field(default_factory=list)

    @override
    def add(self, node: object) -> None:
        if isinstance(node, State):
            self.states.append(node)
        elif isinstance(node, Category):
            self.categories.append(node)
        else:
            _Frame.add(self, node)

    @override
    def finish(self) -> Form:
        return replace(
            self.node,
            states=self.states or None,
            categories=self.categories or None,
        )


@dataclass(slots=True)
class CategoryFrame(_Frame):
    node: Category
    tag: str = Tags.CATEGORY
    fields: list[Field] = field(default_factory=list)

    @override
    def add(self, node: object) -> None:
        if isinstance(node, Field):
            self.fields.append(node)
        else:
            _Frame.add(self, node)

    @override
    def finish(self) -> Category:
        return replace(self.node, fields=self.fields)


@dataclass(slots=True)
class FieldFrame(_Frame):
    node: Field
    tag: str = Tags.FIELD
    entries: list[Entry] = field(default_factory=list)
    comments: list[Comment] = field(default_factory=list)

    @override
    def add(self, node: object) -> None:
        if isinstance(node, Entry):
            self.entries.append(node)
        elif isinstance(node, Comment):
            self.comments.append(node)
        else:
            _Frame.add(self, node)

    @override
    def finish(self) -> Field:
        return replace(
            self.node,
            entries=self.entries or None,
            comments=self.comments or None,
        )


@dataclass(slots=True)
class EntryFrame(_Frame):
    node: Entry
    tag: str = Tags.ENTRY
    value: Value | None = None
    reason: Reason | None = None

    @override
    def add(self, node: object) -> None:
        if isinstance(node, Value):
            self.value = node
        elif isinstance(node, Reason):
            self.reason = node
        else:
            _Frame.add(self, node)

    @override
    def finish(self) -> Entry:
        return replace(self.node, value=self.value, reason=self.reason)


@dataclass(slots=True)
class CommentFrame(_Frame):
    node: Comment
    tag: str = Tags.COMMENT
    value: Value | None = None

    @override
    def add(self, node: object) -> None:
        if isinstance(node, Value):
            self.value = node
        else:
            _Frame.add(self, node)

    @override
    def finish(self) -> Comment:
        return replace(self.node, value=self.value)


@dataclass(slots=True)
class LeafFrame(_Frame):
    """An attribute-only node such as ``state``; children are not expected."""

    node: State
    tag: str = Tags.STATE

    @override
    def finish(self) -> State:
        return self.node


@dataclass(slots=True)
class TextFrame(_Frame):
    """``value`` or ``reason``: attributes plus free text collected until the end tag."""

    attributes: dict[str, str]
    tag: str = Tags.VALUE
    strict_optional_datetimes: bool = False
    parts: list[str] = field(default_factory=list)

    @override
    def finish(self) -> Value | Reason:
        builder = build_reason if self.tag == Tags.REASON else build_value
        return builder(
            self.attributes,
            "".join(self.parts),
            strict_optional_datetimes=self.strict_optional_datetimes,
        )


@dataclass(slots=True)
class SkipFrame(_Frame):
    """Unknown or misplaced element; swallows its whole subtree."""

    tag: str = ""
    depth: int = 1


class NativeStreamParser:
    """Builds one native document from a token stream.

    A parser instance holds the state of a single parse call and is not
    reusable; create one per document.

    Example:
        >>> parser = NativeStreamParser(NativeDialect.SUBJECT)
        >>> native = parser.parse(xml_text)
        >>> native.patients[0].patient_id
        'ABC-001'
    """

    def __init__(
        self,
        dialect: NativeDialect,
        *,
        config: ParserConfig | None = None,
        logger: LoggerPort | None = None,
    ) -> None:
        self.dialect = dialect
        self.config = config or ParserConfig()
        self.logger = logger or NullLogger()
        self._record_tag = dialect.record_tag
        self._build_record = _RECORD_BUILDERS[dialect]
        self._stack: list[_Frame] = []
        self._records: list[NativeRecord] | None = None

    def parse(self, source: XmlSource) -> NativeDocument:
        """Parse a complete document.

        Raises:
            ParsingError: malformed markup, a broken attribute list or an
                unparsable required timestamp. No partial tree is returned.
        """
        if self._records is not None or self._stack:
            raise RuntimeError("NativeStreamParser instances parse a single document")
        for event in tokenize(source, chunk_size=self.config.chunk_size):
            match event:
                case StartElement(name, attributes, line, column):
                    self._on_start(local_name(name), attributes, line, column, empty=False)
                case EmptyElement(name, attributes, line, column):
                    self._on_start(local_name(name), attributes, line, column, empty=True)
                case Text(content):
                    self._on_text(content)
                case EndElement(_, line, column):
                    self._on_end(line, column)
        if self._records is None:
            raise ParsingError(
                "Document ended before the root element was closed",
                kind=ParsingErrorKind.TOKENIZER,
            )
        return build_document(self.dialect, self._records)

    def _on_start(
        self,
        tag: str,
        raw_attributes: list[str],
        line: int,
        column: int,
        *,
        empty: bool,
    ) -> None:
        if not self._stack:
            if tag != Tags.DOCUMENT:
                self.logger.debug(f"Unexpected root element <{tag}>, reading it as the export wrapper")
            self._stack.append(DocumentFrame(tag=tag))
            if empty:
                self._on_end(line, column)
            return

        top = self._stack[-1]
        if isinstance(top, SkipFrame):
            if not empty:
                top.depth += 1
            return

        try:
            frame = self._open(top, tag, raw_attributes)
        except ParsingError as e:
            raise e.at(line, column) from e

        if frame is None:
            if self.config.report_unknown_elements:
                self.logger.log_skipped_element(tag, top.tag, line)
            if not empty:
                self._stack.append(SkipFrame(tag=tag))
            return

        if empty:
            self._complete(top, frame, line, column)
        else:
            self._stack.append(frame)

    def _open(self, top: _Frame, tag: str, raw_attributes: list[str]) -> _Frame | None:
        strict = self.config.strict_optional_datetimes
        match top, tag:
            case DocumentFrame(), _ if tag == self._record_tag:
                attributes = extract_attributes(raw_attributes)
                return RecordFrame(node=self._build_record(attributes), tag=tag)
            case RecordFrame(), Tags.FORM:
                attributes = extract_attributes(raw_attributes)
                return FormFrame(
                    node=build_form(attributes, strict_optional_datetimes=strict)
                )
            case FormFrame(), Tags.STATE:
                attributes = extract_attributes(raw_attributes)
                return LeafFrame(
                    node=build_state(attributes, strict_optional_datetimes=strict)
                )
            case FormFrame(), Tags.CATEGORY:
                return CategoryFrame(node=build_category(extract_attributes(raw_attributes)))
            case CategoryFrame(), Tags.FIELD:
                return FieldFrame(node=build_field(extract_attributes(raw_attributes)))
            case FieldFrame(), Tags.ENTRY:
                return EntryFrame(node=build_entry(extract_attributes(raw_attributes)))
            case FieldFrame(), Tags.COMMENT:
                return CommentFrame(node=build_comment(extract_attributes(raw_attributes)))
            case (EntryFrame(), Tags.VALUE | Tags.REASON) | (CommentFrame(), Tags.VALUE):
                return TextFrame(
                    attributes=extract_attributes(raw_attributes),
                    tag=tag,
                    strict_optional_datetimes=strict,
                )
            case _:
                return None

    def _on_text(self, content: str) -> None:
        if self._stack and isinstance(self._stack[-1], TextFrame):
            self._stack[-1].parts.append(content)

    def _on_end(self, line: int, column: int) -> None:
        top = self._stack[-1]
        if isinstance(top, SkipFrame):
            top.depth -= 1
            if top.depth == 0:
                self._stack.pop()
            return
        self._stack.pop()
        if isinstance(top, DocumentFrame):
            self._records = top.finish()
            return
        self._complete(self._stack[-1], top, line, column)

    def _complete(self, parent: _Frame, frame: _Frame, line: int, column: int) -> None:
        try:
            node = frame.finish()
        except ParsingError as e:
            raise e.at(line, column) from e
        parent.add(node)
        if isinstance(frame, RecordFrame):
            self.logger.debug(f"Parsed <{frame.tag}> {record_label(frame.node)}")


def parse_native_stream(
    source: XmlSource,
    dialect: NativeDialect,
    *,
    config: ParserConfig | None = None,
    logger: LoggerPort | None = None,
) -> NativeDocument:
    """Parse one native export of the given dialect from a stream or buffer."""
    return NativeStreamParser(dialect, config=config, logger=logger).parse(source)
