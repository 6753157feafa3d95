"""Dict and JSON adapters for native document trees.

``native_to_dict`` keeps Python field names and ``datetime`` values.
``native_to_json`` writes camelCase keys (``patientId``, ``fieldType``,
``entryId``...) and UTC timestamps ending in ``Z``. ``native_from_json`` reads
that output back through the same node builders the XML parser uses, so both
inputs follow identical coercion rules.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import asdict, replace
from datetime import UTC, datetime
import json

from ...domain.entities.native import (
    Comment,
    Entry,
    Form,
    NativeDialect,
    NativeDocument,
    NativeRecord,
    build_document,
)
from ...domain.exceptions import ParsingError, ParsingErrorKind
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

ROOT_KEYS: dict[NativeDialect, str] = {
    NativeDialect.SUBJECT: "patients",
    NativeDialect.SITE: "sites",
    NativeDialect.USER: "users",
}

_RECORD_BUILDERS: dict[NativeDialect, Callable[[Mapping[str, str]], NativeRecord]] = {
    NativeDialect.SUBJECT: build_patient,
    NativeDialect.SITE: build_site,
    NativeDialect.USER: build_user,
}


def native_to_dict(node: object) -> dict[str, object]:
    """Convert any node or document root into nested plain dicts and lists."""
    return asdict(node)  # type: ignore[call-overload]


def native_to_json(root: NativeDocument, *, indent: int | None = 2) -> str:
    return json.dumps(_to_json_value(native_to_dict(root)), indent=indent, ensure_ascii=False)


def native_from_json(text: str | bytes, dialect: NativeDialect | str) -> NativeDocument:
    """Rebuild a document tree from ``native_to_json`` output.

    Raises:
        ParsingError: The text is not JSON, or a node has the wrong shape.
    """
    dialect = NativeDialect(dialect)
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ParsingError(
            f"Malformed JSON: {e.msg}",
            kind=ParsingErrorKind.TOKENIZER,
            line=e.lineno,
            column=e.colno,
        ) from e
    document = _mapping(data, "document")
    build_record = _RECORD_BUILDERS[dialect]
    records = [
        replace(build_record(_attributes(item)), forms=_forms(item))
        for item in _children(document, ROOT_KEYS[dialect])
    ]
    return build_document(dialect, records)


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def _format_datetime(value: datetime) -> str:
    # isoformat always writes a four-digit year
    return value.astimezone(UTC).isoformat().replace("+00:00", "Z")


def _to_json_value(value: object) -> object:
    match value:
        case dict():
            return {_camel(key): _to_json_value(item) for key, item in value.items()}
        case list():
            return [_to_json_value(item) for item in value]
        case datetime():
            return _format_datetime(value)
        case _:
            return value


def _mapping(value: object, what: str) -> Mapping[str, object]:
    if not isinstance(value, Mapping):
        raise ParsingError(
            f"Expected an object for {what}, got {type(value).__name__}",
            kind=ParsingErrorKind.ATTRIBUTE,
        )
    return value


def _children(data: Mapping[str, object], key: str) -> list[Mapping[str, object]]:
    items = data.get(key)
    if items is None:
        return []
    if not isinstance(items, list):
        raise ParsingError(
            f"Expected a list for {key!r}, got {type(items).__name__}",
            kind=ParsingErrorKind.ATTRIBUTE,
        )
    return [_mapping(item, key) for item in items]


def _attributes(data: Mapping[str, object]) -> dict[str, str]:
    attributes: dict[str, str] = {}
    for key, value in data.items():
        match value:
            case bool():
                attributes[key] = "true" if value else "false"
            case int() | float() | str():
                attributes[key] = str(value)
            case _:
                # None and nested nodes carry no attribute.
                continue
    return attributes


def _content(data: Mapping[str, object]) -> str:
    value = data.get("value")
    return value if isinstance(value, str) else ""


def _forms(data: Mapping[str, object]) -> list[Form] | None:
    forms = []
    for item in _children(data, "forms"):
        states = [build_state(_attributes(state)) for state in _children(item, "states")]
        categories = [
            replace(
                build_category(_attributes(category)),
                fields=[
                    replace(
                        build_field(_attributes(field)),
                        entries=[_entry(entry) for entry in _children(field, "entries")] or None,
                        comments=[_comment(comment) for comment in _children(field, "comments")]
                        or None,
                    )
                    for field in _children(category, "fields")
                ],
            )
            for category in _children(item, "categories")
        ]
        forms.append(
            replace(
                build_form(_attributes(item)),
                states=states or None,
                categories=categories or None,
            )
        )
    return forms or None


def _entry(data: Mapping[str, object]) -> Entry:
    entry = build_entry(_attributes(data))
    value = data.get("value")
    reason = data.get("reason")
    return replace(
        entry,
        value=None if value is None else _text_node(build_value, value, "value"),
        reason=None if reason is None else _text_node(build_reason, reason, "reason"),
    )


def _comment(data: Mapping[str, object]) -> Comment:
    comment = build_comment(_attributes(data))
    value = data.get("value")
    return replace(
        comment,
        value=None if value is None else _text_node(build_value, value, "value"),
    )


def _text_node[T](
    builder: Callable[[Mapping[str, str], str], T], data: object, what: str
) -> T:
    node = _mapping(data, what)
    return builder(_attributes(node), _content(node))
