"""Attribute extraction and value coercion for native export tags.

The export is lenient about values: a missing or malformed attribute usually
degrades to a typed absence (``None``, ``""``, ``0``, ``False``). The only
fatal cases are a structurally broken attribute list and an unparsable
timestamp in an attribute the record cannot do without.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from datetime import UTC, datetime

from ...constants import DateFormats
from ..exceptions import ParsingError, ParsingErrorKind

type RawText = str | bytes
type RawAttributes = Sequence[RawText] | Sequence[tuple[RawText, RawText]]


def _decode(raw: object) -> str:
    if isinstance(raw, str):
        return raw
    if isinstance(raw, (bytes, bytearray, memoryview)):
        return bytes(raw).decode("utf-8", errors="replace")
    raise ParsingError(
        f"Attribute token has unexpected type {type(raw).__name__}",
        kind=ParsingErrorKind.ATTRIBUTE,
    )


def extract_attributes(raw: RawAttributes | None) -> dict[str, str]:
    """Turn one tag's raw attribute list into a name -> value mapping.

    Accepts the flat ``[name, value, name, value, ...]`` layout produced by
    expat's ``ordered_attributes`` mode as well as a sequence of pairs. Bytes
    are decoded as UTF-8 with replacement characters. A later duplicate name
    overrides an earlier one.

    Raises:
        ParsingError: the list cannot be read as name/value pairs.
    """
    if not raw:
        return {}
    if isinstance(raw, (str, bytes, bytearray)):
        raise ParsingError(
            "Attribute list must be a sequence, not a scalar",
            kind=ParsingErrorKind.ATTRIBUTE,
        )
    items = list(raw)
    attributes: dict[str, str] = {}
    if all(isinstance(item, tuple) for item in items):
        for pair in items:
            if len(pair) != 2:
                raise ParsingError(
                    f"Malformed attribute pair of length {len(pair)}",
                    kind=ParsingErrorKind.ATTRIBUTE,
                )
            name, value = pair
            attributes[_decode(name)] = _decode(value)
        return attributes
    if len(items) % 2:
        raise ParsingError(
            f"Attribute list has an odd number of tokens ({len(items)})",
            kind=ParsingErrorKind.ATTRIBUTE,
        )
    for index in range(0, len(items), 2):
        attributes[_decode(items[index])] = _decode(items[index + 1])
    return attributes


def first_present(attributes: Mapping[str, str], *names: str) -> str | None:
    for name in names:
        if name in attributes:
            return attributes[name]
    return None


def text(attributes: Mapping[str, str], *names: str) -> str:
    value = first_present(attributes, *names)
    return "" if value is None else value


def optional_text(attributes: Mapping[str, str], *names: str) -> str | None:
    value = first_present(attributes, *names)
    return value or None


def integer(attributes: Mapping[str, str], *names: str) -> int:
    value = first_present(attributes, *names)
    if value is None:
        return 0
    digits = value.strip()
    if not (digits.isascii() and digits.isdigit()):
        return 0
    return int(digits)


def flag(attributes: Mapping[str, str], *names: str) -> bool:
    return first_present(attributes, *names) == "true"


def parse_datetime(value: str) -> datetime | None:
    """Parse a native timestamp and normalize it to UTC.

    Tries ``YYYY-MM-DD HH:MM:SS +HHMM``, ``YYYY-MM-DDTHH:MM:SS+HHMM`` and
    RFC 3339 in that order. Returns ``None`` when no form matches or the
    value carries no UTC offset.
    """
    for fmt in DateFormats.NATIVE:
        try:
            return datetime.strptime(value, fmt).astimezone(UTC)
        except ValueError:
            continue
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        return None
    return parsed.astimezone(UTC)


def optional_datetime(
    attributes: Mapping[str, str], name: str, *, strict: bool = False
) -> datetime | None:
    raw = attributes.get(name)
    if not raw:
        return None
    parsed = parse_datetime(raw)
    if parsed is None and strict:
        raise ParsingError(
            f"Invalid datetime in attribute {name!r}: {raw!r}",
            kind=ParsingErrorKind.REQUIRED_DATETIME,
        )
    return parsed


def required_datetime(attributes: Mapping[str, str], name: str) -> datetime | None:
    """Like :func:`optional_datetime`, but a non-empty unparsable value is fatal."""
    return optional_datetime(attributes, name, strict=True)
