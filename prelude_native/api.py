"""Library entry points.

Every function parses one complete document and returns its root, or raises
one of the errors in :mod:`prelude_native.domain.exceptions`. ``config`` and
``logger`` default to :class:`ParserConfig` defaults and a silent logger.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, cast

from .domain.entities.native import NativeDialect, SiteNative, SubjectNative, UserNative
from .infrastructure.io.native_reader import NativeFileReader

if TYPE_CHECKING:
    from pathlib import Path

    from .application.ports.services import LoggerPort
    from .config import ParserConfig


def _reader(config: ParserConfig | None, logger: LoggerPort | None) -> NativeFileReader:
    return NativeFileReader(config=config, logger=logger)


def parse_subject_native_file(
    path: str | Path,
    *,
    config: ParserConfig | None = None,
    logger: LoggerPort | None = None,
) -> SubjectNative:
    """Parse a subject (patient) native export file.

    Raises:
        NativeFileNotFoundError: ``path`` does not exist.
        InvalidFileTypeError: ``path`` does not end in ``.xml``.
        UnknownError: ``path`` has no extension or is not a regular file.
        ParsingError: The document is malformed.
    """
    document = _reader(config, logger).read(path, NativeDialect.SUBJECT)
    return cast("SubjectNative", document)


def parse_subject_native_string(
    xml: str | bytes,
    *,
    config: ParserConfig | None = None,
    logger: LoggerPort | None = None,
) -> SubjectNative:
    document = _reader(config, logger).read_source(xml, NativeDialect.SUBJECT)
    return cast("SubjectNative", document)


def parse_site_native_file(
    path: str | Path,
    *,
    config: ParserConfig | None = None,
    logger: LoggerPort | None = None,
) -> SiteNative:
    document = _reader(config, logger).read(path, NativeDialect.SITE)
    return cast("SiteNative", document)


def parse_site_native_string(
    xml: str | bytes,
    *,
    config: ParserConfig | None = None,
    logger: LoggerPort | None = None,
) -> SiteNative:
    document = _reader(config, logger).read_source(xml, NativeDialect.SITE)
    return cast("SiteNative", document)


def parse_user_native_file(
    path: str | Path,
    *,
    config: ParserConfig | None = None,
    logger: LoggerPort | None = None,
) -> UserNative:
    document = _reader(config, logger).read(path, NativeDialect.USER)
    return cast("UserNative", document)


def parse_user_native_string(
    xml: str | bytes,
    *,
    config: ParserConfig | None = None,
    logger: LoggerPort | None = None,
) -> UserNative:
    document = _reader(config, logger).read_source(xml, NativeDialect.USER)
    return cast("UserNative", document)
