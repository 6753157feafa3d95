from __future__ import annotations

from typing import override

import pytest

from prelude_native.config import ParserConfig
from prelude_native.domain.entities.native import NativeDialect, SubjectNative
from prelude_native.domain.exceptions import InvalidFileTypeError, ParsingError
from prelude_native.infrastructure.io.native_reader import NativeFileReader
from prelude_native.infrastructure.logging.null_logger import NullLogger


class CallLogger(NullLogger):
    def __init__(self) -> None:
        super().__init__()
        self.calls: list[tuple[object, ...]] = []

    @override
    def log_parse_start(self, source_name: str, dialect: str) -> None:
        self.calls.append(("start", source_name, dialect))

    @override
    def log_parse_complete(
        self, dialect: str, record_count: int, elapsed_ms: float
    ) -> None:
        self.calls.append(("complete", dialect, record_count))


def test_read_file_logs_start_and_completion(write_xml, canonical_subject_xml):
    path = write_xml(canonical_subject_xml)
    logger = CallLogger()

    native = NativeFileReader(logger=logger).read(path, NativeDialect.SUBJECT)

    assert isinstance(native, SubjectNative)
    assert len(native.patients) == 2
    assert logger.calls == [
        ("start", str(path), NativeDialect.SUBJECT),
        ("complete", NativeDialect.SUBJECT, 2),
    ]


def test_validation_runs_before_parsing(write_xml):
    logger = CallLogger()

    with pytest.raises(InvalidFileTypeError):
        NativeFileReader(logger=logger).read(write_xml("<broken", name="x.txt"), NativeDialect.SUBJECT)
    assert logger.calls == []


def test_parse_error_skips_completion_log():
    logger = CallLogger()

    with pytest.raises(ParsingError):
        NativeFileReader(logger=logger).read_source("<broken", NativeDialect.SUBJECT)
    assert logger.calls == [("start", "<string>", NativeDialect.SUBJECT)]


def test_config_is_passed_to_parser(write_xml):
    xml = (
        '<export_from_vision_EDC><patient patientId="P-1">'
        '<form name="f" lastModified="not a date"/></patient></export_from_vision_EDC>'
    )
    path = write_xml(xml)

    lenient = NativeFileReader().read(path, NativeDialect.SUBJECT)
    assert lenient.records[0].forms[0].last_modified is None  # type: ignore[index]

    with pytest.raises(ParsingError):
        NativeFileReader(config=ParserConfig(strict_optional_datetimes=True)).read(
            path, NativeDialect.SUBJECT
        )
