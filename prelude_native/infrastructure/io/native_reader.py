from __future__ import annotations

import time
from typing import TYPE_CHECKING, override

from ...application.ports.services import NativeReaderPort
from ...config import ParserConfig
from ..logging.null_logger import NullLogger
from .file_validation import validate_xml_path
from .native_parser import parse_native_stream

if TYPE_CHECKING:
    from pathlib import Path

    from ...application.ports.services import LoggerPort
    from ...domain.entities.native import NativeDialect, NativeDocument
    from .tokenizer import XmlSource


class NativeFileReader(NativeReaderPort):
    """Validates, opens and parses native export files."""

    def __init__(
        self, config: ParserConfig | None = None, logger: LoggerPort | None = None
    ) -> None:
        super().__init__()
        self.config = config or ParserConfig()
        self.logger = logger or NullLogger()

    @override
    def read(self, path: str | Path, dialect: NativeDialect) -> NativeDocument:
        path = validate_xml_path(path)
        with path.open("rb") as handle:
            return self.read_source(handle, dialect, source_name=str(path))

    def read_source(
        self, source: XmlSource, dialect: NativeDialect, *, source_name: str = "<string>"
    ) -> NativeDocument:
        self.logger.log_parse_start(source_name, dialect)
        started = time.perf_counter()
        document = parse_native_stream(
            source, dialect, config=self.config, logger=self.logger
        )
        elapsed_ms = (time.perf_counter() - started) * 1000
        self.logger.log_parse_complete(dialect, len(document.records), elapsed_ms)
        return document
