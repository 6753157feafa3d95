from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from pathlib import Path

    from ...domain.entities.native import NativeDialect, NativeDocument


@runtime_checkable
class LoggerPort(Protocol):
    pass

    def info(self, message: str) -> None: ...

    def success(self, message: str) -> None: ...

    def warning(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...

    def debug(self, message: str) -> None: ...

    def verbose(self, message: str) -> None: ...

    def log_parse_start(self, source_name: str, dialect: str) -> None: ...

    def log_parse_complete(
        self, dialect: str, record_count: int, elapsed_ms: float
    ) -> None: ...

    def log_skipped_element(
        self, tag: str, parent_tag: str, line: int | None = None
    ) -> None: ...


@runtime_checkable
class NativeReaderPort(Protocol):
    pass

    def read(self, path: str | Path, dialect: NativeDialect) -> NativeDocument: ...


@runtime_checkable
class NativeExportPort(Protocol):
    pass

    def render(self, document: NativeDocument, output_format: str) -> str: ...
