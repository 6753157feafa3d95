from __future__ import annotations

from dataclasses import dataclass
import time
from typing import TYPE_CHECKING

from ..domain.exceptions import NativeParserError
from ..domain.services.record_summary import summarize_document
from .models import ParseNativeResponse

if TYPE_CHECKING:
    from pathlib import Path

    from .models import ParseNativeRequest
    from .ports.services import LoggerPort, NativeExportPort, NativeReaderPort


@dataclass(slots=True)
class ParseNativeDependencies:
    logger: LoggerPort
    reader: NativeReaderPort
    exporter: NativeExportPort


class ParseNativeUseCase:
    """Read one native export, summarize it and optionally render it.

    The reader raises the native error taxonomy; this use case turns those
    errors into a failed response so callers never see a partial document.

    Example:
        >>> use_case = ParseNativeUseCase(dependencies)
        >>> response = use_case.execute(
        ...     ParseNativeRequest(input_path=Path("export.xml"), output_format="csv")
        ... )
        >>> if response.success:
        ...     print(response.rendered)
    """

    def __init__(self, dependencies: ParseNativeDependencies) -> None:
        super().__init__()
        self.logger = dependencies.logger
        self._reader = dependencies.reader
        self._exporter = dependencies.exporter

    def execute(self, request: ParseNativeRequest) -> ParseNativeResponse:
        response = ParseNativeResponse(dialect=request.dialect)
        started = time.perf_counter()
        try:
            document = self._reader.read(request.input_path, request.dialect)
        except NativeParserError as e:
            self.logger.error(f"{request.input_path}: {e}")
            response.success = False
            response.errors.append(str(e))
            return response

        response.document = document
        response.summaries = summarize_document(document)
        for summary in response.summaries:
            if not summary.forms_match_hint:
                self.logger.debug(
                    f"{summary.label}: numberOfForms={summary.declared_forms}, "
                    f"parsed {summary.forms}"
                )

        if request.output_format is not None:
            response.rendered = self._exporter.render(document, request.output_format)
            if request.output_path is not None:
                try:
                    self._write(request.output_path, response.rendered)
                except OSError as e:
                    self.logger.error(f"Could not write {request.output_path}: {e}")
                    response.success = False
                    response.errors.append(str(e))
                    return response
                response.output_path = request.output_path
                self.logger.success(f"Wrote {request.output_path}")

        response.elapsed_ms = (time.perf_counter() - started) * 1000
        return response

    @staticmethod
    def _write(path: Path, text: str) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
