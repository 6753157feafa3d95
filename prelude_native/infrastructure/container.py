from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console

from ..application.parse_use_case import ParseNativeDependencies, ParseNativeUseCase
from ..config import ParserConfig
from .io.native_export import NativeExportAdapter
from .io.native_reader import NativeFileReader
from .logging.console_logger import ConsoleLogger
from .logging.null_logger import NullLogger

if TYPE_CHECKING:
    from ..application.ports.services import LoggerPort, NativeExportPort


class DependencyContainer:
    pass

    def __init__(
        self,
        verbose: int = 0,
        console: Console | None = None,
        use_null_logger: bool = False,
        config: ParserConfig | None = None,
        logger: LoggerPort | None = None,
    ) -> None:
        super().__init__()
        self.verbose = verbose
        self.console = console or Console(stderr=True)
        self.use_null_logger = use_null_logger
        self.config = config or ParserConfig()
        self._logger_instance: LoggerPort | None = logger
        self._reader_instance: NativeFileReader | None = None
        self._exporter_instance: NativeExportPort | None = None

    def create_logger(self) -> LoggerPort:
        if self._logger_instance is None:
            if self.use_null_logger:
                self._logger_instance = NullLogger()
            else:
                self._logger_instance = ConsoleLogger(
                    console=self.console, verbosity=self.verbose
                )
        return self._logger_instance

    def create_native_reader(self) -> NativeFileReader:
        if self._reader_instance is None:
            self._reader_instance = NativeFileReader(
                config=self.config, logger=self.create_logger()
            )
        return self._reader_instance

    def create_native_exporter(self) -> NativeExportPort:
        if self._exporter_instance is None:
            self._exporter_instance = NativeExportAdapter()
        return self._exporter_instance

    def create_parse_use_case(self) -> ParseNativeUseCase:
        return ParseNativeUseCase(
            ParseNativeDependencies(
                logger=self.create_logger(),
                reader=self.create_native_reader(),
                exporter=self.create_native_exporter(),
            )
        )
