from dataclasses import dataclass
from enum import IntEnum
from typing import override

from rich.console import Console
from rich.markup import escape

from ...application.ports.services import LoggerPort
from ...constants import LogLevels


class LogLevel(IntEnum):
    NORMAL = LogLevels.NORMAL
    VERBOSE = LogLevels.VERBOSE
    DEBUG = LogLevels.DEBUG


@dataclass(slots=True)
class LogContext:
    file_name: str = ""
    dialect: str = ""


def _empty_stats() -> dict[str, int]:
    return {
        "files_parsed": 0,
        "records_parsed": 0,
        "elements_skipped": 0,
        "warnings": 0,
        "errors": 0,
    }


class ConsoleLogger(LoggerPort):
    pass

    def __init__(self, console: Console | None = None, verbosity: int = 0) -> None:
        super().__init__()
        self.console = console or Console(stderr=True)
        self.verbosity = verbosity
        self._context: LogContext | None = None
        self._stats: dict[str, int] = _empty_stats()

    @override
    def info(self, message: str, *, level: int = LogLevel.NORMAL) -> None:
        if self.verbosity >= level:
            prefix = self._get_prefix()
            self.console.print(f"{prefix}{message}")

    @override
    def verbose(self, message: str) -> None:
        if self.verbosity >= LogLevel.VERBOSE:
            prefix = self._get_prefix()
            self.console.print(f"[dim]{prefix}{message}[/dim]")

    @override
    def debug(self, message: str) -> None:
        if self.verbosity >= LogLevel.DEBUG:
            prefix = self._get_prefix()
            self.console.print(f"[dim cyan]{prefix}{message}[/dim cyan]")

    @override
    def success(self, message: str) -> None:
        self.console.print(f"[green]✓[/green] {message}")

    @override
    def warning(self, message: str) -> None:
        self._stats["warnings"] += 1
        self.console.print(f"[yellow]⚠[/yellow] {message}")

    @override
    def error(self, message: str) -> None:
        self._stats["errors"] += 1
        self.console.print(f"[red]✗[/red] {message}")

    @override
    def log_parse_start(self, source_name: str, dialect: str) -> None:
        self._context = LogContext(file_name=source_name, dialect=dialect)
        self.verbose(f"Parsing {dialect} native export from {source_name}")

    @override
    def log_parse_complete(
        self, dialect: str, record_count: int, elapsed_ms: float
    ) -> None:
        self._stats["files_parsed"] += 1
        self._stats["records_parsed"] += record_count
        self.verbose(f"Parsed {record_count:,} {dialect} records in {elapsed_ms:.1f} ms")

    @override
    def log_skipped_element(
        self, tag: str, parent_tag: str, line: int | None = None
    ) -> None:
        self._stats["elements_skipped"] += 1
        where = f" at line {line}" if line is not None else ""
        self.verbose(f"Skipped unexpected <{tag}> inside <{parent_tag}>{where}")

    def log_final_stats(self) -> None:
        if self.verbosity < LogLevel.VERBOSE:
            return
        stats = self.get_stats()
        self.console.print()
        self.console.print("[dim]Parse Statistics:[/dim]")
        self.console.print(f"[dim]  Files parsed: {stats['files_parsed']}[/dim]")
        self.console.print(f"[dim]  Records parsed: {stats['records_parsed']:,}[/dim]")
        if stats["elements_skipped"] > 0:
            self.console.print(
                f"[dim]  Elements skipped: {stats['elements_skipped']}[/dim]"
            )
        if stats["warnings"] > 0:
            self.console.print(f"[dim yellow]  Warnings: {stats['warnings']}[/dim yellow]")
        if stats["errors"] > 0:
            self.console.print(f"[dim red]  Errors: {stats['errors']}[/dim red]")

    def get_stats(self) -> dict[str, int]:
        return self._stats.copy()

    def _get_prefix(self) -> str:
        if self._context is None or self.verbosity < LogLevel.DEBUG:
            return ""
        parts = [part for part in (self._context.dialect, self._context.file_name) if part]
        return escape(f"[{':'.join(parts)}] ") if parts else ""
