from typing import override

from ...application.ports.services import LoggerPort


class NullLogger(LoggerPort):
    pass

    @override
    def info(self, message: str) -> None:
        return

    @override
    def success(self, message: str) -> None:
        return

    @override
    def warning(self, message: str) -> None:
        return

    @override
    def error(self, message: str) -> None:
        return

    @override
    def debug(self, message: str) -> None:
        return

    @override
    def verbose(self, message: str) -> None:
        return

    @override
    def log_parse_start(self, source_name: str, dialect: str) -> None:
        return None

    @override
    def log_parse_complete(
        self, dialect: str, record_count: int, elapsed_ms: float
    ) -> None:
        return None

    @override
    def log_skipped_element(
        self, tag: str, parent_tag: str, line: int | None = None
    ) -> None:
        return None
