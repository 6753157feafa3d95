from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ..constants import Defaults
from ..domain.entities.native import NativeDialect

if TYPE_CHECKING:
    from pathlib import Path

    from ..domain.entities.native import NativeDocument
    from ..domain.services.record_summary import RecordSummary


def _empty_summaries() -> list[RecordSummary]:
    return []


def _empty_error_list() -> list[str]:
    return []


@dataclass(slots=True)
class ParseNativeRequest:
    input_path: Path
    dialect: NativeDialect = NativeDialect.SUBJECT
    output_format: str | None = Defaults.OUTPUT_FORMAT
    output_path: Path | None = None


@dataclass(slots=True)
class ParseNativeResponse:
    success: bool = True
    dialect: NativeDialect = NativeDialect.SUBJECT
    document: NativeDocument | None = None
    rendered: str | None = None
    output_path: Path | None = None
    summaries: list[RecordSummary] = field(default_factory=_empty_summaries)
    errors: list[str] = field(default_factory=_empty_error_list)
    elapsed_ms: float = 0.0

    @property
    def record_count(self) -> int:
        return len(self.summaries)
