from __future__ import annotations

from enum import StrEnum
from pathlib import Path


class NativeParserError(Exception):
    pass


class NativeFileNotFoundError(NativeParserError, FileNotFoundError):
    def __init__(self, path: Path) -> None:
        super().__init__(f"File was not found at the specified path: {path}")
        self.path = path


class InvalidFileTypeError(NativeParserError):
    def __init__(self, path: Path) -> None:
        super().__init__(f"File {path} is not a XML file")
        self.path = path


class UnknownError(NativeParserError):
    pass


class ParsingErrorKind(StrEnum):
    TOKENIZER = "tokenizer"
    ATTRIBUTE = "attribute"
    REQUIRED_DATETIME = "required-datetime"


class ParsingError(NativeParserError):
    """Fatal failure while reading a native export; no tree is produced."""

    def __init__(
        self,
        message: str,
        *,
        kind: ParsingErrorKind,
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.kind = kind
        self.line = line
        self.column = column

    def __str__(self) -> str:
        if self.line is None:
            return self.message
        return f"{self.message} (line {self.line}, column {self.column})"

    def at(self, line: int, column: int) -> ParsingError:
        """Copy of this error pinned to a document position."""
        return ParsingError(self.message, kind=self.kind, line=line, column=column)
