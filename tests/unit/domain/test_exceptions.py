from pathlib import Path

from prelude_native.domain.exceptions import (
    InvalidFileTypeError,
    NativeFileNotFoundError,
    NativeParserError,
    ParsingError,
    ParsingErrorKind,
    UnknownError,
)


def test_taxonomy_shares_a_base():
    for error_type in (
        NativeFileNotFoundError,
        InvalidFileTypeError,
        ParsingError,
        UnknownError,
    ):
        assert issubclass(error_type, NativeParserError)


def test_file_not_found_is_also_builtin():
    error = NativeFileNotFoundError(Path("missing.xml"))

    assert isinstance(error, FileNotFoundError)
    assert error.path == Path("missing.xml")
    assert "missing.xml" in str(error)


def test_invalid_file_type_message():
    assert str(InvalidFileTypeError(Path("data.csv"))) == "File data.csv is not a XML file"


def test_parsing_error_position_in_message():
    error = ParsingError("Malformed XML", kind=ParsingErrorKind.TOKENIZER, line=3, column=7)

    assert str(error) == "Malformed XML (line 3, column 7)"
    assert error.kind == "tokenizer"


def test_parsing_error_at_pins_position():
    error = ParsingError("bad", kind=ParsingErrorKind.ATTRIBUTE)
    pinned = error.at(12, 4)

    assert str(error) == "bad"
    assert (pinned.line, pinned.column) == (12, 4)
    assert pinned.kind is ParsingErrorKind.ATTRIBUTE
