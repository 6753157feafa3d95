"""Parser for Prelude EDC native XML exports (subject, site and user dialects)."""

from importlib.metadata import PackageNotFoundError, version

from .api import (
    parse_site_native_file,
    parse_site_native_string,
    parse_subject_native_file,
    parse_subject_native_string,
    parse_user_native_file,
    parse_user_native_string,
)
from .config import ConfigLoader, ParserConfig
from .domain.entities.native import (
    NativeDialect,
    SiteNative,
    SubjectNative,
    UserNative,
)
from .domain.exceptions import (
    InvalidFileTypeError,
    NativeFileNotFoundError,
    NativeParserError,
    ParsingError,
    ParsingErrorKind,
    UnknownError,
)
from .infrastructure.io import (
    native_from_json,
    native_to_dict,
    native_to_frame,
    native_to_json,
    parse_native_stream,
    validate_xml_path,
)

try:  # pragma: no cover
    __version__ = version("prelude-native")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

__all__ = [
    "ConfigLoader",
    "InvalidFileTypeError",
    "NativeDialect",
    "NativeFileNotFoundError",
    "NativeParserError",
    "ParserConfig",
    "ParsingError",
    "ParsingErrorKind",
    "SiteNative",
    "SubjectNative",
    "UnknownError",
    "UserNative",
    "__version__",
    "native_from_json",
    "native_to_dict",
    "native_to_frame",
    "native_to_json",
    "parse_native_stream",
    "parse_site_native_file",
    "parse_site_native_string",
    "parse_subject_native_file",
    "parse_subject_native_string",
    "parse_user_native_file",
    "parse_user_native_string",
    "validate_xml_path",
]
