"""XML input, file checks, and JSON / tabular output adapters."""

from .file_validation import validate_xml_path
from .frame_export import AUDIT_COLUMNS, native_to_frame
from .json_codec import native_from_json, native_to_dict, native_to_json
from .native_parser import NativeStreamParser, parse_native_stream
from .tokenizer import XmlTokenizer, tokenize

__all__ = [
    "AUDIT_COLUMNS",
    "NativeStreamParser",
    "XmlTokenizer",
    "native_from_json",
    "native_to_dict",
    "native_to_frame",
    "native_to_json",
    "parse_native_stream",
    "tokenize",
    "validate_xml_path",
]
