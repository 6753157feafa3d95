from typing import ClassVar


class Defaults:
    CHUNK_SIZE = 64 * 1024
    STRICT_OPTIONAL_DATETIMES = False
    REPORT_UNKNOWN_ELEMENTS = False
    CONFIG_FILE = "prelude_native.toml"
    OUTPUT_FORMAT = "json"


class Tags:
    DOCUMENT = "export_from_vision_EDC"
    PATIENT = "patient"
    SITE = "site"
    USER = "user"
    FORM = "form"
    STATE = "state"
    CATEGORY = "category"
    FIELD = "field"
    ENTRY = "entry"
    COMMENT = "comment"
    VALUE = "value"
    REASON = "reason"


class DateFormats:
    # Tried in order; RFC 3339 is handled separately by datetime.fromisoformat.
    NATIVE: ClassVar[tuple[str, ...]] = (
        "%Y-%m-%d %H:%M:%S %z",
        "%Y-%m-%dT%H:%M:%S%z",
    )


class FileTypes:
    XML_SUFFIX = ".xml"


class EnvVars:
    CHUNK_SIZE = "PRELUDE_NATIVE_CHUNK_SIZE"
    STRICT_OPTIONAL_DATETIMES = "PRELUDE_NATIVE_STRICT_OPTIONAL_DATETIMES"
    REPORT_UNKNOWN_ELEMENTS = "PRELUDE_NATIVE_REPORT_UNKNOWN_ELEMENTS"


class LogLevels:
    NORMAL = 0
    VERBOSE = 1
    DEBUG = 2
