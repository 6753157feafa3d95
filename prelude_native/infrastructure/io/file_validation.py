from pathlib import Path

from ...constants import FileTypes
from ...domain.exceptions import (
    InvalidFileTypeError,
    NativeFileNotFoundError,
    UnknownError,
)


def validate_xml_path(path: str | Path) -> Path:
    """Check that ``path`` names an existing ``.xml`` file before it is opened.

    Raises:
        NativeFileNotFoundError: Nothing exists at ``path``.
        UnknownError: The path has no extension at all or is not a regular
            file (a directory, a socket...).
        InvalidFileTypeError: The extension is something other than ``.xml``
            (compared case-insensitively).
    """
    path = Path(path)
    if not path.exists():
        raise NativeFileNotFoundError(path)
    if not path.suffix:
        raise UnknownError(f"Cannot determine the file type of {path}")
    if not path.is_file():
        raise UnknownError(f"{path} is not a regular file")
    if path.suffix.lower() != FileTypes.XML_SUFFIX:
        raise InvalidFileTypeError(path)
    return path
