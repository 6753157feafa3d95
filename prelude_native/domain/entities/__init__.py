"""Domain entities.

Nodes of the native export document tree.
"""

from .native import (
    Category,
    Comment,
    Entry,
    Field,
    Form,
    NativeDialect,
    NativeDocument,
    NativeRecord,
    Patient,
    Reason,
    Site,
    SiteNative,
    State,
    SubjectNative,
    User,
    UserNative,
    Value,
    build_document,
    record_label,
)

__all__ = [
    "Category",
    "Comment",
    "Entry",
    "Field",
    "Form",
    "NativeDialect",
    "NativeDocument",
    "NativeRecord",
    "Patient",
    "Reason",
    "Site",
    "SiteNative",
    "State",
    "SubjectNative",
    "User",
    "UserNative",
    "Value",
    "build_document",
    "record_label",
]
