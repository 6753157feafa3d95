"""Document tree for Prelude native exports.

One canonical node model serves all three dialects (subject, site and user
record sets). Nodes are created from the attributes of their start tag and
finalized once, when their end tag is read; after that they are not changed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum


class NativeDialect(StrEnum):
    SUBJECT = "subject"
    SITE = "site"
    USER = "user"

    @property
    def record_tag(self) -> str:
        return _RECORD_TAGS[self]


_RECORD_TAGS = {
    NativeDialect.SUBJECT: "patient",
    NativeDialect.SITE: "site",
    NativeDialect.USER: "user",
}


@dataclass(frozen=True, slots=True)
class Value:
    by: str
    by_unique_id: str | None
    role: str
    when: datetime | None
    value: str = ""


@dataclass(frozen=True, slots=True)
class Reason:
    by: str
    by_unique_id: str | None
    role: str
    when: datetime | None
    value: str = ""


@dataclass(frozen=True, slots=True)
class Entry:
    entry_id: str
    value: Value | None = None
    reason: Reason | None = None


@dataclass(frozen=True, slots=True)
class Comment:
    comment_id: str
    value: Value | None = None


@dataclass(frozen=True, slots=True)
class Field:
    name: str
    field_type: str
    data_type: str | None
    error_code: str
    when_created: datetime | None
    keep_history: bool
    entries: list[Entry] | None = None
    comments: list[Comment] | None = None


@dataclass(frozen=True, slots=True)
class Category:
    name: str
    category_type: str
    highest_index: int
    fields: list[Field] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class State:
    value: str
    signer: str
    signer_unique_id: str
    date_signed: datetime | None


@dataclass(frozen=True, slots=True)
class Form:
    name: str
    last_modified: datetime | None
    who_last_modified_name: str | None
    who_last_modified_role: str | None
    when_created: int
    has_errors: bool
    has_warnings: bool
    locked: bool
    user: str | None
    date_time_changed: datetime | None
    form_title: str
    form_index: int
    form_group: str | None
    form_state: str
    states: list[State] | None = None
    categories: list[Category] | None = None


@dataclass(frozen=True, slots=True)
class Patient:
    patient_id: str
    unique_id: str
    when_created: datetime | None
    creator: str
    site_name: str
    site_unique_id: str
    last_language: str | None
    number_of_forms: int
    forms: list[Form] | None = None


@dataclass(frozen=True, slots=True)
class Site:
    name: str
    unique_id: str
    number_of_patients: int
    count_of_randomized_patients: int
    when_created: datetime | None
    creator: str
    number_of_forms: int
    forms: list[Form] | None = None


@dataclass(frozen=True, slots=True)
class User:
    unique_id: str
    last_language: str | None
    creator: str
    number_of_forms: int
    forms: list[Form] | None = None


type NativeRecord = Patient | Site | User


@dataclass(frozen=True, slots=True)
class SubjectNative:
    """Contents of a subject (patient) native export."""

    patients: list[Patient] = field(default_factory=list)

    @property
    def records(self) -> list[Patient]:
        return self.patients


@dataclass(frozen=True, slots=True)
class SiteNative:
    """Contents of a site native export."""

    sites: list[Site] = field(default_factory=list)

    @property
    def records(self) -> list[Site]:
        return self.sites


@dataclass(frozen=True, slots=True)
class UserNative:
    """Contents of a user native export."""

    users: list[User] = field(default_factory=list)

    @property
    def records(self) -> list[User]:
        return self.users


type NativeDocument = SubjectNative | SiteNative | UserNative


def build_document(
    dialect: NativeDialect, records: list[NativeRecord]
) -> NativeDocument:
    if dialect is NativeDialect.SUBJECT:
        return SubjectNative(patients=records)  # type: ignore[arg-type]
    if dialect is NativeDialect.SITE:
        return SiteNative(sites=records)  # type: ignore[arg-type]
    return UserNative(users=records)  # type: ignore[arg-type]


def record_label(record: NativeRecord) -> str:
    """Human-facing identifier of a record (patient id, site name or user id)."""
    if isinstance(record, Patient):
        return record.patient_id
    if isinstance(record, Site):
        return record.name
    return record.unique_id
