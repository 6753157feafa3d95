"""Typed node constructors.

Each builder turns one tag's attribute mapping into a node whose children are
still empty. The parser attaches children when the tag closes. Attribute names
are matched exactly as the export writes them; the camelCase aliases of the
JSON export (``categoryType``, ``fieldType``, ``entryId``...) are accepted as
well so the JSON reader can reuse these builders.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..entities.native import (
    Category,
    Comment,
    Entry,
    Field,
    Form,
    Patient,
    Reason,
    Site,
    State,
    User,
    Value,
)
from .coercion import (
    flag,
    integer,
    optional_datetime,
    optional_text,
    required_datetime,
    text,
)

if TYPE_CHECKING:
    from collections.abc import Mapping


def build_patient(attributes: Mapping[str, str]) -> Patient:
    return Patient(
        patient_id=text(attributes, "patientId"),
        unique_id=text(attributes, "uniqueId"),
        when_created=required_datetime(attributes, "whenCreated"),
        creator=text(attributes, "creator"),
        site_name=text(attributes, "siteName"),
        site_unique_id=text(attributes, "siteUniqueId"),
        last_language=optional_text(attributes, "lastLanguage"),
        number_of_forms=integer(attributes, "numberOfForms"),
    )


def build_site(attributes: Mapping[str, str]) -> Site:
    return Site(
        name=text(attributes, "name"),
        unique_id=text(attributes, "uniqueId"),
        number_of_patients=integer(attributes, "numberOfPatients"),
        count_of_randomized_patients=integer(attributes, "countOfRandomizedPatients"),
        when_created=required_datetime(attributes, "whenCreated"),
        creator=text(attributes, "creator"),
        number_of_forms=integer(attributes, "numberOfForms"),
    )


def build_user(attributes: Mapping[str, str]) -> User:
    return User(
        unique_id=text(attributes, "uniqueId"),
        last_language=optional_text(attributes, "lastLanguage"),
        creator=text(attributes, "creator"),
        number_of_forms=integer(attributes, "numberOfForms"),
    )


def build_form(
    attributes: Mapping[str, str], *, strict_optional_datetimes: bool = False
) -> Form:
    return Form(
        name=text(attributes, "name"),
        last_modified=optional_datetime(
            attributes, "lastModified", strict=strict_optional_datetimes
        ),
        who_last_modified_name=optional_text(attributes, "whoLastModifiedName"),
        who_last_modified_role=optional_text(attributes, "whoLastModifiedRole"),
        when_created=integer(attributes, "whenCreated"),
        has_errors=flag(attributes, "hasErrors"),
        has_warnings=flag(attributes, "hasWarnings"),
        locked=flag(attributes, "locked"),
        user=optional_text(attributes, "user"),
        date_time_changed=optional_datetime(
            attributes, "dateTimeChanged", strict=strict_optional_datetimes
        ),
        form_title=text(attributes, "formTitle"),
        form_index=integer(attributes, "formIndex"),
        form_group=optional_text(attributes, "formGroup"),
        form_state=text(attributes, "formState"),
    )


def build_state(
    attributes: Mapping[str, str], *, strict_optional_datetimes: bool = False
) -> State:
    return State(
        value=text(attributes, "value"),
        signer=text(attributes, "signer"),
        signer_unique_id=text(attributes, "signerUniqueId"),
        date_signed=optional_datetime(
            attributes, "dateSigned", strict=strict_optional_datetimes
        ),
    )


def build_category(attributes: Mapping[str, str]) -> Category:
    return Category(
        name=text(attributes, "name"),
        category_type=text(attributes, "type", "categoryType"),
        highest_index=integer(attributes, "highestIndex"),
    )


def build_field(attributes: Mapping[str, str]) -> Field:
    return Field(
        name=text(attributes, "name"),
        field_type=text(attributes, "type", "fieldType"),
        data_type=optional_text(attributes, "dataType"),
        error_code=text(attributes, "errorCode"),
        when_created=required_datetime(attributes, "whenCreated"),
        keep_history=flag(attributes, "keepHistory"),
    )


def build_entry(attributes: Mapping[str, str]) -> Entry:
    return Entry(entry_id=text(attributes, "entryId", "id"))


def build_comment(attributes: Mapping[str, str]) -> Comment:
    return Comment(comment_id=text(attributes, "commentId", "id"))


def build_value(
    attributes: Mapping[str, str],
    content: str = "",
    *,
    strict_optional_datetimes: bool = False,
) -> Value:
    return Value(
        by=text(attributes, "by"),
        by_unique_id=optional_text(attributes, "byUniqueId"),
        role=text(attributes, "role"),
        when=optional_datetime(attributes, "when", strict=strict_optional_datetimes),
        value=content,
    )


def build_reason(
    attributes: Mapping[str, str],
    content: str = "",
    *,
    strict_optional_datetimes: bool = False,
) -> Reason:
    return Reason(
        by=text(attributes, "by"),
        by_unique_id=optional_text(attributes, "byUniqueId"),
        role=text(attributes, "role"),
        when=optional_datetime(attributes, "when", strict=strict_optional_datetimes),
        value=content,
    )
