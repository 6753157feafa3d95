"""Flat audit table of a native document.

One row per entry and per comment, carrying the identifying context of the
record, form, category and field it belongs to. Timestamp columns are
``datetime64[ns, UTC]`` with ``NaT`` for missing values.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pandas as pd

from ...domain.entities.native import record_label

if TYPE_CHECKING:
    from ...domain.entities.native import (
        Category,
        Comment,
        Entry,
        Field,
        Form,
        NativeDocument,
        NativeRecord,
    )

AUDIT_COLUMNS: list[str] = [
    "record",
    "form",
    "form_index",
    "form_title",
    "category",
    "field",
    "field_type",
    "kind",
    "item_id",
    "value",
    "by",
    "by_unique_id",
    "role",
    "when",
    "reason",
    "reason_by",
    "reason_when",
]

_DATETIME_COLUMNS = ("when", "reason_when")


def native_to_frame(root: NativeDocument) -> pd.DataFrame:
    rows: list[dict[str, object]] = []
    for record in root.records:
        for form in record.forms or []:
            for category in form.categories or []:
                for field in category.fields:
                    rows.extend(_field_rows(record, form, category, field))
    frame = pd.DataFrame(rows, columns=AUDIT_COLUMNS)
    for column in _DATETIME_COLUMNS:
        frame[column] = pd.to_datetime(frame[column], utc=True)
    return frame


def _field_rows(
    record: NativeRecord, form: Form, category: Category, field: Field
) -> list[dict[str, object]]:
    context: dict[str, object] = {
        "record": record_label(record),
        "form": form.name,
        "form_index": form.form_index,
        "form_title": form.form_title,
        "category": category.name,
        "field": field.name,
        "field_type": field.field_type,
    }
    rows = [_entry_row(context, entry) for entry in field.entries or []]
    rows.extend(_comment_row(context, comment) for comment in field.comments or [])
    return rows


def _entry_row(context: dict[str, object], entry: Entry) -> dict[str, object]:
    value = entry.value
    reason = entry.reason
    return {
        **context,
        "kind": "entry",
        "item_id": entry.entry_id,
        "value": value.value if value else None,
        "by": value.by if value else None,
        "by_unique_id": value.by_unique_id if value else None,
        "role": value.role if value else None,
        "when": value.when if value else None,
        "reason": reason.value if reason else None,
        "reason_by": reason.by if reason else None,
        "reason_when": reason.when if reason else None,
    }


def _comment_row(context: dict[str, object], comment: Comment) -> dict[str, object]:
    value = comment.value
    return {
        **context,
        "kind": "comment",
        "item_id": comment.comment_id,
        "value": value.value if value else None,
        "by": value.by if value else None,
        "by_unique_id": value.by_unique_id if value else None,
        "role": value.role if value else None,
        "when": value.when if value else None,
        "reason": None,
        "reason_by": None,
        "reason_when": None,
    }
