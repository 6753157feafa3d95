from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..entities.native import record_label

if TYPE_CHECKING:
    from ..entities.native import NativeDocument, NativeRecord


@dataclass(frozen=True, slots=True)
class RecordSummary:
    label: str
    declared_forms: int
    forms: int
    fields: int
    entries: int
    comments: int

    @property
    def forms_match_hint(self) -> bool:
        return self.declared_forms == self.forms


def summarize_record(record: NativeRecord) -> RecordSummary:
    """Count the parsed children of one record.

    ``declared_forms`` is the ``numberOfForms`` hint from the export; it is
    reported next to the parsed count because the two may disagree.
    """
    forms = record.forms or []
    fields = [
        field
        for form in forms
        for category in form.categories or []
        for field in category.fields
    ]
    return RecordSummary(
        label=record_label(record),
        declared_forms=record.number_of_forms,
        forms=len(forms),
        fields=len(fields),
        entries=sum(len(field.entries or []) for field in fields),
        comments=sum(len(field.comments or []) for field in fields),
    )


def summarize_document(document: NativeDocument) -> list[RecordSummary]:
    return [summarize_record(record) for record in document.records]
