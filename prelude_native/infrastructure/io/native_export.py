from __future__ import annotations

from typing import TYPE_CHECKING, override

from ...application.ports.services import NativeExportPort
from .frame_export import native_to_frame
from .json_codec import native_to_json

if TYPE_CHECKING:
    from ...domain.entities.native import NativeDocument

OUTPUT_FORMATS = ("json", "csv")


class NativeExportAdapter(NativeExportPort):
    pass

    @override
    def render(self, document: NativeDocument, output_format: str) -> str:
        if output_format == "json":
            return native_to_json(document)
        if output_format == "csv":
            return native_to_frame(document).to_csv(index=False)
        raise ValueError(
            f"Unsupported output format {output_format!r}; expected one of {OUTPUT_FORMATS}"
        )
