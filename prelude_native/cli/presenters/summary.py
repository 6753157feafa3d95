from __future__ import annotations

from typing import TYPE_CHECKING

from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from collections.abc import Sequence

    from rich.console import Console

    from ...application.models import ParseNativeResponse
    from ...domain.services.record_summary import RecordSummary

_RECORD_HEADERS = {
    "subject": "Patient",
    "site": "Site",
    "user": "User",
}


class SummaryPresenter:
    pass

    def __init__(self, console: Console) -> None:
        super().__init__()
        self.console = console

    def present(self, response: ParseNativeResponse) -> None:
        self.console.print()
        self.console.print(self._build_table(response))
        self.console.print()
        self.console.print(
            f"[bold]Records:[/bold] {response.record_count:,}"
            f"  [dim]({response.elapsed_ms:.1f} ms)[/dim]"
        )
        mismatched = [s for s in response.summaries if not s.forms_match_hint]
        if mismatched:
            self.console.print(
                f"[yellow]⚠[/yellow] {len(mismatched)} record(s) declare a different "
                "numberOfForms than were parsed"
            )

    def _build_table(self, response: ParseNativeResponse) -> Table:
        table = Table(
            title=f"Native Export Summary ({response.dialect})",
            show_header=True,
            header_style="bold cyan",
            border_style="bright_blue",
            title_style="bold magenta",
        )
        table.add_column(
            _RECORD_HEADERS.get(str(response.dialect), "Record"),
            style="cyan",
            no_wrap=True,
        )
        table.add_column("Forms", justify="right", style="yellow", no_wrap=True)
        table.add_column("Fields", justify="right", no_wrap=True)
        table.add_column("Entries", justify="right", no_wrap=True)
        table.add_column("Comments", justify="right", no_wrap=True)
        for summary in response.summaries:
            table.add_row(
                escape(summary.label) or "[dim]-[/dim]",
                self._forms_cell(summary),
                f"{summary.fields:,}",
                f"{summary.entries:,}",
                f"{summary.comments:,}",
            )
        totals = self._totals(response.summaries)
        table.add_section()
        table.add_row(
            "[bold]Total[/bold]",
            f"[bold yellow]{totals[0]:,}[/bold yellow]",
            f"[bold]{totals[1]:,}[/bold]",
            f"[bold]{totals[2]:,}[/bold]",
            f"[bold]{totals[3]:,}[/bold]",
        )
        return table

    @staticmethod
    def _forms_cell(summary: RecordSummary) -> str:
        if summary.forms_match_hint:
            return f"{summary.forms:,}"
        return f"{summary.forms:,} [dim](of {summary.declared_forms:,})[/dim]"

    @staticmethod
    def _totals(summaries: Sequence[RecordSummary]) -> tuple[int, int, int, int]:
        return (
            sum(s.forms for s in summaries),
            sum(s.fields for s in summaries),
            sum(s.entries for s in summaries),
            sum(s.comments for s in summaries),
        )
