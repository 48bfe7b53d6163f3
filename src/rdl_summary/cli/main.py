"""CLI for rdl-summary: summarize / combine / classify commands."""

from __future__ import annotations

import json
from pathlib import Path
from typing import List, NoReturn, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from rdl_summary.core.config import AppSettings, ObservabilityConfig
from rdl_summary.core.logging_config import setup_logging
from rdl_summary.evidence.categories import CATEGORY_DISPLAY_NAMES, CATEGORY_PREDICATES
from rdl_summary.evidence.matcher import classify as classify_item
from rdl_summary.exceptions import InputValidationError
from rdl_summary.formatters.disclosure import missing_documents, packet_status
from rdl_summary.formatters.json_formatter import JSONFormatter
from rdl_summary.models import NotApplicable, RequiredCategory, SummaryRecord
from rdl_summary.parsing import extract_json
from rdl_summary.rating.combiner import combine as combine_ratings
from rdl_summary.summary.assembler import assemble_payload

app = typer.Typer(name="rdl-summary", help="Summarize VA Rating Decision Letters")
console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging to stderr"),
) -> None:
    if verbose:
        setup_logging(ObservabilityConfig(log_level="DEBUG"))


def _fail(exc: Exception) -> NoReturn:
    console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
    raise typer.Exit(code=1)


def _render_client(record: SummaryRecord) -> None:
    client = record.client
    if client is None:
        console.print(Panel("No client information in this letter", title="Client"))
        return
    era = client.era
    if isinstance(era, tuple):
        era = ", ".join(era)
    # letter text may contain square brackets
    lines = [
        f"[bold]Name:[/bold] {escape(client.name or 'N/A')}",
        f"[bold]Branch:[/bold] {escape(client.branch or 'N/A')}",
        f"[bold]Service:[/bold] {client.service_start or 'N/A'} to {client.service_end or 'N/A'}",
        f"[bold]Era:[/bold] {escape(era or 'N/A')}",
    ]
    console.print(Panel("\n".join(lines), title="Client"))


def _render_checklist(record: SummaryRecord) -> None:
    table = Table(title=f"Evidence Packet: {packet_status(record.evidence_validation)}")
    table.add_column("Required document", style="cyan")
    table.add_column("Found")
    table.add_column("Matched evidence", max_width=50)

    for category in RequiredCategory:
        match = record.evidence_validation.match_for(category)
        table.add_row(
            CATEGORY_DISPLAY_NAMES[category],
            "[green]yes[/green]" if match.found else "[red]no[/red]",
            escape(match.matched_item or ""),
        )
    console.print(table)


def _render_conditions(record: SummaryRecord) -> None:
    conditions = record.claim.conditions if record.claim else ()
    if not conditions:
        console.print("No conditions listed.")
        return

    table = Table(title="Disability Conditions")
    table.add_column("Condition", style="cyan")
    table.add_column("Decision")
    table.add_column("Effective")
    table.add_column("Rating")
    table.add_column("CFR", max_width=30)

    for condition in conditions:
        rating = "" if condition.evaluation_percent is None else f"{condition.evaluation_percent}%"
        table.add_row(
            escape(condition.name),
            condition.adjudication.value,
            condition.effective_date or "",
            rating,
            escape(", ".join(condition.cfr_citations)),
        )
    console.print(table)


def _render_report(record: SummaryRecord, *, show_conditions: bool) -> None:
    console.print("[bold]VA Rating Decision Summary[/bold]\n")
    _render_client(record)

    source = "computed from conditions" if record.combined_from_conditions else "stated in letter"
    received = record.claim.received_date if record.claim else None
    console.print(f"[bold]Claim received:[/bold] {received or 'N/A'}")
    console.print(f"[bold]Total rating:[/bold] {record.combined_rating}% ({source})\n")

    _render_checklist(record)

    if show_conditions:
        _render_conditions(record)
    else:
        console.print(
            "\n[yellow]Condition detail is hidden because required evidence is missing:[/yellow]"
        )
        for name in missing_documents(record.evidence_validation):
            console.print(f"  - {name}")


@app.command()
def summarize(
    candidate_file: Path = typer.Argument(..., exists=True, dir_okay=False, help="Candidate record JSON"),
    raw: bool = typer.Option(False, "--raw", help="File holds the extractor's raw response text"),
    as_json: bool = typer.Option(False, "--json", help="Print JSON instead of a report"),
    show_all: bool = typer.Option(False, "--show-all", help="Show conditions even for incomplete packets"),
    output: Optional[Path] = typer.Option(None, help="Write the JSON summary to this path"),
) -> None:
    """Validate the evidence packet and compute the combined rating for one letter."""
    settings = AppSettings()
    suppress = settings.disclosure.suppress_unconfirmed_conditions and not show_all
    text = candidate_file.read_text(encoding="utf-8")

    try:
        if raw:
            payload = extract_json(text)
        else:
            try:
                payload = json.loads(text)
            except json.JSONDecodeError as exc:
                raise typer.BadParameter(f"{candidate_file} is not valid JSON: {exc.msg}") from exc
        result = assemble_payload(payload)
    except InputValidationError as exc:
        _fail(exc)

    formatter = JSONFormatter(suppress_unconfirmed_conditions=suppress)
    if output:
        try:
            formatter.format_to_file(result, output)
        except OSError as exc:
            _fail(exc)
        console.print(f"[green]Summary saved to {escape(str(output))}[/green]")

    if as_json:
        typer.echo(formatter.format(result).decode())
        return

    if isinstance(result, NotApplicable):
        console.print("[yellow]This document is not a VA Rating Decision Letter.[/yellow]")
        return

    _render_report(result, show_conditions=result.confirmed_packet or not suppress)


@app.command()
def combine(
    percents: List[int] = typer.Argument(None, help="Granted condition percentages"),
    stated: Optional[int] = typer.Option(None, "--stated", help="Combined rating stated in the letter"),
) -> None:
    """Combine condition percentages with VA math."""
    try:
        result = combine_ratings(stated, percents or [])
    except InputValidationError as exc:
        _fail(exc)

    source = "computed" if result.combined_from_conditions else "stated"
    console.print(f"Combined rating: [bold]{result.combined_rating}%[/bold] ({source})")


@app.command()
def classify(
    items: List[str] = typer.Argument(..., help="Evidence descriptions"),
    explain: bool = typer.Option(False, "--explain", help="Show the keyword rule each category matched"),
) -> None:
    """Show which required categories each evidence description satisfies."""
    table = Table(title="Evidence Classification")
    table.add_column("Evidence", style="cyan", max_width=50)
    table.add_column("Categories")
    if explain:
        table.add_column("Rule")

    for item in items:
        categories = classify_item(item)
        row = [escape(item), ", ".join(c.value for c in categories) or "[dim]none[/dim]"]
        if explain:
            row.append(escape("\n".join(CATEGORY_PREDICATES[c].describe() for c in categories)))
        table.add_row(*row)

    console.print(table)


@app.command()
def serve(
    host: Optional[str] = typer.Option(None, help="Bind address (default from RDL_API_HOST)"),
    port: Optional[int] = typer.Option(None, help="Port (default from RDL_API_PORT)"),
) -> None:
    """Run the HTTP API."""
    import uvicorn

    from rdl_summary.api.app import create_app

    settings = AppSettings()
    uvicorn.run(
        create_app(settings),
        host=host or settings.api.host,
        port=port or settings.api.port,
        log_config=None,
    )


if __name__ == "__main__":
    app()
