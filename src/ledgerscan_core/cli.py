"""LedgerScan Core CLI -- Rich-formatted ledger table reconstruction from the terminal."""

import json
import logging
from pathlib import Path

import click

STRATEGIES = ["auto", "delimited", "row-numbers", "keywords"]


def _read_input(text, file):
    if file:
        return Path(file).read_text(encoding="utf-8", errors="replace")
    if text:
        return text
    return click.get_text_stream("stdin").read()


def _load_settings(console, settings_path):
    from rich.markup import escape

    from .tables import load_settings

    try:
        return load_settings(settings_path or None)
    except (OSError, ValueError) as exc:
        console.print(f"[red]Invalid settings: {escape(str(exc))}[/red]")
        raise SystemExit(1)


def _render_table(console, result, title="Parsed Table"):
    from rich.markup import escape
    from rich.table import Table

    table = Table(title=escape(title))
    for col in result.headers:
        table.add_column(escape(col), style="cyan")
    for row in result.rows:
        table.add_row(*[escape(row.get(c, "")) for c in result.headers])
    console.print(table)


def _confidence_style(confidence):
    if confidence >= 90:
        return "green"
    if confidence >= 80:
        return "yellow"
    return "red"


def _print_summary(console, result):
    style = _confidence_style(result.confidence)
    console.print(
        f"\n[bold]Parsed {result.row_count} rows[/bold] "
        f"({len(result.headers)} columns, strategy: {result.strategy.value}, "
        f"confidence: [{style}]{result.confidence:.0f}[/{style}])\n"
    )


@click.group()
@click.version_option(package_name="ledgerscan-core")
@click.option("--verbose", "-v", is_flag=True, help="Log each parsing strategy attempt.")
def cli(verbose):
    """LedgerScan Core -- Turn recognized ledger pages into spreadsheet tables."""
    if verbose:
        from rich.logging import RichHandler

        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(show_path=False)],
        )


@cli.command()
@click.argument("text", required=False)
@click.option("--file", "-f", type=click.Path(exists=True), help="Read text from file.")
@click.option("--strategy", "-s", type=click.Choice(STRATEGIES), default="auto",
              help="Run a single strategy instead of the full chain.")
@click.option("--settings", "settings_path", type=click.Path(exists=True), default=None,
              help="JSON parser settings file.")
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON.")
def parse(text, file, strategy, settings_path, as_json):
    """Reconstruct a table from recognized text or a text file."""
    from rich.console import Console

    from .tables import (
        parse_delimited_lines,
        parse_keyword_tokens,
        parse_row_numbered_tokens,
        parse_table_from_text,
        tokenize,
    )

    console = Console()
    text = _read_input(text, file)

    if not text or not text.strip():
        console.print("[red]No input text provided.[/red]")
        raise SystemExit(1)

    settings = _load_settings(console, settings_path)
    if strategy == "delimited":
        result = parse_delimited_lines(text, settings)
    elif strategy == "row-numbers":
        result = parse_row_numbered_tokens(tokenize(text), settings)
    elif strategy == "keywords":
        result = parse_keyword_tokens(tokenize(text), settings)
    else:
        result = parse_table_from_text(text, settings)

    if as_json:
        click.echo(json.dumps(result.model_dump(mode="json"), indent=2, ensure_ascii=False))
        return

    if not result.headers:
        console.print("[yellow]No table detected.[/yellow]")
        return

    _print_summary(console, result)
    _render_table(console, result)


@cli.command()
@click.argument("file", type=click.Path(exists=True))
@click.option("--output", "-o", default="", help="Write the table to a .csv or .xlsx file.")
@click.option("--language", "-l", default="eng", help="Tesseract language code(s) for images.")
@click.option("--settings", "settings_path", type=click.Path(exists=True), default=None,
              help="JSON parser settings file.")
def extract(file, output, language, settings_path):
    """Recognize a text, PDF, or image file and reconstruct its table."""
    from rich.console import Console
    from rich.markup import escape

    from .export import export_csv, export_excel
    from .ingestion import extract_table_from_file

    console = Console()
    settings = _load_settings(console, settings_path)

    try:
        with console.status("Recognizing..."):
            result = extract_table_from_file(file, settings, language=language)
    except (ImportError, ValueError) as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise SystemExit(1)

    if not result.found:
        console.print("[yellow]No table detected.[/yellow]")
        raise SystemExit(1)

    _print_summary(console, result)
    _render_table(console, result, title=Path(file).name)

    if output:
        suffix = Path(output).suffix.lower()
        try:
            if suffix == ".xlsx":
                export_excel(result, output)
            elif suffix == ".csv":
                export_csv(result, output)
            else:
                console.print(f"[red]Unsupported output type '{suffix}'. Use .csv or .xlsx.[/red]")
                raise SystemExit(1)
        except ImportError as exc:
            console.print(f"[red]{escape(str(exc))}[/red]")
            raise SystemExit(1)
        console.print(f"\nSaved to: [bold]{output}[/bold]")


@cli.command()
@click.argument("text", required=False)
@click.option("--file", "-f", type=click.Path(exists=True), help="Read text from file.")
def profile(text, file):
    """Reconstruct a table and profile its columns."""
    from rich.console import Console
    from rich.markup import escape
    from rich.panel import Panel
    from rich.table import Table

    from .profiler import profile_table
    from .tables import parse_table_from_text

    console = Console()
    text = _read_input(text, file)

    result = parse_table_from_text(text or "")
    if not result.found:
        console.print("[yellow]No table detected.[/yellow]")
        raise SystemExit(1)

    summary = profile_table(result)

    console.print(Panel(
        f"Rows: {summary['total_rows']}  |  Columns: {summary['total_columns']}  |  "
        f"Completeness: {summary['completeness_percent']}% ({summary['quality']})",
        title="Table Profile",
    ))

    table = Table(title="Columns")
    table.add_column("Column", style="cyan")
    table.add_column("Unique", justify="right")
    table.add_column("Empty", justify="right", style="yellow")
    table.add_column("Numeric", style="green")
    table.add_column("Samples")

    for col in summary["columns"]:
        table.add_row(
            escape(col["column"]),
            str(col["unique_values"]),
            str(col["empty_count"]),
            "yes" if col["is_numeric"] else "-",
            escape(", ".join(col["sample_values"])),
        )

    console.print(table)

    for col in summary["columns"]:
        if col["summary"]:
            s = col["summary"]
            console.print(
                f"[bold]{escape(col['column'])}[/bold]: SUM={s['sum']:g}  AVERAGE={s['mean']:g}  "
                f"MIN={s['min']:g}  MAX={s['max']:g}  COUNT={s['count']:g}"
            )


if __name__ == "__main__":
    cli()
