"""CLI entry point for contentdoc."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
import yaml
from rich import print as rprint
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from contentdoc.config import ContentDocConfig, load_config
from contentdoc.config.loader import DEFAULT_CONFIG_TEMPLATE
from contentdoc.converter import convert_text
from contentdoc.extract import extract_plain_text, is_structured_document, make_preview
from contentdoc.logging_setup import configure_logging
from contentdoc.migration import ContentMigrator, MigrationReport, load_records, save_records

app = typer.Typer(
    name="contentdoc",
    help="Convert legacy text to structured rich-text documents and back.",
)

config_app = typer.Typer(help="Manage contentdoc configuration.")
app.add_typer(config_app, name="config")

# Global state
_config: ContentDocConfig | None = None


def _get_config() -> ContentDocConfig:
    if _config is None:
        return load_config()
    return _config


@app.callback()
def main(
    config: Annotated[
        str | None, typer.Option("--config", "-c", help="Path to contentdoc.yaml")
    ] = None,
) -> None:
    """Global options."""
    global _config
    try:
        _config = load_config(config)
    except ValueError as e:
        rprint(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    configure_logging(_config.log_level, _config.log_format)


def _read_text(file: str) -> str:
    try:
        return Path(file).read_text(encoding="utf-8")
    except OSError as e:
        rprint(f"[red]Error:[/red] Could not read '{file}': {e}")
        raise typer.Exit(1)


def _display_report(report: MigrationReport) -> None:
    """Display per-collection migration stats as a Rich table."""
    updated_label = "Needing migration" if report.dry_run else "Updated"
    title = "Migration analysis" if report.dry_run else "Migration results"
    table = Table(title=title)
    table.add_column("Collection", style="cyan")
    table.add_column("Records", justify="right")
    table.add_column(updated_label, justify="right", style="green")
    table.add_column("Plain fields", justify="right")
    table.add_column("Markdown fields", justify="right")
    for stats in report.collections:
        table.add_row(
            stats.collection,
            str(stats.records),
            str(stats.records_updated),
            str(stats.fields_plain),
            str(stats.fields_markdown),
        )
    rprint(table)
    rprint(f"[bold]Total:[/bold] {report.total_updated} records, {report.total_fields} fields")

    if report.errors:
        rprint(f"\n[yellow]{len(report.errors)} problem(s):[/yellow]")
        for message in report.errors:
            typer.echo(f"  - {message}")


@app.command()
def convert(
    file: str = typer.Argument(..., help="Path to a text file to convert"),
    fmt: str | None = typer.Option(
        None, "--format", "-f", help="Source format: auto, plain or markdown"
    ),
    output: str | None = typer.Option(None, "--output", "-o", help="Write document JSON to file"),
) -> None:
    """Convert plain text or markdown to a structured document."""
    cfg = _get_config()
    fmt = fmt or cfg.converter.default_format
    if fmt not in ("auto", "plain", "markdown"):
        rprint(f"[red]Error:[/red] Unknown format '{fmt}': expected auto, plain or markdown")
        raise typer.Exit(1)

    result = convert_text(_read_text(file), fmt)

    if not output:
        typer.echo(result.to_json())
        return

    Path(output).write_text(result.to_json(), encoding="utf-8")
    rprint(
        Panel(
            f"[dim]Source:[/dim]  {file}\n"
            f"[dim]Format:[/dim]  {result.format}\n"
            f"[dim]Blocks:[/dim]  {len(result.document.content)}\n"
            f"[dim]Output:[/dim]  {output}",
            title="Conversion Result",
            border_style="green",
        )
    )


@app.command()
def extract(
    file: str = typer.Argument(..., help="File holding a stored document or legacy text"),
) -> None:
    """Print the plain text of a stored document."""
    typer.echo(extract_plain_text(_read_text(file)))


@app.command()
def check(
    file: str = typer.Argument(..., help="File holding stored content"),
) -> None:
    """Report whether content is a structured document. Exits 1 for legacy text."""
    if is_structured_document(_read_text(file)):
        rprint(f"[green]Structured document:[/green] {file}")
        return
    rprint(f"[yellow]Legacy text:[/yellow] {file}")
    raise typer.Exit(1)


@app.command()
def preview(
    file: str = typer.Argument(..., help="File holding stored content"),
    max_chars: int | None = typer.Option(None, "--max-chars", "-n", help="Snippet length"),
) -> None:
    """Print a short plain-text preview of stored content."""
    cfg = _get_config()
    limit = max_chars if max_chars is not None else cfg.preview.max_chars
    if limit <= 0:
        rprint(f"[red]Error:[/red] --max-chars must be positive, got {limit}")
        raise typer.Exit(1)
    typer.echo(make_preview(_read_text(file), limit, cfg.preview.ellipsis))


def _load_records_or_exit(records: str) -> dict:
    try:
        return load_records(records)
    except (ValueError, OSError) as e:
        rprint(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)


@app.command()
def analyze(
    records: str = typer.Argument(..., help="JSON record file"),
) -> None:
    """Count record fields that still hold legacy text."""
    cfg = _get_config()
    data = _load_records_or_exit(records)
    _display_report(ContentMigrator(cfg.migration).analyze(data))


@app.command()
def migrate(
    records: str = typer.Argument(..., help="JSON record file"),
    output: str | None = typer.Option(
        None, "--output", "-o", help="Write migrated records here instead of in place"
    ),
    dry_run: bool = typer.Option(False, "--dry-run", help="Analyze without writing"),
    no_backup: bool = typer.Option(False, "--no-backup", help="Skip the .bak copy"),
) -> None:
    """Migrate legacy text fields in a record file to structured documents."""
    cfg = _get_config()
    data = _load_records_or_exit(records)
    migrator = ContentMigrator(cfg.migration)

    if dry_run:
        rprint("[yellow](dry run: nothing written)[/yellow]\n")
        _display_report(migrator.analyze(data))
        return

    report = migrator.migrate(data)
    target = output or records
    try:
        backup_path = save_records(target, report.records, backup=cfg.migration.backup and not no_backup)
    except OSError as e:
        rprint(f"[red]Error:[/red] Could not write '{target}': {e}")
        raise typer.Exit(1)

    _display_report(report)
    if backup_path is not None:
        rprint(f"[dim]Backup:[/dim] {backup_path}")
    rprint(f"[green]Written to[/green] {target}")


@config_app.command("show")
def config_show() -> None:
    """Show current resolved configuration."""
    cfg = _get_config()
    rprint(Syntax(yaml.dump(cfg.model_dump(), default_flow_style=False), "yaml"))


@config_app.command("init")
def config_init(
    force: bool = typer.Option(False, "--force", help="Overwrite existing config"),
) -> None:
    """Create default contentdoc.yaml in current directory."""
    target = Path("contentdoc.yaml")
    if target.exists() and not force:
        rprint("[yellow]contentdoc.yaml already exists.[/yellow] Use --force to overwrite.")
        raise typer.Exit(1)
    target.write_text(DEFAULT_CONFIG_TEMPLATE)
    rprint(f"[green]Created[/green] {target}")
