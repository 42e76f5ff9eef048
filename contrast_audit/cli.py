"""
Command-Line Interface

CLI using rich for colored tables and summaries. Computes contrast reports
from a colors file, exports them to CSV, and writes a starter palette.
"""

import sys
from pathlib import Path
from typing import Optional

import click
from pydantic import ValidationError
from rich.color import Color
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.style import Style
from rich.table import Table
from rich.text import Text

from . import __version__
from .auditor import FILTER_LEVELS, audit_file
from .checks.contrast import parse_hex
from .config import configure_logging, load_config
from .errors import ContrastAuditError
from .export import export_csv, to_json
from .models import CategorizedReport, Config, ContrastResult
from .palettes import DEFAULT_COLOR_SETS, write_palettes


console = Console()

_colors_option = click.option(
    '--colors',
    default=None,
    type=click.Path(dir_okay=False),
    help='JSON colors file with "light" and "dark" palettes. Defaults to CONTRAST_COLORS_FILE or colors.json'
)
_search_option = click.option(
    '--search',
    default=None,
    help='Only include pairs where either color name contains this text (case-insensitive)'
)
_filter_option = click.option(
    '--filter', 'filter_level',
    default=None,
    type=click.Choice(FILTER_LEVELS, case_sensitive=False),
    help='Only include pairs at this small-text level'
)


@click.group()
@click.option(
    '--env-file',
    default=None,
    type=click.Path(exists=True, dir_okay=False),
    help='Path to .env file (defaults to ./.env)'
)
@click.option(
    '--log-level',
    default=None,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
    help='Diagnostic log level. Defaults to CONTRAST_LOG_LEVEL or WARNING'
)
@click.version_option(version=__version__)
@click.pass_context
def main(ctx: click.Context, env_file: Optional[str], log_level: Optional[str]):
    """
    Contrast Audit - WCAG Palette Contrast Checker

    Compare every foreground ("light") color with every background ("dark")
    color and classify each pair for small and large text.

    Examples:

      # Table of all pairs from ./colors.json
      contrast-audit report

      # Only failing pairs involving "blue"
      contrast-audit report --search blue --filter FAIL

      # JSON output for other tools
      contrast-audit report --output json

      # CSV export
      contrast-audit export --out contrast_results.csv
    """
    try:
        config = load_config(Path(env_file) if env_file else None)
    except ValidationError as e:
        console.print(f"[red]❌ Invalid configuration: {escape(str(e))}[/red]")
        sys.exit(1)
    if log_level:
        config = config.model_copy(update={"log_level": log_level.upper()})
    configure_logging(config.log_level)
    ctx.obj = config


@main.command()
@_colors_option
@_search_option
@_filter_option
@click.option(
    '--output',
    default='rich',
    type=click.Choice(['rich', 'json'], case_sensitive=False),
    help='Output format: rich (colored terminal) or json'
)
@click.pass_obj
def report(
    config: Config,
    colors: Optional[str],
    search: Optional[str],
    filter_level: Optional[str],
    output: str
):
    """Show the categorized contrast report."""
    result = _run_audit(config, colors, search, filter_level)

    if output.lower() == 'json':
        print(to_json(result))
    else:
        _output_rich(result)


@main.command()
@_colors_option
@_search_option
@_filter_option
@click.option(
    '--out',
    default=None,
    type=click.Path(dir_okay=False),
    help='CSV file to write. Defaults to CONTRAST_EXPORT_PATH or contrast_results.csv'
)
@click.pass_obj
def export(
    config: Config,
    colors: Optional[str],
    search: Optional[str],
    filter_level: Optional[str],
    out: Optional[str]
):
    """Export the contrast report as CSV."""
    result = _run_audit(config, colors, search, filter_level)
    path = export_csv(result, out or config.export_path)
    console.print(f"[green]✓ Wrote {result.total} rows to {path}[/green]")
    _print_invalid(result)


@main.command()
@_colors_option
@click.option('--force', is_flag=True, help='Overwrite an existing colors file')
@click.pass_obj
def init(config: Config, colors: Optional[str], force: bool):
    """Write a starter colors file."""
    try:
        path = write_palettes(DEFAULT_COLOR_SETS, colors or config.colors_file, overwrite=force)
    except FileExistsError as e:
        console.print(f"[red]❌ {escape(str(e))} (use --force to overwrite)[/red]")
        sys.exit(1)
    console.print(f"[green]✓ Wrote starter palettes to {path}[/green]")


def _run_audit(
    config: Config,
    colors: Optional[str],
    search: Optional[str],
    filter_level: Optional[str]
) -> CategorizedReport:
    """Load palettes and compute the report, exiting on fatal errors"""
    try:
        return audit_file(colors or config.colors_file, search=search, filter_level=filter_level)
    except KeyboardInterrupt:
        console.print("\n[yellow]⚠️  Interrupted by user[/yellow]")
        sys.exit(130)
    except ContrastAuditError as e:
        console.print(f"[red]❌ Error: {escape(str(e))}[/red]")
        sys.exit(1)


def _output_rich(result: CategorizedReport):
    """Output report as rich formatted terminal tables"""

    title = "[bold]WCAG Contrast Report[/bold]"
    details = []
    if result.search:
        details.append(f"Search: {escape(result.search)}")
    if result.filter_level:
        details.append(f"Filter: {result.filter_level}")
    if details:
        title += "\n" + "  ".join(details)

    console.print()
    console.print(Panel.fit(title, border_style="cyan"))

    if result.is_empty:
        console.print("\n[yellow]No color pairs match.[/yellow]")
    else:
        headings = {
            "AAA": "[bold green]AAA[/bold green]",
            "AA": "[bold yellow]AA[/bold yellow]",
            "Fail": "[bold red]Fail[/bold red]",
            "Other": "[bold red]Other[/bold red]",
        }
        for name, bucket in result.buckets().items():
            if not bucket:
                continue
            console.print(f"\n{headings[name]} ({len(bucket)})")
            console.print(_results_table(bucket))

    _print_invalid(result)
    console.print(f"\n[dim]{result.summary()}[/dim]")
    console.print()


def _results_table(results: list[ContrastResult]) -> Table:
    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Foreground", style="cyan")
    table.add_column("Background", style="cyan")
    table.add_column("Ratio", justify="right")
    table.add_column("Small", justify="center")
    table.add_column("Large", justify="center")
    table.add_column("Fix", justify="center")

    for r in results:
        table.add_row(
            Text.assemble(_swatch(r), f" {r.foreground_name} {r.foreground_hex}"),
            Text(f"{r.background_name} {r.background_hex}"),
            f"{r.contrast_ratio:.2f}",
            _level_markup(r.level_small_text),
            _level_markup(r.level_large_text),
            "❌" if r.requires_fix else "✅"
        )
    return table


def _swatch(r: ContrastResult) -> Text:
    """Sample text in the pair's own colors"""
    style = Style(
        color=Color.from_rgb(*parse_hex(r.foreground_hex)),
        bgcolor=Color.from_rgb(*parse_hex(r.background_hex))
    )
    return Text(" Aa ", style=style)


def _level_markup(level: str) -> str:
    """Colored markup for a WCAG level"""
    color = {"AAA": "green", "AA": "yellow"}.get(level, "red")
    return f"[{color}]{level}[/]"


def _print_invalid(result: CategorizedReport):
    if not result.invalid:
        return
    console.print(f"\n[bold yellow]⚠️  Skipped {len(result.invalid)} invalid colors[/bold yellow]")
    for entry in result.invalid:
        console.print(f"  {entry.palette} {entry.name!r} ({entry.hex}): {entry.reason}", markup=False)


if __name__ == "__main__":
    main()
