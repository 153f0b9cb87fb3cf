"""
Command-line interface for pdfofficex.
"""

import os
import sys

import click
from rich.console import Console
from rich.table import Table

from pdfofficex import __version__
from pdfofficex.converter import convert_pdf_file, extract_text_lines
from pdfofficex.exceptions import PdfOfficeXError
from pdfofficex.types import ConversionOptions, OutputKind
from pdfofficex.utils import configure_logging

console = Console()

KIND_CHOICES = [kind.value for kind in OutputKind] + ["docx", "pptx", "xlsx"]


def _format_size(size: int) -> str:
    if size < 1024:
        return f"{size} B"
    if size < 1024 * 1024:
        return f"{size / 1024:.1f} KB"
    return f"{size / (1024 * 1024):.1f} MB"


@click.group()
@click.version_option(version=__version__)
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging')
def cli(verbose):
    """
    pdfofficex - Convert PDF text into Word, PowerPoint and Excel files.
    """
    if verbose:
        configure_logging(verbose=True)


@cli.command()
@click.argument('input_pdf', type=click.Path(exists=True, dir_okay=False))
@click.option(
    '--to', '-t', 'kind',
    default='word',
    show_default=True,
    type=click.Choice(KIND_CHOICES, case_sensitive=False),
    help='Output document kind'
)
@click.option(
    '--output', '-o',
    default=None,
    type=click.Path(dir_okay=False),
    help='Destination file (defaults to the input name with the new extension)'
)
@click.option('--no-metadata', is_flag=True, help='Do not copy PDF metadata into the output')
def convert(input_pdf, kind, output, no_metadata):
    """
    Convert a PDF into an office document.

    Examples:

        pdfofficex convert report.pdf

        pdfofficex convert report.pdf --to excel -o tables.xlsx
    """
    options = ConversionOptions(include_metadata=not no_metadata)
    try:
        result = convert_pdf_file(input_pdf, output, kind=kind, options=options)
    except PdfOfficeXError as exc:
        console.print(f"[bold red]✗ Error:[/bold red] {exc}")
        sys.exit(1)

    table = Table(title="Conversion", show_header=False)
    table.add_column("Property", style="cyan")
    table.add_column("Value", style="green")
    table.add_row("Input", os.path.basename(input_pdf))
    table.add_row("Output", str(result.output_path))
    table.add_row("Format", result.kind.label)
    table.add_row("Lines", str(result.line_count))
    table.add_row("Size", _format_size(result.size))
    console.print(table)
    console.print("[bold green]✓ Conversion complete[/bold green]")


@cli.command()
@click.argument('input_pdf', type=click.Path(exists=True, dir_okay=False))
@click.option('--limit', '-n', default=None, type=click.IntRange(min=1), help='Maximum number of lines to print')
def extract(input_pdf, limit):
    """
    Print the text lines recovered from a PDF.
    """
    try:
        with open(input_pdf, 'rb') as handle:
            lines = extract_text_lines(handle)
    except (OSError, PdfOfficeXError) as exc:
        console.print(f"[bold red]✗ Error:[/bold red] {exc}")
        sys.exit(1)

    shown = lines[:limit] if limit else lines
    for line in shown:
        click.echo(line)
    if len(shown) < len(lines):
        console.print(f"[dim]... and {len(lines) - len(shown)} more[/dim]")


def main():
    cli()


if __name__ == '__main__':
    main()
