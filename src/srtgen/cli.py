"""srtgen CLI entry point.

Collects the video length, the dialogue text, and the output name (from
options, or interactively when an option is omitted), then parses the
dialogue, renders the SRT document, and writes it to disk.  Typed errors
are shown as Rich panels with exit code 1; tracebacks are never shown.
"""

import logging
import sys
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from srtgen.errors import SrtGenError
from srtgen.ingestion.dialogue import parse_entries
from srtgen.ingestion.source import collect_until_blank, read_dialogue_file
from srtgen.rendering.srt import render_document
from srtgen.settings import get_default_duration, get_default_output_name, load_settings
from srtgen.writer import resolve_output_path, write_document

app = typer.Typer(
    name="srtgen",
    help="Convert timestamped dialogue lines into an .srt subtitle file.",
    add_completion=False,
)
console = Console()
err_console = Console(stderr=True)

_logger = logging.getLogger("srtgen")


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.ERROR,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


@app.command()
def main(
    duration: Annotated[
        Optional[str],
        typer.Option("--duration", "-d", help="Video length in mm:ss (e.g. 2:30). Prompted for when omitted."),
    ] = None,
    input_file: Annotated[
        Optional[Path],
        typer.Option(
            "--input", "-i",
            file_okay=True,
            dir_okay=False,
            resolve_path=True,
            help="Text file with the dialogue. When omitted, lines are read from the terminal.",
        ),
    ] = None,
    output: Annotated[
        Optional[str],
        typer.Option("--output", "-o", help="Output file name; '.srt' is appended if missing."),
    ] = None,
    output_dir: Annotated[
        Optional[Path],
        typer.Option(
            "--output-dir",
            file_okay=False,
            dir_okay=True,
            resolve_path=True,
            help="Directory for relative output names (default: SRTGEN_OUTPUT_DIR or the current directory).",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log debug output to stderr."),
    ] = False,
) -> None:
    """Generate an .srt file from '(m:ss) Speaker: "dialogue"' blocks."""
    _configure_logging(verbose)
    console.print("[bold cyan]Welcome to the .srt Generator CLI![/bold cyan]")

    if input_file is not None and not input_file.exists():
        err_console.print(Panel(
            f"File not found: [bold]{input_file}[/bold]\n"
            f"Check that the path is correct and the file is accessible.",
            title="[red]Input Error[/red]",
            border_style="red",
        ))
        raise typer.Exit(1)

    try:
        if duration is None:
            duration = typer.prompt(
                "Enter the video length in mm:ss (ex. 2:30)",
                default=get_default_duration(),
            )
        # Validates the duration before any dialogue is collected.
        settings = load_settings(duration, output, output_dir)

        if input_file is not None:
            raw_text = read_dialogue_file(input_file)
        else:
            console.print(
                "\nEnter the subtitle text "
                "(leave one empty line between entries, press Enter twice when finished):"
            )
            raw_text = collect_until_blank(sys.stdin)

        if output is None:
            settings.output_name = typer.prompt(
                "\nEnter the name for the output SRT file (e.g., output.srt)",
                default=get_default_output_name(),
            )

        entries, warnings = parse_entries(raw_text)
        for warning in warnings:
            console.print(f"[yellow]Warning:[/] {escape(warning)}", highlight=False)

        srt_content = render_document(entries, settings.duration_s)
        output_path = resolve_output_path(settings.output_name, settings.output_dir)
        write_document(srt_content, output_path)
        _logger.debug("Wrote %d cues to %s", len(entries), output_path)
    except SrtGenError as e:
        err_console.print(Panel(
            str(e),
            title="[red]Error[/red]",
            border_style="red",
        ))
        raise typer.Exit(1)

    console.print(
        f"[green].srt file generated successfully:[/] [dim]{output_path}[/dim] "
        f"({len(entries)} cues)"
    )
