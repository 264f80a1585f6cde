"""
rf-recorder - CLI Entry Point.

Configuration Priority:
    1. CLI arguments (--variant, --selenium, --aria-as-text)
    2. Config file (rf-recorder.yaml)
    3. Environment variables (RF_RECORDER__EXPORT__BACKEND, ...)

Usage:
    rf-recorder convert recording.json
    rf-recorder convert recording.json --selenium -o tests/
    rf-recorder variants
"""

import logging
import os
import re
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from rf_recorder import __version__
from rf_recorder.config import load_config
from rf_recorder.config.settings import Settings
from rf_recorder.exceptions import ConfigurationError, RecordingLoadError
from rf_recorder.interfaces.stringifier import IStringifier
from rf_recorder.recording import load_recording
from rf_recorder.registry import ComponentRegistry, register_builtin_stringifiers
from rf_recorder.translator import RobotFrameworkStringifier
from rf_recorder.utils.logging import setup_logging_from_settings

# Create the CLI app
app = typer.Typer(
    name="rf-recorder",
    help="Convert browser recordings to Robot Framework test cases",
    add_completion=False,
)

# Scripts go to stdout; messages go to stderr
console = Console(stderr=True)

logger = logging.getLogger(__name__)


def _load_settings(config_path: Optional[Path]) -> Settings:
    try:
        return load_config(config_path=config_path)
    except ConfigurationError as e:
        console.print(f"[red]Configuration error:[/red] {escape(str(e))}")
        raise typer.Exit(1)


def _select_stringifier(
    settings: Settings,
    variant: Optional[str],
    selenium: Optional[bool],
    aria_as_text: Optional[bool],
) -> IStringifier:
    """
    Pick the stringifier for a conversion.

    An explicit variant name wins, then backend flags, then the variant or
    backend from the settings.
    """
    if variant is None and selenium is None and aria_as_text is None:
        variant = settings.export.variant

    if variant is not None:
        try:
            return ComponentRegistry.get_stringifier(variant)
        except ValueError as e:
            console.print(f"[red]Error:[/red] {escape(str(e))}")
            raise typer.Exit(1)

    export = {}
    if selenium is not None:
        export["backend"] = "selenium" if selenium else "browser"
    if aria_as_text is not None:
        export["aria_as_text"] = aria_as_text
    config = settings.merge_with({"export": export}).export.to_translator_config()
    return RobotFrameworkStringifier(config)


def _script_path(output: str, title: str, extension: str) -> Path:
    """
    Target file for a script; a directory gets a file named after the title.

    The output is a directory if it exists as one, ends with a path
    separator or has no suffix.
    """
    path = Path(output)
    if path.is_dir() or output.endswith(("/", os.sep)) or not path.suffix:
        stem = re.sub(r"[^\w\-]+", "_", title).strip("_") or "recording"
        return path / f"{stem}{extension}"
    return path


@app.command()
def convert(
    recording_file: Path = typer.Argument(..., help="Recording exported as JSON"),
    variant: Optional[str] = typer.Option(None, "--variant", "-V", help="Registered variant name (see 'variants')"),
    selenium: Optional[bool] = typer.Option(None, "--selenium/--browser", help="Target SeleniumLibrary or the Browser library"),
    aria_as_text: Optional[bool] = typer.Option(None, "--aria-as-text/--no-aria", help="Prefer ARIA labels and text over CSS"),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Output file or directory (default: stdout)"),
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="Path to config file"),
    verbose: bool = typer.Option(False, "--verbose", help="Enable verbose output"),
):
    """
    Convert a recording to a Robot Framework test case.

    Examples:
        rf-recorder convert login.json
        rf-recorder convert login.json --selenium -o tests/
        rf-recorder convert login.json -V "RobotFrameworkRecorder (Browser, aria as text)"
    """
    settings = _load_settings(config_path)
    setup_logging_from_settings(settings.logging, verbose=verbose or settings.debug)
    register_builtin_stringifiers()

    stringifier = _select_stringifier(settings, variant, selenium, aria_as_text)

    try:
        recording = load_recording(recording_file)
    except RecordingLoadError as e:
        console.print(f"[red]Error:[/red] {escape(e.message)}")
        raise typer.Exit(1)

    script = stringifier.stringify(recording)

    if output is None:
        typer.echo(script)
        return

    target = _script_path(output, recording.title, settings.export.file_extension)
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(script + "\n", encoding=settings.export.encoding)
    except OSError as e:
        console.print(f"[red]Error:[/red] cannot write {escape(str(target))}: {escape(str(e))}")
        raise typer.Exit(1)

    logger.info(f"Wrote {len(script.splitlines())} lines to {target}")
    console.print(f"[green]✓[/green] Script written to [bold]{escape(str(target))}[/bold]")


@app.command()
def variants():
    """List the registered stringifier variants."""
    register_builtin_stringifiers()

    table = Table(title="Stringifier variants")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Library")
    table.add_column("ARIA as text")
    table.add_column("MIME type", style="dim")

    for entry in ComponentRegistry.list_registrations():
        stringifier = entry.stringifier
        if isinstance(stringifier, RobotFrameworkStringifier):
            library = stringifier.config.profile.library
            aria = "yes" if stringifier.config.prefer_aria_as_text else "no"
        else:
            library, aria = "-", "-"
        table.add_row(entry.name, library, aria, entry.mime_type)

    Console().print(table)


@app.command()
def version():
    """Show version information."""
    typer.echo(f"rf-recorder v{__version__}")


def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
