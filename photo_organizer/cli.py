#!/usr/bin/env python3


import logging
from pathlib import Path

import click
import rich
from rich.markup import escape

from . import __version__
from .metadata import MetadataError
from .organize import organize_photos
from .progress import TerminalProgress
from .types import OrganizeResult

MAX_LISTED_FAILURES = 10


def create_output_folder(ctx: click.Context, param: click.Parameter, value: str) -> Path:
    """Create the output folder, and any missing parents, during argument validation."""
    path = Path(value)
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise click.BadParameter(f"cannot create folder '{value}': {e.strerror or e}")
    return path


def print_failures(result: OrganizeResult) -> None:
    if not result.failures:
        return
    rich.print(f"[yellow]{len(result.failures)} of {result.processed} files could not be copied:[/yellow]")
    for failure in result.failures[:MAX_LISTED_FAILURES]:
        rich.print(f"  [yellow]{escape(failure.source.name)}: {escape(str(failure.error))}[/yellow]")
    if len(result.failures) > MAX_LISTED_FAILURES:
        rich.print(f"  [yellow]... and {len(result.failures) - MAX_LISTED_FAILURES} more[/yellow]")


@click.command()
@click.argument("folder", type=click.Path(exists=True, file_okay=False, path_type=Path))
@click.argument("output_folder", metavar="OUTPUT-FOLDER", callback=create_output_folder)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    default="INFO",
    help="Set the logging level (default: INFO)",
)
@click.version_option(__version__, prog_name="photo-organizer")
def main(folder: Path, output_folder: Path, log_level: str) -> None:
    """Copy the photos in FOLDER to OUTPUT-FOLDER, prefixing each name with its capture time."""
    # Set up logging
    level = getattr(logging, log_level.upper())
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")

    # When not in debug mode, only show our own debug messages
    if level != logging.DEBUG:
        # Set third-party loggers to WARNING
        for logger_name in logging.root.manager.loggerDict:
            if not logger_name.startswith("photo_organizer"):
                logging.getLogger(logger_name).setLevel(logging.WARNING)

    # The progress line redraws the line above it
    click.echo()
    try:
        result = organize_photos(folder, output_folder, reporter=TerminalProgress())
    except MetadataError as e:
        raise click.ClickException(str(e))
    except OSError as e:
        raise click.ClickException(f"cannot organize folder '{folder}': {e.strerror or e}")

    print_failures(result)


if __name__ == "__main__":
    main()
