"""CLI commands for Source Notes.

Provides the Click-based command group 'notes' with subcommands for
exporting a reading note, previewing it, and dumping the parsed
declaration tree.
"""

import logging
from typing import Optional

import click

from source_notes import __version__
from source_notes.errors import SourceNotesError
from source_notes.exporter import NoteExporter
from source_notes.parsers.tree_json import dump_tree
from source_notes.utils.config import AppConfig, load_config
from source_notes.utils.logging import setup_logging
from source_notes.utils.notifier import ClickNotifier

logger = logging.getLogger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="source-notes")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to a config.yaml file.",
)
@click.pass_context
def notes(ctx: click.Context, config_path: Optional[str]) -> None:
    """Source Notes: turn Java sources into Markdown reading notes."""
    config = load_config(config_path)
    setup_logging(
        level=config.logging.level,
        log_format=config.logging.format,
        log_file=config.logging.file,
    )
    ctx.obj = config


@notes.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--output-dir",
    "-o",
    type=click.Path(file_okay=False),
    default=None,
    help="Directory for the note. Defaults to the configured one, then the Desktop.",
)
@click.pass_obj
def export(config: AppConfig, path: str, output_dir: Optional[str]) -> None:
    """Export a reading note for a Java file.

    PATH may also be a JSON declaration tree written by 'notes tree'.
    """
    exporter = NoteExporter(config=config, notifier=ClickNotifier(), output_dir=output_dir)
    written = exporter.export(path)
    if written is None:
        raise SystemExit(1)
    click.echo(f"Note written to {written}")


@notes.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.pass_obj
def preview(config: AppConfig, path: str) -> None:
    """Print the reading note for a Java file without saving it."""
    exporter = NoteExporter(config=config, notifier=ClickNotifier())
    try:
        content = exporter.render(path)
    except (SourceNotesError, FileNotFoundError) as e:
        raise click.ClickException(str(e)) from e
    click.echo(content, nl=False)


@notes.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.pass_obj
def tree(config: AppConfig, path: str) -> None:
    """Print the parsed declaration tree of a Java file as JSON."""
    exporter = NoteExporter(config=config, notifier=ClickNotifier())
    try:
        source_file = exporter.load(path)
    except (SourceNotesError, FileNotFoundError) as e:
        raise click.ClickException(str(e)) from e
    click.echo(dump_tree(source_file))
