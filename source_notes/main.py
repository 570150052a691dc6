"""Entry point for Source Notes.

Delegates to the Click command group, which loads configuration and
sets up logging before running a subcommand.
"""

from source_notes.cli.commands import notes


def main() -> None:
    """Launch the CLI."""
    notes(prog_name="notes")


if __name__ == "__main__":
    main()
