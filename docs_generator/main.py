"""Entry point for the Docs Generator.

Configuration and logging are initialized by the 'docgen' command
group; this module only hands control to the CLI.
"""

from docs_generator.cli.commands import docgen


def main() -> None:
    """Launch the CLI."""
    docgen(prog_name="docgen")


if __name__ == "__main__":
    main()
