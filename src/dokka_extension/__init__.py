"""
dokka-extension - build and run Dokka documentation commands.

Usage:
    dokka-extension args --config dokka.yaml
    dokka-extension run --format javadoc
    dokka-extension formats
"""

from __future__ import annotations

import logging

import typer

from dokka_extension.dokka import (
    AnalysisPlatform,
    DocumentedVisibility,
    LoggingLevel,
    OutputFormat,
    SourceSet,
)
from dokka_extension.errors import (
    DokkaConfigError,
    DokkaError,
    ExitStatusError,
    MissingSourceSetError,
    OutputDirectoryError,
)
from dokka_extension.operation import DokkaOperation
from dokka_extension.project import BaseProject, ProjectContext

__version__ = "0.1.0"

app = typer.Typer(
    name="dokka-extension",
    help="Generate Kotlin/Java documentation with the Dokka command line",
    add_completion=False,
    no_args_is_help=True,
)


@app.callback()
def callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log the rendered Dokka command"),
) -> None:
    """Configure logging for every command."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


from dokka_extension.cli.commands import register_commands  # noqa: E402

register_commands(app)


def main():
    app()


__all__ = [
    "AnalysisPlatform",
    "BaseProject",
    "DocumentedVisibility",
    "DokkaConfigError",
    "DokkaError",
    "DokkaOperation",
    "ExitStatusError",
    "LoggingLevel",
    "MissingSourceSetError",
    "OutputDirectoryError",
    "OutputFormat",
    "ProjectContext",
    "SourceSet",
    "app",
    "main",
    "__version__",
]


if __name__ == "__main__":
    main()
