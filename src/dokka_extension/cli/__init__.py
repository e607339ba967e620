"""Command line front end for dokka-extension."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from dokka_extension.config import load_operation
from dokka_extension.errors import DokkaError
from dokka_extension.operation import DokkaOperation

__all__ = ["load_operation_or_exit"]


def load_operation_or_exit(
    console: Console,
    config_path: Path,
    output_format: str | None = None,
) -> DokkaOperation:
    """Build the operation described by ``config_path`` or exit with status 1.

    ``output_format`` overrides the format named in the file.
    """
    try:
        operation = load_operation(config_path)
        if output_format is not None:
            operation.output_format(output_format)
    except (DokkaError, ValueError) as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise typer.Exit(1)
    return operation
