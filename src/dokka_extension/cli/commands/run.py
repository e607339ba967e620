"""``dokka-extension run``: generate documentation with Dokka."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from dokka_extension.cli import load_operation_or_exit
from dokka_extension.core.constants import DEFAULT_CONFIG_FILE
from dokka_extension.errors import DokkaError, ExitStatusError

console = Console()


def run(
    config: Path = typer.Option(
        Path(DEFAULT_CONFIG_FILE),
        "--config",
        "-c",
        help="Path to the dokka.yaml configuration file",
    ),
    output_format: str | None = typer.Option(
        None,
        "--format",
        "-f",
        help="Output format overriding the configuration (javadoc, html, markdown, jekyll)",
    ),
) -> None:
    """Run Dokka in the configured project directory."""
    operation = load_operation_or_exit(console, config, output_format)

    try:
        operation.execute()
    except ExitStatusError as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise typer.Exit(exc.exit_status)
    except (DokkaError, OSError) as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise typer.Exit(1)

    if operation.output_dir is not None:
        console.print(
            f"[green]✓[/green] Documentation written to {escape(str(operation.output_dir))}",
            soft_wrap=True,
        )
    else:
        console.print("[green]✓[/green] Dokka finished")
