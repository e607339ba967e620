"""``dokka-extension args``: print the Dokka command without running it."""

from __future__ import annotations

import json
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.text import Text

from dokka_extension.cli import load_operation_or_exit
from dokka_extension.core.constants import DEFAULT_CONFIG_FILE
from dokka_extension.errors import DokkaError

console = Console()


def args(
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
    json_output: bool = typer.Option(False, "--json", help="Print the arguments as a JSON list"),
) -> None:
    """Render the Dokka process command described by a configuration file."""
    operation = load_operation_or_exit(console, config, output_format)

    try:
        command = operation.render()
    except DokkaError as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise typer.Exit(1)

    if json_output:
        typer.echo(json.dumps(command))
        return

    for index, token in enumerate(command):
        line = Text(f"{index:>3} ", style="dim")
        line.append(token, style="cyan" if token.startswith("-") else "")
        console.print(line, soft_wrap=True)
