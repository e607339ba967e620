"""``dokka-extension formats``: list the supported output formats."""

from __future__ import annotations

from rich.console import Console
from rich.table import Table

from dokka_extension.dokka import OutputFormat

console = Console()


def formats() -> None:
    """List output formats and the plugin JARs each one pulls from lib/bld."""
    table = Table(title="Dokka Output Formats")
    table.add_column("Format", style="cyan")
    table.add_column("Plugin JAR pattern", overflow="fold")

    for output_format in OutputFormat:
        table.add_row(output_format.arg, output_format.plugin_regex)

    console.print(table)
