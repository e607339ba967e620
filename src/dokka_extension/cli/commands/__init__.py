"""CLI command modules for dokka-extension."""

from __future__ import annotations

import typer

from .args import args
from .formats import formats
from .run import run


def register_commands(app: typer.Typer) -> None:
    """Attach every command to ``app``."""
    app.command()(args)
    app.command()(run)
    app.command()(formats)


__all__ = ["register_commands", "args", "run", "formats"]
