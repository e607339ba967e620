"""Exception hierarchy for Dokka argument construction and execution."""

from __future__ import annotations

from pathlib import Path

from dokka_extension.core.constants import EXIT_FAILURE


class DokkaError(Exception):
    """Base exception for dokka-extension errors."""


class ExitStatusError(DokkaError):
    """The operation cannot run, or Dokka exited with a failure status.

    Raised before any rendering when no project is bound, and after the
    process finishes when it returned a non-zero exit status.
    """

    def __init__(self, exit_status: int = EXIT_FAILURE, message: str | None = None):
        self.exit_status = exit_status
        super().__init__(message or f"Dokka failed with exit status {exit_status}")


class MissingSourceSetError(DokkaError, ValueError):
    """No source roots are configured for the source set."""

    def __init__(self, message: str = "At least one sourceSet is required."):
        super().__init__(message)


class OutputDirectoryError(DokkaError, RuntimeError):
    """The output directory could not be created."""

    def __init__(self, path: Path, reason: str | None = None):
        self.path = path
        message = f"Could not create: {path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class DokkaConfigError(DokkaError, RuntimeError):
    """Raised when a dokka.yaml file cannot be read or validated."""


__all__ = [
    "DokkaError",
    "ExitStatusError",
    "MissingSourceSetError",
    "OutputDirectoryError",
    "DokkaConfigError",
]
