"""Dokka source set configuration and command line enumerations."""

from dokka_extension.dokka.source_set import SourceSet
from dokka_extension.dokka.types import (
    PLUGIN_REGEXES,
    AnalysisPlatform,
    DocumentedVisibility,
    LoggingLevel,
    OutputFormat,
)

__all__ = [
    "SourceSet",
    "AnalysisPlatform",
    "DocumentedVisibility",
    "LoggingLevel",
    "OutputFormat",
    "PLUGIN_REGEXES",
]
