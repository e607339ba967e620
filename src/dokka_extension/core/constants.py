"""Shared constants for the Dokka command line grammar and project layout."""

from __future__ import annotations

SEMICOLON = ";"
DOUBLE_CARET = "^^"

DOKKA_MAIN_CLASS = "org.jetbrains.dokka.MainKt"
DOKKA_CLI_JAR_REGEX = r"^.*dokka-cli.*\.jar$"

SOURCES_JAR_SUFFIX = "-sources.jar"
JAVADOC_JAR_SUFFIX = "-javadoc.jar"

DEFAULT_JAVA_TOOL = "java"
DEFAULT_CONFIG_FILE = "dokka.yaml"

EXIT_FAILURE = 1

__all__ = [
    "SEMICOLON",
    "DOUBLE_CARET",
    "DOKKA_MAIN_CLASS",
    "DOKKA_CLI_JAR_REGEX",
    "SOURCES_JAR_SUFFIX",
    "JAVADOC_JAR_SUFFIX",
    "DEFAULT_JAVA_TOOL",
    "DEFAULT_CONFIG_FILE",
    "EXIT_FAILURE",
]
