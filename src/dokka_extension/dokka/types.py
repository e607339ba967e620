"""Enumerations accepted by the Dokka command line."""

from __future__ import annotations

from enum import Enum


class _ArgEnum(Enum):
    """Enum rendered on the command line as its lower-cased member name."""

    @property
    def arg(self) -> str:
        return self.name.lower()

    @classmethod
    def parse(cls, value: "str | _ArgEnum"):
        """Look up a member by name, case-insensitively.

        Raises:
            ValueError: If ``value`` names no member.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls[str(value).strip().upper()]
        except KeyError:
            valid = ", ".join(m.arg for m in cls)
            raise ValueError(
                f"Unknown {cls.__name__}: {value}. Valid values: {valid}"
            ) from None


class AnalysisPlatform(_ArgEnum):
    """Platform used for setting up code analysis and samples."""
    JVM = "jvm"
    JS = "js"
    NATIVE = "native"
    COMMON = "common"
    ANDROID = "android"


class DocumentedVisibility(_ArgEnum):
    """Declaration visibilities Dokka can document."""
    PUBLIC = "public"
    PRIVATE = "private"
    PROTECTED = "protected"
    INTERNAL = "internal"
    PACKAGE = "package"


class LoggingLevel(_ArgEnum):
    """Dokka's own logging level."""
    DEBUG = "debug"
    PROGRESS = "progress"
    INFO = "info"
    WARN = "warn"
    ERROR = "error"


class OutputFormat(_ArgEnum):
    """Documentation output formats, each backed by a set of plugin JARs."""
    JAVADOC = "javadoc"
    HTML = "html"
    MARKDOWN = "markdown"
    JEKYLL = "jekyll"

    @property
    def plugin_regex(self) -> str:
        """Pattern selecting this format's plugin JARs from ``lib/bld``."""
        return PLUGIN_REGEXES[self]


PLUGIN_REGEXES: dict[OutputFormat, str] = {
    OutputFormat.MARKDOWN: (
        r"^.*(dokka-base|analysis-kotlin-descriptors|gfm-plugin|freemarker).*\.jar$"
    ),
    OutputFormat.HTML: (
        r"^.*(dokka-base|analysis-kotlin-descriptors|kotlinx-html-jvm|freemarker).*\.jar$"
    ),
    OutputFormat.JAVADOC: (
        r"^.*(dokka-base|analysis-kotlin-descriptors|javadoc-plugin|kotlin-as-java-plugin|korte-jvm).*\.jar$"
    ),
    OutputFormat.JEKYLL: (
        r"^.*(dokka-base|analysis-kotlin-descriptors|jekyll-plugin|gfm-plugin|freemarker).*\.jar$"
    ),
}

__all__ = [
    "AnalysisPlatform",
    "DocumentedVisibility",
    "LoggingLevel",
    "OutputFormat",
    "PLUGIN_REGEXES",
]
