"""Per-source-set Dokka configuration.

A :class:`SourceSet` collects the options Dokka applies to one group of
source roots and renders them, in Dokka's fixed option order, as the tokens
that end up inside the single ``-sourceSet`` argument of the process command.

Scalars and flags are plain attributes. Collections only ever grow through
the ``add_*`` methods, each of which returns the source set so calls can be
chained::

    source_set = (
        SourceSet(api_version="1.9", skip_deprecated=True)
        .add_src("src/main/kotlin")
        .add_classpath(Path("lib/compile/kotlin-stdlib.jar"))
    )
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from dokka_extension.core.constants import DOUBLE_CARET, SEMICOLON
from dokka_extension.core.paths import (
    PathInput,
    PathLike,
    absolute_paths,
    flatten_strings,
    is_not_blank,
    join_pairs,
    join_paths,
    to_absolute,
)
from dokka_extension.dokka.types import AnalysisPlatform, DocumentedVisibility

__all__ = ["SourceSet"]


@dataclass
class SourceSet:
    """Configuration for a Dokka source set.

    Attributes:
        analysis_platform: Platform used for code analysis and ``@sample``.
        api_version: Kotlin API version used for analysis and samples.
        display_name: Name shown to readers and used in log messages.
        jdk_version: JDK version used when linking to JDK Javadocs.
        language_version: Kotlin language version used for analysis.
        source_set_name: Name of the source set (Dokka defaults to ``main``).
        no_jdk_link: Do not link to JDK Javadocs.
        no_skip_empty_packages: Create pages for empty packages.
        no_stdlib_link: Do not link to the Kotlin standard library docs.
        report_undocumented: Warn about undocumented visible declarations.
        skip_deprecated: Leave ``@Deprecated`` declarations out.
        classpath: Analysis classpath (``.jar`` and ``.klib``), absolute paths.
        includes: Markdown files with module and package docs, absolute paths.
        samples: Files or directories holding ``@sample`` functions.
        src: Source roots to analyze and document.
        suppressed_files: Files left out of the documentation.
        dependent_source_sets: Module name to dependent source set name.
        external_documentation_links: Documentation URL to package list URL.
        src_links: Source path to remote URL (line suffix included).
        per_package_options: Raw per-package option strings.
        documented_visibilities: Visibilities to document.
    """

    analysis_platform: AnalysisPlatform | None = None
    api_version: str | int | None = None
    display_name: str | None = None
    jdk_version: str | int | None = None
    language_version: str | int | None = None
    source_set_name: str | None = None
    no_jdk_link: bool = False
    no_skip_empty_packages: bool = False
    no_stdlib_link: bool = False
    report_undocumented: bool = False
    skip_deprecated: bool = False
    classpath: list[str] = field(default_factory=list)
    includes: list[str] = field(default_factory=list)
    samples: list[str] = field(default_factory=list)
    src: list[str] = field(default_factory=list)
    suppressed_files: list[str] = field(default_factory=list)
    dependent_source_sets: dict[str, str] = field(default_factory=dict)
    external_documentation_links: dict[str, str] = field(default_factory=dict)
    src_links: dict[str, str] = field(default_factory=dict)
    per_package_options: list[str] = field(default_factory=list)
    documented_visibilities: list[DocumentedVisibility] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.analysis_platform is not None:
            self.analysis_platform = AnalysisPlatform.parse(self.analysis_platform)
        self.classpath = absolute_paths([self.classpath])
        self.includes = absolute_paths([self.includes])
        self.samples = absolute_paths([self.samples])
        self.src = absolute_paths([self.src])
        self.suppressed_files = absolute_paths([self.suppressed_files])
        self.dependent_source_sets = dict(self.dependent_source_sets)
        self.external_documentation_links = dict(self.external_documentation_links)
        self.src_links = dict(self.src_links)
        self.per_package_options = flatten_strings([self.per_package_options])
        visibilities = self.documented_visibilities
        if isinstance(visibilities, (str, DocumentedVisibility)):
            visibilities = [visibilities]
        self.documented_visibilities = [DocumentedVisibility.parse(v) for v in visibilities]

    # ------------------------------------------------------------------
    # Path collections
    # ------------------------------------------------------------------

    def add_classpath(self, *files: PathInput) -> SourceSet:
        """Add classpath entries for analysis and interactive samples."""
        self.classpath.extend(absolute_paths(files))
        return self

    def add_includes(self, *files: PathInput) -> SourceSet:
        """Add Markdown files containing module and package documentation."""
        self.includes.extend(absolute_paths(files))
        return self

    def add_samples(self, *samples: PathInput) -> SourceSet:
        """Add directories or files containing sample functions."""
        self.samples.extend(absolute_paths(samples))
        return self

    def add_src(self, *src: PathInput) -> SourceSet:
        """Add source roots (directories or ``.kt``/``.java`` files)."""
        self.src.extend(absolute_paths(src))
        return self

    def add_suppressed_files(self, *files: PathInput) -> SourceSet:
        """Add files to suppress when generating documentation."""
        self.suppressed_files.extend(absolute_paths(files))
        return self

    # ------------------------------------------------------------------
    # Mappings and sequences
    # ------------------------------------------------------------------

    def add_dependent_source_set(self, module_name: str, source_set_name: str) -> SourceSet:
        self.dependent_source_sets[module_name] = source_set_name
        return self

    def add_dependent_source_sets(self, dependent_source_sets: Mapping[str, str]) -> SourceSet:
        self.dependent_source_sets.update(dependent_source_sets)
        return self

    def add_external_documentation_link(self, url: str, package_list_url: str) -> SourceSet:
        """Link to external documentation for this source set only."""
        self.external_documentation_links[url] = package_list_url
        return self

    def add_external_documentation_links(self, links: Mapping[str, str]) -> SourceSet:
        self.external_documentation_links.update(links)
        return self

    def add_src_link(self, src_path: PathLike, remote_path: str, line_suffix: str) -> SourceSet:
        """Map a source directory to a web page for browsing the code.

        A ``str`` path is used as given; path objects become absolute.

        Args:
            src_path: Local source directory.
            remote_path: URL of the same directory in a code browser.
            line_suffix: Suffix used to append line numbers, e.g. ``#L``.
        """
        key = src_path if isinstance(src_path, str) else to_absolute(src_path)
        self.src_links[key] = remote_path + line_suffix
        return self

    def add_per_package_options(self, *options: str | Iterable[str]) -> SourceSet:
        """Add per-package options such as ``matchingRegexp;-deprecated;+suppress``."""
        self.per_package_options.extend(flatten_strings(options))
        return self

    def add_documented_visibilities(
        self, *visibilities: DocumentedVisibility | str
    ) -> SourceSet:
        self.documented_visibilities.extend(DocumentedVisibility.parse(v) for v in visibilities)
        return self

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render(self) -> list[str]:
        """Return the source set options as Dokka command line tokens.

        Options appear in Dokka's documented order; unset options are left
        out entirely and enabled flags contribute only their name.
        """
        args: list[str] = []

        def option(name: str, value: object) -> None:
            if value is None or (isinstance(value, str) and not is_not_blank(value)):
                return
            args.append(name)
            args.append(str(value))

        def flag(name: str, enabled: bool) -> None:
            if enabled:
                args.append(name)

        if self.analysis_platform:
            option("-analysisPlatform", AnalysisPlatform.parse(self.analysis_platform).arg)
        option("-apiVersion", self.api_version)
        if self.classpath:
            option("-classpath", join_paths(self.classpath))
        if self.dependent_source_sets:
            option("-dependentSourceSets", join_pairs(self.dependent_source_sets, "{}/{}", SEMICOLON))
        option("-displayName", self.display_name)
        if self.documented_visibilities:
            option(
                "-documentedVisibilities",
                SEMICOLON.join(
                    DocumentedVisibility.parse(v).arg for v in self.documented_visibilities
                ),
            )
        if self.external_documentation_links:
            option(
                "-externalDocumentationLinks",
                join_pairs(self.external_documentation_links, "{}^{}", DOUBLE_CARET),
            )
        option("-jdkVersion", self.jdk_version)
        if self.includes:
            option("-includes", join_paths(self.includes))
        option("-languageVersion", self.language_version)
        flag("-noJdkLink", self.no_jdk_link)
        flag("-noSkipEmptyPackages", self.no_skip_empty_packages)
        flag("-noStdlibLink", self.no_stdlib_link)
        flag("-reportUndocumented", self.report_undocumented)
        if self.per_package_options:
            option("-perPackageOptions", SEMICOLON.join(self.per_package_options))
        if self.samples:
            option("-samples", join_paths(self.samples))
        flag("-skipDeprecated", self.skip_deprecated)
        if self.src:
            option("-src", join_paths(self.src))
        if self.src_links:
            option("-srcLink", join_pairs(self.src_links, "{}={}", SEMICOLON))
        option("-sourceSetName", self.source_set_name)
        if self.suppressed_files:
            option("-suppressedFiles", join_paths(self.suppressed_files))

        return args
