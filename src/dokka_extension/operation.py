"""Build and run the Dokka command line.

:class:`DokkaOperation` holds the global (module level) Dokka options plus one
:class:`~dokka_extension.dokka.SourceSet`, and turns them into the argument
vector of a ``java`` process running the Dokka CLI::

    operation = (
        DokkaOperation()
        .from_project(BaseProject("Example", work_directory=Path("examples")))
        .output_format(OutputFormat.HTML)
    )
    operation.output_dir = "build/dokka/html"
    operation.execute()

Rendering has one side effect: the output directory is created so Dokka can
write into it.
"""

from __future__ import annotations

import logging
import os
import subprocess
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path

from dokka_extension.core.constants import (
    DEFAULT_JAVA_TOOL,
    DOKKA_CLI_JAR_REGEX,
    DOKKA_MAIN_CLASS,
    DOUBLE_CARET,
    EXIT_FAILURE,
    SEMICOLON,
)
from dokka_extension.core.paths import (
    PathInput,
    PathLike,
    absolute_paths,
    flatten_strings,
    encode_json,
    get_jar_list,
    is_not_blank,
    join_pairs,
    join_paths,
    to_absolute,
)
from dokka_extension.dokka import LoggingLevel, OutputFormat, SourceSet
from dokka_extension.errors import (
    ExitStatusError,
    MissingSourceSetError,
    OutputDirectoryError,
)
from dokka_extension.project import ProjectContext

logger = logging.getLogger(__name__)

__all__ = ["DokkaOperation"]


def _optional_path(value: PathLike | None) -> str | None:
    return to_absolute(value) if value is not None else None


@dataclass
class DokkaOperation:
    """Generates documentation (Javadoc, HTML, Markdown, Jekyll) with Dokka.

    Attributes:
        source_set: The documented source set.
        project: Host project; required by :meth:`execute` and
            :meth:`output_format`.
        module_name: Display name of the module (Dokka defaults to ``root``).
        module_version: Documented version.
        output_dir: Directory Dokka writes to, whatever the format.
        json: Dokka JSON configuration file, passed through unparsed.
        logging_level: Dokka's logging level.
        java_tool: Java executable used to launch Dokka.
        silent: Suppress error logging for precondition failures.
        delay_template_substitution: Delay substitution of some elements
            (incremental builds of multi-module projects).
        fail_on_warning: Fail if Dokka emitted a warning or an error.
        no_suppress_obvious_functions: Document functions inherited from
            ``Any``/``Object`` and compiler generated ones.
        offline_mode: Do not resolve remote files or links.
        suppress_inherited_members: Hide inherited members that are not
            overridden.
        global_links: Documentation URL to package list URL, for all source sets.
        global_package_options: Package options applied to all source sets.
        global_src_links: Source link mappings applied to all source sets.
        includes: Markdown files with module and package docs, absolute paths.
        plugins_classpath: Plugin JARs and their dependencies, absolute paths.
        plugins_configuration: Fully qualified plugin name to JSON configuration.
    """

    source_set: SourceSet | None = None
    project: ProjectContext | None = None
    module_name: str | None = None
    module_version: str | None = None
    output_dir: PathLike | None = None
    json: PathLike | None = None
    logging_level: LoggingLevel | None = None
    java_tool: str = DEFAULT_JAVA_TOOL
    silent: bool = False
    delay_template_substitution: bool = False
    fail_on_warning: bool = False
    no_suppress_obvious_functions: bool = False
    offline_mode: bool = False
    suppress_inherited_members: bool = False
    global_links: dict[str, str] = field(default_factory=dict)
    global_package_options: list[str] = field(default_factory=list)
    global_src_links: list[str] = field(default_factory=list)
    includes: list[str] = field(default_factory=list)
    plugins_classpath: list[str] = field(default_factory=list)
    plugins_configuration: dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.output_dir = _optional_path(self.output_dir)
        self.json = _optional_path(self.json)
        if self.logging_level is not None:
            self.logging_level = LoggingLevel.parse(self.logging_level)
        self.global_links = dict(self.global_links)
        self.plugins_configuration = dict(self.plugins_configuration)
        self.global_package_options = flatten_strings([self.global_package_options])
        self.global_src_links = flatten_strings([self.global_src_links])
        self.includes = absolute_paths([self.includes])
        self.plugins_classpath = absolute_paths([self.plugins_classpath])

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def from_project(self, project: ProjectContext) -> DokkaOperation:
        """Configure the operation from a project.

        Binds the project and replaces the source set with one documenting
        ``<src/main>/kotlin`` against the project's compile and provided
        classpaths. The JDK version follows the project's Java release and
        the module is named after the project.
        """
        self.project = project
        self.source_set = (
            SourceSet()
            .add_src(project.src_main_directory / "kotlin")
            .add_classpath(project.compile_classpath_jars())
            .add_classpath(project.provided_classpath_jars())
        )
        if project.java_release is not None:
            self.source_set.jdk_version = project.java_release
        self.module_name = project.name
        return self

    def with_source_set(self, source_set: SourceSet) -> DokkaOperation:
        self.source_set = source_set
        return self

    def add_global_link(self, url: str, package_list_url: str) -> DokkaOperation:
        """Link to external documentation for every source set."""
        self.global_links[url] = package_list_url
        return self

    def add_global_links(self, links: Mapping[str, str]) -> DokkaOperation:
        self.global_links.update(links)
        return self

    def add_global_package_options(self, *options: str | Iterable[str]) -> DokkaOperation:
        """Add package options such as ``matchingRegexp;-deprecated;+suppress``."""
        self.global_package_options.extend(flatten_strings(options))
        return self

    def add_global_src_links(self, *links: str | Iterable[str]) -> DokkaOperation:
        self.global_src_links.extend(flatten_strings(links))
        return self

    def add_includes(self, *files: PathInput) -> DokkaOperation:
        """Add Markdown files containing module and package documentation."""
        self.includes.extend(absolute_paths(files))
        return self

    def add_plugins_classpath(self, *jars: PathInput) -> DokkaOperation:
        """Add JARs for Dokka plugins and their dependencies."""
        self.plugins_classpath.extend(absolute_paths(jars))
        return self

    def add_plugin_configuration(self, name: str, json_configuration: str) -> DokkaOperation:
        """Configure a plugin by its fully qualified name."""
        self.plugins_configuration[name] = json_configuration
        return self

    def add_plugin_configurations(self, configurations: Mapping[str, str]) -> DokkaOperation:
        self.plugins_configuration.update(configurations)
        return self

    def output_format(self, output_format: OutputFormat | str) -> DokkaOperation:
        """Select the output format by swapping in its plugin JARs.

        The plugin classpath is cleared first, then refilled with the JARs in
        the project's ``lib/bld`` directory that match the format's pattern.

        Raises:
            ExitStatusError: If no project is bound.
        """
        fmt = OutputFormat.parse(output_format)
        if self.project is None:
            raise ExitStatusError(
                EXIT_FAILURE, f"A project must be specified to select the {fmt.arg} format."
            )

        self.plugins_classpath.clear()
        jars = get_jar_list(self.project.lib_bld_directory, fmt.plugin_regex)
        if jars:
            logger.info("Resolved %d %s plugin JAR(s)", len(jars), fmt.arg)
        else:
            logger.warning(
                "No %s plugin JARs found in %s", fmt.arg, self.project.lib_bld_directory
            )
        self.plugins_classpath.extend(absolute_paths([jars]))
        return self

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def _ensure_output_dir(self, output_dir: str) -> None:
        try:
            Path(output_dir).mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise OutputDirectoryError(Path(output_dir), exc.strerror) from exc
        if not Path(output_dir).is_dir():
            raise OutputDirectoryError(Path(output_dir), "not a directory")

    def render(self) -> list[str]:
        """Return the full Dokka process command.

        A project is optional here; without one the command has no ``-cp``
        prefix. Only :meth:`execute` requires a project.

        Raises:
            MissingSourceSetError: If no source roots are configured.
            OutputDirectoryError: If the output directory cannot be created.
        """
        if self.source_set is None or not self.source_set.src:
            raise MissingSourceSetError()

        args: list[str] = [self.java_tool]

        # -cp
        if self.project is not None:
            cli_jars = get_jar_list(self.project.lib_bld_directory, DOKKA_CLI_JAR_REGEX)
            if cli_jars:
                args.append("-cp")
                args.append(join_paths(cli_jars, os.pathsep))

        args.append(DOKKA_MAIN_CLASS)

        # -pluginsClasspath
        if self.plugins_classpath:
            args.append("-pluginsClasspath")
            args.append(join_paths(self.plugins_classpath))

        # -sourceSet
        args.append("-sourceSet")
        args.append(" ".join(self.source_set.render()))

        # -outputDir
        if self.output_dir is not None:
            output_dir = to_absolute(self.output_dir)
            self._ensure_output_dir(output_dir)
            args.append("-outputDir")
            args.append(output_dir)

        if self.delay_template_substitution:
            args.append("-delayTemplateSubstitution")

        if self.fail_on_warning:
            args.append("-failOnWarning")

        if self.global_links:
            args.append("-globalLinks")
            args.append(join_pairs(self.global_links, "{}^{}", DOUBLE_CARET))

        if self.global_package_options:
            args.append("-globalPackageOptions")
            args.append(SEMICOLON.join(self.global_package_options))

        # Dokka's CLI spells this option with a trailing underscore.
        if self.global_src_links:
            args.append("-globalSrcLinks_")
            args.append(SEMICOLON.join(self.global_src_links))

        if self.includes:
            args.append("-includes")
            args.append(join_paths(self.includes))

        if self.logging_level is not None:
            args.append("-loggingLevel")
            args.append(LoggingLevel.parse(self.logging_level).arg)

        if is_not_blank(self.module_name):
            args.append("-moduleName")
            args.append(self.module_name)

        if is_not_blank(self.module_version):
            args.append("-moduleVersion")
            args.append(self.module_version)

        if self.no_suppress_obvious_functions:
            args.append("-noSuppressObviousFunctions")

        if self.offline_mode:
            args.append("-offlineMode")

        if self.plugins_configuration:
            args.append("-pluginsConfiguration")
            encoded = {
                encode_json(name): encode_json(conf)
                for name, conf in self.plugins_configuration.items()
            }
            args.append(join_pairs(encoded, "{}={}", DOUBLE_CARET))

        if self.suppress_inherited_members:
            args.append("-suppressInheritedMembers")

        # json configuration goes last, unflagged
        if self.json is not None:
            args.append(to_absolute(self.json))

        logger.debug("Dokka command: %s", " ".join(args))
        return args

    # ------------------------------------------------------------------
    # Execution
    # ------------------------------------------------------------------

    def execute(self) -> None:
        """Run Dokka in the project's work directory.

        Raises:
            ExitStatusError: If no project is bound, or Dokka exits with a
                non-zero status.
            MissingSourceSetError: If no source roots are configured.
            OutputDirectoryError: If the output directory cannot be created.
        """
        if self.project is None:
            if not self.silent:
                logger.error("A project must be specified.")
            raise ExitStatusError(EXIT_FAILURE, "A project must be specified.")

        command = self.render()
        completed = subprocess.run(command, cwd=str(self.project.work_directory), check=False)
        if completed.returncode != 0:
            raise ExitStatusError(completed.returncode)
