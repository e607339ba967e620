"""dokka.yaml configuration.

A configuration file describes the host project and the Dokka operation to
run against it::

    project:
      name: Example
      directory: .
      java_release: 17
    operation:
      output_dir: build/dokka/html
      output_format: html
      source_set:
        documented_visibilities: [public, protected]

Relative paths are resolved against the directory holding the file.
"""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from dokka_extension.dokka import (
    AnalysisPlatform,
    DocumentedVisibility,
    LoggingLevel,
    OutputFormat,
    SourceSet,
)
from dokka_extension.errors import DokkaConfigError
from dokka_extension.operation import DokkaOperation
from dokka_extension.project import BaseProject

logger = logging.getLogger(__name__)

__all__ = [
    "ProjectConfig",
    "SrcLinkConfig",
    "SourceSetConfig",
    "OperationConfig",
    "DokkaConfig",
    "load_dokka_config",
    "build_operation",
    "load_operation",
]


def _version_text(value: object) -> object:
    # A float has already lost the text as written (1.10 reads as 1.1).
    if isinstance(value, float):
        raise ValueError(f"version {value!r} is a number; quote it in dokka.yaml (e.g. \"1.10\")")
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return value


class ProjectConfig(BaseModel):
    """Host project description."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(..., min_length=1)
    directory: str = "."
    java_release: int | None = None


class SrcLinkConfig(BaseModel):
    """One ``-srcLink`` mapping."""

    model_config = ConfigDict(extra="forbid")

    path: str
    remote: str
    line_suffix: str = ""


class SourceSetConfig(BaseModel):
    """Options for the documented source set."""

    model_config = ConfigDict(extra="forbid")

    analysis_platform: str | None = None
    api_version: str | None = None
    display_name: str | None = None
    jdk_version: str | None = None
    language_version: str | None = None
    source_set_name: str | None = None
    no_jdk_link: bool = False
    no_skip_empty_packages: bool = False
    no_stdlib_link: bool = False
    report_undocumented: bool = False
    skip_deprecated: bool = False
    classpath: list[str] = Field(default_factory=list)
    includes: list[str] = Field(default_factory=list)
    samples: list[str] = Field(default_factory=list)
    src: list[str] = Field(default_factory=list)
    suppressed_files: list[str] = Field(default_factory=list)
    dependent_source_sets: dict[str, str] = Field(default_factory=dict)
    external_documentation_links: dict[str, str] = Field(default_factory=dict)
    src_links: list[SrcLinkConfig] = Field(default_factory=list)
    per_package_options: list[str] = Field(default_factory=list)
    documented_visibilities: list[str] = Field(default_factory=list)

    @field_validator("api_version", "jdk_version", "language_version", mode="before")
    @classmethod
    def stringify_versions(cls, v: object) -> object:
        return _version_text(v)

    @field_validator("analysis_platform")
    @classmethod
    def validate_analysis_platform(cls, v: str | None) -> str | None:
        if v is not None:
            AnalysisPlatform.parse(v)
        return v

    @field_validator("documented_visibilities")
    @classmethod
    def validate_documented_visibilities(cls, v: list[str]) -> list[str]:
        for item in v:
            DocumentedVisibility.parse(item)
        return v


class OperationConfig(BaseModel):
    """Global Dokka options."""

    model_config = ConfigDict(extra="forbid")

    java_tool: str | None = None
    module_name: str | None = None
    module_version: str | None = None
    output_dir: str | None = None
    output_format: str | None = None
    json_config: str | None = Field(default=None, alias="json")
    logging_level: str | None = None
    delay_template_substitution: bool = False
    fail_on_warning: bool = False
    no_suppress_obvious_functions: bool = False
    offline_mode: bool = False
    suppress_inherited_members: bool = False
    global_links: dict[str, str] = Field(default_factory=dict)
    global_package_options: list[str] = Field(default_factory=list)
    global_src_links: list[str] = Field(default_factory=list)
    includes: list[str] = Field(default_factory=list)
    plugins_classpath: list[str] = Field(default_factory=list)
    plugins_configuration: dict[str, str] = Field(default_factory=dict)
    source_set: SourceSetConfig = Field(default_factory=SourceSetConfig)

    @field_validator("module_version", mode="before")
    @classmethod
    def stringify_module_version(cls, v: object) -> object:
        return _version_text(v)

    @field_validator("output_format")
    @classmethod
    def validate_output_format(cls, v: str | None) -> str | None:
        if v is not None:
            OutputFormat.parse(v)
        return v

    @field_validator("logging_level")
    @classmethod
    def validate_logging_level(cls, v: str | None) -> str | None:
        if v is not None:
            LoggingLevel.parse(v)
        return v


class DokkaConfig(BaseModel):
    """Top-level dokka.yaml document."""

    model_config = ConfigDict(extra="forbid")

    project: ProjectConfig | None = None
    operation: OperationConfig = Field(default_factory=OperationConfig)


def load_dokka_config(path: Path) -> DokkaConfig:
    """Read and validate a dokka.yaml file.

    Args:
        path: Configuration file.

    Returns:
        The validated configuration.

    Raises:
        DokkaConfigError: If the file is missing, is not valid YAML, or does
            not match the schema.
    """
    if not path.is_file():
        raise DokkaConfigError(f"Configuration file not found: {path}")

    yaml = YAML(typ="safe")
    try:
        with path.open("r", encoding="utf-8") as handle:
            payload = yaml.load(handle) or {}
    except YAMLError as exc:
        raise DokkaConfigError(f"Failed to parse {path}: {exc}") from exc

    if not isinstance(payload, dict):
        raise DokkaConfigError(f"Expected a mapping at the top of {path}")

    try:
        return DokkaConfig.model_validate(payload)
    except ValidationError as exc:
        raise DokkaConfigError(f"Invalid configuration in {path}: {exc}") from exc


def _resolve(base_dir: Path, value: str) -> Path:
    path = Path(value).expanduser()
    return path if path.is_absolute() else base_dir / path


def _resolve_all(base_dir: Path, values: list[str]) -> list[Path]:
    return [_resolve(base_dir, value) for value in values]


def _apply_source_set(source_set: SourceSet, config: SourceSetConfig, base_dir: Path) -> None:
    for name in (
        "api_version",
        "display_name",
        "jdk_version",
        "language_version",
        "source_set_name",
    ):
        value = getattr(config, name)
        if value is not None:
            setattr(source_set, name, value)
    if config.analysis_platform is not None:
        source_set.analysis_platform = AnalysisPlatform.parse(config.analysis_platform)

    for name in (
        "no_jdk_link",
        "no_skip_empty_packages",
        "no_stdlib_link",
        "report_undocumented",
        "skip_deprecated",
    ):
        if getattr(config, name):
            setattr(source_set, name, True)

    source_set.add_classpath(_resolve_all(base_dir, config.classpath))
    source_set.add_includes(_resolve_all(base_dir, config.includes))
    source_set.add_samples(_resolve_all(base_dir, config.samples))
    source_set.add_src(_resolve_all(base_dir, config.src))
    source_set.add_suppressed_files(_resolve_all(base_dir, config.suppressed_files))
    source_set.add_dependent_source_sets(config.dependent_source_sets)
    source_set.add_external_documentation_links(config.external_documentation_links)
    for link in config.src_links:
        source_set.add_src_link(_resolve(base_dir, link.path), link.remote, link.line_suffix)
    source_set.add_per_package_options(config.per_package_options)
    source_set.add_documented_visibilities(*config.documented_visibilities)


def build_operation(config: DokkaConfig, base_dir: Path) -> DokkaOperation:
    """Turn a validated configuration into a ready-to-render operation.

    With a ``project`` section the operation starts from that project's
    conventions (``src/main/kotlin``, classpath JARs, module name); the
    ``operation`` section is then layered on top.

    Args:
        config: Validated configuration.
        base_dir: Directory relative paths are resolved against.

    Returns:
        The configured operation.

    Raises:
        DokkaConfigError: If an output format is requested without a project.
    """
    base_dir = Path(base_dir).absolute()
    op_config = config.operation
    operation = DokkaOperation()

    if config.project is not None:
        project = BaseProject(
            name=config.project.name,
            work_directory=_resolve(base_dir, config.project.directory),
            java_release=config.project.java_release,
        )
        operation.from_project(project)
    else:
        operation.with_source_set(SourceSet())

    _apply_source_set(operation.source_set, op_config.source_set, base_dir)

    if op_config.java_tool:
        operation.java_tool = op_config.java_tool
    if op_config.module_name is not None:
        operation.module_name = op_config.module_name
    if op_config.module_version is not None:
        operation.module_version = op_config.module_version
    if op_config.output_dir is not None:
        operation.output_dir = str(_resolve(base_dir, op_config.output_dir))
    if op_config.json_config is not None:
        operation.json = str(_resolve(base_dir, op_config.json_config))
    if op_config.logging_level is not None:
        operation.logging_level = LoggingLevel.parse(op_config.logging_level)

    operation.delay_template_substitution = op_config.delay_template_substitution
    operation.fail_on_warning = op_config.fail_on_warning
    operation.no_suppress_obvious_functions = op_config.no_suppress_obvious_functions
    operation.offline_mode = op_config.offline_mode
    operation.suppress_inherited_members = op_config.suppress_inherited_members

    operation.add_global_links(op_config.global_links)
    operation.add_global_package_options(op_config.global_package_options)
    operation.add_global_src_links(op_config.global_src_links)
    operation.add_includes(_resolve_all(base_dir, op_config.includes))
    operation.add_plugin_configurations(op_config.plugins_configuration)

    if op_config.output_format is not None:
        if operation.project is None:
            raise DokkaConfigError(
                "output_format requires a project section to locate plugin JARs"
            )
        operation.output_format(op_config.output_format)

    # Explicit entries are added after the format so they survive its reset.
    operation.add_plugins_classpath(_resolve_all(base_dir, op_config.plugins_classpath))
    return operation


def load_operation(path: Path) -> DokkaOperation:
    """Load ``path`` and build its operation relative to the file's directory."""
    config = load_dokka_config(path)
    logger.debug("Loaded Dokka configuration from %s", path)
    return build_operation(config, path.absolute().parent)
