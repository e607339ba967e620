"""Project context consumed by :class:`~dokka_extension.operation.DokkaOperation`.

The operation only needs a handful of read accessors from the host build:
where the sources live, which JARs make up the compile and provided
classpaths, where build tool JARs (Dokka itself and its plugins) are kept,
and which Java release the project targets.

:class:`BaseProject` implements that contract for the conventional layout::

    <work_directory>/
        src/main/kotlin/
        lib/bld/        Dokka CLI and plugin JARs
        lib/compile/    compile classpath JARs
        lib/provided/   provided classpath JARs
        build/
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol, runtime_checkable

from dokka_extension.core.paths import get_jar_list

__all__ = ["ProjectContext", "BaseProject", "JAR_REGEX"]

JAR_REGEX = r"^.*\.jar$"


@runtime_checkable
class ProjectContext(Protocol):
    """Read-only view of the host project."""

    @property
    def name(self) -> str: ...

    @property
    def work_directory(self) -> Path: ...

    @property
    def java_release(self) -> int | None: ...

    @property
    def src_main_directory(self) -> Path: ...

    @property
    def lib_bld_directory(self) -> Path: ...

    def compile_classpath_jars(self) -> list[Path]: ...

    def provided_classpath_jars(self) -> list[Path]: ...


@dataclass
class BaseProject:
    """Project laid out the conventional way under ``work_directory``.

    Attributes:
        name: Project name, used as the default Dokka module name.
        work_directory: Project root; also the working directory of Dokka.
        java_release: Targeted Java release, if any.
    """

    name: str
    work_directory: Path = field(default_factory=Path.cwd)
    java_release: int | None = None

    def __post_init__(self) -> None:
        self.work_directory = Path(self.work_directory).absolute()

    @property
    def src_directory(self) -> Path:
        return self.work_directory / "src"

    @property
    def src_main_directory(self) -> Path:
        return self.src_directory / "main"

    @property
    def lib_directory(self) -> Path:
        return self.work_directory / "lib"

    @property
    def lib_bld_directory(self) -> Path:
        return self.lib_directory / "bld"

    @property
    def lib_compile_directory(self) -> Path:
        return self.lib_directory / "compile"

    @property
    def lib_provided_directory(self) -> Path:
        return self.lib_directory / "provided"

    @property
    def build_directory(self) -> Path:
        return self.work_directory / "build"

    def compile_classpath_jars(self) -> list[Path]:
        """Return the JARs in ``lib/compile``, sources and Javadoc JARs excluded."""
        return get_jar_list(self.lib_compile_directory, JAR_REGEX)

    def provided_classpath_jars(self) -> list[Path]:
        """Return the JARs in ``lib/provided``, sources and Javadoc JARs excluded."""
        return get_jar_list(self.lib_provided_directory, JAR_REGEX)
