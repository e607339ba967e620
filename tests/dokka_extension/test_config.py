"""Tests for dokka.yaml loading and operation building."""

from __future__ import annotations

from pathlib import Path

import pytest

from dokka_extension.config import (
    DokkaConfig,
    build_operation,
    load_dokka_config,
    load_operation,
)
from dokka_extension.dokka import AnalysisPlatform, DocumentedVisibility, LoggingLevel
from dokka_extension.errors import DokkaConfigError

FULL_CONFIG = """\
project:
  name: Example
  directory: example
  java_release: 17
operation:
  output_dir: build/dokka/html
  output_format: html
  logging_level: info
  module_version: "1.10"
  fail_on_warning: true
  json: dokka.json
  global_links:
    https://example.com/: https://example.com/package-list
  plugins_configuration:
    org.jetbrains.dokka.base.DokkaBase: '{"footerMessage": "x"}'
  plugins_classpath:
    - extra/plugin.jar
  source_set:
    analysis_platform: jvm
    api_version: "1.9"
    documented_visibilities: [public, protected]
    skip_deprecated: true
    src_links:
      - path: example/src/main/kotlin
        remote: https://github.com/x/y/blob/main
        line_suffix: "#L"
"""


def write_config(directory: Path, text: str) -> Path:
    path = directory / "dokka.yaml"
    path.write_text(text, encoding="utf-8")
    return path


class TestLoadDokkaConfig:
    def test_full_document(self, tmp_path: Path) -> None:
        config = load_dokka_config(write_config(tmp_path, FULL_CONFIG))

        assert isinstance(config, DokkaConfig)
        assert config.project is not None
        assert config.project.name == "Example"
        assert config.project.java_release == 17
        assert config.operation.module_version == "1.10"
        assert config.operation.json_config == "dokka.json"
        assert config.operation.source_set.api_version == "1.9"
        assert config.operation.source_set.src_links[0].line_suffix == "#L"

    def test_empty_file(self, tmp_path: Path) -> None:
        config = load_dokka_config(write_config(tmp_path, ""))
        assert config.project is None
        assert config.operation.source_set.src == []

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(DokkaConfigError, match="not found"):
            load_dokka_config(tmp_path / "dokka.yaml")

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        with pytest.raises(DokkaConfigError, match="Failed to parse"):
            load_dokka_config(write_config(tmp_path, "operation: [unclosed\n"))

    def test_top_level_must_be_mapping(self, tmp_path: Path) -> None:
        with pytest.raises(DokkaConfigError, match="Expected a mapping"):
            load_dokka_config(write_config(tmp_path, "- a\n- b\n"))

    def test_unknown_key_rejected(self, tmp_path: Path) -> None:
        with pytest.raises(DokkaConfigError, match="Invalid configuration"):
            load_dokka_config(write_config(tmp_path, "operation:\n  outputdir: build\n"))

    def test_unknown_enum_value_rejected(self, tmp_path: Path) -> None:
        text = "operation:\n  output_format: pdf\n"
        with pytest.raises(DokkaConfigError, match="Unknown OutputFormat"):
            load_dokka_config(write_config(tmp_path, text))

    @pytest.mark.parametrize(
        "text",
        [
            "operation:\n  module_version: 1.10\n",
            "operation:\n  source_set:\n    api_version: 1.10\n",
            "operation:\n  source_set:\n    language_version: 2.00\n",
        ],
    )
    def test_unquoted_decimal_version_rejected(self, tmp_path: Path, text: str) -> None:
        """A YAML float has already dropped digits such as the 0 in 1.10."""
        with pytest.raises(DokkaConfigError, match="quote it"):
            load_dokka_config(write_config(tmp_path, text))

    def test_quoted_version_kept_verbatim(self, tmp_path: Path) -> None:
        text = "operation:\n  module_version: \"1.10\"\n  source_set:\n    api_version: \"2.00\"\n"
        config = load_dokka_config(write_config(tmp_path, text))
        assert config.operation.module_version == "1.10"
        assert config.operation.source_set.api_version == "2.00"

    def test_integer_version_accepted(self, tmp_path: Path) -> None:
        text = "operation:\n  source_set:\n    jdk_version: 17\n"
        config = load_dokka_config(write_config(tmp_path, text))
        assert config.operation.source_set.jdk_version == "17"

    def test_unknown_visibility_rejected(self, tmp_path: Path) -> None:
        text = "operation:\n  source_set:\n    documented_visibilities: [friends]\n"
        with pytest.raises(DokkaConfigError):
            load_dokka_config(write_config(tmp_path, text))


class TestBuildOperation:
    def test_full_document(self, tmp_path: Path, project_dir: Path) -> None:
        """Relative paths resolve against the configuration file's directory."""
        op = load_operation(write_config(tmp_path, FULL_CONFIG))

        assert op.project is not None
        assert op.project.work_directory == project_dir
        assert op.module_name == "Example"
        assert op.module_version == "1.10"
        assert op.output_dir == str(tmp_path / "build" / "dokka" / "html")
        assert op.json == str(tmp_path / "dokka.json")
        assert op.logging_level is LoggingLevel.INFO
        assert op.fail_on_warning is True
        assert op.global_links == {"https://example.com/": "https://example.com/package-list"}
        assert op.plugins_configuration == {
            "org.jetbrains.dokka.base.DokkaBase": '{"footerMessage": "x"}'
        }
        assert op.plugins_classpath[-1] == str(tmp_path / "extra" / "plugin.jar")
        assert str(project_dir / "lib" / "bld" / "kotlinx-html-jvm-0.9.1.jar") in op.plugins_classpath

        source_set = op.source_set
        assert source_set.analysis_platform is AnalysisPlatform.JVM
        assert source_set.api_version == "1.9"
        assert source_set.jdk_version == 17
        assert source_set.skip_deprecated is True
        assert source_set.documented_visibilities == [
            DocumentedVisibility.PUBLIC,
            DocumentedVisibility.PROTECTED,
        ]
        assert source_set.src == [str(project_dir / "src" / "main" / "kotlin")]
        assert source_set.src_links == {
            str(project_dir / "src" / "main" / "kotlin"): "https://github.com/x/y/blob/main#L"
        }

    def test_renders_from_config(self, tmp_path: Path, project_dir: Path) -> None:
        args = load_operation(write_config(tmp_path, FULL_CONFIG)).render()
        assert args[0] == "java"
        assert args[1:3] == ["-cp", str(project_dir / "lib" / "bld" / "dokka-cli-1.9.20.jar")]
        assert args[-1] == str(tmp_path / "dokka.json")
        assert (tmp_path / "build" / "dokka" / "html").is_dir()

    def test_without_project(self, tmp_path: Path) -> None:
        config = DokkaConfig.model_validate(
            {"operation": {"source_set": {"src": ["src/main/kotlin"], "jdk_version": 21}}}
        )
        op = build_operation(config, tmp_path)

        assert op.project is None
        assert op.module_name is None
        assert op.source_set.src == [str(tmp_path / "src" / "main" / "kotlin")]
        assert op.source_set.jdk_version == "21"

    def test_output_format_without_project(self, tmp_path: Path) -> None:
        config = DokkaConfig.model_validate({"operation": {"output_format": "javadoc"}})
        with pytest.raises(DokkaConfigError, match="requires a project"):
            build_operation(config, tmp_path)

    def test_absolute_paths_kept(self, tmp_path: Path) -> None:
        elsewhere = tmp_path / "elsewhere"
        config = DokkaConfig.model_validate(
            {"operation": {"source_set": {"src": [str(elsewhere)]}}}
        )
        op = build_operation(config, tmp_path / "config-dir")
        assert op.source_set.src == [str(elsewhere)]
