from __future__ import annotations

from pathlib import Path

import pytest

from dokka_extension.project import BaseProject

BLD_JARS = [
    "analysis-kotlin-descriptors-1.9.20.jar",
    "dokka-base-1.9.20.jar",
    "dokka-base-1.9.20-sources.jar",
    "dokka-cli-1.9.20.jar",
    "dokka-cli-1.9.20-javadoc.jar",
    "freemarker-2.3.31.jar",
    "gfm-plugin-1.9.20.jar",
    "javadoc-plugin-1.9.20.jar",
    "javadoc-plugin-1.9.20-sources.jar",
    "jekyll-plugin-1.9.20.jar",
    "korte-jvm-4.0.10.jar",
    "kotlin-as-java-plugin-1.9.20.jar",
    "kotlinx-html-jvm-0.9.1.jar",
    "unrelated-1.0.jar",
]


def _touch(path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"")
    return path


@pytest.fixture()
def project_dir(tmp_path: Path) -> Path:
    """Create a project laid out the conventional way, with Dokka JARs in lib/bld."""
    root = tmp_path / "example"
    for name in BLD_JARS:
        _touch(root / "lib" / "bld" / name)
    _touch(root / "lib" / "compile" / "kotlin-stdlib-1.9.20.jar")
    _touch(root / "lib" / "compile" / "kotlin-stdlib-1.9.20-sources.jar")
    _touch(root / "lib" / "provided" / "annotations-24.0.1.jar")
    kotlin = root / "src" / "main" / "kotlin" / "com" / "example" / "Example.kt"
    _touch(kotlin).write_text("package com.example\n\nclass Example\n", encoding="utf-8")
    return root


@pytest.fixture()
def project(project_dir: Path) -> BaseProject:
    return BaseProject("Example", work_directory=project_dir, java_release=17)


@pytest.fixture()
def in_tmp(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test from ``tmp_path`` so relative paths resolve under it."""
    monkeypatch.chdir(tmp_path)
    return Path.cwd()
