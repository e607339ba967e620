"""Tests for path normalization and delimiter joining."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from dokka_extension.core.paths import (
    absolute_paths,
    encode_json,
    flatten_strings,
    get_jar_list,
    is_not_blank,
    join_pairs,
    join_paths,
    to_absolute,
)


class TestToAbsolute:
    def test_same_result_for_str_path_and_dir_entry(self, in_tmp: Path) -> None:
        """A str, a Path and a DirEntry naming one file normalize identically."""
        (in_tmp / "Example.kt").write_text("", encoding="utf-8")
        with os.scandir(in_tmp) as entries:
            entry = next(e for e in entries if e.name == "Example.kt")

        expected = str(in_tmp / "Example.kt")
        assert to_absolute("Example.kt") == expected
        assert to_absolute(Path("Example.kt")) == expected
        assert to_absolute(entry) == expected

    def test_absolute_input_is_normalized(self, tmp_path: Path) -> None:
        assert to_absolute(f"{tmp_path}/a/../b") == str(tmp_path / "b")

    def test_rejects_non_path(self) -> None:
        with pytest.raises(TypeError):
            to_absolute(42)  # type: ignore[arg-type]


class TestAbsolutePaths:
    def test_flattens_mixed_input(self, in_tmp: Path) -> None:
        result = absolute_paths(["a", [Path("b"), "c"], Path("d")])
        assert result == [str(in_tmp / name) for name in "abcd"]

    def test_single_string_is_not_split(self, in_tmp: Path) -> None:
        assert absolute_paths(["src"]) == [str(in_tmp / "src")]

    def test_empty(self) -> None:
        assert absolute_paths([]) == []


class TestFlattenStrings:
    def test_mixed(self) -> None:
        assert flatten_strings(["a", ["b", "c"], ("d",)]) == ["a", "b", "c", "d"]

    def test_string_kept_whole(self) -> None:
        assert flatten_strings(["option1;option2"]) == ["option1;option2"]


class TestJoining:
    def test_join_paths_uses_semicolon_by_default(self, in_tmp: Path) -> None:
        assert join_paths(["a", "b"]) == f"{in_tmp / 'a'};{in_tmp / 'b'}"

    def test_join_paths_custom_separator(self, in_tmp: Path) -> None:
        assert join_paths(["a", "b"], os.pathsep) == f"{in_tmp / 'a'}{os.pathsep}{in_tmp / 'b'}"

    def test_join_pairs_ignores_insertion_order(self) -> None:
        forward = {"s": "gLink1", "s2": "gLink2"}
        backward = {"s2": "gLink2", "s": "gLink1"}
        assert join_pairs(forward, "{}^{}", "^^") == "s^gLink1^^s2^gLink2"
        assert join_pairs(backward, "{}^{}", "^^") == join_pairs(forward, "{}^{}", "^^")

    def test_join_pairs_empty(self) -> None:
        assert join_pairs({}, "{}={}", ";") == ""

    def test_delimiters_in_values_are_not_escaped(self) -> None:
        assert join_pairs({"a;b": "c^d"}, "{}^{}", "^^") == "a;b^c^d"


class TestEncodeJson:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("name", "{name}"),
            ('{"json"}', '{\\"json\\"}'),
            ('"name2"', '{\\"name2\\"}'),
            ("name3}", "{name3}}"),
            ("{json3", "{{json3}"),
        ],
    )
    def test_wraps_and_escapes(self, value: str, expected: str) -> None:
        assert encode_json(value) == expected

    def test_keeps_non_ascii(self) -> None:
        assert encode_json("héllo") == "{héllo}"


class TestIsNotBlank:
    @pytest.mark.parametrize("value", [None, "", "   ", "\t\n"])
    def test_blank(self, value: str | None) -> None:
        assert not is_not_blank(value)

    def test_not_blank(self) -> None:
        assert is_not_blank(" 1.0 ")


class TestGetJarList:
    def test_sorted_and_skips_sources_and_javadoc(self, project_dir: Path) -> None:
        bld = project_dir / "lib" / "bld"
        jars = get_jar_list(bld, r"^.*dokka-(base|cli).*\.jar$")
        assert [jar.name for jar in jars] == ["dokka-base-1.9.20.jar", "dokka-cli-1.9.20.jar"]
        assert all(jar.is_absolute() for jar in jars)

    def test_whole_name_must_match(self, tmp_path: Path) -> None:
        (tmp_path / "dokka-cli-1.9.20.jar.bak").write_bytes(b"")
        (tmp_path / "dokka-cli-1.9.20.jar").write_bytes(b"")
        jars = get_jar_list(tmp_path, r"dokka-cli.*\.jar")
        assert [jar.name for jar in jars] == ["dokka-cli-1.9.20.jar"]

    def test_missing_directory(self, tmp_path: Path) -> None:
        assert get_jar_list(tmp_path / "missing", r"^.*\.jar$") == []
