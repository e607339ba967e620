"""Path normalization and delimiter joining for Dokka arguments.

Every builder funnels path-like input through :func:`to_absolute`, so a raw
string, a :class:`pathlib.Path` and an :class:`os.DirEntry` naming the same
file all end up as the same absolute path string.

Delimiters (``;``, ``^``, ``=``) that appear inside user supplied values are
passed through untouched. Dokka has no escape syntax for them.
"""

from __future__ import annotations

import json
import os
import re
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Union

from dokka_extension.core.constants import (
    JAVADOC_JAR_SUFFIX,
    SEMICOLON,
    SOURCES_JAR_SUFFIX,
)

PathLike = Union[str, "os.PathLike[str]"]
PathInput = Union[PathLike, Iterable[PathLike]]

__all__ = [
    "PathLike",
    "PathInput",
    "to_absolute",
    "absolute_paths",
    "flatten_strings",
    "join_paths",
    "join_pairs",
    "encode_json",
    "is_not_blank",
    "get_jar_list",
]


def to_absolute(path: PathLike) -> str:
    """Return the normalized absolute path string for a path-like value.

    Args:
        path: A ``str``, ``pathlib.Path``, ``os.DirEntry`` or any other
            ``os.PathLike``.

    Returns:
        The absolute path, relative input being resolved against the
        current working directory.

    Raises:
        TypeError: If ``path`` is not path-like.
    """
    return os.path.abspath(os.fspath(path))


def _is_path_like(value: object) -> bool:
    return isinstance(value, (str, os.PathLike))


def absolute_paths(items: Iterable[PathInput]) -> list[str]:
    """Flatten path-likes and iterables of path-likes into absolute paths.

    Accepts the shapes a caller naturally has at hand: ``("a", "b")``,
    ``([Path("a"), Path("b")],)`` or a mix of both. Order is preserved.
    """
    paths: list[str] = []
    for item in items:
        if _is_path_like(item):
            paths.append(to_absolute(item))  # type: ignore[arg-type]
        else:
            paths.extend(to_absolute(p) for p in item)  # type: ignore[union-attr]
    return paths


def flatten_strings(values: Iterable[str | Iterable[str]]) -> list[str]:
    """Flatten strings and iterables of strings, keeping order."""
    flat: list[str] = []
    for value in values:
        if isinstance(value, str):
            flat.append(value)
        else:
            flat.extend(value)
    return flat


def join_paths(paths: Iterable[PathLike], separator: str = SEMICOLON) -> str:
    """Join paths as absolute path strings."""
    return separator.join(to_absolute(p) for p in paths)


def join_pairs(mapping: Mapping[str, str], template: str, separator: str) -> str:
    """Render ``mapping`` as ``template``-formatted pairs in ascending key order.

    Args:
        mapping: Key/value pairs to render.
        template: ``str.format`` template receiving the key and value,
            e.g. ``"{}^{}"``.
        separator: Separator placed between rendered pairs.

    Returns:
        The joined pairs; the same mapping always renders the same string,
        whatever order its keys were inserted in.
    """
    return separator.join(template.format(key, mapping[key]) for key in sorted(mapping))


def encode_json(value: str) -> str:
    """Wrap ``value`` in braces unless already brace-delimited, then JSON-escape it.

    ``name`` becomes ``{name}`` and ``{"json"}`` becomes ``{\\"json\\"}``.
    """
    if not (value.startswith("{") and value.endswith("}")):
        value = "{" + value + "}"
    return json.dumps(value, ensure_ascii=False)[1:-1]


def is_not_blank(value: str | None) -> bool:
    """Return True if ``value`` holds something other than whitespace."""
    return value is not None and value.strip() != ""


def get_jar_list(directory: PathLike, regex: str) -> list[Path]:
    """Return the JARs in ``directory`` whose file name matches ``regex``.

    Sources and Javadoc JARs are always skipped. The listing is sorted by
    file name; a missing directory yields an empty list.

    Args:
        directory: Directory to scan (not recursive).
        regex: Pattern the whole file name must match.

    Returns:
        Matching files as absolute paths.
    """
    root = Path(to_absolute(directory))
    if not root.is_dir():
        return []

    pattern = re.compile(regex)
    jars: list[Path] = []
    for entry in sorted(root.iterdir(), key=lambda p: p.name):
        name = entry.name
        if name.endswith(SOURCES_JAR_SUFFIX) or name.endswith(JAVADOC_JAR_SUFFIX):
            continue
        if pattern.fullmatch(name):
            jars.append(entry)
    return jars
