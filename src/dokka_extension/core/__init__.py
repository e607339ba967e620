"""Core helpers shared by the Dokka builders."""

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

__all__ = [
    "absolute_paths",
    "encode_json",
    "flatten_strings",
    "get_jar_list",
    "is_not_blank",
    "join_pairs",
    "join_paths",
    "to_absolute",
]
