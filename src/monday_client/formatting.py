"""
GraphQL text helpers.

Queries are assembled as plain strings; there is no schema awareness here.
Whether a string argument is quoted depends only on whether it contains
whitespace, so enum values and single-word strings render identically.
"""

from __future__ import annotations

import json
from enum import Enum
from typing import Any, Mapping, Optional, Sequence, Union

MAX_SELECT_DEPTH = 64

SelectItem = Union[str, Mapping[str, Any]]


class SelectionDepthError(ValueError):
    """Raised when a selection nests deeper than MAX_SELECT_DEPTH."""


class GraphQLEnum(str):
    """A string emitted bare (unquoted) inside GraphQL input objects."""


def _is_multi_word(value: str) -> bool:
    return any(ch.isspace() for ch in value.strip())


def _format_arg_value(value: Any) -> str:
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, str):
        return f'"{value}"' if _is_multi_word(value) else value
    if isinstance(value, Mapping):
        # JSON scalar arguments (column_values etc.) travel as a JSON string
        return json.dumps(json.dumps(value))
    if isinstance(value, (list, tuple)):
        return json.dumps(list(value))
    return str(value)


def format_args(args: Optional[Mapping[str, Any]]) -> str:
    """
    Convert an argument mapping into a GraphQL argument list.

    {"key": "multiple word value", "limit": 5} -> 'key: "multiple word value", limit: 5'
    """
    if not args:
        return ""
    return ", ".join(f"{key}: {_format_arg_value(value)}" for key, value in args.items())


def format_arguments_block(args: Optional[Mapping[str, Any]]) -> str:
    """Wrap format_args in parentheses, or return "" when there are no args."""
    formatted = format_args(args)
    return f"({formatted})" if formatted else ""


def _as_selection(nested: Any) -> Sequence[SelectItem]:
    if isinstance(nested, (str, Mapping)):
        return [nested]
    return nested


def format_select(select: Sequence[SelectItem], *, _depth: int = 0) -> str:
    """
    Convert a selection list into a GraphQL selection set body.

    ["id", "name", {"columns": ["id"]}] -> "id name columns { id }"

    A mapping item is named after its first key; the selections of all
    its values are merged inside that field.
    """
    if _depth > MAX_SELECT_DEPTH:
        raise SelectionDepthError(
            f"Selection nesting exceeds {MAX_SELECT_DEPTH} levels."
        )

    parts: list[str] = []
    for item in select:
        if isinstance(item, Mapping):
            if not item:
                continue
            field = next(iter(item))
            inner = " ".join(
                format_select(_as_selection(nested), _depth=_depth + 1)
                for nested in item.values()
            )
            parts.append(f"{field} {{ {inner} }}")
        else:
            parts.append(str(item))
    return " ".join(parts)


def format_graphql_object(value: Any) -> str:
    """Render a value as a GraphQL input-object literal."""
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, GraphQLEnum):
        return str(value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, str):
        return json.dumps(value)
    if isinstance(value, Mapping):
        fields = ", ".join(
            f"{key}: {format_graphql_object(val)}" for key, val in value.items()
        )
        return "{" + fields + "}"
    if isinstance(value, (list, tuple)):
        return "[" + ", ".join(format_graphql_object(v) for v in value) + "]"
    return str(value)


__all__ = [
    "MAX_SELECT_DEPTH",
    "SelectionDepthError",
    "GraphQLEnum",
    "format_args",
    "format_arguments_block",
    "format_select",
    "format_graphql_object",
]
