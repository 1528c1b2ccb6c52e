"""Join parsed values with extracted descriptions into table rows."""

from __future__ import annotations

import json
from typing import Any

from .models import ValueDescription, ValueRow


def value_type(value: Any) -> str:
    """Name the YAML type of a value as shown in the values table."""
    # bool is a subclass of int, check it first
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, int):
        return "int"
    if isinstance(value, float):
        return "float"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "list"
    if isinstance(value, dict):
        return "object"
    if value is None:
        return "null"
    # dates and other YAML scalars
    return "string"


def format_default(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"), default=str)


def flatten_values(
    values: dict[Any, Any],
    prefix: str = "",
    documented: frozenset[str] = frozenset(),
) -> list[tuple[str, Any]]:
    """Flatten nested mappings into (dotted key, leaf value) pairs.

    Non-empty mappings recurse unless their own key is in `documented`.
    """
    pairs: list[tuple[str, Any]] = []
    for raw_key, value in values.items():
        key = f"{prefix}{raw_key}"
        if isinstance(value, dict) and value and key not in documented:
            pairs.extend(flatten_values(value, f"{key}.", documented))
        else:
            pairs.append((key, value))
    return pairs


def build_value_rows(
    values: dict[Any, Any],
    descriptions: dict[str, ValueDescription],
) -> list[ValueRow]:
    """Build one row per leaf key, sorted by key.

    An explicit @default override replaces the JSON-encoded value.
    Keys without a description get an empty description.
    """
    rows = []
    for key, value in flatten_values(values, documented=frozenset(descriptions)):
        doc = descriptions.get(key)
        default = doc.default if doc is not None and doc.default is not None else format_default(value)
        rows.append(
            ValueRow(
                key=key,
                type=value_type(value),
                default=default,
                description=doc.description if doc is not None else "",
            )
        )
    return sorted(rows, key=lambda r: r.key)
