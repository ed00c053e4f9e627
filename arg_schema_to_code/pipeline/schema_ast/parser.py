"""
Catalog parser.

Converts a JSON component catalog into ArgumentSchema/ComponentSchema values.
This is the only place where raw dictionaries are inspected; everything
downstream works on the immutable schema nodes.

Catalog format::

    {
        "components": [
            {
                "name": "text_normalizer",
                "kind": "transform",
                "arguments_type": "TextNormalizerTransform.Arguments",
                "implementation_type": "TextNormalizerTransform",
                "arguments": [
                    {"name": "column", "type": {"kind": "column", "name": "Column"}, "collection": true},
                    {"name": "keep_numbers", "type": "bool", "default": true, "help": "Keep digits"}
                ]
            }
        ]
    }
"""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

from ..errors import SchemaClassificationError, UnmappedTypeError
from .nodes import NAMED_KINDS, ArgumentSchema, ComponentSchema, SchemaKind, SchemaType

ExclusionPredicate = Callable[[str], bool]

PRIMITIVE_NAMES: dict[str, SchemaKind] = {
    "bool": SchemaKind.BOOLEAN,
    "boolean": SchemaKind.BOOLEAN,
    "int": SchemaKind.INTEGER,
    "integer": SchemaKind.INTEGER,
    "long": SchemaKind.LONG,
    "float": SchemaKind.FLOAT,
    "double": SchemaKind.DOUBLE,
    "number": SchemaKind.DOUBLE,
    "string": SchemaKind.STRING,
    "str": SchemaKind.STRING,
    "char": SchemaKind.CHAR,
}


def parse_type(raw: Any, argument: str | None = None) -> SchemaType:
    """
    Parse a type declaration.

    Args:
        raw: A primitive name ("int", "string[]", "float?") or a dict with
            "kind", "name", "item" and "nullable" keys
        argument: Name of the argument being parsed, for error messages

    Returns:
        The parsed SchemaType
    """
    if isinstance(raw, str):
        text = raw.strip()
        nullable = text.endswith("?")
        if nullable:
            text = text[:-1]
        if text.endswith("[]"):
            return SchemaType(kind=SchemaKind.SEQUENCE, item=parse_type(text[:-2], argument), nullable=nullable)
        if text not in PRIMITIVE_NAMES:
            raise UnmappedTypeError(f"Unknown type '{raw}'", argument=argument)
        return SchemaType(kind=PRIMITIVE_NAMES[text], nullable=nullable)

    if isinstance(raw, dict):
        kind_name = raw.get("kind")
        try:
            kind = SchemaKind(kind_name)
        except ValueError:
            if kind_name in PRIMITIVE_NAMES:
                kind = PRIMITIVE_NAMES[kind_name]
            else:
                raise UnmappedTypeError(f"Unknown type kind '{kind_name}'", argument=argument) from None

        name = raw.get("name", "")
        if kind in NAMED_KINDS and not name:
            raise UnmappedTypeError(f"Type kind '{kind.value}' requires a name", argument=argument)

        item = None
        if kind == SchemaKind.SEQUENCE:
            if "item" not in raw:
                raise UnmappedTypeError("Sequence type requires an item type", argument=argument)
            item = parse_type(raw["item"], argument)

        return SchemaType(kind=kind, name=name, item=item, nullable=bool(raw.get("nullable", False)))

    raise UnmappedTypeError(f"Unsupported type declaration {raw!r}", argument=argument)


def parse_arguments(entries: list[dict[str, Any]], is_excluded: ExclusionPredicate | None = None) -> tuple[ArgumentSchema, ...]:
    """
    Parse a list of argument entries, dropping excluded ones unparsed.

    Args:
        entries: Raw argument entries in declaration order
        is_excluded: Predicate on the long-name; matching entries are skipped
            before their type is looked at

    Returns:
        The parsed arguments, in declaration order
    """
    arguments = []
    for entry in entries:
        if is_excluded is not None and entry.get("name") and is_excluded(entry["name"]):
            continue
        arguments.append(parse_argument(entry, is_excluded))
    return tuple(arguments)


def parse_argument(raw: dict[str, Any], is_excluded: ExclusionPredicate | None = None) -> ArgumentSchema:
    """Parse one argument entry of a component."""
    long_name = raw.get("name")
    if not long_name:
        raise SchemaClassificationError(f"Argument entry without a name: {raw!r}")

    nested = None
    if "arguments" in raw:
        nested = parse_arguments(raw["arguments"], is_excluded)

    field_type = None
    if "type" in raw:
        field_type = parse_type(raw["type"], long_name)
    elif nested is not None:
        raise UnmappedTypeError("Subcomponent requires an object type name", argument=long_name)

    is_collection = raw.get("collection")
    if is_collection is None:
        is_collection = field_type is not None and field_type.is_sequence

    if not is_collection:
        item_type = field_type
    elif "item_type" in raw:
        item_type = parse_type(raw["item_type"], long_name)
    elif field_type is not None and field_type.is_sequence:
        item_type = field_type.item
    else:
        item_type = field_type

    return ArgumentSchema(
        long_name=long_name,
        item_type=item_type,
        field_type=field_type,
        is_collection=bool(is_collection),
        is_hidden=bool(raw.get("hidden", False)),
        default_value=raw.get("default"),
        has_default="default" in raw,
        help_text=raw.get("help"),
        nested=nested,
    )


def parse_component(raw: dict[str, Any], is_excluded: ExclusionPredicate | None = None) -> ComponentSchema:
    """Parse one component entry of the catalog."""
    name = raw.get("name")
    if not name:
        raise SchemaClassificationError(f"Component entry without a name: {raw!r}")

    try:
        arguments = parse_arguments(raw.get("arguments", []), is_excluded)
    except (SchemaClassificationError, UnmappedTypeError) as e:
        raise e.located(component=name) from None

    return ComponentSchema(
        name=name,
        kind=raw.get("kind", "transform"),
        arguments_type=raw.get("arguments_type", "Arguments"),
        implementation_type=raw.get("implementation_type", name),
        arguments=arguments,
        summary=raw.get("summary"),
    )


def parse_catalog(raw: dict[str, Any] | list[Any], is_excluded: ExclusionPredicate | None = None) -> list[ComponentSchema]:
    """Parse a whole catalog (either {"components": [...]} or a bare list)."""
    entries = raw.get("components", []) if isinstance(raw, dict) else raw
    return [parse_component(entry, is_excluded) for entry in entries]


def load_catalog(path: str | Path, is_excluded: ExclusionPredicate | None = None) -> list[ComponentSchema]:
    """Load and parse a catalog file."""
    with open(path, encoding="utf-8") as f:
        return parse_catalog(json.load(f), is_excluded)
