"""
Argument schema node definitions.

These nodes describe the configurable arguments of a component. They are
produced once by the catalog parser and are read-only for the rest of the
pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class SchemaKind(Enum):
    """Kind of a schema type."""

    BOOLEAN = "bool"
    INTEGER = "int"
    LONG = "long"
    FLOAT = "float"
    DOUBLE = "double"
    STRING = "string"
    CHAR = "char"
    ENUM = "enum"  # Named enumeration
    OBJECT = "object"  # Named nested-object reference
    COLUMN = "column"  # Reference to a data column, parsed from text
    SEQUENCE = "sequence"  # T[]


# Kinds that render to their declared name rather than a fixed keyword
NAMED_KINDS = frozenset({SchemaKind.ENUM, SchemaKind.OBJECT, SchemaKind.COLUMN})


@dataclass(frozen=True)
class SchemaType:
    """A declared argument type."""

    kind: SchemaKind = SchemaKind.STRING
    name: str = ""  # For named kinds (enum, object, column)
    item: SchemaType | None = None  # For sequences
    nullable: bool = False

    @property
    def is_sequence(self) -> bool:
        return self.kind == SchemaKind.SEQUENCE

    @property
    def is_string_sequence(self) -> bool:
        return self.is_sequence and self.item is not None and self.item.kind == SchemaKind.STRING

    @staticmethod
    def sequence_of(item: SchemaType) -> SchemaType:
        return SchemaType(kind=SchemaKind.SEQUENCE, item=item)


@dataclass(frozen=True)
class ArgumentSchema:
    """One configurable argument of a component."""

    long_name: str = ""

    # Element type for collections, scalar type otherwise
    item_type: SchemaType | None = None

    # Raw declared type before collection/column resolution
    field_type: SchemaType | None = None

    is_collection: bool = False
    is_hidden: bool = False

    # has_default separates "no default" from an explicit null default
    default_value: Any = None
    has_default: bool = False

    help_text: str | None = None

    # Arguments of a nested subcomponent
    nested: tuple[ArgumentSchema, ...] | None = None

    @property
    def is_subcomponent(self) -> bool:
        return self.nested is not None


@dataclass(frozen=True)
class ComponentSchema:
    """A component and the ordered list of its arguments."""

    name: str = ""
    kind: str = ""  # e.g. "transform", "trainer"
    arguments_type: str = ""  # Real arguments class the body assigns into
    implementation_type: str = ""  # Class instantiated by the generated method
    arguments: tuple[ArgumentSchema, ...] = field(default_factory=tuple)
    summary: str | None = None
