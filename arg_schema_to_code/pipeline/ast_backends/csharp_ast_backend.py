"""
C# code generation backend.

Owns the fixed schema-kind to C# type table and the rendering of default
values as C# literals.
"""

from __future__ import annotations

import math
from dataclasses import replace
from typing import Any

from ...logging import get_logger
from ..analyzer.shapes import ShapeKind
from ..config import CodeGeneratorConfig
from ..errors import UnmappedTypeError
from ..schema_ast.nodes import NAMED_KINDS, ArgumentSchema, SchemaKind, SchemaType
from .base import AstBackend

logger = get_logger("csharp")

STRING_SEQUENCE = SchemaType.sequence_of(SchemaType(kind=SchemaKind.STRING))


class CSharpAstBackend(AstBackend):
    """C# code generation backend."""

    TYPE_MAP = {
        SchemaKind.BOOLEAN: "bool",
        SchemaKind.INTEGER: "int",
        SchemaKind.LONG: "long",
        SchemaKind.FLOAT: "float",
        SchemaKind.DOUBLE: "double",
        SchemaKind.STRING: "string",
        SchemaKind.CHAR: "char",
    }

    def __init__(self, config: CodeGeneratorConfig):
        super().__init__(config)

    def map_type(self, schema_type: SchemaType) -> str:
        """Translate a schema type to a C# type string."""
        result = self._map_type_inner(schema_type)

        if schema_type.nullable and not result.endswith("?"):
            result = f"{result}?"

        return result

    def _map_type_inner(self, schema_type: SchemaType) -> str:
        """Inner type translation without nullable handling."""
        if schema_type.kind in self.TYPE_MAP:
            return self.TYPE_MAP[schema_type.kind]

        if schema_type.kind in NAMED_KINDS:
            if not schema_type.name:
                raise UnmappedTypeError(f"Type kind '{schema_type.kind.value}' has no name")
            return schema_type.name

        if schema_type.kind == SchemaKind.SEQUENCE:
            if schema_type.item is None:
                raise UnmappedTypeError("Sequence type has no item type")
            return f"{self.map_type(schema_type.item)}[]"

        raise UnmappedTypeError(f"No C# type for schema kind '{schema_type.kind.value}'")

    def type_name_for(self, shape: ShapeKind, argument: ArgumentSchema) -> str:
        """Return the member type name for an argument of the given shape."""
        if shape == ShapeKind.COLUMN_COLLECTION:
            # The column type is still needed by the assignment's Parse call
            self.column_type_name(argument)
            return self.map_type(STRING_SEQUENCE)

        if shape == ShapeKind.STRING_COLLECTION:
            return self.map_type(argument.field_type)

        if shape == ShapeKind.GENERIC_COLLECTION:
            if self.config.lift_generic_collections:
                return self.map_type(argument.item_type)
            return self.map_type(SchemaType.sequence_of(argument.item_type))

        if shape == ShapeKind.SUBCOMPONENT_GROUP:
            return self.map_type(argument.field_type)

        return self.map_type(argument.item_type)

    def column_type_name(self, argument: ArgumentSchema) -> str:
        """Name of the column-reference type whose Parse method reads one element."""
        return self.map_type(replace(argument.item_type, nullable=False))

    def render_default(self, shape: ShapeKind, argument: ArgumentSchema) -> str | None:
        """Render the initializer of the member generated for `argument`."""
        value = argument.default_value
        if not argument.has_default or value is None:
            return None

        if shape == ShapeKind.SUBCOMPONENT_GROUP:
            return None

        if shape == ShapeKind.SCALAR:
            return self.format_default_value(value, argument.item_type)

        if shape == ShapeKind.STRING_COLLECTION:
            return self.format_default_value(_as_list(value), argument.field_type)

        if shape == ShapeKind.COLUMN_COLLECTION:
            return self.format_default_value([str(v) for v in _as_list(value)], STRING_SEQUENCE)

        # Generic collection
        if not self.config.lift_generic_collections:
            return self.format_default_value(_as_list(value), SchemaType.sequence_of(argument.item_type))

        if not isinstance(value, list):
            return self.format_default_value(value, argument.item_type)
        if len(value) == 1:
            return self.format_default_value(value[0], argument.item_type)

        logger.debug("Dropping default of '%s': %d values do not fit a single member", argument.long_name, len(value))
        return None

    def format_default_value(self, value: Any, schema_type: SchemaType) -> str | None:
        """Format a default value for C#."""
        if value is None:
            return None

        if isinstance(value, list):
            return self._format_list_default(value, schema_type)

        if isinstance(value, bool):
            return "true" if value else "false"

        kind = schema_type.kind

        if kind == SchemaKind.ENUM and isinstance(value, str):
            return f"{schema_type.name}.{value}"

        if kind == SchemaKind.CHAR and isinstance(value, str):
            escaped = value.replace("\\", "\\\\").replace("'", "\\'")
            return f"'{escaped}'"

        if isinstance(value, str):
            escaped = value.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n").replace("\r", "\\r").replace("\t", "\\t")
            return f'"{escaped}"'

        if isinstance(value, (int, float)):
            return self._format_number(value, schema_type)

        return str(value)

    def _format_number(self, value: int | float, schema_type: SchemaType) -> str:
        """Format a numeric literal; float literals need the 'f' suffix."""
        kind = schema_type.kind

        if kind in (SchemaKind.INTEGER, SchemaKind.LONG, SchemaKind.ENUM) and isinstance(value, float):
            if not value.is_integer():
                raise UnmappedTypeError(f"Default {value!r} is not a whole number for type '{kind.value}'")
            value = int(value)

        if kind == SchemaKind.ENUM:
            # Underlying value of a named enumeration
            literal = f"({value})" if value < 0 else str(value)
            return f"({schema_type.name}){literal}"

        if kind in (SchemaKind.FLOAT, SchemaKind.DOUBLE):
            keyword = self.TYPE_MAP[kind]
            number = float(value)
            if math.isnan(number):
                return f"{keyword}.NaN"
            if math.isinf(number):
                return f"{keyword}.PositiveInfinity" if number > 0 else f"{keyword}.NegativeInfinity"
            literal = repr(number)
            return f"{literal}f" if kind == SchemaKind.FLOAT else literal

        if kind == SchemaKind.LONG:
            return f"{value}L"

        if kind == SchemaKind.INTEGER:
            return str(value)

        raise UnmappedTypeError(f"Numeric default {value!r} for non-numeric type '{kind.value}'")

    def _format_list_default(self, value: list, schema_type: SchemaType) -> str:
        """Format a list default value for C#."""
        if not schema_type.is_sequence or schema_type.item is None:
            raise UnmappedTypeError(f"List default {value!r} for non-sequence type '{schema_type.kind.value}'")

        type_name = self.map_type(schema_type.item)
        if len(value) == 0:
            return f"new {type_name}[0]"

        items = []
        for item in value:
            formatted = self.format_default_value(item, schema_type.item)
            items.append("null" if formatted is None else formatted)

        return f"new {type_name}[] {{ {', '.join(items)} }}"


def _as_list(value: Any) -> list:
    return value if isinstance(value, list) else [value]
