"""
Argument shape classification.

Every argument resolves to exactly one output-facing shape. The rule only
looks at the argument itself, never at its neighbours or emission order.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ...utils import capitalize
from ..errors import SchemaClassificationError
from ..schema_ast.nodes import ArgumentSchema, SchemaKind


class ShapeKind(Enum):
    """Resolved shape of an argument."""

    SCALAR = "scalar"
    COLUMN_COLLECTION = "column_collection"  # Rendered as string[], parsed back element-wise
    STRING_COLLECTION = "string_collection"  # Field already declared as string[]
    GENERIC_COLLECTION = "generic_collection"
    SUBCOMPONENT_GROUP = "subcomponent_group"


def classify(argument: ArgumentSchema) -> ShapeKind:
    """
    Classify an argument into its ShapeKind.

    Args:
        argument: The argument to classify

    Returns:
        The resolved shape

    Raises:
        SchemaClassificationError: If the argument is inconsistent, or if a
            member argument has a long-name whose property name would equal it
    """
    shape = _shape_of(argument)
    if shape != ShapeKind.SUBCOMPONENT_GROUP and capitalize(argument.long_name) == argument.long_name:
        raise SchemaClassificationError(
            "Long name must start with a lowercase letter to get a distinct property name",
            argument=argument.long_name,
        )
    return shape


def _shape_of(argument: ArgumentSchema) -> ShapeKind:
    if argument.is_subcomponent:
        if argument.is_collection:
            raise SchemaClassificationError("Subcomponent arguments cannot be collections", argument=argument.long_name)
        return ShapeKind.SUBCOMPONENT_GROUP

    if not argument.is_collection:
        if argument.item_type is None:
            raise SchemaClassificationError("Scalar argument has no type", argument=argument.long_name)
        return ShapeKind.SCALAR

    if argument.item_type is None:
        raise SchemaClassificationError("Collection argument has no resolvable item type", argument=argument.long_name)

    if argument.item_type.kind == SchemaKind.COLUMN:
        return ShapeKind.COLUMN_COLLECTION

    if argument.field_type is not None and argument.field_type.is_string_sequence:
        return ShapeKind.STRING_COLLECTION

    return ShapeKind.GENERIC_COLLECTION


@dataclass(frozen=True)
class ResolvedArgument:
    """An argument with everything an emitter needs already rendered."""

    argument: ArgumentSchema
    shape: ShapeKind
    type_name: str
    name: str  # long_name + suffix
    default: str | None
    is_boolean: bool
    help_text: str | None
    suffix: str = ""

    @property
    def long_name(self) -> str:
        return self.argument.long_name
