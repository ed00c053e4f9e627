"""
Base class for code generation backends.

Defines the interface that all language-specific backends must implement.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from ..config import CodeGeneratorConfig
from ..schema_ast.nodes import ArgumentSchema, SchemaKind, SchemaType

if TYPE_CHECKING:
    from ..analyzer.shapes import ShapeKind


class AstBackend(ABC):
    """Abstract base class for code generation backends."""

    # Type mapping from primitive schema kinds to language types
    TYPE_MAP: dict[SchemaKind, str] = {}

    def __init__(self, config: CodeGeneratorConfig):
        """
        Initialize the backend.

        Args:
            config: Code generation configuration
        """
        self.config = config

    @abstractmethod
    def map_type(self, schema_type: SchemaType) -> str:
        """
        Translate a schema type to a language-specific type string.

        Args:
            schema_type: The schema type

        Returns:
            Language-specific type string

        Raises:
            UnmappedTypeError: If the type has no mapping
        """

    @abstractmethod
    def type_name_for(self, shape: ShapeKind, argument: ArgumentSchema) -> str:
        """Return the member type name for an argument of the given shape."""

    @abstractmethod
    def format_default_value(self, value: Any, schema_type: SchemaType) -> str | None:
        """
        Format a default value for the target language.

        Args:
            value: The default value
            schema_type: The type of the value

        Returns:
            Formatted default value string, or None when there is nothing to render
        """

    @abstractmethod
    def render_default(self, shape: ShapeKind, argument: ArgumentSchema) -> str | None:
        """Render the initializer of the member generated for `argument`."""
