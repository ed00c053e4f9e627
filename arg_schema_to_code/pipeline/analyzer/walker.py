"""
Schema walker.

Walks the argument list of a component in declaration order and hands every
surviving argument, fully resolved, to an emission strategy. The same walk
drives storage fields, accessor properties and assignment statements; the
walker itself never writes any text.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

from ...logging import get_logger
from ..ast_backends.base import AstBackend
from ..config import CodeGeneratorConfig
from ..errors import CodeGenerationError
from ..schema_ast.nodes import ArgumentSchema, SchemaKind
from .context import EmissionContext
from .shapes import ResolvedArgument, ShapeKind, classify

logger = get_logger("walker")


class MemberEmitter(ABC):
    """Emission strategy invoked by the walker for each argument."""

    @abstractmethod
    def emit(self, context: EmissionContext, resolved: ResolvedArgument) -> None:
        """Write the output for one non-group argument."""

    def begin_group(self, context: EmissionContext, resolved: ResolvedArgument) -> None:
        """Called before the members of a subcomponent are walked.

        `context` is the parent context; the nested suffix is `resolved.suffix`.
        """

    def end_group(self, context: EmissionContext, resolved: ResolvedArgument) -> None:
        """Called after the members of a subcomponent are walked."""


class SchemaWalker:
    """Filters, classifies and resolves arguments, then delegates emission."""

    def __init__(self, backend: AstBackend, config: CodeGeneratorConfig):
        self.backend = backend
        self.config = config

    def should_skip(self, argument: ArgumentSchema) -> bool:
        """Exclusion is checked first, then visibility."""
        if self.config.is_excluded(argument.long_name):
            logger.debug("Skipping excluded argument '%s'", argument.long_name)
            return True
        if argument.is_hidden and not self.config.include_hidden:
            logger.debug("Skipping hidden argument '%s'", argument.long_name)
            return True
        return False

    def resolve(self, argument: ArgumentSchema, suffix: str = "") -> ResolvedArgument:
        """
        Resolve an argument into the values handed to the emitter.

        Args:
            argument: The argument to resolve
            suffix: Name suffix accumulated in enclosing subcomponents

        Returns:
            The resolved argument
        """
        shape = classify(argument)
        if shape == ShapeKind.SUBCOMPONENT_GROUP:
            # The nested members carry the extended suffix
            member_suffix = f"{suffix}_{argument.long_name}"
        else:
            member_suffix = suffix

        return ResolvedArgument(
            argument=argument,
            shape=shape,
            type_name=self.backend.type_name_for(shape, argument),
            name=argument.long_name + suffix,
            default=self.backend.render_default(shape, argument),
            is_boolean=argument.item_type is not None and argument.item_type.kind == SchemaKind.BOOLEAN,
            help_text=argument.help_text,
            suffix=member_suffix,
        )

    def walk(self, arguments: Sequence[ArgumentSchema], context: EmissionContext, emitter: MemberEmitter) -> None:
        """
        Walk `arguments` in declaration order, recursing into subcomponents.

        Raises:
            CodeGenerationError: On the first argument that cannot be classified
                or whose type cannot be mapped, located at that argument
        """
        for argument in arguments:
            if self.should_skip(argument):
                continue

            try:
                resolved = self.resolve(argument, context.suffix)
            except CodeGenerationError as e:
                e.located(component=context.component, argument=argument.long_name)
                raise

            if resolved.shape == ShapeKind.SUBCOMPONENT_GROUP:
                emitter.begin_group(context, resolved)
                self.walk(argument.nested or (), context.descend(argument.long_name), emitter)
                emitter.end_group(context, resolved)
            else:
                emitter.emit(context, resolved)
