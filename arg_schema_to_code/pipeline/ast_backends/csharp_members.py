"""
C# member rendering.

Pure functions that turn one resolved argument into lines of C#, and the
three emission strategies (storage fields, accessor properties, assignment
statements) the walker drives. Lines are returned relative to the writer's
current depth.
"""

from __future__ import annotations

from ...logging import get_logger
from ...utils import capitalize, escape_doc_text
from ..analyzer.context import EmissionContext
from ..analyzer.shapes import ResolvedArgument, ShapeKind
from ..analyzer.walker import MemberEmitter
from ..config import CodeGeneratorConfig
from .csharp_ast_backend import CSharpAstBackend
from .writer import IndentedTextWriter

logger = get_logger("members")

INDENT = IndentedTextWriter.INDENT

BOOLEAN_DOC_PREFIX = "a value indicating whether "


def render_storage(type_name: str, name: str, default: str | None) -> list[str]:
    """Private field declaration followed by a blank separator line."""
    initializer = "" if default is None else f" = {default}"
    return [f"private {type_name} {name}{initializer};", ""]


def render_doc_summary(text: str) -> list[str]:
    """XML summary comment; every line of multi-line text keeps the /// prefix."""
    lines = escape_doc_text(text).splitlines() or [""]
    if len(lines) == 1:
        return [f"/// <summary> {lines[0]} </summary>"]
    return (
        [f"/// <summary> {lines[0]}".rstrip()]
        + [f"/// {line}".rstrip() for line in lines[1:-1]]
        + [f"/// {lines[-1]} </summary>"]
    )


def render_accessor(type_name: str, name: str, is_boolean: bool, help_text: str | None) -> list[str]:
    """Public property delegating to the private field of the same name."""
    summary = help_text if help_text is not None else name
    prefix = BOOLEAN_DOC_PREFIX if is_boolean else ""
    return [
        *render_doc_summary(f"Gets or sets {prefix}{summary}"),
        f"public {type_name} {capitalize(name)}",
        "{",
        f"{INDENT}get {{ return {name}; }}",
        f"{INDENT}set {{ {name} = value; }}",
        "}",
        "",
    ]


def render_assignment(
    shape: ShapeKind,
    long_name: str,
    name: str,
    suffix: str = "",
    column_type: str | None = None,
    lift: bool = True,
) -> str:
    """
    Statement copying a generated member back into the real arguments object.

    Args:
        shape: Resolved shape of the argument
        long_name: Field name on the arguments object
        name: Rendered member name (long_name + suffix)
        suffix: Suffix of the arguments variable (empty at the top level)
        column_type: Column-reference type for column collections
        lift: Whether generic collections are single values to be wrapped

    Returns:
        One C# statement
    """
    target = f"args{suffix}.{long_name}"

    if shape == ShapeKind.COLUMN_COLLECTION:
        return f"{target} = {name}.Select({column_type}.Parse).ToArray();"

    if shape == ShapeKind.GENERIC_COLLECTION and lift:
        return f"{target} = new[] {{ {name} }};"

    return f"{target} = {name};"


def render_group_open(type_name: str, suffix: str) -> str:
    """Declare the arguments object of a subcomponent."""
    return f"var args{suffix} = new {type_name}();"


def render_group_close(long_name: str, parent_suffix: str, suffix: str) -> str:
    """Attach a filled subcomponent arguments object to its parent."""
    return f"args{parent_suffix}.{long_name} = args{suffix};"


class StorageEmitter(MemberEmitter):
    """Writes one private field per argument."""

    def emit(self, context: EmissionContext, resolved: ResolvedArgument) -> None:
        context.writer.write_lines(render_storage(resolved.type_name, resolved.name, resolved.default))


class AccessorEmitter(MemberEmitter):
    """Writes one documented public property per argument."""

    def emit(self, context: EmissionContext, resolved: ResolvedArgument) -> None:
        context.writer.write_lines(
            render_accessor(resolved.type_name, resolved.name, resolved.is_boolean, resolved.help_text)
        )


class AssignmentEmitter(MemberEmitter):
    """Writes the statements filling the arguments object from the members.

    This path can run as a separate pass, so the exclusion predicate is checked
    again here.
    """

    def __init__(self, backend: CSharpAstBackend, config: CodeGeneratorConfig):
        self.backend = backend
        self.config = config

    def emit(self, context: EmissionContext, resolved: ResolvedArgument) -> None:
        if self.config.is_excluded(resolved.long_name):
            return

        column_type = None
        if resolved.shape == ShapeKind.COLUMN_COLLECTION:
            column_type = self.backend.column_type_name(resolved.argument)
        elif resolved.shape == ShapeKind.GENERIC_COLLECTION and self.config.lift_generic_collections:
            logger.warning(
                "Collection argument '%s' of '%s' is generated as a single value",
                resolved.long_name,
                context.component,
            )

        context.writer.write_line(
            render_assignment(
                resolved.shape,
                resolved.long_name,
                resolved.name,
                context.suffix,
                column_type,
                self.config.lift_generic_collections,
            )
        )

    def begin_group(self, context: EmissionContext, resolved: ResolvedArgument) -> None:
        if self.config.is_excluded(resolved.long_name):
            return
        context.writer.write_line(render_group_open(resolved.type_name, resolved.suffix))

    def end_group(self, context: EmissionContext, resolved: ResolvedArgument) -> None:
        if self.config.is_excluded(resolved.long_name):
            return
        context.writer.write_line(render_group_close(resolved.long_name, context.suffix, resolved.suffix))
