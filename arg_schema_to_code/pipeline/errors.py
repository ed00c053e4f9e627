"""
Errors raised during code generation.

Generation is deterministic, so none of these are retried: the schema or the
type mapping table has to be fixed instead.
"""

from __future__ import annotations


class CodeGenerationError(Exception):
    """Raised when a generation pass cannot complete.

    Carries the offending component and argument long-name so that the
    upstream catalog can be corrected.
    """

    def __init__(self, message: str, component: str | None = None, argument: str | None = None):
        self.reason = message
        self.component = component
        self.argument = argument
        super().__init__(self._format())

    def _format(self) -> str:
        location = []
        if self.component:
            location.append(f"component '{self.component}'")
        if self.argument:
            location.append(f"argument '{self.argument}'")
        if not location:
            return self.reason
        return f"{', '.join(location)}: {self.reason}"

    def located(self, component: str | None = None, argument: str | None = None) -> CodeGenerationError:
        """Fill in the location fields that are still unknown and refresh the message."""
        if self.component is None:
            self.component = component
        if self.argument is None:
            self.argument = argument
        self.args = (self._format(),)
        return self

    def __str__(self) -> str:
        return self._format()


class SchemaClassificationError(CodeGenerationError):
    """An argument does not fit any resolved shape.

    This can happen when:
    - The collection flag is set but no item type can be resolved
    - A scalar argument has no type at all
    - A subcomponent is declared as a collection
    """


class UnmappedTypeError(CodeGenerationError):
    """A schema type has no entry in the type mapping table, or a default
    value cannot be written as a literal of its declared type.
    """
