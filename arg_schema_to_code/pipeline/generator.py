"""
Implementation class generator.

Turns component schemas into C# classes made of four blocks:

1. Private storage fields, one per argument
2. Public accessor properties delegating to the fields
3. A method signature supplied by the component kind (or the caller)
4. A method body filling the real arguments object from the members

Each block is one walk over the same argument list with a different emission
strategy. A component is rendered into a private buffer and only returned
once every block succeeded, so a failing component yields no output at all.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from pathlib import Path

import jinja2

from ..logging import get_logger
from ..utils import snake_to_pascal_case
from .analyzer.context import EmissionContext
from .analyzer.walker import MemberEmitter, SchemaWalker
from .ast_backends.csharp_ast_backend import CSharpAstBackend
from .ast_backends.csharp_members import AccessorEmitter, AssignmentEmitter, StorageEmitter, render_doc_summary
from .ast_backends.writer import IndentedTextWriter
from .config import CodeGeneratorConfig
from .errors import CodeGenerationError
from .schema_ast.nodes import ComponentSchema

logger = get_logger("generator")

TEMPLATE_DIR = Path(__file__).parent.parent / "templates" / "cs"


class ImplGenerator(ABC):
    """Generates the members and the factory method of one component."""

    # Component kind handled by this generator
    KIND: str = ""

    def __init__(self, config: CodeGeneratorConfig | None = None, backend: CSharpAstBackend | None = None):
        self.config = config or CodeGeneratorConfig()
        self.backend = backend or CSharpAstBackend(self.config)
        self.walker = SchemaWalker(self.backend, self.config)

    def generate_content(self, component: ComponentSchema, method_signature: str | None = None) -> str:
        """
        Generate the member list of the class for `component`.

        Args:
            component: The component schema
            method_signature: Pre-rendered signature line; defaults to the one
                of this generator's component kind

        Returns:
            The class members, unindented

        Raises:
            CodeGenerationError: If any argument cannot be classified or mapped
        """
        writer = IndentedTextWriter()
        context = EmissionContext(writer=writer, component=component.name)

        self.generate_impl_fields(component, context, StorageEmitter())
        self.generate_impl_fields(component, context, AccessorEmitter())
        writer.write_line(method_signature or self.method_signature(component))
        self.generate_impl_body(component, context)

        return writer.getvalue()

    def generate_impl_fields(self, component: ComponentSchema, context: EmissionContext, emitter: MemberEmitter) -> None:
        """Walk every argument of `component` with the given strategy."""
        self.walker.walk(component.arguments, context, emitter)

    def generate_impl_body(self, component: ComponentSchema, context: EmissionContext) -> None:
        """Write the method body: prologue, assignments, epilogue."""
        writer = context.writer
        writer.write_line("{")
        with writer.nest():
            writer.write_lines(self.body_prologue(component))
            self.generate_impl_fields(component, context, AssignmentEmitter(self.backend, self.config))
            writer.write_lines(self.body_epilogue(component))
        writer.write_line("}")

    @abstractmethod
    def method_signature(self, component: ComponentSchema) -> str:
        """Signature line of the generated factory method."""

    def body_prologue(self, component: ComponentSchema) -> list[str]:
        return [f"var args = new {component.arguments_type}();"]

    @abstractmethod
    def body_epilogue(self, component: ComponentSchema) -> list[str]:
        """Statements following the assignments."""


class TransformImplGenerator(ImplGenerator):
    KIND = "transform"

    def method_signature(self, component: ComponentSchema) -> str:
        return "public IDataTransform Create(IHostEnvironment env, IDataView input)"

    def body_epilogue(self, component: ComponentSchema) -> list[str]:
        return [f"return new {component.implementation_type}(env, args, input);"]


class TrainerImplGenerator(ImplGenerator):
    KIND = "trainer"

    def method_signature(self, component: ComponentSchema) -> str:
        return "public ITrainer CreateTrainer(IHostEnvironment env)"

    def body_epilogue(self, component: ComponentSchema) -> list[str]:
        return [f"return new {component.implementation_type}(env, args);"]


GENERATORS: dict[str, type[ImplGenerator]] = {
    TransformImplGenerator.KIND: TransformImplGenerator,
    TrainerImplGenerator.KIND: TrainerImplGenerator,
}


def get_generator(kind: str, config: CodeGeneratorConfig | None = None) -> ImplGenerator:
    """Return the generator for a component kind."""
    if kind not in GENERATORS:
        raise CodeGenerationError(f"No generator for component kind '{kind}' (known: {', '.join(sorted(GENERATORS))})")
    return GENERATORS[kind](config)


class FileGenerator:
    """Assembles the classes of several components into one C# file."""

    def __init__(self, config: CodeGeneratorConfig | None = None, generation_comment: str = ""):
        self.config = config or CodeGeneratorConfig()
        self.generation_comment = generation_comment

        self.jinja_env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(TEMPLATE_DIR)),
            lstrip_blocks=True,
            trim_blocks=True,
        )
        self.prefix_template = self.jinja_env.get_template("prefix.cs.jinja2")

    def class_name(self, component: ComponentSchema) -> str:
        return snake_to_pascal_case(component.name) + self.config.class_suffix

    def generate_class(self, component: ComponentSchema) -> list[str]:
        """Lines of the class generated for `component`, unindented."""
        try:
            content = get_generator(component.kind, self.config).generate_content(component)
        except CodeGenerationError as e:
            e.located(component=component.name)
            raise

        lines = []
        if component.summary:
            lines.extend(render_doc_summary(component.summary))
        lines.append(f"public sealed partial class {self.class_name(component)}")
        lines.append("{")
        lines.extend(f"{IndentedTextWriter.INDENT}{line}" if line else "" for line in content.splitlines())
        lines.append("}")
        return lines

    def generate(self, components: Sequence[ComponentSchema]) -> str:
        """
        Generate a complete C# file.

        Args:
            components: Components to generate, in output order

        Returns:
            The file contents
        """
        writer = IndentedTextWriter()

        prefix = self.prefix_template.render(
            generation_comment=self.generation_comment if self.config.add_generation_comment else "",
            usings=self.config.csharp_usings,
        ).rstrip("\n")
        if prefix:
            writer.write_lines(prefix.split("\n"))
            writer.write_line()

        if self.config.csharp_namespace:
            writer.write_line(f"namespace {self.config.csharp_namespace}")
            writer.write_line("{")
            with writer.nest():
                self._write_classes(writer, components)
            writer.write_line("}")
        else:
            self._write_classes(writer, components)

        return writer.getvalue()

    def _write_classes(self, writer: IndentedTextWriter, components: Sequence[ComponentSchema]) -> None:
        for i, component in enumerate(components):
            logger.info("Generating %s (%s)", self.class_name(component), component.kind)
            class_lines = self.generate_class(component)
            if i > 0:
                writer.write_line()
            writer.write_lines(class_lines)
