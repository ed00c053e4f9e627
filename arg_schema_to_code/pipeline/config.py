"""
Configuration for the code generator pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class CodeGeneratorConfig:
    """Configuration options for code generation."""

    # Argument long-names to skip in every emitted block
    exclude: list[str] = field(default_factory=list)

    # Whether hidden arguments are generated as well
    include_hidden: bool = False

    # Generate collection arguments as a single value wrapped into a one-element
    # array on assignment. When off, the member is a full array copied as is.
    lift_generic_collections: bool = True

    # Add generation comment at top of file
    add_generation_comment: bool = True

    # Namespace wrapping the generated classes (empty = none)
    csharp_namespace: str = ""

    # Using directives emitted at the top of the file
    csharp_usings: list[str] = field(
        default_factory=lambda: [
            "System",
            "System.Linq",
            "Microsoft.ML",
            "Microsoft.ML.CommandLine",
            "Microsoft.ML.Data",
            "Microsoft.ML.Internal.Internallearn",
        ]
    )

    # Appended to the PascalCase component name to form the class name
    class_suffix: str = ""

    def is_excluded(self, long_name: str) -> bool:
        """Exclusion predicate shared by every emission path."""
        return long_name in self.exclude

    @staticmethod
    def from_dict(d: dict) -> CodeGeneratorConfig:
        """Create a config from a dictionary."""
        config = CodeGeneratorConfig()
        for k, v in d.items():
            if hasattr(config, k):
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "exclude": self.exclude,
            "include_hidden": self.include_hidden,
            "lift_generic_collections": self.lift_generic_collections,
            "add_generation_comment": self.add_generation_comment,
            "csharp_namespace": self.csharp_namespace,
            "csharp_usings": self.csharp_usings,
            "class_suffix": self.class_suffix,
        }
