"""Argument Schema to Code Generator

Generates C# implementation classes (storage fields, documented accessor
properties and argument-assignment bodies) from component argument schemas.
"""

__version__ = "0.1.0"

from .pipeline import (
    CodeGenerationError,
    CodeGeneratorConfig,
    FileGenerator,
    ImplGenerator,
    SchemaClassificationError,
    UnmappedTypeError,
    get_generator,
)

__all__ = [
    "CodeGenerationError",
    "CodeGeneratorConfig",
    "FileGenerator",
    "ImplGenerator",
    "SchemaClassificationError",
    "UnmappedTypeError",
    "get_generator",
]
