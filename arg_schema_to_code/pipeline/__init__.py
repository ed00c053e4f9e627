"""
Pipeline - argument schema to C# member generator.

1. Phase 1 (Parser): Parse the component catalog into schema nodes
2. Phase 2 (Walker): Filter, classify and resolve every argument
3. Phase 3 (Backend): Map types and render members through an emission strategy
4. Phase 4 (Generator): Assemble members, method signature and body into classes
"""

from __future__ import annotations

from .config import CodeGeneratorConfig
from .errors import CodeGenerationError, SchemaClassificationError, UnmappedTypeError
from .generator import (
    GENERATORS,
    FileGenerator,
    ImplGenerator,
    TrainerImplGenerator,
    TransformImplGenerator,
    get_generator,
)

__all__ = [
    "CodeGeneratorConfig",
    "CodeGenerationError",
    "SchemaClassificationError",
    "UnmappedTypeError",
    "GENERATORS",
    "FileGenerator",
    "ImplGenerator",
    "TrainerImplGenerator",
    "TransformImplGenerator",
    "get_generator",
]
