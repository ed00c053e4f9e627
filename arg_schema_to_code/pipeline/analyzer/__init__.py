"""
Analyzer module.

Contains argument classification, the emission context and the schema walker.
"""

from __future__ import annotations

from .context import EmissionContext
from .shapes import ResolvedArgument, ShapeKind, classify
from .walker import MemberEmitter, SchemaWalker

__all__ = [
    "EmissionContext",
    "MemberEmitter",
    "ResolvedArgument",
    "SchemaWalker",
    "ShapeKind",
    "classify",
]
