"""
Emission context threaded through one generation pass.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from ..ast_backends.writer import IndentedTextWriter


@dataclass(frozen=True)
class EmissionContext:
    """Output cursor plus the name suffix accumulated in subcomponents.

    Owned by a single pass. The writer is shared with child contexts so that
    nested members land in the same block.
    """

    writer: IndentedTextWriter
    component: str = ""
    suffix: str = ""

    def descend(self, long_name: str) -> EmissionContext:
        """Context for the members of the subcomponent stored in `long_name`."""
        return replace(self, suffix=f"{self.suffix}_{long_name}")
