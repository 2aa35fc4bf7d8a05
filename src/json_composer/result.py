"""CompositionResult dataclass for composition output.

This module provides the rich result type returned by compose() calls.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

__all__ = ["CompositionResult"]


@dataclass(frozen=True, slots=True)
class CompositionResult:
    """Rich result of a compose() call.

    Attributes:
        value: The fully populated root object.
        setters_invoked: Number of setter calls made across the object graph.
        objects_created: Number of typed objects instantiated, root included.
        mappings_built: Number of generic mappings built, nested ones included.
        max_depth: Deepest JSON object nesting level visited (root is 1).
        computation_time_ms: Wall-clock duration of the composition in
            milliseconds, decoding included.
    """

    value: Any
    setters_invoked: int
    objects_created: int
    mappings_built: int
    max_depth: int
    computation_time_ms: float
