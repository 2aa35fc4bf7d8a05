"""ComposerConfig, NamingConvention and ArrayPolicy.

ComposerConfig is a frozen (immutable) dataclass holding the composition
parameters.  NamingConvention selects the canonical identifier casing used to
derive property and setter names; ArrayPolicy selects how JSON arrays that
carry objects are treated.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import StrEnum, auto

# Stack frames one nesting level may cost: three on the typed path, plus
# headroom for the caller and the setters themselves.
_FRAMES_PER_LEVEL = 5


def max_supported_depth() -> int:
    """Largest ``max_depth`` the interpreter stack can honour."""
    return sys.getrecursionlimit() // _FRAMES_PER_LEVEL


class NamingConvention(StrEnum):
    """Canonical casing for property names and the setters derived from them.

    - SNAKE: ``zip_code`` -> setter ``set_zip_code``.
    - CAMEL: ``zipCode``  -> setter ``setZipCode``.
    """

    SNAKE = auto()
    CAMEL = auto()


class ArrayPolicy(StrEnum):
    """How JSON arrays are assigned to properties.

    - STRICT:      Reject arrays of JSON objects bound to a property declared
                   as a sequence of a concrete class (``list[Address]``);
                   typed elements are never reconstructed, so silently passing
                   raw dicts would hand the setter the wrong element type.
    - PASSTHROUGH: Pass every array to the setter unchanged.
    """

    STRICT = auto()
    PASSTHROUGH = auto()


@dataclass(frozen=True, slots=True)
class ComposerConfig:
    """Immutable configuration for a Composer.

    Attributes:
        naming: Canonical casing applied to JSON keys on the typed path.
        array_policy: Treatment of arrays containing JSON objects.
        max_depth: Maximum JSON nesting depth (root object is depth 1).  Must
            not exceed ``max_supported_depth()``.
        schema_cache_size: Number of classes whose resolved schema the default
            TypeIntrospector keeps in its LRU cache.  Infrastructure only; it
            never changes composition results.
    """

    naming: NamingConvention = NamingConvention.SNAKE
    array_policy: ArrayPolicy = ArrayPolicy.STRICT
    max_depth: int = 128
    schema_cache_size: int = 256

    def __post_init__(self) -> None:
        if self.max_depth < 1:
            msg = f"max_depth must be >= 1, got {self.max_depth}"
            raise ValueError(msg)
        if self.max_depth > max_supported_depth():
            msg = (
                f"max_depth must be <= {max_supported_depth()} under the current "
                f"recursion limit, got {self.max_depth}"
            )
            raise ValueError(msg)
        if self.schema_cache_size < 1:
            msg = f"schema_cache_size must be >= 1, got {self.schema_cache_size}"
            raise ValueError(msg)
