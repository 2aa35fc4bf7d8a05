"""JSON composer - build typed objects from JSON through their setters."""

from __future__ import annotations

import logging

from json_composer.api import compose, compose_object
from json_composer.composer import Composer
from json_composer.config import ArrayPolicy, ComposerConfig, NamingConvention
from json_composer.errors import (
    ComposerError,
    ContractViolationError,
    DepthExceededError,
    InvalidInputError,
)
from json_composer.result import CompositionResult
from json_composer.schema import SchemaRegistry, TypeIntrospector

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__: str = "0.1.0"
__all__: list[str] = [
    "ArrayPolicy",
    "Composer",
    "ComposerConfig",
    "ComposerError",
    "CompositionResult",
    "ContractViolationError",
    "DepthExceededError",
    "InvalidInputError",
    "NamingConvention",
    "SchemaRegistry",
    "TypeIntrospector",
    "compose",
    "compose_object",
]
