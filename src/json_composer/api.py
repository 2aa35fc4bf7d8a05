"""Public API functions for json-composer.

This module provides the two user-facing functions: compose_object and
compose.  Each call creates a fresh Composer to guarantee zero global state
mutation between calls.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from json_composer.composer import Composer

if TYPE_CHECKING:
    from json_composer.config import ComposerConfig
    from json_composer.protocols import SchemaProvider
    from json_composer.result import CompositionResult

__all__ = ["compose", "compose_object"]


def compose_object(
    json: str | bytes,
    target_type: Any,
    config: ComposerConfig | None = None,
    schema: SchemaProvider | None = None,
) -> Any:
    """Compose a JSON document onto a new instance of ``target_type``.

    Every field is assigned through the instance's setter methods.  Nested
    JSON objects become instances of the receiving property's declared class,
    or plain dicts when the property is declared as a generic mapping.

    Args:
        json:        JSON text whose root is an object.
        target_type: The class to instantiate, a name registered in ``schema``,
                     or an import path such as ``"app.models:Person"``.
        config:      Composition parameters.  Defaults to ``ComposerConfig()``.
        schema:      Schema provider.  Defaults to a fresh ``TypeIntrospector``.

    Returns:
        The fully populated instance.

    Raises:
        InvalidInputError:      Malformed JSON or unknown target type.
        ContractViolationError: The document does not fit the target class.
        DepthExceededError:     Nesting deeper than ``config.max_depth``.
    """
    return Composer(config=config, schema=schema).compose_object(json, target_type)


def compose(
    json: str | bytes,
    target_type: Any,
    config: ComposerConfig | None = None,
    schema: SchemaProvider | None = None,
) -> CompositionResult:
    """Compose a JSON document and return a rich CompositionResult.

    Same contract as ``compose_object``; the populated instance is
    ``result.value``.
    """
    return Composer(config=config, schema=schema).compose(json, target_type)
