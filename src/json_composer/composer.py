"""Composer: orchestrator that wires JsonDecoder + KeyNormalizer + SchemaProvider.

Turns a JSON document into a populated instance of a target class, assigning
every field through the class's setter methods.

Architecture:
- compose() decodes the text once, resolves the target type, instantiates the
  root with no arguments and fills it key by key in document order.
- Filling a field derives the setter name from the normalized key and checks
  the setter exists before looking at the value.
- A nested JSON object is routed by the declared type of the receiving
  property: a concrete class is instantiated and filled recursively (keys
  normalized); a generic container becomes a plain dict (keys verbatim);
  anything else is a contract violation.
- Each nested value is complete before the parent's setter receives it.
- Every error aborts the whole composition.  Nothing is returned on failure.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from json_composer.config import ArrayPolicy, ComposerConfig
from json_composer.decoder import JsonDecoder
from json_composer.errors import (
    ContractViolationError,
    DepthExceededError,
    InvalidInputError,
)
from json_composer.naming.normalizer import KeyNormalizer
from json_composer.result import CompositionResult
from json_composer.schema.descriptors import PropertyKind
from json_composer.schema.introspector import TypeIntrospector

if TYPE_CHECKING:
    from json_composer.protocols import SchemaProvider

__all__ = ["Composer"]

logger = logging.getLogger(__name__)


def _pointer_token(key: str) -> str:
    """Escape a key for use in a JSON Pointer (RFC 6901)."""
    return key.replace("~", "~0").replace("/", "~1")


def _type_name(cls: type) -> str:
    return f"{cls.__module__}.{cls.__qualname__}"


def _json_kind(value: Any) -> str:
    if isinstance(value, dict):
        return "object"
    if isinstance(value, list):
        return "array"
    if value is None:
        return "null"
    return type(value).__name__


@dataclass(slots=True)
class _Stats:
    """Per-call counters; one instance per compose() call."""

    setters_invoked: int = 0
    objects_created: int = 0
    mappings_built: int = 0
    max_depth: int = 0


class Composer:
    """Composes typed Python objects from JSON documents.

    Two separate ``Composer`` instances never share state, and one instance
    carries nothing from one ``compose()`` call to the next apart from the
    schema provider's cache.

    Example::

        from json_composer.composer import Composer

        composer = Composer()
        person = composer.compose_object(
            '{"name": "Ana", "address": {"city": "Rome"}}', Person
        )
        person.get_address().get_city()   # "Rome"
    """

    def __init__(
        self,
        config: ComposerConfig | None = None,
        schema: SchemaProvider | None = None,
    ) -> None:
        """Initialise the composer.

        Args:
            config: Composition parameters.  Defaults to ``ComposerConfig()``.
            schema: A SchemaProvider-conformant object.  Defaults to a fresh
                ``TypeIntrospector`` sized by ``config.schema_cache_size``.
        """
        self._config: ComposerConfig = (
            config if config is not None else ComposerConfig()
        )
        self._schema: Any = (
            schema
            if schema is not None
            else TypeIntrospector(cache_size=self._config.schema_cache_size)
        )
        self._normalizer = KeyNormalizer(self._config.naming)
        self._decoder = JsonDecoder()

    @property
    def config(self) -> ComposerConfig:
        return self._config

    @property
    def schema(self) -> SchemaProvider:
        return self._schema

    @property
    def normalizer(self) -> KeyNormalizer:
        return self._normalizer

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def compose_object(self, json: str | bytes, target_type: Any) -> Any:
        """Compose ``json`` onto a new instance of ``target_type``.

        Args:
            json:        JSON text whose root is an object.
            target_type: A class, a registered alias or an import path.

        Returns:
            The fully populated instance.

        Raises:
            InvalidInputError:      Malformed JSON, non-object root, unknown
                                    or non-constructible target type.
            ContractViolationError: The document does not fit the class.
            DepthExceededError:     Nesting deeper than ``max_depth``.
        """
        return self.compose(json, target_type).value

    def compose(self, json: str | bytes, target_type: Any) -> CompositionResult:
        """Like ``compose_object`` but returns a ``CompositionResult``."""
        t0 = time.perf_counter()
        value = self._decoder.decode(json)
        return self._compose_decoded(value, target_type, t0)

    def compose_value(self, value: Any, target_type: Any) -> Any:
        """Compose an already decoded JSON object (a ``dict``)."""
        return self._compose_decoded(value, target_type, time.perf_counter()).value

    # ------------------------------------------------------------------
    # Object composition
    # ------------------------------------------------------------------

    def _compose_decoded(
        self, value: Any, target_type: Any, t0: float
    ) -> CompositionResult:
        if not isinstance(value, dict):
            raise InvalidInputError(
                f"The JSON root must be an object, got {_json_kind(value)}"
            )

        cls = self._schema.resolve_type(target_type)
        if cls is None:
            raise InvalidInputError(f"Class '{target_type}' not found!")

        logger.debug("Composing %s from %d root keys", _type_name(cls), len(value))

        try:
            root = cls()
        except TypeError as exc:
            raise InvalidInputError(
                f"Class '{_type_name(cls)}' cannot be instantiated "
                f"without arguments: {exc}"
            ) from exc

        stats = _Stats(objects_created=1, max_depth=1)
        try:
            self._fill_object(root, value, "", 1, stats)
        except DepthExceededError:
            raise
        except RecursionError as exc:
            # The stack ran out before max_depth was reached.
            raise DepthExceededError(self._config.max_depth, "") from exc

        elapsed_ms = (time.perf_counter() - t0) * 1000.0
        logger.debug(
            "Composed %s: %d setters, %d objects, %d mappings, depth %d in %.3f ms",
            _type_name(cls),
            stats.setters_invoked,
            stats.objects_created,
            stats.mappings_built,
            stats.max_depth,
            elapsed_ms,
        )
        return CompositionResult(
            value=root,
            setters_invoked=stats.setters_invoked,
            objects_created=stats.objects_created,
            mappings_built=stats.mappings_built,
            max_depth=stats.max_depth,
            computation_time_ms=elapsed_ms,
        )

    def _fill_object(
        self,
        target: object,
        obj: dict[str, Any],
        path: str,
        depth: int,
        stats: _Stats,
    ) -> None:
        """Fill ``target`` with every key of ``obj`` in document order."""
        for key, value in obj.items():
            self._fill_field(
                self._normalizer.normalize(key),
                value,
                target,
                f"{path}/{_pointer_token(key)}",
                depth,
                stats,
            )

    def _fill_field(
        self,
        prop: str,
        value: Any,
        target: object,
        path: str,
        depth: int,
        stats: _Stats,
    ) -> None:
        """Assign one JSON field to ``target`` through its setter.

        Args:
            prop:   Canonical property name.
            value:  The decoded JSON value of the field.
            target: The object being filled (at nesting level ``depth``).
            path:   JSON Pointer of the field.
        """
        cls = type(target)
        setter = self._normalizer.setter_name(prop)
        if not self._schema.has_setter(cls, setter):
            raise ContractViolationError(
                f"Class '{_type_name(cls)}' does not have a method '{setter}'",
                _type_name(cls),
                setter,
                path,
            )

        if isinstance(value, dict):
            value = self._compose_nested(prop, value, cls, path, depth + 1, stats)
        elif isinstance(value, list):
            self._check_array(prop, value, cls, path)

        self._schema.invoke(target, setter, value)
        stats.setters_invoked += 1

    def _compose_nested(
        self,
        prop: str,
        value: dict[str, Any],
        owner: type,
        path: str,
        depth: int,
        stats: _Stats,
    ) -> Any:
        """Build the effective value for a JSON object assigned to ``owner.prop``."""
        self._enter(depth, path, stats)

        declared = self._schema.property_type(owner, prop)
        if declared is None:
            raise ContractViolationError(
                f"Type of property '{_type_name(owner)}.{prop}' is undefined!",
                _type_name(owner),
                prop,
                path,
            )

        if declared.kind is PropertyKind.GENERIC:
            return self._fill_mapping(value, path, depth, stats)

        if declared.kind is PropertyKind.CONCRETE and declared.target is not None:
            child_cls = declared.target
            try:
                child = child_cls()
            except TypeError as exc:
                raise ContractViolationError(
                    f"Class '{_type_name(child_cls)}' declared by "
                    f"'{_type_name(owner)}.{prop}' cannot be instantiated "
                    f"without arguments: {exc}",
                    _type_name(owner),
                    prop,
                    path,
                ) from exc
            stats.objects_created += 1
            logger.debug("Created %s at '%s'", _type_name(child_cls), path)
            self._fill_object(child, value, path, depth, stats)
            return child

        raise ContractViolationError(
            f"Property '{_type_name(owner)}.{prop}' is declared as "
            f"'{declared.describe()}' and cannot hold a JSON object",
            _type_name(owner),
            prop,
            path,
        )

    def _check_array(
        self, prop: str, value: list[Any], owner: type, path: str
    ) -> None:
        """Reject arrays of JSON objects bound for ``list[SomeClass]`` under STRICT."""
        if self._config.array_policy is ArrayPolicy.PASSTHROUGH:
            return
        if not any(isinstance(item, dict) for item in value):
            return

        declared = self._schema.property_type(owner, prop)
        if (
            declared is not None
            and declared.kind is PropertyKind.SEQUENCE
            and declared.target is not None
        ):
            raise ContractViolationError(
                f"Property '{_type_name(owner)}.{prop}' expects a sequence of "
                f"'{_type_name(declared.target)}'; arrays of typed objects are "
                f"not supported",
                _type_name(owner),
                prop,
                path,
            )

    # ------------------------------------------------------------------
    # Generic mapping composition
    # ------------------------------------------------------------------

    def _fill_mapping(
        self, value: dict[str, Any], path: str, depth: int, stats: _Stats
    ) -> dict[str, Any]:
        """Copy a JSON object into a generic mapping, keys verbatim."""
        mapping: dict[str, Any] = {}
        for key, sub in value.items():
            if isinstance(sub, dict):
                sub_path = f"{path}/{_pointer_token(key)}"
                self._enter(depth + 1, sub_path, stats)
                mapping[key] = self._fill_mapping(sub, sub_path, depth + 1, stats)
            else:
                mapping[key] = sub
        stats.mappings_built += 1
        return mapping

    def _enter(self, depth: int, path: str, stats: _Stats) -> None:
        if depth > self._config.max_depth:
            raise DepthExceededError(self._config.max_depth, path)
        stats.max_depth = max(stats.max_depth, depth)
