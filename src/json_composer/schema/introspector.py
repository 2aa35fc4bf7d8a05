"""TypeIntrospector: reflective SchemaProvider backed by an LRU cache.

Discovers everything the composer needs from the classes themselves:

- type ids:        class objects, or import paths ("pkg.mod:Class",
                   "pkg.mod.Class") resolved with importlib.
- property types:  ``typing.get_type_hints(cls)`` over the whole MRO, looked up
                   under the property name and then under ``_<name>``.  When
                   one annotation cannot be resolved, the others are
                   still evaluated individually.
- setters:         any callable class attribute with the exact setter name.

Resolved type hints are cached per class in a ``cachetools.LRUCache``.  Each
instance owns its cache; two introspectors never share state.
"""

from __future__ import annotations

import importlib
import inspect
import logging
import sys
from typing import Any, get_type_hints

from cachetools import LRUCache

from json_composer.schema.descriptors import PropertyType, classify

__all__ = ["TypeIntrospector"]

logger = logging.getLogger(__name__)


def _import_type(path: str) -> type | None:
    """Resolve "pkg.mod:Outer.Inner" or "pkg.mod.Class" to a class, or None."""
    if ":" in path:
        module_name, _, qualname = path.partition(":")
    else:
        module_name, _, qualname = path.rpartition(".")
    if not module_name or not qualname:
        return None

    try:
        obj: Any = importlib.import_module(module_name)
    except ImportError:
        return None

    for attr in qualname.split("."):
        obj = getattr(obj, attr, None)
        if obj is None:
            return None
    return obj if isinstance(obj, type) else None


def _resolve_annotations(cls: type) -> tuple[dict[str, Any], list[str]]:
    """Evaluate annotations one at a time over the MRO, subclasses winning.

    String annotations are evaluated against the globals of the module that
    declares them.  Names that still cannot be resolved (typically imports
    guarded by ``TYPE_CHECKING``) keep their raw string and are returned in
    the second element so the caller can report them.
    """
    merged: dict[str, Any] = {}
    unresolved: list[str] = []
    for klass in reversed(cls.__mro__):
        if klass is object:
            continue
        module = sys.modules.get(klass.__module__)
        globalns = dict(vars(module)) if module is not None else {}
        localns = dict(vars(klass))
        for name, annotation in inspect.get_annotations(klass).items():
            if isinstance(annotation, str):
                try:
                    annotation = eval(annotation, globalns, localns)  # noqa: S307
                except (NameError, AttributeError):
                    unresolved.append(name)
            merged[name] = annotation
    return merged, unresolved


class TypeIntrospector:
    """Reflective schema provider.

    Satisfies the ``SchemaProvider`` Protocol structurally (no inheritance).

    Args:
        cache_size: Maximum number of classes whose classified property
            types are kept in memory.  Least-recently-used classes are
            evicted silently and re-introspected on next use.
    """

    def __init__(self, cache_size: int = 256) -> None:
        self._cache: LRUCache[type, dict[str, PropertyType]] = LRUCache(
            maxsize=cache_size
        )

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def max_size(self) -> int:
        """The maximum number of classes this introspector caches."""
        return int(self._cache.maxsize)

    @property
    def curr_size(self) -> int:
        """The number of classes currently cached."""
        return int(self._cache.currsize)

    # ------------------------------------------------------------------
    # SchemaProvider Protocol surface
    # ------------------------------------------------------------------

    def resolve_type(self, type_id: Any) -> type | None:
        """Resolve a class object or import path; None when unknown."""
        if isinstance(type_id, type):
            return type_id
        if isinstance(type_id, str) and type_id:
            return _import_type(type_id)
        return None

    def property_type(self, cls: type, name: str) -> PropertyType | None:
        """Return the declared type of ``cls.name``, or None when undeclared."""
        properties = self._properties(cls)
        found = properties.get(name)
        if found is None:
            found = properties.get(f"_{name}")
        return found

    def has_setter(self, cls: type, setter: str) -> bool:
        return callable(getattr(cls, setter, None))

    def invoke(self, obj: object, setter: str, value: Any) -> None:
        getattr(obj, setter)(value)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _properties(self, cls: type) -> dict[str, PropertyType]:
        cached = self._cache.get(cls)
        if cached is not None:
            return cached

        try:
            hints = get_type_hints(cls)
        except NameError:
            hints, unresolved = _resolve_annotations(cls)
            # Only the failing names stay raw strings, which classify as OPAQUE.
            logger.warning(
                "Cannot resolve type hints of %s for %s; keeping raw annotations",
                cls.__qualname__,
                ", ".join(unresolved),
            )

        properties = {name: classify(hint) for name, hint in hints.items()}
        self._cache[cls] = properties
        logger.debug(
            "Introspected %s: %d declared properties", cls.__qualname__, len(properties)
        )
        return properties
