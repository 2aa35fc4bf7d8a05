"""SchemaRegistry: explicit descriptor table layered over a TypeIntrospector.

Lets callers declare, once, what reflection cannot see or should not decide:

- string aliases for target types ("Person" instead of "app.models:Person")
- property types for properties a class leaves unannotated, or overrides of
  annotated ones

Anything not registered falls through to the wrapped TypeIntrospector, so a
registry is a drop-in SchemaProvider.

Example::

    registry = SchemaRegistry()

    @registry.register(alias="person")
    class Person: ...

    registry.register(Legacy, properties={"payload": dict})
    compose_object('{"payload": {"a": 1}}', Legacy, schema=registry)
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any, overload

from json_composer.schema.descriptors import PropertyType, classify
from json_composer.schema.introspector import TypeIntrospector

__all__ = ["SchemaRegistry"]


class SchemaRegistry:
    """Explicit schema provider with reflective fallback.

    Satisfies the ``SchemaProvider`` Protocol structurally.

    Args:
        introspector: Provider consulted for anything not registered.
            Defaults to a fresh ``TypeIntrospector()``.
    """

    def __init__(self, introspector: TypeIntrospector | None = None) -> None:
        self._introspector = (
            introspector if introspector is not None else TypeIntrospector()
        )
        self._aliases: dict[str, type] = {}
        self._properties: dict[type, dict[str, PropertyType]] = {}

    @overload
    def register(
        self,
        cls: type,
        *,
        alias: str | None = ...,
        properties: Mapping[str, Any] | None = ...,
    ) -> type: ...

    @overload
    def register(
        self,
        cls: None = ...,
        *,
        alias: str | None = ...,
        properties: Mapping[str, Any] | None = ...,
    ) -> Callable[[type], type]: ...

    def register(
        self,
        cls: type | None = None,
        *,
        alias: str | None = None,
        properties: Mapping[str, Any] | None = None,
    ) -> type | Callable[[type], type]:
        """Register a class, directly or as a class decorator.

        The class is always reachable under its ``__name__``; ``alias`` adds
        one more name.  ``properties`` maps canonical property names to type
        annotations (``dict``, ``Address``, ``list[str]``...).

        Raises:
            TypeError:  If ``cls`` is not a class.
            ValueError: If a name is already registered for another class.
        """
        if cls is None:
            return lambda klass: self.register(
                klass, alias=alias, properties=properties
            )

        if not isinstance(cls, type):
            msg = f"Only classes can be registered, got {cls!r}"
            raise TypeError(msg)

        names = [cls.__name__] if alias is None else [cls.__name__, alias]
        for name in names:
            existing = self._aliases.get(name)
            if existing is not None and existing is not cls:
                msg = f"Type id '{name}' is already registered for {existing!r}"
                raise ValueError(msg)
        for name in names:
            self._aliases[name] = cls

        if properties:
            table = self._properties.setdefault(cls, {})
            for prop, annotation in properties.items():
                table[prop] = classify(annotation)
        return cls

    @property
    def registered_types(self) -> dict[str, type]:
        """Snapshot of the alias table."""
        return dict(self._aliases)

    # ------------------------------------------------------------------
    # SchemaProvider Protocol surface
    # ------------------------------------------------------------------

    def resolve_type(self, type_id: Any) -> type | None:
        if isinstance(type_id, str) and type_id in self._aliases:
            return self._aliases[type_id]
        return self._introspector.resolve_type(type_id)

    def property_type(self, cls: type, name: str) -> PropertyType | None:
        for klass in cls.__mro__:
            table = self._properties.get(klass)
            if table is not None and name in table:
                return table[name]
        return self._introspector.property_type(cls, name)

    def has_setter(self, cls: type, setter: str) -> bool:
        return self._introspector.has_setter(cls, setter)

    def invoke(self, obj: object, setter: str, value: Any) -> None:
        self._introspector.invoke(obj, setter, value)
