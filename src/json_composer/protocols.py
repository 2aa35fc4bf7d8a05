"""SchemaProvider Protocol for the composer's type-introspection extension point.

Defines the structural interface the composer consults for every type
decision.  Users can plug in their own provider without inheriting from any
base class; any class with the four conformant methods passes ``isinstance``
checks.

Example::

    from json_composer.protocols import SchemaProvider

    class FixedProvider:
        def resolve_type(self, type_id): ...
        def property_type(self, cls, name): ...
        def has_setter(self, cls, setter): ...
        def invoke(self, obj, setter, value): ...

    assert isinstance(FixedProvider(), SchemaProvider)  # True
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from json_composer.schema.descriptors import PropertyType


@runtime_checkable
class SchemaProvider(Protocol):
    """Structural protocol for schema providers.

    - ``resolve_type`` returns the class for a type id, or None when unknown.
    - ``property_type`` returns the declared PropertyType of a property, or
      None when the class does not declare it.
    - ``has_setter`` reports whether ``cls`` exposes a callable with exactly
      that name.
    - ``invoke`` calls the setter on ``obj`` with ``value`` as sole argument.
    """

    def resolve_type(self, type_id: Any) -> type | None: ...

    def property_type(self, cls: type, name: str) -> PropertyType | None: ...

    def has_setter(self, cls: type, setter: str) -> bool: ...

    def invoke(self, obj: object, setter: str, value: Any) -> None: ...
