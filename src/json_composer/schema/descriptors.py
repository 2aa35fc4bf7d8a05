"""PropertyType descriptor and PropertyKind StrEnum.

A PropertyType says what a nested JSON object assigned to a property should
become.  ``classify`` turns a resolved type annotation into a descriptor:

- CONCRETE  -> ``Address``, ``Address | None``: build and fill a new instance.
- GENERIC   -> ``dict``, ``dict[str, Any]``, ``Mapping[...]``, any other
               Mapping subclass (``OrderedDict``, ``defaultdict``), ``Any``
               and TypedDict classes: build a plain generic mapping.
- SEQUENCE  -> ``list[...]``, ``tuple[...]``, ``set[...]``, ``Sequence[...]``.
- OPAQUE    -> scalars, enums and anything else that cannot hold an object.
"""

from __future__ import annotations

import collections.abc
import types
import typing
from dataclasses import dataclass
from enum import Enum, StrEnum, auto
from typing import Any, Union, get_args, get_origin, is_typeddict

__all__ = ["PropertyKind", "PropertyType", "classify"]

_SEQUENCE_ORIGINS: frozenset[Any] = frozenset(
    {
        list,
        tuple,
        set,
        frozenset,
        collections.abc.Sequence,
        collections.abc.MutableSequence,
        collections.abc.Set,
        collections.abc.MutableSet,
    }
)

_SCALARS: tuple[type, ...] = (str, bytes, bool, int, float, complex, type(None))


class PropertyKind(StrEnum):
    """The four shapes a declared property type can take."""

    CONCRETE = auto()
    GENERIC = auto()
    SEQUENCE = auto()
    OPAQUE = auto()


@dataclass(frozen=True, slots=True)
class PropertyType:
    """Declared type of one property.

    Attributes:
        kind:       Classification of the annotation (see PropertyKind).
        target:     The class to instantiate for CONCRETE; the element class
                    for SEQUENCE when it is a concrete class; None otherwise.
        annotation: The annotation the descriptor was classified from.
    """

    kind: PropertyKind
    target: type | None = None
    annotation: Any = None

    def describe(self) -> str:
        """Short human-readable form used in error messages."""
        if self.annotation is None:
            return self.kind.value
        if isinstance(self.annotation, type):
            return self.annotation.__qualname__
        if isinstance(self.annotation, str):
            return self.annotation
        return repr(self.annotation)


def _unwrap_optional(annotation: Any) -> Any:
    """Strip ``None`` from ``Optional[X]`` / ``X | None``; leave other unions alone."""
    if get_origin(annotation) in (Union, types.UnionType):
        args = [a for a in get_args(annotation) if a is not type(None)]
        if len(args) == 1:
            return args[0]
    return annotation


def _is_mapping(origin: Any) -> bool:
    """True for dict, Mapping and every subclass (OrderedDict, defaultdict...)."""
    return isinstance(origin, type) and issubclass(origin, collections.abc.Mapping)


def _is_concrete(annotation: Any) -> bool:
    # typing.Any is a class on 3.11+
    if annotation is Any or not isinstance(annotation, type):
        return False
    if issubclass(annotation, _SCALARS) or issubclass(annotation, Enum):
        return False
    return not _is_mapping(annotation) and annotation not in _SEQUENCE_ORIGINS


def classify(annotation: Any) -> PropertyType:
    """Classify a resolved type annotation.

    Args:
        annotation: A runtime annotation as returned by ``typing.get_type_hints``.

    Returns:
        The PropertyType for the annotation.  Never raises; anything that
        cannot be understood is OPAQUE.
    """
    annotation = _unwrap_optional(annotation)

    if annotation is Any:
        return PropertyType(PropertyKind.GENERIC, annotation=annotation)

    # Annotated[X, ...] carries metadata only
    if get_origin(annotation) is typing.Annotated:
        return classify(get_args(annotation)[0])

    origin = get_origin(annotation) or annotation

    if _is_mapping(origin) or is_typeddict(annotation):
        return PropertyType(PropertyKind.GENERIC, annotation=annotation)

    if origin in _SEQUENCE_ORIGINS:
        args = get_args(annotation)
        element = _unwrap_optional(args[0]) if args else None
        return PropertyType(
            PropertyKind.SEQUENCE,
            target=element if _is_concrete(element) else None,
            annotation=annotation,
        )

    if _is_concrete(annotation):
        return PropertyType(
            PropertyKind.CONCRETE, target=annotation, annotation=annotation
        )

    return PropertyType(PropertyKind.OPAQUE, annotation=annotation)
