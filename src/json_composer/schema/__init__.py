"""Schema subpackage: everything the composer knows about target classes.

Re-exports the public API for the schema module:
- PropertyType / PropertyKind: declared-type descriptor of one property
- classify: annotation -> PropertyType
- TypeIntrospector: reflective, LRU-cached SchemaProvider
- SchemaRegistry: explicit descriptor table over a TypeIntrospector
"""

from json_composer.schema.descriptors import PropertyKind, PropertyType, classify
from json_composer.schema.introspector import TypeIntrospector
from json_composer.schema.registry import SchemaRegistry

__all__ = [
    "PropertyKind",
    "PropertyType",
    "SchemaRegistry",
    "TypeIntrospector",
    "classify",
]
