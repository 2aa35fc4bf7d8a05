"""Exception hierarchy for json-composer.

Every error raised by the package derives from ``ComposerError``.  Each
concrete error also subclasses the closest builtin (``ValueError``,
``TypeError``, ``RecursionError``) so callers that already catch builtins keep
working.

- InvalidInputError:      malformed JSON, non-object root, unknown or
                          non-constructible target type.
- ContractViolationError: the JSON shape does not match the declared shape of
                          the target class (missing setter, undefined
                          property type, unsupported assignment).
- DepthExceededError:     JSON nesting deeper than ``ComposerConfig.max_depth``.
"""

from __future__ import annotations

__all__ = [
    "ComposerError",
    "ContractViolationError",
    "DepthExceededError",
    "InvalidInputError",
]


class ComposerError(Exception):
    """Base class for all json-composer errors."""


class InvalidInputError(ComposerError, ValueError):
    """The JSON text or the target type cannot be used at all.

    Attributes:
        reason: Human-readable description of what was rejected.
    """

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class ContractViolationError(ComposerError, TypeError):
    """The JSON document does not fit the declared shape of the target class.

    Attributes:
        type_name: Qualified name of the class being filled.
        member:    The setter or property the violation is about.
        path:      JSON Pointer (RFC 6901) of the offending field.
    """

    def __init__(self, message: str, type_name: str, member: str, path: str) -> None:
        super().__init__(f"{message} (at '{path}')" if path else message)
        self.type_name = type_name
        self.member = member
        self.path = path


class DepthExceededError(ComposerError, RecursionError):
    """JSON nesting exceeded the configured bound.

    Attributes:
        limit: The configured ``max_depth``.
        path:  JSON Pointer of the first value beyond the limit.
    """

    def __init__(self, limit: int, path: str) -> None:
        super().__init__(f"JSON nesting exceeds max_depth={limit} at '{path}'")
        self.limit = limit
        self.path = path
