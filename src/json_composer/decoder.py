"""JsonDecoder: JSON text -> generic value tree.

Thin wrapper over the standard ``json`` module that turns every decoding
failure into ``InvalidInputError``.  Object key order is document order
(``dict`` preserves insertion order).  The non-standard constants ``NaN``,
``Infinity`` and ``-Infinity`` are rejected.
"""

from __future__ import annotations

import json
from typing import Any

from json_composer.errors import InvalidInputError

__all__ = ["JsonDecoder"]


def _reject_constant(name: str) -> Any:
    msg = f"non-standard JSON constant {name!r}"
    raise ValueError(msg)


class JsonDecoder:
    """Decodes JSON text into dicts, lists and scalars."""

    def decode(self, text: str | bytes | bytearray) -> Any:
        """Decode ``text``.

        Raises:
            InvalidInputError: If ``text`` is not str/bytes, is not valid JSON,
                or is nested too deeply for the decoder.
        """
        if not isinstance(text, (str, bytes, bytearray)):
            raise InvalidInputError(
                f"JSON content must be str or bytes, got {type(text).__name__}"
            )
        try:
            return json.loads(text, parse_constant=_reject_constant)
        except ValueError as exc:
            raise InvalidInputError(f"The JSON content is invalid: {exc}") from exc
        except RecursionError as exc:
            raise InvalidInputError(
                "The JSON content is nested too deeply to decode"
            ) from exc
