"""pytest plugin for json-composer.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from typing import Any

import pytest

from json_composer import Composer, ComposerConfig
from json_composer.decoder import JsonDecoder
from json_composer.naming import KeyNormalizer

_MISSING = object()


def _read_back(obj: object, prop: str, normalizer: KeyNormalizer) -> Any:
    """Read ``prop`` through its getter, else the attribute, else ``_prop``."""
    getter = getattr(obj, normalizer.getter_name(prop), None)
    if callable(getter):
        return getter()
    value = getattr(obj, prop, _MISSING)
    if value is _MISSING:
        value = getattr(obj, f"_{prop}", _MISSING)
    return value


def _collect_mismatches(
    obj: object,
    expected: dict[str, Any],
    path: str,
    normalizer: KeyNormalizer,
    mismatches: list[str],
) -> None:
    for key, want in expected.items():
        key_path = f"{path}/{key}"
        got = _read_back(obj, normalizer.normalize(key), normalizer)
        if got is _MISSING:
            mismatches.append(f"{key_path}: no getter or attribute")
        elif isinstance(want, dict) and not isinstance(got, dict):
            _collect_mismatches(got, want, key_path, normalizer, mismatches)
        elif got != want:
            mismatches.append(f"{key_path}: {got!r} != {want!r}")


@pytest.fixture(scope="session")
def assert_json_composes() -> Any:
    """Fixture that returns a callable compose-and-verify asserter.

    The fixture is session-scoped because the returned callable is stateless
    (creates a fresh Composer per call).

    Usage in tests::

        def test_person(assert_json_composes):
            person = assert_json_composes('{"name": "Ana"}', Person)
            assert isinstance(person, Person)

    Returns:
        A callable ``_assert(document, target_type, config=None, schema=None)``
        that composes the document, reads every field back through its getter
        (recursing into nested typed objects) and raises ``AssertionError``
        listing each JSON Pointer whose value does not round-trip.  Returns the
        composed object.  Composition errors propagate unchanged.
    """

    def _assert(
        document: str | bytes,
        target_type: Any,
        config: ComposerConfig | None = None,
        schema: Any = None,
    ) -> Any:
        composer = Composer(config=config, schema=schema)
        obj = composer.compose_object(document, target_type)

        mismatches: list[str] = []
        _collect_mismatches(
            obj, JsonDecoder().decode(document), "", composer.normalizer, mismatches
        )
        if mismatches:
            raise AssertionError(
                f"Composed {type(obj).__qualname__} does not match the document:\n"
                + "\n".join(f"  {m}" for m in mismatches)
            )
        return obj

    return _assert
