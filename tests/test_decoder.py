"""Tests for JsonDecoder."""

from __future__ import annotations

import pytest

from json_composer.decoder import JsonDecoder
from json_composer.errors import ComposerError, InvalidInputError


@pytest.fixture
def decoder() -> JsonDecoder:
    return JsonDecoder()


class TestValidInput:
    def test_object(self, decoder: JsonDecoder) -> None:
        assert decoder.decode('{"a": 1, "b": [true, null]}') == {
            "a": 1,
            "b": [True, None],
        }

    def test_preserves_key_order(self, decoder: JsonDecoder) -> None:
        decoded = decoder.decode('{"z": 1, "a": 2, "m": 3}')
        assert list(decoded) == ["z", "a", "m"]

    def test_bytes(self, decoder: JsonDecoder) -> None:
        assert decoder.decode(b'{"a": "b"}') == {"a": "b"}

    def test_scalar_root(self, decoder: JsonDecoder) -> None:
        assert decoder.decode("3.5") == 3.5

    def test_distinguishes_object_and_array(self, decoder: JsonDecoder) -> None:
        assert isinstance(decoder.decode("{}"), dict)
        assert isinstance(decoder.decode("[]"), list)


class TestInvalidInput:
    @pytest.mark.parametrize(
        "text",
        ["not json", "", "{", '{"a": }', "{'a': 1}", '{"a": 1,}', b"\xff\xfe{"],
    )
    def test_malformed(self, decoder: JsonDecoder, text: str | bytes) -> None:
        with pytest.raises(InvalidInputError, match="invalid"):
            decoder.decode(text)

    @pytest.mark.parametrize("text", ["NaN", '{"a": Infinity}', "[-Infinity]"])
    def test_non_standard_constants(self, decoder: JsonDecoder, text: str) -> None:
        with pytest.raises(InvalidInputError, match="non-standard"):
            decoder.decode(text)

    def test_non_text(self, decoder: JsonDecoder) -> None:
        with pytest.raises(InvalidInputError, match="str or bytes"):
            decoder.decode({"a": 1})  # type: ignore[arg-type]

    def test_error_hierarchy(self, decoder: JsonDecoder) -> None:
        with pytest.raises(ComposerError):
            decoder.decode("nope")
        with pytest.raises(ValueError):
            decoder.decode("nope")

    def test_cause_is_chained(self, decoder: JsonDecoder) -> None:
        with pytest.raises(InvalidInputError) as exc_info:
            decoder.decode("nope")
        assert isinstance(exc_info.value.__cause__, ValueError)
