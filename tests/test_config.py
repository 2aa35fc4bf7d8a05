"""Tests for ComposerConfig frozen dataclass and its StrEnums.

Covers:
- Default values (SNAKE, STRICT, max_depth=128, schema_cache_size=256)
- Immutability (FrozenInstanceError on assignment)
- Validation: max_depth and schema_cache_size must be >= 1, and max_depth
  must fit under the interpreter recursion limit
- NamingConvention and ArrayPolicy members and string values
"""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from json_composer.config import (
    ArrayPolicy,
    ComposerConfig,
    NamingConvention,
    max_supported_depth,
)


class TestNamingConvention:
    def test_has_exactly_two_members(self) -> None:
        assert len(list(NamingConvention)) == 2

    def test_values(self) -> None:
        assert NamingConvention.SNAKE == "snake"
        assert NamingConvention.CAMEL == "camel"

    def test_is_str_subclass(self) -> None:
        assert isinstance(NamingConvention.SNAKE, str)


class TestArrayPolicy:
    def test_has_exactly_two_members(self) -> None:
        assert len(list(ArrayPolicy)) == 2

    def test_values(self) -> None:
        assert ArrayPolicy.STRICT == "strict"
        assert ArrayPolicy.PASSTHROUGH == "passthrough"


class TestComposerConfigDefaults:
    def test_defaults(self) -> None:
        config = ComposerConfig()
        assert config.naming is NamingConvention.SNAKE
        assert config.array_policy is ArrayPolicy.STRICT
        assert config.max_depth == 128
        assert config.schema_cache_size == 256

    def test_custom_values(self) -> None:
        config = ComposerConfig(
            naming=NamingConvention.CAMEL,
            array_policy=ArrayPolicy.PASSTHROUGH,
            max_depth=3,
            schema_cache_size=8,
        )
        assert config.naming is NamingConvention.CAMEL
        assert config.array_policy is ArrayPolicy.PASSTHROUGH
        assert config.max_depth == 3
        assert config.schema_cache_size == 8

    def test_frozen(self) -> None:
        config = ComposerConfig()
        with pytest.raises(FrozenInstanceError):
            config.max_depth = 5  # type: ignore[misc]

    def test_equality(self) -> None:
        assert ComposerConfig() == ComposerConfig()


class TestComposerConfigValidation:
    @pytest.mark.parametrize("depth", [0, -1])
    def test_max_depth_must_be_positive(self, depth: int) -> None:
        with pytest.raises(ValueError, match="max_depth"):
            ComposerConfig(max_depth=depth)

    def test_max_depth_one_is_valid(self) -> None:
        assert ComposerConfig(max_depth=1).max_depth == 1

    def test_max_depth_beyond_stack_is_rejected(self) -> None:
        with pytest.raises(ValueError, match="recursion limit"):
            ComposerConfig(max_depth=100_000)

    def test_max_supported_depth_is_valid(self) -> None:
        limit = max_supported_depth()
        assert ComposerConfig(max_depth=limit).max_depth == limit
        with pytest.raises(ValueError, match="max_depth"):
            ComposerConfig(max_depth=limit + 1)

    def test_default_fits_under_stack(self) -> None:
        assert ComposerConfig().max_depth <= max_supported_depth()

    def test_cache_size_must_be_positive(self) -> None:
        with pytest.raises(ValueError, match="schema_cache_size"):
            ComposerConfig(schema_cache_size=0)
