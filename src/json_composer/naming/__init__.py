"""Naming subpackage: raw JSON key -> canonical property and setter names.

Re-exports:
- KeyNormalizer: normalizes keys across camelCase, PascalCase, snake_case, kebab-case
"""

from json_composer.naming.normalizer import KeyNormalizer

__all__ = ["KeyNormalizer"]
