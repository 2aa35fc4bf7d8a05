"""Integrations subpackage for json-composer.

Contains integration adapters for external frameworks:
- pytest plugin (auto-discovered via pytest11 entry point), providing the
  ``assert_json_composes`` fixture

The plugin module is loaded by pytest itself; importing this package does not
import pytest.
"""

from __future__ import annotations

__all__: list[str] = []
