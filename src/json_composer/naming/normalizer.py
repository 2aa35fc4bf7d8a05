"""KeyNormalizer: converts raw JSON object keys to canonical property names.

Handles the usual naming conventions found in JSON payloads:
- camelCase  (e.g. "zipCode"   -> "zip_code" / "zipCode")
- PascalCase (e.g. "ZipCode"   -> "zip_code" / "zipCode")
- snake_case (e.g. "zip_code"  -> "zip_code" / "zipCode")
- kebab-case (e.g. "zip-code"  -> "zip_code" / "zipCode")

Also handles:
- Acronyms (e.g. "APIKey" -> "api_key", "URLParser" -> "url_parser")
- Dotted and space-separated keys (e.g. "zip code", "zip.code")
- Multiple consecutive separators (e.g. "some__key" -> "some_key")

Digits stay attached to the word they follow ("address2" -> "address2") so
that normalized names match ordinary Python identifiers.
"""

from __future__ import annotations

import re

from json_composer.config import NamingConvention

# Compiled regex patterns (module-level, compiled once)

# Matches every separator run: underscores, hyphens, dots and whitespace
_SEP = re.compile(r"[_\-.\s]+")

# Matches camelCase boundary: lowercase letter or digit followed by uppercase
# e.g. "zipCode" -> "zip Code", "v2Config" -> "v2 Config" via "\1 \2"
_LOWER_UPPER = re.compile(r"([a-z0-9])([A-Z])")

# Matches acronym runs: uppercase letters before an uppercase+lowercase pair
# e.g. "URLParser" -> "URL Parser" via "\1 \2"
_UPPER_RUN = re.compile(r"([A-Z]+)([A-Z][a-z])")


class KeyNormalizer:
    """Normalizes raw JSON keys into one canonical identifier convention.

    The normalizer is stateless apart from its convention, so one instance can
    be shared freely.

    Example usage:
        normalizer = KeyNormalizer()
        normalizer.normalize("zipCode")         # "zip_code"
        normalizer.setter_name("zip_code")      # "set_zip_code"

        camel = KeyNormalizer(NamingConvention.CAMEL)
        camel.normalize("zip_code")             # "zipCode"
        camel.setter_name("zipCode")            # "setZipCode"
    """

    def __init__(self, convention: NamingConvention = NamingConvention.SNAKE) -> None:
        self._convention = convention

    @property
    def convention(self) -> NamingConvention:
        return self._convention

    def words(self, key: str) -> list[str]:
        """Split a raw key into lowercase words.

        Processing pipeline (applied in order):
        1. Replace separator runs with spaces.
        2. Insert space at camelCase boundaries.
        3. Insert space at acronym runs (e.g. "URL" before "Parser").
        4. Lowercase and split on whitespace.

        Args:
            key: The raw JSON object key string.

        Returns:
            The words of the key, lowercased.  Empty for keys made only of
            separators.
        """
        s = _SEP.sub(" ", key)
        s = _LOWER_UPPER.sub(r"\1 \2", s)
        s = _UPPER_RUN.sub(r"\1 \2", s)
        return s.lower().split()

    def normalize(self, key: str) -> str:
        """Normalize a raw JSON key to the canonical property name.

        Total: every string maps to some (possibly empty) identifier candidate.
        Whether a matching setter exists is the composer's business.
        """
        words = self.words(key)
        if self._convention is NamingConvention.CAMEL:
            return "".join(words[:1] + [w.capitalize() for w in words[1:]])
        return "_".join(words)

    def setter_name(self, prop: str) -> str:
        """Return the setter method name for a canonical property name."""
        if self._convention is NamingConvention.CAMEL:
            return "set" + prop[:1].upper() + prop[1:]
        return f"set_{prop}"

    def getter_name(self, prop: str) -> str:
        """Return the getter method name for a canonical property name."""
        if self._convention is NamingConvention.CAMEL:
            return "get" + prop[:1].upper() + prop[1:]
        return f"get_{prop}"
