"""
Page Object Namer.

Turns key candidates ("search input", "Submit", "user-name") into
camelCase identifiers and keeps them unique within one page object.
"""

from typing import Dict, Optional
import re

_SEPARATOR_RUN = re.compile(r"[^a-z0-9]+(.)")


def camel_case(value: str) -> str:
    """
    Lowercase a string and camel-case it on non-alphanumeric runs.

    Example:
        >>> camel_case("search input")
        'searchInput'
        >>> camel_case("Submit")
        'submit'
    """
    return _SEPARATOR_RUN.sub(lambda m: m.group(1).upper(), value.lower())


class PageObjectBuilder:
    """
    Accumulates an ordered, collision-free mapping of names to selectors.

    Existing entries are never overwritten; a clashing name gets the
    first free numeric suffix (``submit``, ``submit1``, ``submit2``).
    """

    def __init__(self):
        self._entries: Dict[str, str] = {}

    def add(self, selector: str, key_base: str, tag: str = "", index: int = 0) -> str:
        """
        Record a selector under a fresh name.

        Args:
            selector: Selector string to store
            key_base: Human-readable name candidate
            tag: Element tag, used when key_base is empty
            index: Traversal index, used when key_base is empty

        Returns:
            The key the selector was stored under
        """
        base = camel_case(key_base or f"{tag.lower()}{index}")
        key = self._free_key(base)
        self._entries[key] = selector
        return key

    def _free_key(self, base: str) -> str:
        if base not in self._entries:
            return base
        suffix = 1
        while f"{base}{suffix}" in self._entries:
            suffix += 1
        return f"{base}{suffix}"

    def get(self, key: str) -> Optional[str]:
        return self._entries.get(key)

    def __len__(self) -> int:
        return len(self._entries)

    def to_dict(self) -> Dict[str, str]:
        """Copy of the mapping, in insertion order."""
        return dict(self._entries)
