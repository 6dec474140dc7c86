"""Mapping-backed project property store."""

from __future__ import annotations

from collections.abc import Iterable, Mapping


class MappingProjectProperties:
    def __init__(self, properties: Mapping[str, object] | None = None):
        self._properties = dict(properties or {})

    def find_property(self, name: str) -> object | None:
        return self._properties.get(name)

    @classmethod
    def from_assignments(cls, assignments: Iterable[str]) -> "MappingProjectProperties":
        """Build a store from ``key=value`` strings (as given to ``-P``).

        Raises:
            ValueError: If an entry has no ``=`` or an empty key
        """
        properties: dict[str, str] = {}
        for item in assignments:
            key, sep, value = item.partition("=")
            key = key.strip()
            if not sep or not key:
                raise ValueError(f"Expected key=value, got {item!r}")
            properties[key] = value
        return cls(properties)
