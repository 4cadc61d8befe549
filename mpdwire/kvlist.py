"""An ordered list of key-value pairs that may repeat keys."""

from __future__ import annotations

from collections.abc import Iterator

from mpdwire.parser import Pair


class KeyValueList:
    """Key-value pairs kept in insertion order; keys may occur more than once."""

    def __init__(self) -> None:
        self._items: list[Pair] = []

    def add(self, key: str, value: str) -> None:
        """Append a pair."""
        self._items.append(Pair(key, value))

    def get(self, name: str) -> str | None:
        """The value of the first pair named *name*, or None."""
        return next((item.value for item in self._items if item.name == name), None)

    def __iter__(self) -> Iterator[Pair]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"KeyValueList({[(p.name, p.value) for p in self._items]!r})"