"""Saved colors collected by clicking during a session."""

from __future__ import annotations

from typing import Iterator


class SavedColors:
    """
    Insertion-ordered set of saved color descriptions.

    Adding a description already present is a no-op. Nothing is ever removed.
    """

    def __init__(self) -> None:
        self._items: dict[str, None] = {}

    def add(self, description: str) -> bool:
        """Save a description. Returns True if it was not already saved."""
        if description in self._items:
            return False
        self._items[description] = None
        return True

    def __contains__(self, description: object) -> bool:
        return description in self._items

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)
