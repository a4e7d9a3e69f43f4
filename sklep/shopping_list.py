"""The shopping list: checkable entries, saved as a numbered text file."""

from __future__ import annotations

import re
from dataclasses import dataclass
from os import PathLike
from typing import Iterator, Union

_NUMBER_PREFIX = re.compile(r"^\d+\.\s*")

StrPath = Union[str, "PathLike[str]"]


class NothingSelectedError(LookupError):
    """Raised when checked entries are removed but none is checked."""


@dataclass
class ShoppingItem:
    """One entry of the list."""

    text: str
    checked: bool = False


def parse_list(text: str) -> list[ShoppingItem]:
    """Read entries from text written by :meth:`ShoppingList.to_text`.

    Blank lines are skipped and a leading ``N.`` number is dropped.
    """
    items = []
    for raw in text.splitlines():
        line = raw.strip()
        if line:
            items.append(ShoppingItem(_NUMBER_PREFIX.sub("", line, count=1)))
    return items


class ShoppingList:
    """An ordered list of shopping entries."""

    def __init__(self) -> None:
        self._items: list[ShoppingItem] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[ShoppingItem]:
        return iter(self._items)

    def __getitem__(self, index: int) -> ShoppingItem:
        return self._items[index]

    def add(self, text: str) -> ShoppingItem | None:
        """Append an unchecked entry; blank text is ignored and gives None."""
        text = text.strip()
        if not text:
            return None
        item = ShoppingItem(text)
        self._items.append(item)
        return item

    def set_checked(self, index: int, checked: bool) -> None:
        """Check or uncheck the entry at ``index``."""
        self._items[index].checked = checked

    def remove_checked(self) -> list[ShoppingItem]:
        """Remove every checked entry and return them in list order."""
        removed = [item for item in self._items if item.checked]
        if not removed:
            raise NothingSelectedError("Nie wybrano produktu do usunięcia")
        self._items = [item for item in self._items if not item.checked]
        return removed

    def clear(self) -> None:
        """Remove every entry."""
        self._items.clear()

    def to_text(self) -> str:
        """Numbered lines, one per entry, starting from 1."""
        return "".join(
            f"{number}. {item.text}\n" for number, item in enumerate(self._items, start=1)
        )

    def save(self, path: StrPath) -> None:
        """Write the list to ``path``."""
        with open(path, "w", encoding="utf-8") as stream:
            stream.write(self.to_text())

    def load(self, path: StrPath) -> None:
        """Replace the entries with those read from ``path``."""
        with open(path, encoding="utf-8", errors="replace") as stream:
            text = stream.read()
        self._items = parse_list(text)