"""An ordered set of components with stable indexes and lazy compaction."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

from ichigo.engine.interface import VisitFunc


class Container:
    """Components in order; removal leaves a free slot until compaction.

    Items must be hashable; components normally hash by identity.
    """

    __slots__ = ("_items", "_reverse")

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._items: list[Any] = list(items)
        self._reverse: dict[Any, int] = {}
        self._rebuild_reverse()

    def _rebuild_reverse(self) -> None:
        self._reverse = {x: i for i, x in enumerate(self._items)}

    def __getstate__(self) -> list[Any]:
        self._compact()
        return list(self._items)

    def __setstate__(self, state: list[Any]) -> None:
        self._items = list(state)
        self._rebuild_reverse()

    def scan(self, visit: VisitFunc) -> None:
        """Call visit on every item still present, in order."""
        for x in list(self._items):
            if x is None or x not in self._reverse:
                continue
            visit(x)

    def __iter__(self) -> Iterator[Any]:
        return (x for x in self._items if x is not None)

    def add(self, component: Any) -> None:
        """Append component unless it is None or already present."""
        if component is None or self.contains(component):
            return
        self._reverse[component] = len(self._items)
        self._items.append(component)

    def remove(self, component: Any) -> None:
        """Free the slot holding component; compact when most slots are free."""
        i = self._reverse.pop(component, None)
        if i is None:
            return
        self._items[i] = None
        if len(self._reverse) < len(self._items) // 2:
            self._compact()

    def contains(self, component: Any) -> bool:
        return component in self._reverse

    __contains__ = contains

    def index_of(self, component: Any) -> int | None:
        """Return the index of component, or None if it is absent."""
        return self._reverse.get(component)

    def item_count(self) -> int:
        """Return the number of items, not counting free slots."""
        return len(self._reverse)

    def element(self, i: int) -> Any:
        """Return the item at index i, or None for a free slot."""
        return self._items[i]

    def __len__(self) -> int:
        """Number of items plus free slots."""
        return len(self._items)

    def swap(self, i: int, j: int) -> None:
        """Swap two slots, keeping the index map up to date."""
        items = self._items
        items[i], items[j] = items[j], items[i]
        if items[i] is not None:
            self._reverse[items[i]] = i
        if items[j] is not None:
            self._reverse[items[j]] = j

    def __str__(self) -> str:
        inner = " ".join("<nil>" if x is None else str(x) for x in self._items)
        return f"Container[{inner}]"

    __repr__ = __str__

    def _compact(self) -> None:
        self._items = [x for x in self._items if x is not None]
        for i, x in enumerate(self._items):
            self._reverse[x] = i


def make_container(*args: Any) -> Container:
    """Put the arguments into a new Container."""
    return Container(args)