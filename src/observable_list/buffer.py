"""Ordered storage behind ObservableList.

Every mutation of an `ObservableList` (append, insert, remove, replace, clear,
...) is expressed as one call to `SequenceBuffer.splice()`: remove `count`
items at `index` and put `items` in their place. Keeping a single primitive
means the notification built from its result is always splice-equivalent.

Warning:
    This is an internal helper. It does no bounds checking of its own; callers
    validate indices before splicing.
"""

from typing import Any, Iterator, List, Sequence


class SequenceBuffer:
    """A plain Python list that is only ever changed through `splice()`."""
    __slots__ = ('_items',)

    def __init__(self, items: Sequence[Any] = ()):
        self._items: List[Any] = list(items)

    def splice(self, index: int, count: int, items: Sequence[Any] = ()) -> List[Any]:
        """Replaces `count` items starting at `index` with `items`.

        Returns:
            List[Any]: The removed items, in order (a new list).
        """
        end = index + count
        removed = self._items[index:end]
        self._items[index:end] = items
        return removed

    def replace_all(self, items: Sequence[Any]) -> List[Any]:
        """Swaps in a fresh copy of `items` and returns the previous list as-is."""
        removed = self._items
        self._items = list(items)
        return removed

    def item(self, index: int) -> Any:
        return self._items[index]

    def slice(self, index: int, count: int) -> List[Any]:
        return self._items[index:index + count]

    def snapshot(self) -> List[Any]:
        """Returns an independent copy of the stored items."""
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __reversed__(self) -> Iterator[Any]:
        return reversed(self._items)
