"""Provides the ObservableList class, an ordered list that reports its own changes.

This module contains `ObservableList`, a mutable, index-addressable sequence
that tells its subscribers about every change made to it. Each notification
carries three values:

*   `index`: where the change starts,
*   `removed`: a tuple of the elements that were taken out at `index`,
*   `added`: a tuple of the elements that were put in at `index`.

Replacing `removed` with `added` at `index` in the old content always gives
the new content, so a subscriber (a view, a derived list, a cache) can stay in
sync without rescanning the whole list.

How it works:

1.  Create the list: `items = ObservableList(['a', 'b'])`
2.  Subscribe: `items.changed.subscribe(on_change)`
3.  Modify it **through its methods**:

    *   `items.add('c')`                 -> `on_change(2, (), ('c',))`
    *   `items.set(0, 'z')`              -> `on_change(0, ('a',), ('z',))`
    *   `items.remove_range(1, 2)`       -> `on_change(1, ('b', 'c'), ())`

Notes:

*   Notifications are synchronous: every subscriber has run by the time the
    mutating method returns.
*   Calls that would not change anything (adding an empty sequence, removing a
    zero-length range, clearing an empty list) emit nothing.
*   Out-of-range indices raise `IndexOutOfBoundsError` before anything is
    changed or emitted.
*   Mutating the list from inside the callback of an iteration helper
    (`for_each`, `find`, `map`, ...) is unsupported. Mutating it from inside a
    *subscriber* is fine; the nested change is fully applied and emitted
    before the outer notification continues.
"""

import operator
from typing import Any, Callable, Generic, Iterable, Iterator, List, Optional, Tuple, TypeVar

from . import logger
from .buffer import SequenceBuffer
from .config import ListConfig, get_default_config
from .equality import EqualityStrategy
from .event import Event, Subscription, SubscriptionCallback
from .exceptions import IndexOutOfBoundsError

T = TypeVar('T')
R = TypeVar('R')

# Type Aliases for the callbacks accepted by the iteration helpers.
Predicate = Callable[[T, int], bool]
Visitor = Callable[[T, int], Any]

NOT_FOUND = -1


def _check_predicate(result: Any, method: str) -> bool:
    # Predicates must answer with a real bool, truthiness is not accepted.
    if not isinstance(result, bool):
        raise TypeError(f"ObservableList.{method}(): predicate must return a bool, got {type(result).__name__}")
    return result


class ObservableList(Generic[T]):
    """An ordered, mutable list that notifies subscribers of every change.

    Args:
        elements (Optional[Iterable[T]]): Initial content. It is copied, never
            aliased, and creating the list does not emit a notification.
        config (Optional[ListConfig]): Settings for this list. Defaults to the
            library-wide default (see `observable_list.config`) as it is at
            construction time.
        equality (Optional[EqualityStrategy]): Overrides `config.equality`,
            the function used to compare elements in `index_of`, `contains`,
            `remove` and friends.

    Attributes:
        changed (Event): The notification channel. Subscribers are called as
            `callback(index, removed, added)`.

    Example:
        >>> numbers = ObservableList([1, 2, 3])
        >>> _ = numbers.changed.subscribe(lambda i, rem, add: print(i, rem, add))
        >>> numbers.replace_range(1, 2, [9])
        1 (2, 3) (9,)
        [2, 3]
        >>> numbers.to_list()
        [1, 9]
    """

    def __init__(self,
                 elements: Optional[Iterable[T]] = None,
                 *,
                 config: Optional[ListConfig] = None,
                 equality: Optional[EqualityStrategy] = None):
        if config is None:
            config = get_default_config()
        self._config: ListConfig = config
        self._equality: EqualityStrategy = equality if equality is not None else config.equality
        self._buffer = SequenceBuffer(elements if elements is not None else ())
        self.changed = Event(error_policy=config.error_policy)

    # --- Subscription shortcuts ---

    def subscribe(self, callback: SubscriptionCallback) -> Subscription:
        """Shortcut for `self.changed.subscribe(callback)`."""
        return self.changed.subscribe(callback)

    def unsubscribe(self, subscription: Subscription) -> None:
        """Shortcut for `self.changed.unsubscribe(subscription)`."""
        self.changed.unsubscribe(subscription)

    @property
    def equality(self) -> EqualityStrategy:
        """The equality strategy used by element searches."""
        return self._equality

    # --- Validation ---

    def _out_of_bounds(self, method: str, index: int, count: Optional[int] = None) -> IndexOutOfBoundsError:
        error = IndexOutOfBoundsError(index, len(self._buffer), count)
        logger.debug(f"ObservableList.{method}() rejected: {error}")
        return error

    def _check_index(self, method: str, index: int) -> int:
        """Validates an element position, `0 <= index < len`."""
        index = operator.index(index)
        if index < 0 or index >= len(self._buffer):
            raise self._out_of_bounds(method, index)
        return index

    def _check_insert_index(self, method: str, index: int) -> int:
        """Validates an insertion point, `0 <= index <= len`."""
        index = operator.index(index)
        if index < 0 or index > len(self._buffer):
            raise self._out_of_bounds(method, index)
        return index

    def _check_range(self, method: str, index: int, count: int) -> Tuple[int, int]:
        """Validates a range, `0 <= index`, `0 <= count` and `index + count <= len`."""
        index = operator.index(index)
        count = operator.index(count)
        if index < 0 or count < 0 or index + count > len(self._buffer):
            raise self._out_of_bounds(method, index, count)
        return index, count

    # --- Mutation ---

    def _splice(self, index: int, count: int, items: List[T]) -> List[T]:
        # Every positional mutation funnels through here: apply, then emit once.
        removed = self._buffer.splice(index, count, items)
        self.changed.emit(index, tuple(removed), tuple(items))
        return removed

    def add(self, element: T) -> None:
        """Appends `element` to the end of the list.

        Always emits `(len_before, (), (element,))`.
        """
        self._splice(len(self._buffer), 0, [element])

    def add_all(self, elements: Iterable[T]) -> None:
        """Appends every item of `elements`, in order.

        Emits `(len_before, (), tuple(elements))`, or nothing if `elements` is empty.
        """
        items = list(elements)
        if items:
            self._splice(len(self._buffer), 0, items)

    def insert(self, index: int, element: T) -> None:
        """Inserts `element` so that it ends up at position `index`.

        Args:
            index (int): Insertion point, `0 <= index <= len(self)`. Inserting
                at `len(self)` appends.
            element: The element to insert.

        Raises:
            IndexOutOfBoundsError: If `index` is outside `[0, len(self)]`.
        """
        index = self._check_insert_index('insert', index)
        self._splice(index, 0, [element])

    def insert_all(self, index: int, elements: Iterable[T]) -> None:
        """Inserts every item of `elements` starting at `index`, preserving their order.

        The index is validated even when `elements` is empty.

        Raises:
            IndexOutOfBoundsError: If `index` is outside `[0, len(self)]`.
        """
        index = self._check_insert_index('insert_all', index)
        items = list(elements)
        if items:
            self._splice(index, 0, items)

    def remove(self, element: T) -> bool:
        """Removes the first element equal to `element`.

        Returns:
            bool: True if an element was removed (and a notification emitted),
                False if no element matched. A missing element is not an error.
        """
        index = self.index_of(element)
        if index == NOT_FOUND:
            return False
        self._splice(index, 1, [])
        return True

    def remove_last(self, element: T) -> bool:
        """Removes the last element equal to `element`. Returns True if one was removed."""
        index = self.last_index_of(element)
        if index == NOT_FOUND:
            return False
        self._splice(index, 1, [])
        return True

    def remove_at(self, index: int) -> T:
        """Removes and returns the element at `index`.

        Raises:
            IndexOutOfBoundsError: If `index` is outside `[0, len(self))`.
        """
        index = self._check_index('remove_at', index)
        return self._splice(index, 1, [])[0]

    def remove_range(self, index: int, count: int) -> List[T]:
        """Removes `count` elements starting at `index`.

        `index == len(self)` is accepted when `count` is 0.

        Returns:
            List[T]: The removed elements (empty, with no notification, if
                `count` is 0).

        Raises:
            IndexOutOfBoundsError: If `index` or `count` is negative, or the
                range runs past the end of the list.
        """
        index, count = self._check_range('remove_range', index, count)
        if count == 0:
            return []
        return self._splice(index, count, [])

    def clear(self) -> List[T]:
        """Removes every element.

        Returns:
            List[T]: The elements that were in the list. Clearing an empty
                list returns `[]` and emits nothing.
        """
        if not self._buffer:
            return []
        removed = self._buffer.replace_all(())
        self.changed.emit(0, tuple(removed), ())
        return removed

    def set(self, index: int, element: T) -> T:
        """Replaces the element at `index` and returns the old one.

        Always emits `(index, (old,), (element,))`, even if `element` equals `old`.

        Raises:
            IndexOutOfBoundsError: If `index` is outside `[0, len(self))`.
        """
        index = self._check_index('set', index)
        return self._splice(index, 1, [element])[0]

    def replace_range(self, index: int, count: int, elements: Iterable[T]) -> List[T]:
        """Removes `count` elements at `index` and inserts `elements` in their place.

        This is the general form of every other mutation. It emits a single
        notification `(index, removed, added)`, or nothing when `count` is 0
        and `elements` is empty.

        Args:
            index (int): Start of the range, `0 <= index`.
            count (int): Number of elements to remove, `0 <= count` and
                `index + count <= len(self)`.
            elements (Iterable[T]): Replacement elements, inserted in order.

        Returns:
            List[T]: The removed elements.

        Raises:
            IndexOutOfBoundsError: If the range is invalid.
        """
        index, count = self._check_range('replace_range', index, count)
        items = list(elements)
        if count == 0 and not items:
            return []
        return self._splice(index, count, items)

    def set_elements(self, elements: Iterable[T]) -> List[T]:
        """Replaces the entire content with a copy of `elements`.

        Unlike the other mutators this does not look at what actually changed:
        it emits `(0, old_content, new_content)` whenever either side is
        non-empty, even if both hold equal elements. Subscribers that want to
        skip no-change updates must compare the tuples themselves.

        Returns:
            List[T]: The previous content.
        """
        items = list(elements)
        if not self._buffer and not items:
            return []
        removed = self._buffer.replace_all(items)
        self.changed.emit(0, tuple(removed), tuple(items))
        return removed

    # --- Queries ---

    def contains(self, element: T) -> bool:
        return self.index_of(element) != NOT_FOUND

    includes = contains

    def index_of(self, element: T) -> int:
        """Returns the position of the first element equal to `element`, or -1."""
        for index, item in enumerate(self._buffer):
            if self._equality(item, element):
                return index
        return NOT_FOUND

    def last_index_of(self, element: T) -> int:
        """Returns the position of the last element equal to `element`, or -1."""
        for index in range(len(self._buffer) - 1, -1, -1):
            if self._equality(self._buffer.item(index), element):
                return index
        return NOT_FOUND

    def get(self, index: int) -> T:
        """Returns the element at `index`.

        Raises:
            IndexOutOfBoundsError: If `index` is outside `[0, len(self))`.
        """
        index = self._check_index('get', index)
        return self._buffer.item(index)

    def get_range(self, index: int, count: int) -> List[T]:
        """Returns a new list with `count` elements starting at `index`.

        Note:
            `index` must point at an existing element (`0 <= index < len`),
            even when `count` is 0. So `get_range(len(self), 0)` raises,
            while `remove_range(len(self), 0)` is a valid no-op.

        Raises:
            IndexOutOfBoundsError: If `index` is outside `[0, len(self))`,
                `count` is negative, or `index + count > len(self)`.
        """
        index = operator.index(index)
        count = operator.index(count)
        size = len(self._buffer)
        if index < 0 or index >= size or count < 0 or index + count > size:
            raise self._out_of_bounds('get_range', index, count)
        return self._buffer.slice(index, count)

    def to_list(self) -> List[T]:
        """Returns an independent copy of the content."""
        return self._buffer.snapshot()

    to_array = to_list

    def size(self) -> int:
        return len(self._buffer)

    def is_empty(self) -> bool:
        return len(self._buffer) == 0

    # --- Iteration helpers ---
    # Callbacks get (element, index) and read the live content; they must not
    # mutate this list.

    def for_each(self, iterator: Visitor) -> None:
        """Calls `iterator(element, index)` for every element, front to back."""
        for index, element in enumerate(self._buffer):
            iterator(element, index)

    each = for_each

    def every(self, predicate: Predicate) -> bool:
        """Returns True if `predicate(element, index)` is True for every element.

        Stops at the first False. An empty list returns True.
        """
        for index, element in enumerate(self._buffer):
            if not _check_predicate(predicate(element, index), 'every'):
                return False
        return True

    def find(self, predicate: Predicate, default: Optional[T] = None) -> Optional[T]:
        """Returns the first element matching `predicate`, or `default` if none does."""
        for index, element in enumerate(self._buffer):
            if _check_predicate(predicate(element, index), 'find'):
                return element
        return default

    def find_last(self, predicate: Predicate, default: Optional[T] = None) -> Optional[T]:
        """Returns the last element matching `predicate`, or `default` if none does."""
        for index in range(len(self._buffer) - 1, -1, -1):
            element = self._buffer.item(index)
            if _check_predicate(predicate(element, index), 'find_last'):
                return element
        return default

    def find_index(self, predicate: Predicate) -> int:
        """Returns the index of the first element matching `predicate`, or -1."""
        for index, element in enumerate(self._buffer):
            if _check_predicate(predicate(element, index), 'find_index'):
                return index
        return NOT_FOUND

    def filter(self, predicate: Predicate) -> List[T]:
        """Returns a new list of the elements for which `predicate` is True."""
        return [element for index, element in enumerate(self._buffer)
                if _check_predicate(predicate(element, index), 'filter')]

    def map(self, iterator: Callable[[T, int], R]) -> List[R]:
        """Returns a new list of `iterator(element, index)` for every element."""
        return [iterator(element, index) for index, element in enumerate(self._buffer)]

    def reduce(self, callback: Callable[[Any, T, int], Any], initial_value: Any) -> Any:
        """Folds the list left to right.

        `callback(accumulator, element, index)` is called for each element,
        starting with `accumulator = initial_value`, and its result becomes
        the next accumulator.

        Example:
            >>> ObservableList([1, 2, 3]).reduce(lambda acc, x, i: acc + x, 0)
            6
        """
        value = initial_value
        for index, element in enumerate(self._buffer):
            value = callback(value, element, index)
        return value

    def first(self, default: Optional[T] = None) -> Optional[T]:
        """Returns the first element, or `default` if the list is empty."""
        return self._buffer.item(0) if self._buffer else default

    def last(self, default: Optional[T] = None) -> Optional[T]:
        """Returns the last element, or `default` if the list is empty."""
        return self._buffer.item(len(self._buffer) - 1) if self._buffer else default

    # --- Standard Dunder Methods ---

    def __len__(self) -> int:
        return len(self._buffer)

    def __iter__(self) -> Iterator[T]:
        # Iterates a snapshot, not the live buffer.
        return iter(self._buffer.snapshot())

    def __contains__(self, element: Any) -> bool:
        return self.contains(element)

    def __getitem__(self, index: int) -> T:
        """Same as `get(index)`: no negative indices and no slices."""
        return self.get(index)

    def __eq__(self, other: Any) -> bool:
        """Compares content with another ObservableList, a list or a tuple."""
        if isinstance(other, ObservableList):
            return self._buffer.snapshot() == other._buffer.snapshot()
        if isinstance(other, (list, tuple)):
            return self._buffer.snapshot() == list(other)
        return NotImplemented

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"ObservableList({self._buffer.snapshot()!r})"
