"""Helpers for keeping derived collections in sync with an ObservableList.

A notification `(index, removed, added)` is a splice: take `len(removed)`
elements out at `index` and put `added` in their place. `apply_change()` does
exactly that on any plain mutable sequence, and `bind_mirror()` wires it up so
a regular Python list follows an `ObservableList` automatically.
"""

from typing import TYPE_CHECKING, Any, List, MutableSequence, Optional, Sequence, Tuple

from . import logger
from .event import Subscription

if TYPE_CHECKING:
    from .observable_list import ObservableList


def apply_change(target: MutableSequence[Any],
                 index: int,
                 removed: Sequence[Any],
                 added: Sequence[Any]) -> None:
    """Applies one change notification to `target` in place.

    Args:
        target: The sequence to update, for example a plain `list` that
            mirrors an `ObservableList`.
        index (int): Start of the change, as emitted.
        removed: The elements that were removed at `index`. Only its length is
            used to know how many elements to drop from `target`.
        added: The elements to insert at `index`.

    Raises:
        ValueError: If `target` is too short to hold the removed range, which
            means it was already out of sync with the source.
    """
    end = index + len(removed)
    if index < 0 or end > len(target):
        raise ValueError(
            f"Cannot apply change at index {index} removing {len(removed)} item(s) "
            f"to a sequence of length {len(target)}; it is out of sync with its source."
        )
    target[index:end] = list(added)


def bind_mirror(source: 'ObservableList',
                target: Optional[List[Any]] = None) -> Tuple[List[Any], Subscription]:
    """Makes a plain list that follows every change of `source`.

    The target is first filled with the current content of `source` (any
    previous content is replaced), then kept up to date by a subscriber that
    calls `apply_change()` for each notification.

    Subscribers run in registration order and a subscriber may change
    `source` again from inside its callback. The nested change is delivered
    to every subscriber before the outer one reaches the later subscribers.
    The mirror therefore only stays in sync if it is bound before any
    subscriber that changes `source` re-entrantly. If such a subscriber was
    registered first, the mirror receives the nested change before the change
    it depends on. `apply_change()` then raises `ValueError` (logged under
    `ErrorPolicy.LOG`, raised as `SubscriberError` under `ErrorPolicy.RAISE`)
    and the mirror is left out of sync. Call `bind_mirror()` again to resync.

    Args:
        source (ObservableList): The list to follow.
        target (Optional[List]): The list to keep in sync. A new one is created
            if omitted.

    Returns:
        Tuple[List, Subscription]: The mirror list and the subscription. Call
            the subscription (or pass it to `source.unsubscribe()`) to stop
            following.

    Example:
        >>> source = ObservableList([1, 2])
        >>> mirror, subscription = bind_mirror(source)
        >>> source.insert(0, 0)
        >>> mirror
        [0, 1, 2]
    """
    if target is None:
        target = []
    target[:] = source.to_list()

    def on_change(index: int, removed: Sequence[Any], added: Sequence[Any]) -> None:
        apply_change(target, index, removed, added)

    subscription = source.changed.subscribe(on_change)
    logger.debug(f"Bound mirror list (id: {id(target)}) to ObservableList (id: {id(source)})")
    return target, subscription
