"""Custom exceptions for the observable-list library.

This module defines the error types raised by `ObservableList` and by its
notification channel (`Event`). Catching `ObservableListError` handles
anything this library raises on purpose, while the more specific classes let
callers react to a single failure kind.

"Not found" situations (for example `remove()` on an absent element) are not
errors: those operations return `False` or `-1` and leave the list untouched.
"""

from typing import List, Optional


class ObservableListError(Exception):
    """Base class for all errors explicitly raised by the observable-list library."""
    pass


class IndexOutOfBoundsError(ObservableListError, IndexError):
    """Raised when a positional or count argument is outside its valid range.

    The check happens before any mutation, so when this error is raised the
    list content is unchanged and no notification has been emitted.

    It also derives from the built-in `IndexError`, so code that already
    catches `IndexError` around list access keeps working.

    Attributes:
        index (int): The index argument that was supplied.
        count (Optional[int]): The count argument, for range operations
            (`remove_range`, `replace_range`, `get_range`), otherwise `None`.
        size (int): The length of the list at the time of the call.
    """
    def __init__(self, index: int, size: int, count: Optional[int] = None):
        self.index = index
        self.count = count
        self.size = size
        if count is None:
            message = f"Index out of bounds: index={index}, size={size}"
        else:
            message = f"Index out of bounds: index={index}, count={count}, size={size}"
        super().__init__(message)


class SubscriberError(ObservableListError):
    """Raised after a notification when one or more subscriber callbacks failed.

    Only raised when the channel uses `ErrorPolicy.RAISE`. Every subscriber is
    still called; the failures are collected during the fan-out and reported
    together once it finishes. The mutation that triggered the notification
    has already been applied when this is raised.

    Attributes:
        errors (List[BaseException]): The exceptions raised by the failing
            callbacks, in the order the callbacks were invoked.
    """
    def __init__(self, errors: List[BaseException]):
        self.errors = list(errors)
        super().__init__(f"{len(self.errors)} subscriber callback(s) failed during notification")

    def __str__(self) -> str:
        """Provide a more informative string representation."""
        parts = [super().__str__()]
        for error in self.errors:
            parts.append(f"{type(error).__name__}: {error}")
        return ". ".join(parts)
