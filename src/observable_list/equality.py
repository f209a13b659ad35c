"""Equality strategies used when an ObservableList searches for an element.

`remove()`, `remove_last()`, `index_of()`, `last_index_of()` and `contains()`
all need to decide whether a stored element "is" the element they were given.
Rather than hard-coding one answer, each list is built with an equality
strategy: any callable taking two elements and returning a `bool`.

Two strategies are provided:

*   `value_equal` (the default): `a is b or a == b`. This is the same rule the
    built-in `list` uses for `in`, `.index()` and `.remove()`, so plain values
    such as numbers and strings compare by value and `float('nan')` still finds
    itself.
*   `identity_equal`: `a is b`. Useful for lists of mutable objects where two
    distinct objects that happen to compare equal must not be confused.
"""

from typing import Any, Callable

# Type Alias: a function deciding whether two elements should be treated as the same.
EqualityStrategy = Callable[[Any, Any], bool]


def value_equal(a: Any, b: Any) -> bool:
    """Returns True if `a` and `b` are the same object or compare equal."""
    return a is b or bool(a == b)


def identity_equal(a: Any, b: Any) -> bool:
    """Returns True only if `a` and `b` are the very same object."""
    return a is b
