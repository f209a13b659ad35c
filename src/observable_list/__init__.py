"""observable-list: an ordered list that tells you exactly how it changed.

This package provides `ObservableList`, a mutable, index-addressable sequence
that synchronously notifies its subscribers after every insertion, removal or
replacement. Each notification is a triple `(index, removed, added)` which is
enough for a subscriber to update its own copy of the data (a view, a derived
list, a cache) without rescanning the whole list.

Getting Started:

    1.  **Install:** `pip install observable-list`.
    2.  **Import:** `from observable_list import ObservableList`.
    3.  **Create a list:** `todo = ObservableList(["write tests"])`.
    4.  **Subscribe:** `todo.changed.subscribe(on_change)`, where
        `on_change(index, removed, added)` receives each change.
    5.  **Modify it through its methods:** `todo.add(...)`, `todo.insert(...)`,
        `todo.remove(...)`, `todo.replace_range(...)`, `todo.set_elements(...)`.

Logging:

The package logs through the standard `logging` module under the
`observable_list` logger, which has a `NullHandler` attached by default.
Call `logging.basicConfig(level=logging.DEBUG)` (or configure the
`observable_list` logger directly) to see subscription and notification
activity.
"""

import logging

# --- Version ---
from ._version import __version__

# --- Logging Setup ---
# Configure a logger for the 'observable_list' package.
# By default, it uses a NullHandler, so applications using this library
# must configure their own logging if they wish to see its logs.
logger = logging.getLogger("observable_list")
if not logger.hasHandlers():
    logger.addHandler(logging.NullHandler())

# --- Exceptions ---
from .exceptions import (
    ObservableListError,     # Base class for all errors raised on purpose by this library.
    IndexOutOfBoundsError,   # Index or count argument outside its valid range.
    SubscriberError,         # One or more subscribers failed (ErrorPolicy.RAISE only).
)

# --- Configuration ---
from .equality import EqualityStrategy, value_equal, identity_equal
from .config import (
    ErrorPolicy,
    ListConfig,
    get_default_config,
    set_default_config,
    reset_default_config,
)

# --- Notification channel ---
from .event import Event, Subscription

# --- The list itself ---
from .observable_list import ObservableList, NOT_FOUND

# --- Derived-collection helpers ---
from .utils import apply_change, bind_mirror


__all__ = [
    # Version
    '__version__',

    # Logger (for users who might want to configure it)
    'logger',

    # Errors
    'ObservableListError',
    'IndexOutOfBoundsError',
    'SubscriberError',

    # Configuration
    'EqualityStrategy',
    'value_equal',
    'identity_equal',
    'ErrorPolicy',
    'ListConfig',
    'get_default_config',
    'set_default_config',
    'reset_default_config',

    # Notification channel
    'Event',
    'Subscription',

    # List
    'ObservableList',
    'NOT_FOUND',

    # Helpers
    'apply_change',
    'bind_mirror',
]
