"""Configuration for ObservableList instances.

This module defines the structure holding the per-list settings and the
library-wide default that new lists start from.

The primary components are:

- `ErrorPolicy`: How the notification channel reacts when a subscriber
  callback raises an exception.
- `ListConfig`: A data class holding the equality strategy and the error
  policy used by one `ObservableList`.
- Functions to read, replace and reset the library-wide default
  (`get_default_config()`, `set_default_config()`, `reset_default_config()`).
  A list copies the default when it is created, so changing the default later
  does not affect lists that already exist.
"""
from dataclasses import dataclass
from enum import Enum

from . import logger
from .equality import EqualityStrategy, value_equal


class ErrorPolicy(Enum):
    """What the notification channel does when a subscriber callback fails.

    Attributes:
        LOG: Log the exception (with traceback) and carry on with the remaining
            subscribers. The mutating call returns normally. This is the default.
        RAISE: Carry on with the remaining subscribers, then raise a single
            `SubscriberError` holding every exception that was collected.
    """
    LOG = "log"
    RAISE = "raise"


@dataclass(frozen=True)
class ListConfig:
    """Data class representing the settings of a single ObservableList.

    Attributes:
        equality (EqualityStrategy): The function used to compare elements in
            searches (`index_of`, `contains`, `remove`, ...). Defaults to
            `value_equal`.
        error_policy (ErrorPolicy): How failing subscribers are handled when a
            change is emitted. Defaults to `ErrorPolicy.LOG`.
    """
    equality: EqualityStrategy = value_equal
    error_policy: ErrorPolicy = ErrorPolicy.LOG


DEFAULT_CONFIG = ListConfig()

# The library-wide default, replaced through set_default_config().
_default_config: ListConfig = DEFAULT_CONFIG


def get_default_config() -> ListConfig:
    """Returns the configuration new lists use when none is passed explicitly."""
    return _default_config


def set_default_config(config: ListConfig) -> None:
    """Replaces the configuration used by lists created from now on.

    Args:
        config (ListConfig): The new default.

    Raises:
        TypeError: If `config` is not a `ListConfig`.
    """
    global _default_config
    if not isinstance(config, ListConfig):
        raise TypeError(f"Expected a ListConfig, got {type(config).__name__}")
    _default_config = config
    logger.debug(f"Default ListConfig set to {config}")


def reset_default_config() -> None:
    """Restores the built-in default configuration."""
    global _default_config
    _default_config = DEFAULT_CONFIG
