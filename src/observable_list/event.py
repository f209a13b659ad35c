"""Provides the Event class, the notification channel used by ObservableList.

An `Event` keeps an ordered collection of subscriber callbacks and calls all
of them, one after the other, whenever `emit()` is invoked. There is no queue
and no event loop: by the time `emit()` returns, every subscriber has run.

Each `ObservableList` owns one `Event` (its `changed` attribute) and emits
`(index, removed, added)` on it after every content-changing operation, but
the class itself is generic and forwards whatever positional arguments it is
given.

Basic Usage:
    >>> changed = Event()
    >>> subscription = changed.subscribe(lambda *args: print("got", args))
    >>> changed.emit(0, (), ("a",))
    got (0, (), ('a',))
    >>> subscription()          # or: changed.unsubscribe(subscription)
    >>> changed.emit(1, (), ("b",))  # nothing printed
"""

from typing import Any, Callable, Dict, List

from . import logger
from .config import ErrorPolicy
from .exceptions import SubscriberError

# Type Alias for clarity: a function subscribers provide to receive notifications.
# For ObservableList it is called as callback(index, removed, added).
SubscriptionCallback = Callable[..., None]


class Subscription:
    """Opaque token returned by `Event.subscribe()`.

    Pass it to `Event.unsubscribe()` to stop receiving notifications, or simply
    call it with no arguments, which does the same thing. Both ways are
    idempotent: unsubscribing twice is harmless.
    """
    __slots__ = ('_event', 'callback')

    def __init__(self, event: 'Event', callback: SubscriptionCallback):
        self._event = event
        self.callback = callback

    @property
    def active(self) -> bool:
        """True while this registration is still attached to its Event."""
        return self._event._is_registered(self)

    def __call__(self) -> None:
        self._event.unsubscribe(self)

    def __repr__(self) -> str:
        state = "active" if self.active else "inactive"
        return f"<Subscription {self.callback!r} ({state})>"


class Event:
    """A synchronous, ordered publish/subscribe channel.

    Subscribers are called in the order they subscribed. Subscribing the same
    function twice creates two independent registrations, each with its own
    token, and the function is then called twice per emission.

    A subscriber may subscribe, unsubscribe or emit again from inside its own
    callback. Nested emissions run to completion before the outer one resumes.
    The list of callbacks for one emission is fixed when it starts: a
    subscriber removed mid-emission is skipped if it has not been reached yet,
    and a subscriber added mid-emission is first called on the next emission.

    Args:
        error_policy (ErrorPolicy): How exceptions raised by subscriber
            callbacks are handled. With `ErrorPolicy.LOG` (default) they are
            logged and the remaining subscribers still run. With
            `ErrorPolicy.RAISE` the remaining subscribers still run, then a
            `SubscriberError` carrying all collected exceptions is raised.
    """

    def __init__(self, error_policy: ErrorPolicy = ErrorPolicy.LOG):
        # Insertion-ordered mapping used as an ordered set of live registrations.
        self._subscriptions: Dict[Subscription, None] = {}
        self.error_policy = error_policy

    def subscribe(self, callback: SubscriptionCallback) -> Subscription:
        """Registers a function to be called on every emission.

        Args:
            callback: A function accepting the positional arguments passed to
                `emit()`. For `ObservableList.changed` that is
                `(index, removed, added)`.

        Returns:
            Subscription: A token identifying this registration. Calling it, or
                passing it to `unsubscribe()`, removes the registration.

        Raises:
            TypeError: If the provided `callback` is not callable.
        """
        if not callable(callback):
            raise TypeError("Callback provided to Event.subscribe must be callable")
        subscription = Subscription(self, callback)
        self._subscriptions[subscription] = None
        logger.debug(f"Subscribed callback {callback} to Event (id: {id(self)})")
        return subscription

    def unsubscribe(self, subscription: Subscription) -> None:
        """Removes a registration previously returned by `subscribe()`.

        Does nothing if the registration was already removed, or belongs to a
        different Event.

        Args:
            subscription: The token returned by `subscribe()`.
        """
        if subscription in self._subscriptions:
            del self._subscriptions[subscription]
            logger.debug(f"Unsubscribed callback {subscription.callback} from Event (id: {id(self)})")

    def emit(self, *args: Any) -> None:
        """Calls every registered subscriber, in registration order, with `args`.

        Raises:
            SubscriberError: Only with `ErrorPolicy.RAISE`, after all
                subscribers have been called, if any of them raised.
        """
        # Optimization: If no subscribers are registered, do nothing.
        if not self._subscriptions:
            return

        logger.debug("Notifying %d subscribers for Event (id: %s): %s",
                     len(self._subscriptions), id(self), args)

        errors: List[BaseException] = []
        # Iterate over a copy so callbacks may (un)subscribe while we are notifying.
        for subscription in list(self._subscriptions):
            if subscription not in self._subscriptions:
                continue
            try:
                subscription.callback(*args)
            except Exception as e:
                if self.error_policy is ErrorPolicy.RAISE:
                    errors.append(e)
                else:
                    logger.exception(f"Error occurred inside Event subscriber callback {subscription.callback}: {e}")

        if errors:
            raise SubscriberError(errors)

    def clear(self) -> None:
        """Removes every registration at once."""
        self._subscriptions.clear()

    def _is_registered(self, subscription: Subscription) -> bool:
        return subscription in self._subscriptions

    def __len__(self) -> int:
        return len(self._subscriptions)

    def __bool__(self) -> bool:
        return bool(self._subscriptions)

    def __repr__(self) -> str:
        return f"Event(subscribers={len(self._subscriptions)})"
