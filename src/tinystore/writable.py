"""Writable stores — a single value that pushes changes to its subscribers.

Subscribers are called synchronously: once on subscribe with the current
value, then on every accepted set()/update(). Writes that safe_not_equal()
rejects are dropped without touching the value.

An optional on_start callback runs when the first subscriber arrives and may
return a teardown, run when the last one leaves. This lets a store own a
resource (a timer, a socket, a watcher) only while someone is listening.

Re-entrancy: a subscriber may call set(), update(), subscribe() or an
unsubscribe function on the same store. A nested set() finishes its own
notification pass before the outer pass continues.

Thread safety: none. Calls from several threads must be serialized by the
caller.
"""

from __future__ import annotations

import logging
from typing import Callable, Generic, TypeVar

from tinystore._equality import safe_not_equal
from tinystore._types import OnStart, Subscriber, Unsubscriber, Updater

logger = logging.getLogger("tinystore.writable")

T = TypeVar("T")


class _Handle:
    """Identity wrapper for one subscription. Two subscribes, two handles.

    A pending handle is registered but has not had its initial call yet;
    notification passes skip it.
    """

    __slots__ = ("run", "pending")

    def __init__(self, run: Subscriber) -> None:
        self.run = run
        self.pending = True


class WritableStore(Generic[T]):
    """A value with get/set/update/subscribe."""

    __slots__ = ("_value", "_on_start", "_teardown", "_observers")

    def __init__(self, value: T, on_start: OnStart[T] | None = None) -> None:
        self._value = value
        self._on_start = on_start
        self._teardown: Callable[[], None] | None = None
        # dict as an insertion-ordered set of handles
        self._observers: dict[_Handle, None] = {}

    def get(self) -> T:
        """Read the current value."""
        return self._value

    def set(self, value: T) -> None:
        """Store value and notify subscribers, unless it is unchanged."""
        if not safe_not_equal(self._value, value):
            return
        self._value = value
        if not self._observers:
            return
        # Snapshot: handles added during the pass wait for the next change,
        # handles removed before being reached are skipped.
        for handle in list(self._observers):
            if handle in self._observers and not handle.pending:
                handle.run(self._value)

    def update(self, fn: Updater[T]) -> None:
        """Set the value to fn(current value)."""
        self.set(fn(self._value))

    def subscribe(self, run: Subscriber[T]) -> Unsubscriber:
        """Register run and call it with the current value.

        Returns a function that removes the subscription. Calling it more
        than once does nothing.
        """
        handle = _Handle(run)
        self._observers[handle] = None
        if len(self._observers) == 1:
            try:
                self._activate()
            except Exception:
                self._observers.pop(handle, None)
                raise

        handle.pending = False
        run(self._value)

        def _unsubscribe() -> None:
            if handle not in self._observers:
                return  # already removed
            del self._observers[handle]
            if not self._observers:
                self._deactivate()

        return _unsubscribe

    def observer_count(self) -> int:
        """Number of active subscriptions. Useful for testing."""
        return len(self._observers)

    def _activate(self) -> None:
        if self._on_start is None:
            return
        logger.debug("Activating %r", self)
        teardown = self._on_start(self.set, self.update)
        self._teardown = teardown if callable(teardown) else None

    def _deactivate(self) -> None:
        teardown, self._teardown = self._teardown, None
        if teardown is not None:
            logger.debug("Deactivating %r", self)
            teardown()

    def __repr__(self) -> str:
        return f"WritableStore({self._value!r})"


def writable(value: T, on_start: OnStart[T] | None = None) -> WritableStore[T]:
    """Create a store that can be read, written and subscribed to.

    Usage:
        count = writable(0)
        log = []

        unsubscribe = count.subscribe(log.append)
        # log == [0] — called immediately

        count.set(1)
        count.update(lambda n: n + 1)
        # log == [0, 1, 2]

        unsubscribe()
        count.set(3)
        # log == [0, 1, 2] — no longer subscribed

    With on_start, the store is driven by a producer while it has
    subscribers:
        def start(set, update):
            timer = start_timer(lambda: update(lambda n: n + 1))
            return timer.cancel

        ticks = writable(0, start)
    """
    return WritableStore(value, on_start)
