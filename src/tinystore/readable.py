"""Read-only stores — get and subscribe, nothing else.

readonly() wraps any Readable in a new object that forwards exactly those two
methods, so holders of the view cannot reach set()/update() on the source.
readable() builds a store whose value only its on_start producer can change.
"""

from __future__ import annotations

from typing import Generic, TypeVar

from tinystore._types import OnStart, Readable, Subscriber, Unsubscriber
from tinystore.writable import WritableStore

T = TypeVar("T")


class ReadOnlyStore(Generic[T]):
    """A live read-only view of another store."""

    __slots__ = ("_source",)

    def __init__(self, source: Readable[T]) -> None:
        self._source = source

    def get(self) -> T:
        return self._source.get()

    def subscribe(self, run: Subscriber[T]) -> Unsubscriber:
        return self._source.subscribe(run)

    def __repr__(self) -> str:
        return f"ReadOnlyStore({self._source.get()!r})"


def readonly(store: Readable[T]) -> ReadOnlyStore[T]:
    """Return a read-only view of store.

    Usage:
        _count = writable(0)
        count = readonly(_count)

        count.get()   # 0
        _count.set(5)
        count.get()   # 5 — the view is live
    """
    return ReadOnlyStore(store)


def readable(value: T, on_start: OnStart[T] | None = None) -> ReadOnlyStore[T]:
    """Create a store whose value is driven only by on_start.

    Usage:
        def start(set, update):
            set(fetch_initial())
            watcher = watch_for_changes(set)
            return watcher.stop

        config = readable(None, start)
    """
    return ReadOnlyStore(WritableStore(value, on_start))
