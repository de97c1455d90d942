"""Callback shapes and store protocols shared by every store.

Readable is the minimal capability set; Writable adds mutation. Any object
with matching ``get``/``subscribe`` methods is a Readable, so foreign stores
interoperate with readonly() and with consumers typed against the protocol.
"""

from __future__ import annotations

from typing import Callable, Optional, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")

Subscriber = Callable[[T], None]
Unsubscriber = Callable[[], None]
Updater = Callable[[T], T]

StoreSet = Callable[[T], None]
StoreUpdate = Callable[[Updater[T]], None]

# Called with (set, update) when the first observer subscribes. May return a
# teardown, run when the last observer unsubscribes.
OnStart = Callable[[StoreSet[T], StoreUpdate[T]], Optional[Callable[[], None]]]


@runtime_checkable
class Readable(Protocol[T]):
    """A value that can be read directly or by subscription."""

    def get(self) -> T: ...

    def subscribe(self, run: Subscriber[T]) -> Unsubscriber: ...


@runtime_checkable
class Writable(Readable[T], Protocol[T]):
    """A Readable that can also be set and updated."""

    def set(self, value: T) -> None: ...

    def update(self, fn: Updater[T]) -> None: ...
