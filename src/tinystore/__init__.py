"""tinystore: minimal observable value stores for Python."""

from importlib.metadata import version as _version

__version__ = _version("tinystore")

from tinystore._equality import safe_not_equal
from tinystore._types import (
    OnStart,
    Readable,
    StoreSet,
    StoreUpdate,
    Subscriber,
    Unsubscriber,
    Updater,
    Writable,
)
from tinystore.writable import WritableStore, writable
from tinystore.readable import ReadOnlyStore, readable, readonly

__all__ = [
    "writable",
    "readable",
    "readonly",
    "WritableStore",
    "ReadOnlyStore",
    "Readable",
    "Writable",
    "Subscriber",
    "Unsubscriber",
    "Updater",
    "OnStart",
    "StoreSet",
    "StoreUpdate",
    "safe_not_equal",
]
