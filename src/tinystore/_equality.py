"""Change detection — decides whether a write counts as a change.

Scalars compare by value. Everything else (containers, instances, callables)
is always treated as changed: the store cannot see in-place mutation of a
shared object, so it never suppresses a write of one.
"""

from __future__ import annotations

import numbers
from decimal import Decimal

_SCALARS = (type(None), bool, str, bytes, numbers.Number)


def _is_scalar(value: object) -> bool:
    return isinstance(value, _SCALARS) and not callable(value)


def _is_nan(value: object) -> bool:
    """True for self-unequal scalars (float/complex/Decimal NaN)."""
    if isinstance(value, Decimal):
        # comparing a signaling NaN raises InvalidOperation
        return value.is_nan()
    return _is_scalar(value) and value != value


def safe_not_equal(old: object, new: object) -> bool:
    """Return True if replacing ``old`` with ``new`` should notify observers.

    Two NaNs are equal. Scalars follow ``==``, so ``1`` -> ``1.0`` and
    ``True`` -> ``1`` are not changes.
    """
    if _is_nan(old):
        return not _is_nan(new)
    if not _is_scalar(old):
        return True
    if not _is_scalar(new) or _is_nan(new):
        return True
    return old != new
