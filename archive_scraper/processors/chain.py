from __future__ import annotations

from typing import Any, Callable, Iterable, Optional, TypeVar

T = TypeVar("T")


def first_success(strategies: Iterable[Callable[..., Optional[T]]], *args: Any) -> Optional[T]:
    """Return the first truthy result of ``strategies`` applied to ``args``.

    Strategies run in order and evaluation stops at the first hit. Empty
    strings count as a miss.
    """
    for strategy in strategies:
        value = strategy(*args)
        if value:
            return value
    return None
