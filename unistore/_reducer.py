from __future__ import annotations

from typing import Callable, Optional, Protocol, TypeVar


A = TypeVar("A", contravariant=True)
S = TypeVar("S")


__all__ = (
    "Dispatch",
    "Listener",
    "Reducer",
    "Unsubscribe"
)


class Reducer(Protocol[S, A]):
    """Pure transition ``(state, action) -> state``.

    ``state`` is ``None`` only for the initialization action. Returning the
    very object that was passed in signals that nothing changed.
    """

    def __call__(self, state: Optional[S], action: A) -> S:
        ...


Dispatch = Callable[[A], A]
Listener = Callable[[], None]
Unsubscribe = Callable[[], None]
