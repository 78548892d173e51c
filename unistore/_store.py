from __future__ import annotations

import logging

from threading import RLock
from types import MethodType
from typing import Generic, Optional, TypeVar

from ._action import Action, INIT
from ._reducer import Listener, Reducer, Unsubscribe


__all__ = (
    "ReentrantDispatchError",
    "Store",
    "StoreError",

    "create_store"
)


A = TypeVar("A")
S = TypeVar("S")


_logger = logging.getLogger(__name__)


class StoreError(Exception):
    pass


class ReentrantDispatchError(StoreError):
    pass


class Store(Generic[S, A]):
    """Single state value evolved by a reducer.

    A dispatch that changes state notifies a snapshot of the subscribers
    taken when notification starts. Subscribers added during the pass wait
    for the next change, and subscribers removed before their turn are
    skipped. The store lock is held for the whole dispatch including the
    notification pass, so a subscriber must not block on a dispatch running
    in another thread.
    """

    name: str

    def get_state(self) -> S:
        raise NotImplementedError

    def dispatch(self, action: A) -> A:
        raise NotImplementedError

    def subscribe(self, listener: Listener) -> Unsubscribe:
        raise NotImplementedError


_ListenerKey = tuple[int, ...]


def _reducer_name(reducer: Reducer) -> str:
    return getattr(reducer, "__qualname__", type(reducer).__qualname__)


def _listener_key(listener: Listener) -> _ListenerKey:
    # Bound methods are recreated on every attribute access.
    if isinstance(listener, MethodType):
        return id(listener.__self__), id(listener.__func__)

    return (id(listener),)


class _DefaultStore(Store[S, A]):
    _reducer: Reducer[S, A]
    _state: S

    _subscribers: dict[_ListenerKey, Listener]

    _lock: RLock
    _is_reducing: bool

    def __init__(self, reducer: Reducer[S, A], name: str) -> None:
        self.name = name

        self._reducer = reducer
        self._subscribers = {}

        self._lock = RLock()
        self._is_reducing = False

        with self._lock:
            self._state = self._reduce(None, Action(type=INIT))

        _logger.debug(
            "Store %s initialised with %s",
            self.name,
            type(self._state).__qualname__
        )

    def __repr__(self) -> str:
        return f"<Store {self.name}>"

    def _reduce(self, state: Optional[S], action: A) -> S:
        self._is_reducing = True

        try:
            return self._reducer(state, action)
        finally:
            self._is_reducing = False

    def _notify(self) -> None:
        snapshot = tuple(self._subscribers.items())

        _logger.debug(
            "Store %s notifying %d subscriber(s)",
            self.name,
            len(snapshot)
        )

        for key, listener in snapshot:
            # Unsubscribed earlier in this pass.
            if key not in self._subscribers:
                continue

            try:
                listener()
            except Exception:
                _logger.debug(
                    "Store %s subscriber %r raised, aborting notification",
                    self.name,
                    listener
                )

                raise

    def get_state(self) -> S:
        return self._state

    def dispatch(self, action: A) -> A:
        """Reduce ``action`` and notify subscribers if state changed.

        Runs under the store lock, notification pass included. Returns
        ``action`` itself.
        """
        with self._lock:
            if self._is_reducing:
                raise ReentrantDispatchError(
                    f"Reducer of {self.name} may not dispatch actions"
                )

            previous_state = self._state

            self._state = self._reduce(previous_state, action)

            if self._state is previous_state:
                _logger.debug(
                    "Store %s left unchanged by %r",
                    self.name,
                    action
                )
            else:
                self._notify()

        return action

    def subscribe(self, listener: Listener) -> Unsubscribe:
        if not callable(listener):
            raise TypeError("Listener must be callable")

        key = _listener_key(listener)

        with self._lock:
            self._subscribers.setdefault(key, listener)

        _logger.debug("Store %s subscribed %r", self.name, listener)

        def unsubscribe() -> None:
            with self._lock:
                removed = self._subscribers.pop(key, None)

            if removed is not None:
                _logger.debug(
                    "Store %s unsubscribed %r",
                    self.name,
                    listener
                )

        return unsubscribe


def create_store(
    reducer: Reducer[S, A],
    *,
    name: Optional[str] = None
) -> Store[S, A]:
    if not callable(reducer):
        raise TypeError("Reducer must be callable")

    return _DefaultStore(reducer, name or _reducer_name(reducer))
