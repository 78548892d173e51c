from ._action import Action, ActionKind, INIT
from ._reducer import Dispatch, Listener, Reducer, Unsubscribe
from ._store import (
    ReentrantDispatchError,
    Store,
    StoreError,
    create_store
)


__all__ = (
    "Action",
    "ActionKind",
    "Dispatch",
    "INIT",
    "Listener",
    "Reducer",
    "ReentrantDispatchError",
    "Store",
    "StoreError",
    "Unsubscribe",

    "create_store"
)
