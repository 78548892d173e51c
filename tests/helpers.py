from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict

from unistore import Action


class Counter(BaseModel):
    model_config = ConfigDict(frozen=True)

    count: int = 0


class CounterAction(Action):
    type: Literal["increment", "decrement", "unknown"]


def counter(state: Optional[Counter], action: Action) -> Counter:
    if state is None:
        state = Counter()

    if action.type == "increment":
        return Counter(count=state.count + 1)

    if action.type == "decrement":
        return Counter(count=state.count - 1)

    return state


def increment() -> CounterAction:
    return CounterAction(type="increment")


def decrement() -> CounterAction:
    return CounterAction(type="decrement")


def unknown() -> CounterAction:
    return CounterAction(type="unknown")
