from __future__ import annotations

from typing import Union

from pydantic import BaseModel, ConfigDict


__all__ = (
    "Action",
    "ActionKind",
    "INIT"
)


class ActionKind:
    """Opaque action kind.

    Instances compare equal only to themselves, so a kind created here can
    never collide with a string chosen by application code.
    """

    __slots__ = ("_name",)

    def __init__(self, name: str) -> None:
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def __repr__(self) -> str:
        return f"<ActionKind {self._name}>"

    # Copies must keep identity equality intact.
    def __copy__(self) -> ActionKind:
        return self

    def __deepcopy__(self, memo: dict) -> ActionKind:
        return self


INIT = ActionKind("unistore/INIT")


class Action(BaseModel):
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    type: Union[str, ActionKind]
