# byteme/services/schemas/commands.py
from __future__ import annotations

from typing import Generic, Literal, TypeVar, Union

from pydantic import BaseModel

T = TypeVar("T")
E = TypeVar("E")


class CommandOk(BaseModel, Generic[T]):
    status: Literal["ok"] = "ok"
    data: T


class CommandError(BaseModel, Generic[E]):
    status: Literal["error"] = "error"
    error: E


CommandResult = Union[CommandOk[T], CommandError[E]]
