from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Union

from uuid import uuid4

from pydantic import BaseModel, ConfigDict, field_validator


__all__ = (
    "Action",
    "ActionLike",
    "ActionTypes",

    "get_action_type",
    "is_plain_record",
    "make_probe_type",
)


class ActionTypes:
    INIT = "@@statebox/INIT"
    PROBE_UNKNOWN_ACTION_PREFIX = "@@statebox/PROBE_UNKNOWN_ACTION_"


class Action(BaseModel):
    model_config = ConfigDict(extra="allow", frozen=True)

    type: Any

    @field_validator("type")
    @classmethod
    def validate_type(cls, value: Any) -> Any:
        if value is None:
            raise ValueError("Action type may not be None")

        return value


ActionLike = Union[Mapping[str, Any], BaseModel]


def is_plain_record(value: object) -> bool:
    return isinstance(value, (Mapping, BaseModel))


def get_action_type(action: ActionLike) -> Any:
    if isinstance(action, Mapping):
        return action.get("type")

    return getattr(action, "type", None)


def make_probe_type() -> str:
    # e.g. @@statebox/PROBE_UNKNOWN_ACTION_1.f.3.a.9.c.0.e
    return ActionTypes.PROBE_UNKNOWN_ACTION_PREFIX + ".".join(uuid4().hex[:8])
