from __future__ import annotations

import logging

from collections.abc import Mapping
from typing import Any, Callable, Generic, Iterable, Optional, TypeVar, Union

from pydantic import BaseModel

from ._action import ActionTypes, get_action_type, make_probe_type
from ._errors import ReducerInitError, ReducerProbeError, UndefinedStateError


__all__ = (
    "Reducer",
    "ReducerFn",

    "combine_reducers",
)


A = TypeVar("A")
S = TypeVar("S")


logger = logging.getLogger(__name__)


class Reducer(Generic[S, A]):
    def apply(self, state: Optional[S], action: A) -> S:
        raise NotImplementedError

    def __call__(self, state: Optional[S], action: A) -> S:
        return self.apply(state, action)


ReducerFn = Union[Reducer, Callable[[Any, Any], Any]]


def _is_record_state(state: object) -> bool:
    return isinstance(state, (Mapping, BaseModel))


def _state_keys(state: Union[Mapping, BaseModel]) -> Iterable[str]:
    if isinstance(state, BaseModel):
        return type(state).model_fields.keys()

    return state.keys()


def _read_slice(state: object, key: str) -> Any:
    if isinstance(state, Mapping):
        return state.get(key)

    if isinstance(state, BaseModel):
        return getattr(state, key, None)

    return None


def _build_state(previous: object, slices: dict[str, Any]) -> Any:
    if isinstance(previous, BaseModel):
        return previous.model_copy(update=slices)

    return slices


def _get_unexpected_state_shape_warning_message(
    state: object,
    reducers: Mapping[str, ReducerFn],
    action: Any,
    unexpected_key_cache: set[str]
) -> Optional[str]:
    reducer_keys = '", "'.join(reducers)

    if get_action_type(action) == ActionTypes.INIT:
        argument_name = "preloaded_state argument passed to create_store"
    else:
        argument_name = "previous state received by the reducer"

    if not reducers:
        return (
            "Store does not have a valid reducer. Make sure the argument "
            "passed to combine_reducers is a mapping whose values are "
            "reducers."
        )

    if not _is_record_state(state):
        return (
            f'The {argument_name} has unexpected type of '
            f'"{type(state).__name__}". Expected argument to be a record '
            f'with the following keys: "{reducer_keys}"'
        )

    unexpected_keys = [
        key for key in _state_keys(state)  # type: ignore[arg-type]
        if key not in reducers and key not in unexpected_key_cache
    ]

    unexpected_key_cache.update(unexpected_keys)

    if not unexpected_keys:
        return None

    noun = "keys" if len(unexpected_keys) > 1 else "key"
    found = '", "'.join(unexpected_keys)

    return (
        f'Unexpected {noun} "{found}" found in {argument_name}. '
        f'Expected to find one of the known reducer keys instead: '
        f'"{reducer_keys}". Unexpected keys will be ignored.'
    )


def _assert_reducer_sanity(reducers: Mapping[str, ReducerFn]) -> None:
    for key, reducer in reducers.items():
        initial_state = reducer(None, {"type": ActionTypes.INIT})

        if initial_state is None:
            raise ReducerInitError(
                key,
                f'Reducer "{key}" returned None during initialization. '
                "If the state passed to the reducer is None, you must "
                "explicitly return the initial state. The initial state may "
                "not be None."
            )

        if reducer(None, {"type": make_probe_type()}) is None:
            raise ReducerProbeError(
                key,
                f'Reducer "{key}" returned None when probed with a random '
                f"type. Don't try to handle {ActionTypes.INIT} or other "
                'actions in the "@@statebox/" namespace. They are considered '
                "private. Instead, you must return the current state for any "
                "unknown actions, unless it is None, in which case you must "
                "return the initial state, regardless of the action type. "
                "The initial state may not be None."
            )


def combine_reducers(reducers: Mapping[str, ReducerFn]) -> ReducerFn:
    final_reducers: dict[str, ReducerFn] = {}

    for key, reducer in reducers.items():
        if reducer is None:
            logger.warning('No reducer provided for key "%s"', key)

            continue

        if not callable(reducer):
            logger.warning(
                'Reducer for key "%s" is not callable and will be ignored',
                key
            )

            continue

        final_reducers[key] = reducer

    unexpected_key_cache: set[str] = set()
    sanity_error: Optional[Exception] = None

    try:
        _assert_reducer_sanity(final_reducers)
    except Exception as error:
        sanity_error = error

    def combination(state: Any = None, action: Any = None) -> Any:
        if sanity_error is not None:
            raise sanity_error.with_traceback(None)

        if state is None:
            state = {}

        warning_message = _get_unexpected_state_shape_warning_message(
            state,
            final_reducers,
            action,
            unexpected_key_cache
        )

        if warning_message:
            logger.warning(warning_message)

        has_changed = False
        next_state: dict[str, Any] = {}

        for key, reducer in final_reducers.items():
            previous_state_for_key = _read_slice(state, key)
            next_state_for_key = reducer(previous_state_for_key, action)

            if next_state_for_key is None:
                raise UndefinedStateError(key, get_action_type(action))

            next_state[key] = next_state_for_key
            has_changed = (
                has_changed or next_state_for_key is not previous_state_for_key
            )

        if not has_changed:
            return state

        return _build_state(state, next_state)

    return combination
