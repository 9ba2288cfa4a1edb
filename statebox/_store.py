from __future__ import annotations

import logging

from typing import Any, Callable, Generic, Optional, TypeVar

from ._action import ActionTypes, get_action_type, is_plain_record
from ._errors import (
    InvalidActionShapeError,
    InvalidEnhancerError,
    InvalidListenerError,
    InvalidObserverError,
    InvalidReducerError,
    MissingDiscriminatorError,
    ReentrantDispatchError
)
from ._reducer import ReducerFn


__all__ = (
    "Dispatch",
    "Enhancer",
    "Listener",
    "Observable",
    "Store",
    "StoreCreator",
    "Subscription",
    "Unsubscribe",

    "create_store",
)


A = TypeVar("A")
S = TypeVar("S")


logger = logging.getLogger(__name__)


Dispatch = Callable[[Any], Any]
Listener = Callable[[], None]
Unsubscribe = Callable[[], None]


class Subscription:
    def __init__(self, unsubscribe: Unsubscribe) -> None:
        self._unsubscribe = unsubscribe

    def unsubscribe(self) -> None:
        self._unsubscribe()


class Store(Generic[S, A]):
    def dispatch(self, action: A) -> Any:
        raise NotImplementedError

    def get_state(self) -> S:
        raise NotImplementedError

    def subscribe(self, listener: Listener) -> Unsubscribe:
        raise NotImplementedError

    def replace_reducer(self, next_reducer: ReducerFn) -> None:
        raise NotImplementedError

    def observable(self) -> Observable[S]:
        return Observable(self)


class Observable(Generic[S]):
    def __init__(self, store: Store[S, Any]) -> None:
        self._store = store

    def subscribe(self, observer: Any) -> Subscription:
        if observer is None:
            raise InvalidObserverError("Expected the observer to be an object.")

        store = self._store

        def observe_state() -> None:
            on_next = getattr(observer, "next", None)

            if on_next is not None:
                on_next(store.get_state())

        observe_state()

        return Subscription(store.subscribe(observe_state))

    def observable(self) -> Observable[S]:
        return self


StoreCreator = Callable[..., Store]
Enhancer = Callable[[StoreCreator], StoreCreator]


class _DefaultStore(Store[S, A]):
    _reducer: ReducerFn
    _state: Optional[S]

    _current_listeners: list[Listener]
    _next_listeners: list[Listener]

    _is_dispatching: bool
    _is_notifying: bool

    def __init__(self, reducer: ReducerFn, preloaded_state: Optional[S]) -> None:
        self._reducer = reducer
        self._state = preloaded_state

        self._current_listeners = []
        self._next_listeners = self._current_listeners

        self._is_dispatching = False
        self._is_notifying = False

    def _ensure_can_mutate_next_listeners(self) -> None:
        if self._next_listeners is self._current_listeners:
            self._next_listeners = list(self._current_listeners)

    def _notify(self, listeners: list[Listener]) -> None:
        try:
            self._is_notifying = True

            for listener in listeners:
                listener()
        finally:
            self._is_notifying = False

    def _ensure_not_dispatching(self) -> None:
        if self._is_dispatching:
            raise ReentrantDispatchError("Reducers may not dispatch actions.")

        if self._is_notifying:
            raise ReentrantDispatchError("Listeners may not dispatch actions.")

    def get_state(self) -> S:
        return self._state  # type: ignore[return-value]

    def subscribe(self, listener: Listener) -> Unsubscribe:
        if not callable(listener):
            raise InvalidListenerError("Expected the listener to be callable.")

        is_subscribed = True

        self._ensure_can_mutate_next_listeners()
        self._next_listeners.append(listener)

        def unsubscribe() -> None:
            nonlocal is_subscribed

            if not is_subscribed:
                return

            is_subscribed = False

            self._ensure_can_mutate_next_listeners()
            self._next_listeners.remove(listener)

        return unsubscribe

    def dispatch(self, action: A) -> A:
        if not is_plain_record(action):
            raise InvalidActionShapeError(
                "Actions must be plain records, either a mapping or a "
                "pydantic model. Use custom middleware for other kinds of "
                "actions."
            )

        if get_action_type(action) is None:
            raise MissingDiscriminatorError(
                'Actions may not have a missing or None "type". '
                "Have you misspelled a constant?"
            )

        self._ensure_not_dispatching()

        try:
            self._is_dispatching = True
            self._state = self._reducer(self._state, action)
        finally:
            self._is_dispatching = False

        listeners = self._current_listeners = self._next_listeners
        self._notify(listeners)

        return action

    def replace_reducer(self, next_reducer: ReducerFn) -> None:
        if not callable(next_reducer):
            raise InvalidReducerError(
                "Expected the next reducer to be callable."
            )

        self._ensure_not_dispatching()

        logger.debug("Replacing reducer with %r", next_reducer)

        self._reducer = next_reducer
        self.dispatch({"type": ActionTypes.INIT})


def create_store(
    reducer: ReducerFn,
    preloaded_state: Any = None,
    enhancer: Optional[Enhancer] = None
) -> Store:
    if callable(preloaded_state) and enhancer is None:
        enhancer = preloaded_state
        preloaded_state = None

    if not callable(reducer):
        raise InvalidReducerError("Expected the reducer to be callable.")

    if enhancer is not None:
        if not callable(enhancer):
            raise InvalidEnhancerError("Expected the enhancer to be callable.")

        return enhancer(create_store)(reducer, preloaded_state)

    store = _DefaultStore[Any, Any](reducer, preloaded_state)

    store.dispatch({"type": ActionTypes.INIT})

    return store
