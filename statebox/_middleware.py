from __future__ import annotations

from typing import Any, Callable, Generic, Optional, TypeVar

from ._compose import compose
from ._reducer import ReducerFn
from ._store import (
    Dispatch,
    Enhancer,
    Listener,
    Observable,
    Store,
    StoreCreator,
    Unsubscribe
)


__all__ = (
    "Middleware",
    "MiddlewareAPI",

    "apply_middleware",
)


A = TypeVar("A")
S = TypeVar("S")


class MiddlewareAPI(Generic[S]):
    def __init__(
        self,
        get_state: Callable[[], S],
        dispatch: Dispatch
    ) -> None:
        self.get_state = get_state
        self.dispatch = dispatch


Middleware = Callable[[MiddlewareAPI], Callable[[Dispatch], Dispatch]]


def apply_middleware(*middleware: Middleware) -> Enhancer:
    def apply(create_store: StoreCreator) -> StoreCreator:
        def create(
            reducer: ReducerFn,
            preloaded_state: Any = None,
            enhancer: Optional[Enhancer] = None
        ) -> Store:
            original_store = create_store(reducer, preloaded_state, enhancer)

            dispatch: Dispatch = original_store.dispatch

            class EnhancedStore(Store[S, A]):
                def get_state(self) -> S:
                    return original_store.get_state()

                def subscribe(self, listener: Listener) -> Unsubscribe:
                    return original_store.subscribe(listener)

                def replace_reducer(self, next_reducer: ReducerFn) -> None:
                    original_store.replace_reducer(next_reducer)

                def observable(self) -> Observable[S]:
                    return original_store.observable()

            api = MiddlewareAPI(
                get_state=original_store.get_state,
                dispatch=lambda action: dispatch(action)
            )

            chain = [each(api) for each in middleware]
            dispatch = compose(*chain)(original_store.dispatch)

            enhanced_store = EnhancedStore[Any, Any]()

            setattr(enhanced_store, "dispatch", dispatch)

            return enhanced_store

        return create

    return apply
