from ._action import Action, ActionLike, ActionTypes, get_action_type
from ._compose import compose
from ._errors import (
    InvalidActionShapeError,
    InvalidEnhancerError,
    InvalidListenerError,
    InvalidObserverError,
    InvalidReducerError,
    MissingDiscriminatorError,
    ReducerInitError,
    ReducerProbeError,
    ReducerSanityError,
    ReentrantDispatchError,
    StoreError,
    UndefinedStateError
)
from ._middleware import Middleware, MiddlewareAPI, apply_middleware
from ._reducer import Reducer, ReducerFn, combine_reducers
from ._store import (
    Dispatch,
    Enhancer,
    Listener,
    Observable,
    Store,
    StoreCreator,
    Subscription,
    Unsubscribe,
    create_store
)


__all__ = (
    "Action",
    "ActionLike",
    "ActionTypes",
    "Dispatch",
    "Enhancer",
    "InvalidActionShapeError",
    "InvalidEnhancerError",
    "InvalidListenerError",
    "InvalidObserverError",
    "InvalidReducerError",
    "Listener",
    "Middleware",
    "MiddlewareAPI",
    "MissingDiscriminatorError",
    "Observable",
    "Reducer",
    "ReducerFn",
    "ReducerInitError",
    "ReducerProbeError",
    "ReducerSanityError",
    "ReentrantDispatchError",
    "Store",
    "StoreCreator",
    "StoreError",
    "Subscription",
    "UndefinedStateError",
    "Unsubscribe",

    "apply_middleware",
    "combine_reducers",
    "compose",
    "create_store",
    "get_action_type",
)
