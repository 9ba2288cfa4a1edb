__all__ = (
    "InvalidActionShapeError",
    "InvalidEnhancerError",
    "InvalidListenerError",
    "InvalidObserverError",
    "InvalidReducerError",
    "MissingDiscriminatorError",
    "ReducerInitError",
    "ReducerProbeError",
    "ReducerSanityError",
    "ReentrantDispatchError",
    "StoreError",
    "UndefinedStateError",
)


class StoreError(Exception):
    pass


class InvalidReducerError(StoreError, TypeError):
    pass


class InvalidEnhancerError(StoreError, TypeError):
    pass


class InvalidListenerError(StoreError, TypeError):
    pass


class InvalidObserverError(StoreError, TypeError):
    pass


class InvalidActionShapeError(StoreError, TypeError):
    pass


class MissingDiscriminatorError(StoreError):
    pass


class ReentrantDispatchError(StoreError):
    pass


class UndefinedStateError(StoreError):
    def __init__(self, key: str, action_type: object = None) -> None:
        self.key = key
        self.action_type = action_type

        action_name = (
            f'"{action_type}"' if action_type is not None else "an action"
        )

        super().__init__(
            f'Given action {action_name}, reducer "{key}" returned None. '
            "To ignore an action, you must explicitly return the previous "
            "state."
        )


class ReducerSanityError(StoreError):
    def __init__(self, key: str, message: str) -> None:
        self.key = key

        super().__init__(message)


class ReducerInitError(ReducerSanityError):
    pass


class ReducerProbeError(ReducerSanityError):
    pass
