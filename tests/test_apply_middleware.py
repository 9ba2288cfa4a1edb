import pytest

from statebox import (
    ActionTypes,
    MiddlewareAPI,
    apply_middleware,
    combine_reducers,
    create_store
)

from conftest import counter, todos


INC = {"type": "INC"}


def recording(name, log):
    def middleware(api):
        def wrap(next_dispatch):
            def dispatch(action):
                label = action["type"] if isinstance(action, dict) else "thunk"

                log.append(f"{name}:before:{label}")
                result = next_dispatch(action)
                log.append(f"{name}:after:{label}")

                return result

            return dispatch

        return wrap

    return middleware


def thunk(api):
    def wrap(next_dispatch):
        def dispatch(action):
            if callable(action):
                return action(api.dispatch, api.get_state)

            return next_dispatch(action)

        return dispatch

    return wrap


def test_store_without_middleware_behaves_like_base_store():
    store = create_store(counter, apply_middleware())

    assert store.dispatch(INC) is INC
    assert store.get_state() == 1


def test_first_middleware_is_outermost():
    log = []
    store = create_store(
        counter,
        apply_middleware(recording("a", log), recording("b", log))
    )

    store.dispatch(INC)

    assert log == [
        "a:before:INC",
        "b:before:INC",
        "b:after:INC",
        "a:after:INC"
    ]


def test_init_does_not_go_through_middleware():
    log = []
    create_store(counter, apply_middleware(recording("a", log)))

    assert f"a:before:{ActionTypes.INIT}" not in log
    assert log == []


def test_middleware_receives_api_with_state_access():
    apis = []

    def capture(api):
        apis.append(api)

        return lambda next_dispatch: next_dispatch

    store = create_store(counter, 5, apply_middleware(capture))
    store.dispatch(INC)

    assert len(apis) == 1
    assert isinstance(apis[0], MiddlewareAPI)
    assert apis[0].get_state() == 6


def test_api_dispatch_runs_through_the_whole_chain():
    log = []
    store = create_store(
        counter,
        apply_middleware(recording("outer", log), thunk)
    )

    def increment_twice(dispatch, get_state):
        dispatch(INC)
        dispatch(INC)

        return get_state()

    assert store.dispatch(increment_twice) == 2
    assert store.get_state() == 2
    assert log.count("outer:before:INC") == 2
    assert log[0] == "outer:before:thunk"
    assert log[-1] == "outer:after:thunk"


def test_middleware_can_short_circuit():
    def swallow_dec(api):
        def wrap(next_dispatch):
            def dispatch(action):
                if action["type"] == "DEC":
                    return None

                return next_dispatch(action)

            return dispatch

        return wrap

    store = create_store(counter, apply_middleware(swallow_dec))

    assert store.dispatch({"type": "DEC"}) is None

    store.dispatch(INC)

    assert store.get_state() == 1


def test_middleware_can_transform_actions():
    def double_inc(api):
        def wrap(next_dispatch):
            def dispatch(action):
                result = next_dispatch(action)

                if action["type"] == "INC":
                    next_dispatch(action)

                return result

            return dispatch

        return wrap

    store = create_store(counter, apply_middleware(double_inc))
    store.dispatch(INC)

    assert store.get_state() == 2


def test_enhanced_store_delegates_subscribe_and_replace_reducer():
    store = create_store(
        combine_reducers({"count": counter}),
        apply_middleware(thunk)
    )
    calls = []

    unsubscribe = store.subscribe(lambda: calls.append(store.get_state()))
    store.dispatch(INC)
    unsubscribe()

    store.replace_reducer(combine_reducers({"count": counter, "todos": todos}))

    assert calls == [{"count": 1}]
    assert store.get_state() == {"count": 1, "todos": []}


def test_middleware_keeps_preloaded_state():
    store = create_store(counter, 41, apply_middleware(thunk))
    store.dispatch(INC)

    assert store.get_state() == 42


def test_base_dispatch_validation_still_applies():
    store = create_store(counter, apply_middleware(thunk))

    with pytest.raises(TypeError):
        store.dispatch(["INC"])


def test_dispatch_while_building_the_chain_reaches_the_base_store():
    log = []

    def eager(api):
        api.dispatch(INC)

        return lambda next_dispatch: next_dispatch

    store = create_store(
        counter,
        apply_middleware(eager, recording("later", log))
    )

    assert store.get_state() == 1
    assert log == []

    store.dispatch(INC)

    assert store.get_state() == 2
    assert log == ["later:before:INC", "later:after:INC"]
