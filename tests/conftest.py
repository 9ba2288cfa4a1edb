import pytest


def counter(state=None, action=None):
    if state is None:
        state = 0

    if action["type"] == "INC":
        return state + 1

    if action["type"] == "DEC":
        return state - 1

    return state


def todos(state=None, action=None):
    if state is None:
        state = []

    if action["type"] == "ADD_TODO":
        return [*state, action["text"]]

    return state


@pytest.fixture
def counter_reducer():
    return counter


@pytest.fixture
def todos_reducer():
    return todos
