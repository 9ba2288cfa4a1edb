from __future__ import annotations

from functools import reduce
from typing import Any, Callable


__all__ = (
    "compose",
)


def _identity(arg: Any = None, *args: Any, **kwargs: Any) -> Any:
    return arg


def compose(*funcs: Callable[..., Any]) -> Callable[..., Any]:
    """compose(f, g, h)(*args) is f(g(h(*args)))."""

    if not funcs:
        return _identity

    if len(funcs) == 1:
        return funcs[0]

    last = funcs[-1]
    rest = funcs[:-1]

    def composed(*args: Any, **kwargs: Any) -> Any:
        return reduce(
            lambda value, func: func(value),
            reversed(rest),
            last(*args, **kwargs)
        )

    return composed
