"""
functional_chain.py — Chain-of-Responsibility built by function composition.

Instead of handler objects wired together with `set_next(...)`, each unit is a
*handler transform*: a function that receives "the rest of the chain" and
returns a handler that includes its own step. Folding a list of transforms
onto a terminal handler yields a single callable:

    build_chain([h1, h2, h3], terminal)  ==  h1(h2(h3(terminal)))

so `h1` runs first and `terminal` runs only when every unit has deferred.
"""

from __future__ import annotations

from functools import reduce
from typing import Callable, Iterable, TypeVar

H = TypeVar("H", bound=Callable)

HandlerTransform = Callable[[H], H]


def build_chain(transforms: Iterable[HandlerTransform], terminal: H) -> H:
    """
    Composes handler transforms into one handler, first transform outermost.

    Each transform needs the already-built suffix of the chain, so the list is
    folded from the right: the last transform wraps `terminal`, the one before
    wraps that result, and so on up to the first.

    :param transforms: Ordered units; position 0 is evaluated first.
    :param terminal: Base-case handler reached when every unit defers.
    :return: The composed handler; `terminal` itself when there are no units.
    :raises TypeError: If `terminal` or any unit is not callable.
    """
    units = list(transforms)
    if not callable(terminal):
        raise TypeError(f"terminal handler must be callable, got {terminal!r}")
    for position, unit in enumerate(units):
        if not callable(unit):
            raise TypeError(f"chain unit at position {position} is not callable: {unit!r}")

    return reduce(lambda nxt, unit: unit(nxt), reversed(units), terminal)


__all__ = [
    "HandlerTransform",
    "build_chain",
]
