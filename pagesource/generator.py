"""
Generate-until-stop primitives.

Both functions walk a state chain from a seed: while ``condition(state)``
holds they yield ``result_selector(state)`` and then move on to
``iterate(state)``. Nothing is computed before the consumer asks for it.
"""

from collections.abc import AsyncIterator, Awaitable, Callable, Iterator
from typing import TypeVar

S = TypeVar("S")
R = TypeVar("R")


def generate(
    initial: S,
    condition: Callable[[S], bool],
    iterate: Callable[[S], S],
    result_selector: Callable[[S], R],
) -> Iterator[R]:
    """Lazily yields one result per state until the condition fails."""
    state = initial
    while condition(state):
        yield result_selector(state)
        state = iterate(state)


async def agenerate(
    initial: S,
    condition: Callable[[S], bool],
    iterate: Callable[[S], Awaitable[S]],
    result_selector: Callable[[S], R],
) -> AsyncIterator[R]:
    """Async twin of generate() for step functions that suspend."""
    state = initial
    while condition(state):
        yield result_selector(state)
        state = await iterate(state)
