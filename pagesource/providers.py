from collections.abc import Iterable, Sequence
from typing import Protocol, runtime_checkable

from .countries import COUNTRIES


@runtime_checkable
class ItemProvider(Protocol):
    """Anything that can hand out the full, ordered list of candidate strings."""

    def get_items(self) -> Sequence[str]: ...


class StaticItemProvider:
    """
    Serves a fixed collection of strings.

    The iterable is snapshotted into a tuple on construction, so later
    changes to the caller's list never leak into running searches.
    """

    def __init__(self, items: Iterable[str] = COUNTRIES) -> None:
        self._items: tuple[str, ...] = tuple(items)

    def get_items(self) -> Sequence[str]:
        return self._items

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({len(self._items)} items)"
