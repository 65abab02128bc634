from collections.abc import Iterable
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class SearchPhase(str, Enum):
    """Marks the seed, mid-stream and terminal states of a search."""

    NEW = "new"
    HAS_ITEMS = "has_items"
    DONE = "done"


class SearchState(BaseModel):
    """
    One step of a paginated search.

    Instances are frozen. Every transition builds a fresh state from
    the previous one, so successive states never share mutable fields.

    Attributes:
        search_term: The term the search was started with, never changed
        page_number: Number of pages already produced
        items: Matches on the current page (empty for the seed and terminal states)
        phase: Drives both the stop condition and the emitted result
    """

    model_config = ConfigDict(frozen=True)

    search_term: str
    page_number: int = Field(default=0, ge=0)
    items: tuple[str, ...] = ()
    phase: SearchPhase = SearchPhase.NEW

    @classmethod
    def initial(cls, search_term: str) -> "SearchState":
        """Returns the seed state for a new search."""
        return cls(search_term=search_term)

    @property
    def is_done(self) -> bool:
        return self.phase is SearchPhase.DONE

    def with_page(
        self, page_number: int, items: Iterable[str], phase: SearchPhase
    ) -> "SearchState":
        """Returns a copy with the page fields replaced; search_term carries over."""
        return self.model_copy(
            update={"page_number": page_number, "items": tuple(items), "phase": phase}
        )
