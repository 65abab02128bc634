"""
Pure transition and projection functions of a paginated search.

Nothing here sleeps, logs or touches a provider; the drivers in
``source.py`` supply the candidates and apply the delay.
"""

from collections.abc import Sequence

from .config import PAGE_SIZE
from .pagination import PageReady, SearchResult, StreamStarting, is_blank, matches_term, page_slice
from .state import SearchPhase, SearchState


def advance(
    state: SearchState, candidates: Sequence[str], page_size: int = PAGE_SIZE
) -> SearchState:
    """
    Moves a search to its next page.

    A blank term matches nothing. Otherwise the candidates are filtered by
    case-insensitive containment and the page at ``state.page_number`` is cut.
    An empty page produces the terminal DONE state.
    """
    if is_blank(state.search_term):
        items: list[str] = []
    else:
        matches = [item for item in candidates if matches_term(item, state.search_term)]
        items = page_slice(matches, state.page_number, page_size)

    phase = SearchPhase.HAS_ITEMS if items else SearchPhase.DONE
    return state.with_page(state.page_number + 1, items, phase)


def should_continue(state: SearchState) -> bool:
    """Checked on the current state before it is projected."""
    return state.phase is not SearchPhase.DONE


def project(state: SearchState) -> SearchResult:
    """Turns a non-terminal state into the value handed to the consumer."""
    if state.phase is SearchPhase.NEW:
        return StreamStarting(search_term=state.search_term)
    return PageReady(
        search_term=state.search_term, page_number=state.page_number, items=state.items
    )


def step(
    state: SearchState, candidates: Sequence[str], page_size: int = PAGE_SIZE
) -> tuple[SearchResult, SearchState] | None:
    """
    Explicit state machine step.

    Returns the result for ``state`` together with its successor,
    or None once ``state`` is terminal.
    """
    if not should_continue(state):
        return None
    return project(state), advance(state, candidates, page_size)
