"""
Unit tests for SearchState and SearchPhase.

SearchState is frozen: every transition must build a new value.
"""

import pytest
from pydantic import ValidationError

from pagesource.state import SearchPhase, SearchState


@pytest.mark.unit
class TestSearchState:
    def test_initial_state(self):
        state = SearchState.initial("an")

        assert state.search_term == "an"
        assert state.page_number == 0
        assert state.items == ()
        assert state.phase is SearchPhase.NEW
        assert state.is_done is False

    def test_with_page_returns_new_instance(self):
        seed = SearchState.initial("an")

        nxt = seed.with_page(1, ["Albania", "Andorra"], SearchPhase.HAS_ITEMS)

        assert nxt is not seed
        assert nxt.search_term == "an"
        assert nxt.page_number == 1
        assert nxt.items == ("Albania", "Andorra")
        assert nxt.phase is SearchPhase.HAS_ITEMS
        # The seed is untouched
        assert seed.page_number == 0
        assert seed.items == ()

    def test_with_page_snapshots_items(self):
        items = ["Albania"]
        state = SearchState.initial("a").with_page(1, items, SearchPhase.HAS_ITEMS)

        items.append("Algeria")

        assert state.items == ("Albania",)

    def test_state_is_frozen(self):
        state = SearchState.initial("an")

        with pytest.raises(ValidationError):
            state.page_number = 5  # type: ignore[misc]

    def test_negative_page_number_rejected(self):
        with pytest.raises(ValidationError):
            SearchState(search_term="x", page_number=-1)

    def test_done_state(self):
        state = SearchState.initial("x").with_page(1, [], SearchPhase.DONE)

        assert state.is_done is True
        assert state.items == ()


@pytest.mark.unit
class TestSearchPhase:
    def test_values(self):
        assert SearchPhase("new") is SearchPhase.NEW
        assert SearchPhase("has_items") is SearchPhase.HAS_ITEMS
        assert SearchPhase("done") is SearchPhase.DONE
