"""
Search results and page slicing for pagesource.

This module provides the values handed to consumers of a search stream,
and the helpers that cut a filtered candidate list into fixed-size pages.
"""

from collections.abc import Sequence
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class StreamStarting(BaseModel):
    """
    First value of every search stream.

    Attributes:
        search_term: The term the stream was started with
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["stream_starting"] = "stream_starting"
    search_term: str


class PageReady(BaseModel):
    """
    Represents a single non-empty page of matches.

    Attributes:
        search_term: The term the stream was started with
        page_number: 1-based position of this page in the stream
        items: Matching items, in original collection order
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["page_ready"] = "page_ready"
    search_term: str
    page_number: int = Field(ge=1)
    items: tuple[str, ...]

    @property
    def count(self) -> int:
        """Number of items on this page."""
        return len(self.items)


SearchResult = Annotated[Union[StreamStarting, PageReady], Field(discriminator="kind")]

# Validates and dumps SearchResult values from/to plain dicts and JSON
SearchResultAdapter: TypeAdapter[SearchResult] = TypeAdapter(SearchResult)


def matches_term(item: str, search_term: str) -> bool:
    """Case-insensitive substring containment. No trimming, no tokenization."""
    return search_term.lower() in item.lower()


def is_blank(search_term: str) -> bool:
    """True for empty or whitespace-only terms, which never match anything."""
    return not search_term.strip()


def page_slice(matches: Sequence[str], page_number: int, page_size: int) -> list[str]:
    """
    Returns the page_number-th (0-based) slice of matches.

    An index past the end yields an empty list.
    """
    start = page_number * page_size
    return list(matches[start : start + page_size])
