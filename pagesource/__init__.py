from .clock import Clock, InstantClock, SystemClock
from .config import PAGE_SIZE, SIMULATED_DELAY, SourceOptions
from .countries import COUNTRIES
from .exceptions import ConfigurationError, ItemProviderError, PageSourceError
from .generator import agenerate, generate
from .machine import advance, project, should_continue, step
from .pagination import PageReady, SearchResult, SearchResultAdapter, StreamStarting
from .providers import ItemProvider, StaticItemProvider
from .source import PaginatedItemsSource, SearchStream, Subscription, search
from .state import SearchPhase, SearchState

__all__ = [
    "PaginatedItemsSource",
    "SearchStream",
    "Subscription",
    "search",
    # State machine
    "SearchState",
    "SearchPhase",
    "advance",
    "project",
    "should_continue",
    "step",
    "generate",
    "agenerate",
    # Results
    "SearchResult",
    "StreamStarting",
    "PageReady",
    "SearchResultAdapter",
    # Configuration
    "SourceOptions",
    "PAGE_SIZE",
    "SIMULATED_DELAY",
    # Collaborators
    "Clock",
    "SystemClock",
    "InstantClock",
    "ItemProvider",
    "StaticItemProvider",
    "COUNTRIES",
    # Exceptions
    "PageSourceError",
    "ConfigurationError",
    "ItemProviderError",
]
