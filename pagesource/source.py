import asyncio
import threading
from collections.abc import AsyncIterator, Callable, Iterable, Iterator, Sequence

from ._logging import logger, redact_term
from .clock import Clock, SystemClock
from .config import SourceOptions
from .exceptions import handle_provider_errors
from .generator import agenerate, generate
from .machine import advance, project, should_continue
from .pagination import SearchResult
from .providers import ItemProvider, StaticItemProvider
from .state import SearchState


class SearchStream(Iterable[SearchResult]):
    """
    Lazy sequence of results for a single search term.

    Nothing runs until the stream is consumed. Every call to ``iter()``,
    ``aiter()`` or ``subscribe()`` starts a fresh state chain from the seed,
    so a stream can be consumed more than once and two streams never
    share state.

    Usage:
        stream = source.search("an")

        # Blocking pull
        for result in stream:
            ...

        # asyncio pull, the delay never blocks the loop
        async for result in stream:
            ...

        # Push from a background thread
        sub = stream.subscribe(print, on_completed=lambda: print("done"))
        sub.cancel()
    """

    def __init__(
        self, search_term: str, provider: ItemProvider, options: SourceOptions, clock: Clock
    ) -> None:
        self.search_term = search_term
        self.provider = provider
        self.options = options
        self.clock = clock

    def __repr__(self) -> str:
        return f"{type(self).__name__}(search_term={self.search_term!r})"

    def _log_extra(self, **fields: object) -> dict[str, object]:
        return {"term_hash": redact_term(self.search_term), **fields}

    def _candidates(self) -> Sequence[str]:
        with handle_provider_errors(provider_name=type(self.provider).__name__):
            return self.provider.get_items()

    def _advance(self, state: SearchState) -> SearchState:
        """Runs one transition. The delay has already been applied by the caller."""
        new_state = advance(state, self._candidates(), self.options.page_size)
        logger.debug(
            "Page computed",
            extra=self._log_extra(
                operation="advance",
                page_number=new_state.page_number,
                item_count=len(new_state.items),
                phase=new_state.phase.value,
            ),
        )
        return new_state

    def _next_state(self, state: SearchState) -> SearchState:
        self.clock.sleep(self.options.simulated_delay)
        return self._advance(state)

    async def _anext_state(self, state: SearchState) -> SearchState:
        await self.clock.asleep(self.options.simulated_delay)
        return self._advance(state)

    # --- EXECUTION STRATEGIES ---

    def __iter__(self) -> Iterator[SearchResult]:
        """
        Blocking execution: each page waits for the delay on the consumer's thread.
        Stopping iteration early prevents any further transition.
        """
        logger.info(
            "Starting search stream", extra=self._log_extra(operation="iterate", mode="sync")
        )
        emitted = 0
        for result in generate(
            SearchState.initial(self.search_term), should_continue, self._next_state, project
        ):
            yield result
            emitted += 1
        logger.info(
            "Search stream completed",
            extra=self._log_extra(operation="iterate", mode="sync", results=emitted),
        )

    def __aiter__(self) -> AsyncIterator[SearchResult]:
        return self._aiterate()

    async def _aiterate(self) -> AsyncIterator[SearchResult]:
        """
        Async execution: the delay is an awaitable sleep on the running loop.
        Cancelling the consuming task cancels the pending delay and the
        CancelledError propagates to the consumer.
        """
        logger.info(
            "Starting search stream", extra=self._log_extra(operation="iterate", mode="async")
        )
        emitted = 0
        try:
            async for result in agenerate(
                SearchState.initial(self.search_term),
                should_continue,
                self._anext_state,
                project,
            ):
                yield result
                emitted += 1
        except asyncio.CancelledError:
            logger.debug(
                "Search stream cancelled",
                extra=self._log_extra(operation="iterate", mode="async", results=emitted),
            )
            raise
        logger.info(
            "Search stream completed",
            extra=self._log_extra(operation="iterate", mode="async", results=emitted),
        )

    def all(self) -> list[SearchResult]:
        """
        Consumes the whole stream into a list.
        WARNING: Blocks for one delay per page.
        """
        return list(self)

    async def aall(self) -> list[SearchResult]:
        """Async counterpart of all()."""
        return [result async for result in self]

    def subscribe(
        self,
        on_next: Callable[[SearchResult], None],
        on_completed: Callable[[], None] | None = None,
        on_error: Callable[[Exception], None] | None = None,
    ) -> "Subscription":
        """
        Pushes results to callbacks from a background thread.

        Returns:
            A started Subscription; call cancel() to stop delivery
        """
        subscription = Subscription(self, on_next, on_completed, on_error)
        subscription.start()
        return subscription


class Subscription:
    """
    Handle for a push-mode search running on its own daemon thread.

    After cancel() no further transition runs, the pending delay is woken
    immediately, and neither on_completed nor on_error is called.
    """

    def __init__(
        self,
        stream: SearchStream,
        on_next: Callable[[SearchResult], None],
        on_completed: Callable[[], None] | None = None,
        on_error: Callable[[Exception], None] | None = None,
    ) -> None:
        self._stream = stream
        self._on_next = on_next
        self._on_completed = on_completed
        self._on_error = on_error
        self._cancelled = threading.Event()
        self._thread = threading.Thread(
            target=self._run, name=f"pagesource-{redact_term(stream.search_term)}", daemon=True
        )

    @property
    def is_cancelled(self) -> bool:
        return self._cancelled.is_set()

    @property
    def is_running(self) -> bool:
        return self._thread.is_alive()

    def start(self) -> None:
        self._thread.start()

    def cancel(self) -> None:
        """Stops delivery. Safe to call from any thread, including inside on_next."""
        self._cancelled.set()

    def join(self, timeout: float | None = None) -> bool:
        """
        Waits for the worker thread to finish.

        Returns:
            True if the thread has finished
        """
        self._thread.join(timeout)
        return not self._thread.is_alive()

    def _continue(self, state: SearchState) -> bool:
        return not self._cancelled.is_set() and should_continue(state)

    def _next_state(self, state: SearchState) -> SearchState:
        stream = self._stream
        if stream.clock.wait(stream.options.simulated_delay, self._cancelled):
            # Cancelled during the delay; _continue() ends the loop
            return state
        return stream._advance(state)

    def _run(self) -> None:
        stream = self._stream
        try:
            for result in generate(
                SearchState.initial(stream.search_term), self._continue, self._next_state, project
            ):
                self._on_next(result)
        except Exception as e:
            if self._cancelled.is_set():
                logger.debug(
                    "Search subscription failed after cancel",
                    extra=stream._log_extra(operation="subscribe", error=type(e).__name__),
                    exc_info=True,
                )
                return
            logger.warning(
                "Search subscription failed",
                extra=stream._log_extra(operation="subscribe", error=type(e).__name__),
            )
            if self._on_error is None:
                raise
            self._on_error(e)
            return

        if self._cancelled.is_set():
            logger.debug(
                "Search subscription cancelled", extra=stream._log_extra(operation="subscribe")
            )
            return

        logger.info(
            "Search subscription completed", extra=stream._log_extra(operation="subscribe")
        )
        if self._on_completed is not None:
            self._on_completed()


class PaginatedItemsSource:
    """
    Asynchronous data source that serves search matches page by page.

    Args:
        provider: Supplies the candidate strings (defaults to the bundled countries)
        options: Page size and delay (defaults to SourceOptions.from_env())
        clock: Delay implementation (defaults to SystemClock)
    """

    def __init__(
        self,
        provider: ItemProvider | None = None,
        options: SourceOptions | None = None,
        clock: Clock | None = None,
    ) -> None:
        self.provider = provider if provider is not None else StaticItemProvider()
        self.options = options if options is not None else SourceOptions.from_env()
        self.clock = clock if clock is not None else SystemClock()

    def search(self, search_term: str) -> SearchStream:
        """
        Returns a lazy stream of results for items containing ``search_term``.

        The first result is always StreamStarting; PageReady values follow
        with page numbers 1, 2, 3, ... until a page comes up empty.
        """
        if not isinstance(search_term, str):
            raise TypeError(f"search_term must be a str, got {type(search_term).__name__}")
        return SearchStream(search_term, self.provider, self.options, self.clock)


def search(search_term: str) -> SearchStream:
    """Searches the bundled country list with default options."""
    return PaginatedItemsSource().search(search_term)
