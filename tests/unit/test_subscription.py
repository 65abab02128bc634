"""
Unit tests for push-mode subscriptions running on a background thread.
"""

import threading

import pytest

from pagesource import (
    ItemProviderError,
    PageReady,
    PaginatedItemsSource,
    SourceOptions,
    StreamStarting,
    SystemClock,
)


class Recorder:
    """Collects callbacks from a subscription thread."""

    def __init__(self) -> None:
        self.results = []
        self.errors = []
        self.completed = threading.Event()
        self.failed = threading.Event()

    def on_next(self, result) -> None:
        self.results.append(result)

    def on_completed(self) -> None:
        self.completed.set()

    def on_error(self, error) -> None:
        self.errors.append(error)
        self.failed.set()


@pytest.mark.unit
class TestSubscription:
    def test_delivers_all_results_then_completes(self, source):
        recorder = Recorder()

        sub = source.search("a").subscribe(
            recorder.on_next, recorder.on_completed, recorder.on_error
        )

        assert recorder.completed.wait(timeout=2)
        assert sub.join(timeout=2)
        assert recorder.results == source.search("a").all()
        assert recorder.errors == []
        assert sub.is_cancelled is False

    def test_runs_off_the_calling_thread(self, source):
        threads = []
        done = threading.Event()

        source.search("a").subscribe(
            lambda _: threads.append(threading.current_thread()), done.set
        )

        assert done.wait(timeout=2)
        assert threading.current_thread() not in threads

    def test_blank_term(self, source):
        recorder = Recorder()

        source.search("").subscribe(recorder.on_next, recorder.on_completed)

        assert recorder.completed.wait(timeout=2)
        assert recorder.results == [StreamStarting(search_term="")]

    def test_cancel_wakes_pending_delay(self, counting_provider):
        source = PaginatedItemsSource(
            provider=counting_provider,
            options=SourceOptions(simulated_delay_ms=10_000),
            clock=SystemClock(),
        )
        recorder = Recorder()
        first_seen = threading.Event()

        def on_next(result):
            recorder.on_next(result)
            first_seen.set()

        sub = source.search("a").subscribe(on_next, recorder.on_completed, recorder.on_error)
        assert first_seen.wait(timeout=2)

        sub.cancel()

        # Far shorter than the 10 s delay
        assert sub.join(timeout=2)
        assert sub.is_cancelled is True
        assert sub.is_running is False
        assert recorder.results == [StreamStarting(search_term="a")]
        assert not recorder.completed.is_set()
        assert counting_provider.calls == 0

    def test_cancel_from_inside_on_next(self, source):
        recorder = Recorder()
        holder = {}
        ready = threading.Event()

        def on_next(result):
            recorder.on_next(result)
            ready.wait(timeout=2)
            if isinstance(result, PageReady):
                holder["sub"].cancel()

        holder["sub"] = source.search("a").subscribe(on_next, recorder.on_completed)
        ready.set()

        assert holder["sub"].join(timeout=2)
        assert [type(r) for r in recorder.results] == [StreamStarting, PageReady]
        assert recorder.results[1].page_number == 1
        assert not recorder.completed.is_set()

    def test_provider_error_goes_to_on_error(self, failing_provider, instant_clock):
        source = PaginatedItemsSource(provider=failing_provider, clock=instant_clock)
        recorder = Recorder()

        sub = source.search("a").subscribe(
            recorder.on_next, recorder.on_completed, recorder.on_error
        )

        assert recorder.failed.wait(timeout=2)
        assert sub.join(timeout=2)
        assert recorder.results == [StreamStarting(search_term="a")]
        assert isinstance(recorder.errors[0], ItemProviderError)
        assert not recorder.completed.is_set()

    def test_concurrent_subscriptions_are_independent(self, source):
        left, right = Recorder(), Recorder()

        source.search("a").subscribe(left.on_next, left.on_completed)
        source.search("ngo").subscribe(right.on_next, right.on_completed)

        assert left.completed.wait(timeout=2)
        assert right.completed.wait(timeout=2)
        assert {r.search_term for r in left.results} == {"a"}
        assert right.results == [
            StreamStarting(search_term="ngo"),
            PageReady(search_term="ngo", page_number=1, items=("Angola",)),
        ]
