import asyncio
import threading
import time


class Clock:
    """
    Supplies the artificial per-page delay.

    Sources call sleep() when iterated synchronously, asleep() under asyncio
    and wait() from subscription threads, where the delay must be cut short
    as soon as the subscription is cancelled.
    """

    def sleep(self, seconds: float) -> None:
        raise NotImplementedError

    async def asleep(self, seconds: float) -> None:
        raise NotImplementedError

    def wait(self, seconds: float, event: threading.Event) -> bool:
        """
        Blocks for up to ``seconds`` or until ``event`` is set.

        Returns:
            True if the event was set, False if the full delay elapsed
        """
        raise NotImplementedError


class SystemClock(Clock):
    """Real delays backed by time, asyncio and threading."""

    def sleep(self, seconds: float) -> None:
        time.sleep(seconds)

    async def asleep(self, seconds: float) -> None:
        await asyncio.sleep(seconds)

    def wait(self, seconds: float, event: threading.Event) -> bool:
        return event.wait(seconds)


class InstantClock(Clock):
    """
    Never waits. Records every requested delay in ``delays``.

    Useful for tests that need deterministic, zero-latency pages.
    """

    def __init__(self) -> None:
        self.delays: list[float] = []
        self._lock = threading.Lock()

    def _record(self, seconds: float) -> None:
        with self._lock:
            self.delays.append(seconds)

    def sleep(self, seconds: float) -> None:
        self._record(seconds)

    async def asleep(self, seconds: float) -> None:
        self._record(seconds)
        # Still yield to the loop so cancellation can land between pages
        await asyncio.sleep(0)

    def wait(self, seconds: float, event: threading.Event) -> bool:
        self._record(seconds)
        return event.is_set()
