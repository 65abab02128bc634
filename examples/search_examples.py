"""
Example demonstrating the three ways to consume a paginated search.

Blocking iteration, asyncio iteration with cancellation, and a push-mode
subscription that a UI thread could hand results to.
"""

import asyncio
import logging
import threading

from pagesource import PageReady, PaginatedItemsSource, SourceOptions, StreamStarting

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

source = PaginatedItemsSource(options=SourceOptions(page_size=4, simulated_delay_ms=200))


def show(result) -> None:
    if isinstance(result, StreamStarting):
        print(f"--- searching for {result.search_term!r}")
    elif isinstance(result, PageReady):
        print(f"page {result.page_number}: {', '.join(result.items)}")


# 1. Blocking pull: each page waits 200 ms on this thread
print("Blocking iteration")
for result in source.search("land"):
    show(result)


# 2. asyncio pull: the user keeps typing, so the first search is cancelled
async def type_ahead() -> None:
    first = asyncio.create_task(source.search("a").aall())
    await asyncio.sleep(0.3)
    first.cancel()
    try:
        await first
    except asyncio.CancelledError:
        print("--- search for 'a' cancelled")

    async for result in source.search("gu"):
        show(result)


print("\nAsync iteration")
asyncio.run(type_ahead())


# 3. Push: results arrive on a background thread
print("\nSubscription")
done = threading.Event()
subscription = source.search("Islands").subscribe(show, on_completed=done.set)
done.wait(timeout=10)
print(f"--- finished, cancelled={subscription.is_cancelled}")
