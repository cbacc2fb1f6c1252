"""Interactive type-ahead search sessions.

A SearchSession belongs to one input field. Keystrokes are debounced, and
every dispatched lookup is tagged with the session's generation counter at
dispatch time. A response is applied only if no keystroke happened since,
so the latest query always wins no matter which request finishes first.
In-flight requests are never aborted; stale responses are simply dropped.
"""

import asyncio
import logging
from typing import Any, Awaitable, Callable, Optional

from ..schemas import SessionStatus

logger = logging.getLogger(__name__)

DEFAULT_DELAY = 0.3  # seconds
DEFAULT_MIN_LENGTH = 2

Fetch = Callable[[str], Awaitable[list]]
ResultsCallback = Callable[[list], Any]


class SearchSession:
    """Debounced, staleness-safe search for a single input."""

    def __init__(
        self,
        fetch: Fetch,
        delay: float = DEFAULT_DELAY,
        min_length: int = DEFAULT_MIN_LENGTH,
        on_results: Optional[ResultsCallback] = None,
    ):
        """Initialize session.

        Args:
            fetch: Coroutine function mapping a query to a result list
            delay: Quiet period before a query is dispatched, in seconds
            min_length: Shortest trimmed query that is searched
            on_results: Called with the results each time they are applied
        """
        self.fetch = fetch
        self.delay = delay
        self.min_length = min_length
        self.on_results = on_results

        self.query_text = ""
        self.generation = 0
        self.results: list = []
        self.status = SessionStatus.IDLE

        self._timer: Optional[asyncio.TimerHandle] = None
        self._tasks: set[asyncio.Task] = set()
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def is_searchable(self, text: str) -> bool:
        """Check if a query is long enough to search."""
        return len((text or "").strip()) >= self.min_length

    def _cancel_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _begin(self, text: str) -> bool:
        """Start a new generation for text. Returns False if it is rejected."""
        self.generation += 1
        self.query_text = text
        self._cancel_timer()

        if not self.is_searchable(text):
            self.results = []
            self.status = SessionStatus.IDLE
            return False
        return True

    def update(self, text: str) -> int:
        """Record a keystroke and (re)start the debounce timer.

        Must be called from within the running event loop.

        Args:
            text: Current contents of the input

        Returns:
            The session generation after this keystroke
        """
        if self._closed:
            logger.debug("Ignoring input on closed session: %r", text)
            return self.generation

        if not self._begin(text):
            return self.generation

        self.status = SessionStatus.DEBOUNCING
        loop = asyncio.get_running_loop()
        self._timer = loop.call_later(self.delay, self._dispatch, self.generation, text)
        return self.generation

    def _dispatch(self, generation: int, text: str) -> None:
        self._timer = None
        if generation != self.generation or self._closed:
            return

        self.status = SessionStatus.IN_FLIGHT
        task = asyncio.ensure_future(self._run(generation, text))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def _run(self, generation: int, text: str) -> Optional[list]:
        try:
            results = await self.fetch(text.strip())
        except Exception as e:
            logger.warning("Search for %r failed: %s", text, e)
            if generation == self.generation:
                self.results = []
                self.status = SessionStatus.FAILED
            return None

        if generation != self.generation:
            logger.debug(
                "Discarding stale results for %r (generation %d, current %d)",
                text, generation, self.generation,
            )
            return None

        self.results = list(results or [])
        self.status = SessionStatus.RESOLVED
        if self.on_results is not None:
            self.on_results(self.results)
        return self.results

    async def submit(self, text: str) -> list:
        """Search immediately, skipping the debounce.

        Args:
            text: Query to search

        Returns:
            The applied results, or an empty list if the query was rejected,
            failed, or was superseded while in flight
        """
        if self._closed or not self._begin(text):
            return []

        self.status = SessionStatus.IN_FLIGHT
        results = await self._run(self.generation, text)
        return results if results is not None else []

    def clear(self) -> None:
        """Reset after the input is cleared; pending responses become stale."""
        self.generation += 1
        self._cancel_timer()
        self.query_text = ""
        self.results = []
        self.status = SessionStatus.IDLE

    def close(self) -> None:
        """Dispose of the session when its owning view goes away."""
        self.clear()
        self._closed = True

    async def wait(self) -> None:
        """Wait until no lookup is scheduled or in flight.

        A lookup that never completes makes this wait forever.
        """
        while self._timer is not None or self._tasks:
            if self._tasks:
                await asyncio.gather(*list(self._tasks), return_exceptions=True)
            else:
                await asyncio.sleep(self.delay / 2)
