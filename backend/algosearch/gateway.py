"""
Query gateway: owns the search session and dispatches submit, filter and sentinel events.

Runs on one asyncio loop. Only the blocking HTTP call leaves the loop (worker thread);
its response is dispatched back as ResponseArrived tagged with the session it belongs to.
"""

import asyncio
import logging
from typing import Callable, Optional

from algosearch.clients.search_api import SearchOutcome, search_problems
from algosearch.config import Settings
from algosearch.pipeline.schemas import IntersectionReport, LoadStatus, Platform, ResultsView
from algosearch.pipeline.session import (
    Event,
    FilterToggled,
    ResponseArrived,
    SearchState,
    SentinelIntersected,
    Submitted,
    reduce,
    render,
)

logger = logging.getLogger(__name__)

Fetcher = Callable[[str], SearchOutcome]
Listener = Callable[[SearchState], None]


class QueryGateway:
    def __init__(self, settings: Settings | None = None, fetcher: Optional[Fetcher] = None):
        self.settings = settings or Settings()
        self._fetch = fetcher or (lambda query: search_problems(query, self.settings))
        self._state = SearchState(
            page_size=self.settings.page_size,
            intersection_threshold=self.settings.intersection_threshold,
        )
        self._listeners: list[Listener] = []

    @property
    def state(self) -> SearchState:
        return self._state

    @property
    def status(self) -> LoadStatus:
        return self._state.status

    def view(self) -> ResultsView:
        return render(self._state)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener called once per actual state change. Returns an unsubscribe callable."""
        self._listeners.append(listener)
        return lambda: self._listeners.remove(listener)

    def dispatch(self, event: Event) -> bool:
        """Apply one event. Returns False when the event left the state untouched."""
        new_state = reduce(self._state, event)
        if new_state is self._state:
            return False
        self._state = new_state
        for listener in list(self._listeners):
            listener(new_state)
        return True

    async def submit(self, query: str) -> ResultsView:
        """
        Start a new session and wait for its response.

        An older submit still waiting on its request is not cancelled; when its
        response lands the reducer discards it because the session id moved on.
        """
        self.dispatch(Submitted(query=query))
        session_id = self._state.session_id
        logger.info("Session %d: searching for %r", session_id, query)

        try:
            outcome = await asyncio.to_thread(self._fetch, query)
        except Exception as e:
            logger.exception("Session %d: search fetch raised", session_id)
            outcome = SearchOutcome(results=[], error=str(e) or type(e).__name__)
        self.dispatch(ResponseArrived(session_id=session_id, results=outcome.results, error=outcome.error))
        return self.view()

    def toggle_filter(self, platform: Platform) -> ResultsView:
        self.dispatch(FilterToggled(platform=platform))
        return self.view()

    def sentinel_intersected(self, report: IntersectionReport) -> ResultsView:
        # One qualifying report advances exactly one page
        self.dispatch(SentinelIntersected(report=report))
        return self.view()
