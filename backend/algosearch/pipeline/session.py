"""
Search session state and its pure transitions.

All mutation goes through reduce(state, event). Events tagged with a session id
that is not the current one are rejected, which keeps a late response for an
older query from overwriting a newer session. A transition that changes nothing
returns the same state object, so callers can skip re-rendering with an identity check.
"""

import logging
from dataclasses import dataclass, field, replace
from typing import Optional, Union

from algosearch.pipeline import pagination
from algosearch.pipeline.filtering import filter_items
from algosearch.pipeline.parser import decode_results
from algosearch.pipeline.platforms import get_platform_info
from algosearch.pipeline.schemas import (
    IntersectionReport,
    LoadStatus,
    ParsedItem,
    Platform,
    PlatformSelection,
    ResultItemView,
    ResultsView,
)
from algosearch.pipeline.support import get_diagnostics

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchState:
    session_id: int = 0
    query: str = ""
    status: LoadStatus = LoadStatus.IDLE
    items: Optional[tuple[ParsedItem, ...]] = None  # None until a response is applied
    error: Optional[str] = None
    selection: PlatformSelection = field(default_factory=PlatformSelection)
    filtered: tuple[ParsedItem, ...] = ()
    displayed_count: int = 0
    page_size: int = pagination.DEFAULT_PAGE_SIZE
    intersection_threshold: float = pagination.DEFAULT_INTERSECTION_THRESHOLD

    @property
    def displayed(self) -> tuple[ParsedItem, ...]:
        return self.filtered[: self.displayed_count]

    @property
    def has_sentinel(self) -> bool:
        return pagination.has_sentinel(self.displayed_count, len(self.filtered))


# ----- Events -----


@dataclass(frozen=True)
class Submitted:
    query: str


@dataclass(frozen=True)
class ResponseArrived:
    session_id: int
    results: Optional[list] = None
    error: Optional[str] = None


@dataclass(frozen=True)
class FilterToggled:
    platform: Platform


@dataclass(frozen=True)
class SentinelIntersected:
    report: IntersectionReport


Event = Union[Submitted, ResponseArrived, FilterToggled, SentinelIntersected]


def _with_filtered(state: SearchState, **changes) -> SearchState:
    """Apply changes, recompute the FilteredSet and reset the window."""
    state = replace(state, **changes)
    filtered = filter_items(state.items, state.selection)
    return replace(state, filtered=filtered, displayed_count=pagination.reset(filtered, state.page_size))


def reduce(state: SearchState, event: Event) -> SearchState:
    if isinstance(event, Submitted):
        return replace(
            state,
            session_id=state.session_id + 1,
            query=event.query,
            status=LoadStatus.LOADING,
            items=None,
            error=None,
            filtered=(),
            displayed_count=0,
        )

    if isinstance(event, ResponseArrived):
        if event.session_id != state.session_id:
            logger.info(
                "Dropping stale response for session %d (current session %d)",
                event.session_id,
                state.session_id,
            )
            get_diagnostics().record_stale_response()
            return state
        decoded = decode_results(event.results or [])
        return _with_filtered(state, status=LoadStatus.LOADED, items=decoded.items, error=event.error)

    if isinstance(event, FilterToggled):
        return _with_filtered(state, selection=state.selection.toggled(event.platform))

    if isinstance(event, SentinelIntersected):
        report = event.report
        if report.session_id is not None and report.session_id != state.session_id:
            return state
        total = len(state.filtered)
        if not pagination.should_advance(state.displayed_count, total, report, state.intersection_threshold):
            return state
        return replace(
            state,
            displayed_count=pagination.advance(state.displayed_count, total, state.page_size),
        )

    raise TypeError(f"Unknown event: {event!r}")


def render(state: SearchState) -> ResultsView:
    items = []
    for item in state.displayed:
        info = get_platform_info(item.platform)
        items.append(
            ResultItemView(link=item.link, title=item.title, platform=item.platform, label=info.label, logo=info.logo)
        )
    return ResultsView(
        session_id=state.session_id,
        query=state.query,
        status=state.status,
        error=state.error,
        selection=state.selection,
        items=items,
        displayed_count=state.displayed_count,
        filtered_count=len(state.filtered),
        has_more=state.has_sentinel,
        no_results=state.status == LoadStatus.LOADED and state.error is None and not state.filtered,
    )
