"""Result pipeline: parsing, platform filtering, pagination and session state."""

from .filtering import filter_items, recompute
from .pagination import advance, has_sentinel, reset, should_advance
from .parser import MalformedRecordError, classify, decode_results, format_record, parse_record
from .schemas import (
    IntersectionReport,
    LoadStatus,
    ParsedItem,
    Platform,
    PlatformSelection,
    ResultsView,
)
from .session import (
    FilterToggled,
    ResponseArrived,
    SearchState,
    SentinelIntersected,
    Submitted,
    reduce,
    render,
)
from .support import PipelineDiagnostics, RequestMonitor, get_diagnostics, get_request_monitor

__all__ = [
    "parse_record",
    "format_record",
    "classify",
    "decode_results",
    "MalformedRecordError",
    "filter_items",
    "recompute",
    "reset",
    "advance",
    "should_advance",
    "has_sentinel",
    "reduce",
    "render",
    "SearchState",
    "Submitted",
    "ResponseArrived",
    "FilterToggled",
    "SentinelIntersected",
    "IntersectionReport",
    "LoadStatus",
    "ParsedItem",
    "Platform",
    "PlatformSelection",
    "ResultsView",
    "PipelineDiagnostics",
    "RequestMonitor",
    "get_diagnostics",
    "get_request_monitor",
]
