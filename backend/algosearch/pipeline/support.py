"""
Pipeline support: diagnostic counters and search request monitoring in one module.
"""

import time
from dataclasses import dataclass, field
from threading import Lock
from typing import Optional

# ----- Diagnostics -----


@dataclass
class DiagnosticsSnapshot:
    malformed_records: int = 0
    unclassified_links: int = 0
    stale_responses: int = 0
    failed_requests: int = 0


class PipelineDiagnostics:
    """Counters for conditions the pipeline recovers from without surfacing them."""

    def __init__(self):
        self._counts = DiagnosticsSnapshot()
        self._lock = Lock()

    def record_malformed(self, count: int = 1):
        with self._lock:
            self._counts.malformed_records += count

    def record_unclassified(self, count: int = 1):
        with self._lock:
            self._counts.unclassified_links += count

    def record_stale_response(self):
        with self._lock:
            self._counts.stale_responses += 1

    def record_failed_request(self):
        with self._lock:
            self._counts.failed_requests += 1

    def snapshot(self) -> DiagnosticsSnapshot:
        with self._lock:
            c = self._counts
            return DiagnosticsSnapshot(
                malformed_records=c.malformed_records,
                unclassified_links=c.unclassified_links,
                stale_responses=c.stale_responses,
                failed_requests=c.failed_requests,
            )

    def reset(self):
        with self._lock:
            self._counts = DiagnosticsSnapshot()


_diagnostics = PipelineDiagnostics()


def get_diagnostics() -> PipelineDiagnostics:
    return _diagnostics


# ----- Request monitor -----


@dataclass
class RequestMetrics:
    query: str
    start_time: float
    end_time: Optional[float] = None
    success: bool = False
    result_count: int = 0
    error_message: Optional[str] = None

    @property
    def duration_seconds(self) -> float:
        return (self.end_time or 0.0) - self.start_time


@dataclass
class RequestStats:
    total_requests: int = 0
    successful_requests: int = 0
    failed_requests: int = 0
    avg_duration_seconds: float = 0.0
    max_duration_seconds: float = 0.0
    total_results: int = 0
    recent_errors: list[str] = field(default_factory=list)


class RequestMonitor:
    def __init__(self, max_metrics: int = 500):
        self._metrics: list[RequestMetrics] = []
        self._lock = Lock()
        self._max_metrics = max_metrics

    def start_request(self, query: str) -> RequestMetrics:
        return RequestMetrics(query=query, start_time=time.time())

    def _append(self, metric: RequestMetrics):
        with self._lock:
            self._metrics.append(metric)
            if len(self._metrics) > self._max_metrics:
                self._metrics = self._metrics[-self._max_metrics :]

    def record_success(self, metric: RequestMetrics, result_count: int):
        metric.end_time = time.time()
        metric.success = True
        metric.result_count = result_count
        self._append(metric)

    def record_error(self, metric: RequestMetrics, error_message: str):
        metric.end_time = time.time()
        metric.success = False
        metric.error_message = error_message
        self._append(metric)

    def get_stats(self) -> RequestStats:
        with self._lock:
            metrics = self._metrics.copy()
        if not metrics:
            return RequestStats()
        successful = [m for m in metrics if m.success]
        durations = [m.duration_seconds for m in metrics if m.end_time]
        return RequestStats(
            total_requests=len(metrics),
            successful_requests=len(successful),
            failed_requests=len(metrics) - len(successful),
            avg_duration_seconds=sum(durations) / len(durations) if durations else 0.0,
            max_duration_seconds=max(durations) if durations else 0.0,
            total_results=sum(m.result_count for m in successful),
            recent_errors=[m.error_message for m in metrics if m.error_message][-5:],
        )


_request_monitor = RequestMonitor()


def get_request_monitor() -> RequestMonitor:
    return _request_monitor
