"""
Problem search endpoint client. Reuses a single requests.Session for connection pooling.

Every failure mode (transport, non-2xx, non-JSON body, unexpected shape) comes back
as a SearchOutcome with no results and an error message; nothing is raised.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

import requests
from pydantic import ValidationError

from algosearch.config import Settings
from algosearch.pipeline.schemas import SearchRequest, SearchResponse
from algosearch.pipeline.support import get_diagnostics, get_request_monitor

logger = logging.getLogger(__name__)

_session: Optional[requests.Session] = None


def _get_session() -> requests.Session:
    global _session
    if _session is None:
        _session = requests.Session()
    return _session


@dataclass
class SearchOutcome:
    results: list = field(default_factory=list)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _failed(metric, query: str, message: str) -> SearchOutcome:
    get_request_monitor().record_error(metric, message)
    get_diagnostics().record_failed_request()
    logger.error("Problem search failed for query %r: %s", query, message)
    return SearchOutcome(results=[], error=message)


def search_problems(query: str, settings: Settings | None = None) -> SearchOutcome:
    settings = settings or Settings()
    monitor = get_request_monitor()
    metric = monitor.start_request(query)

    try:
        response = _get_session().post(
            settings.search_api_url,
            json=SearchRequest(query=query).model_dump(),
            headers={"Content-Type": "application/json"},
            timeout=settings.request_timeout_seconds,
        )
        response.raise_for_status()
        body = SearchResponse.model_validate(response.json())
    except requests.exceptions.HTTPError as e:
        return _failed(metric, query, f"HTTP {e.response.status_code}: {e}")
    except requests.exceptions.JSONDecodeError as e:
        # Must precede RequestException, which it subclasses
        return _failed(metric, query, f"Invalid JSON body: {e}")
    except requests.exceptions.RequestException as e:
        return _failed(metric, query, str(e))
    except ValidationError as e:
        return _failed(metric, query, f"Unexpected response shape: {e.error_count()} validation error(s)")
    except Exception as e:
        return _failed(metric, query, f"{type(e).__name__}: {e}")

    monitor.record_success(metric, len(body.results))
    logger.debug("Problem search for %r returned %d records", query, len(body.results))
    return SearchOutcome(results=body.results)
