"""Tests for the query gateway event loop coordination."""

import asyncio
import threading

from algosearch.clients.search_api import SearchOutcome
from algosearch.config import Settings
from algosearch.gateway import QueryGateway
from algosearch.pipeline.schemas import IntersectionReport, LoadStatus, Platform


def _gateway(responses: dict, **settings_kwargs) -> QueryGateway:
    def fetch(query: str) -> SearchOutcome:
        return responses[query]

    return QueryGateway(Settings(**settings_kwargs), fetcher=fetch)


class TestSubmit:
    def test_loaded_after_response(self, mixed_records, two_sum_item):
        gateway = _gateway({"sum": SearchOutcome(results=mixed_records)})
        assert gateway.status == LoadStatus.IDLE

        view = asyncio.run(gateway.submit("sum"))

        assert view.status == LoadStatus.LOADED
        assert gateway.state.filtered == (two_sum_item,)

    def test_loading_while_request_in_flight(self, mixed_records):
        seen = []

        def fetch(query):
            seen.append(gateway.status)
            return SearchOutcome(results=mixed_records)

        gateway = QueryGateway(Settings(), fetcher=fetch)
        asyncio.run(gateway.submit("q"))
        assert seen == [LoadStatus.LOADING]

    def test_failure_surfaces_error(self):
        gateway = _gateway({"q": SearchOutcome(results=[], error="HTTP 502")})
        view = asyncio.run(gateway.submit("q"))
        assert view.status == LoadStatus.LOADED
        assert view.error == "HTTP 502"
        assert view.items == []

    def test_raising_fetcher_still_completes_session(self):
        def fetch(query):
            raise RuntimeError("endpoint exploded")

        gateway = QueryGateway(Settings(), fetcher=fetch)
        view = asyncio.run(gateway.submit("q"))

        assert gateway.status == LoadStatus.LOADED
        assert view.error == "endpoint exploded"
        assert view.items == []
        assert view.no_results is False

    def test_stale_response_does_not_overwrite_newer_session(self):
        release_old = threading.Event()

        def fetch(query):
            if query == "old":
                release_old.wait(timeout=5)
                return SearchOutcome(results=["https://leetcode.com/old*Old"])
            return SearchOutcome(results=["https://leetcode.com/new*New"])

        gateway = QueryGateway(Settings(), fetcher=fetch)

        async def scenario():
            old = asyncio.create_task(gateway.submit("old"))
            await asyncio.sleep(0)
            new_view = await gateway.submit("new")
            release_old.set()
            old_view = await old
            return new_view, old_view

        new_view, old_view = asyncio.run(scenario())

        assert [i.title for i in new_view.items] == ["New"]
        assert old_view.query == "new"
        assert [i.title for i in gateway.view().items] == ["New"]
        assert gateway.state.session_id == 2


class TestEvents:
    def test_toggle_and_sentinel(self, make_records):
        records = make_records(25) + make_records(3, "codechef")
        gateway = _gateway({"q": SearchOutcome(results=records)})
        view = asyncio.run(gateway.submit("q"))
        assert view.displayed_count == 10
        assert view.has_more

        view = gateway.sentinel_intersected(IntersectionReport(session_id=view.session_id))
        assert view.displayed_count == 20

        view = gateway.toggle_filter(Platform.CODECHEF)
        assert view.filtered_count == 28
        assert view.displayed_count == 10

    def test_listeners_only_on_change(self, make_records):
        gateway = _gateway({"q": SearchOutcome(results=make_records(15))})
        changes = []
        unsubscribe = gateway.subscribe(changes.append)

        asyncio.run(gateway.submit("q"))
        assert len(changes) == 2  # submitted, response

        gateway.sentinel_intersected(IntersectionReport())
        assert len(changes) == 3
        gateway.sentinel_intersected(IntersectionReport())
        assert len(changes) == 3

        unsubscribe()
        gateway.toggle_filter(Platform.CODEFORCES)
        assert len(changes) == 3

    def test_page_size_from_settings(self, make_records):
        gateway = _gateway({"q": SearchOutcome(results=make_records(12))}, page_size=5)
        view = asyncio.run(gateway.submit("q"))
        assert view.displayed_count == 5
