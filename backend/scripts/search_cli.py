"""
Run one query through the result pipeline and print the rendered pages.

Needs the package installed (`pip install -e .` from the repository root), since
the script imports `algosearch` rather than patching sys.path. Then, from backend:
  python scripts/search_cli.py "two sum"
  python scripts/search_cli.py "dp on trees" --platforms leetcode codeforces --pages 3

Requires the search endpoint to be reachable (ALGOSEARCH_SEARCH_API_URL, default
http://localhost:5000/api/search). Each page after the first simulates one
sentinel intersection.
"""

import argparse
import asyncio
from textwrap import shorten

from dotenv import load_dotenv

from algosearch.config import Settings
from algosearch.gateway import QueryGateway
from algosearch.log_config import configure_logging
from algosearch.pipeline.platforms import resolve_platform
from algosearch.pipeline.schemas import IntersectionReport, Platform, ResultsView
from algosearch.pipeline.support import get_diagnostics, get_request_monitor


def _trunc(s: str, max_len: int = 60) -> str:
    return shorten(s, width=max_len, placeholder="…") if s else ""


def _section(title: str) -> None:
    print()
    print("=" * 80)
    print(f"  {title}")
    print("=" * 80)


def _print_items(view: ResultsView, start: int) -> None:
    for i, item in enumerate(view.items[start:], start + 1):
        print(f"{i:>3}  {item.label:<11}  {_trunc(item.title, 36):<36}  {item.link}")


async def run(query: str, platforms: list[str], pages: int) -> None:
    settings = Settings()
    configure_logging(settings.log_level)
    gateway = QueryGateway(settings)

    wanted = set()
    for name in platforms:
        platform = resolve_platform(name)
        if platform is None:
            raise SystemExit(f"Unknown platform: {name}")
        wanted.add(platform)
    for platform in Platform:
        if gateway.state.selection.is_active(platform) != (platform in wanted):
            gateway.toggle_filter(platform)

    _section(f"Search: {query!r}")
    print(f"Platforms: {[p.value for p in gateway.state.selection.active_platforms]}")
    view = await gateway.submit(query)

    if view.error:
        print(f"Request failed: {view.error}")
        return
    if view.no_results:
        print("No results found. Try a different keyword.")
        return

    print(f"{view.filtered_count} matching problems")
    shown = 0
    for page in range(1, pages + 1):
        _section(f"Page {page}")
        _print_items(view, shown)
        shown = view.displayed_count
        if not view.has_more:
            break
        view = gateway.sentinel_intersected(IntersectionReport(session_id=view.session_id))

    _section("DONE")
    diagnostics = get_diagnostics().snapshot()
    stats = get_request_monitor().get_stats()
    print(f"Shown {shown} of {view.filtered_count}")
    print(f"Malformed records skipped: {diagnostics.malformed_records}")
    print(f"Unclassified links: {diagnostics.unclassified_links}")
    print(f"Request time: {stats.avg_duration_seconds:.2f}s")


def main() -> None:
    load_dotenv()
    parser = argparse.ArgumentParser(description="Search coding problems across judges")
    parser.add_argument("query", nargs="?", default="")
    parser.add_argument("--platforms", nargs="+", default=["leetcode"], help="leetcode, codeforces, codechef")
    parser.add_argument("--pages", type=int, default=1, help="Pages to print (default: 1)")
    args = parser.parse_args()
    asyncio.run(run(args.query, args.platforms, args.pages))


if __name__ == "__main__":
    main()
