"""
Platform filtering: derive the FilteredSet from decoded items and the active selection.

Always a full recomputation. Inputs are one page of endpoint output, so there is
no incremental diffing.
"""

from typing import Any, Iterable, Optional, Sequence

from algosearch.pipeline.parser import decode_results
from algosearch.pipeline.schemas import ParsedItem, PlatformSelection


def filter_items(items: Optional[Iterable[ParsedItem]], selection: PlatformSelection) -> tuple[ParsedItem, ...]:
    """Stable filter: keep items whose platform flag is active. Unclassified items never pass."""
    if items is None:
        return ()
    return tuple(item for item in items if selection.is_active(item.platform))


def recompute(raw_results: Optional[Sequence[Any]], selection: PlatformSelection) -> tuple[ParsedItem, ...]:
    """Parse every raw record and filter by selection. None (no session yet) gives ()."""
    if raw_results is None:
        return ()
    return filter_items(decode_results(raw_results).items, selection)
