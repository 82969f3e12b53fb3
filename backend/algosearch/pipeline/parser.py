"""
Result parsing: decode "<link>*<title>" records into ParsedItem and classify their platform.
"""

import logging
from dataclasses import dataclass
from typing import Any, Iterable, Optional

from algosearch.pipeline.platforms import PLATFORMS
from algosearch.pipeline.schemas import ParsedItem, Platform
from algosearch.pipeline.support import get_diagnostics

logger = logging.getLogger(__name__)

RECORD_DELIMITER = "*"


class MalformedRecordError(ValueError):
    """A raw record that cannot be split into a link and a title."""


def classify(link: str) -> Optional[Platform]:
    """First platform whose domain fragment occurs in the link, or None."""
    lowered = link.lower()
    for info in PLATFORMS:
        if info.fragment in lowered:
            return info.platform
    return None


def parse_record(record: Any) -> ParsedItem:
    """
    Split a record on its first delimiter. The title keeps any further delimiters.

    Raises MalformedRecordError for non-strings, records without a delimiter,
    and records with an empty link.
    """
    if not isinstance(record, str):
        raise MalformedRecordError(f"Expected a string record, got {type(record).__name__}")
    link, sep, title = record.partition(RECORD_DELIMITER)
    link = link.strip()
    if not sep:
        raise MalformedRecordError(f"Record has no '{RECORD_DELIMITER}' delimiter: {record!r}")
    if not link:
        raise MalformedRecordError(f"Record has an empty link: {record!r}")
    return ParsedItem(link=link, title=title.strip(), platform=classify(link))


def format_record(item: ParsedItem) -> str:
    return f"{item.link}{RECORD_DELIMITER}{item.title}"


@dataclass
class DecodedResults:
    items: tuple[ParsedItem, ...]
    malformed_count: int = 0
    unclassified_count: int = 0


def decode_results(records: Optional[Iterable[Any]]) -> DecodedResults:
    """Decode a whole response once at ingestion; bad records are skipped, not raised."""
    if records is None:
        return DecodedResults(items=())
    items: list[ParsedItem] = []
    malformed = 0
    unclassified = 0
    for idx, record in enumerate(records):
        try:
            item = parse_record(record)
        except MalformedRecordError as e:
            malformed += 1
            logger.warning("Skipping malformed result record #%d: %s", idx, e)
            continue
        if item.platform is None:
            unclassified += 1
            logger.debug("Unclassified result link: %s", item.link)
        items.append(item)

    diagnostics = get_diagnostics()
    if malformed:
        diagnostics.record_malformed(malformed)
    if unclassified:
        diagnostics.record_unclassified(unclassified)
    return DecodedResults(items=tuple(items), malformed_count=malformed, unclassified_count=unclassified)
