"""Search endpoint client."""

from .search_api import SearchOutcome, search_problems

__all__ = ["search_problems", "SearchOutcome"]
