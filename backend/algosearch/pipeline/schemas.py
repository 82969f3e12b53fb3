"""
Result pipeline: Pydantic schemas for search records, filters and the rendered view.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Platform(str, Enum):
    """Judge platforms a result link can belong to, in classification order."""

    LEETCODE = "leetcode"
    CODEFORCES = "codeforces"
    CODECHEF = "codechef"


class LoadStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"


# ----- Search endpoint contract -----


class SearchRequest(BaseModel):
    query: str


class SearchResponse(BaseModel):
    """Body of the search endpoint; each record is "<link>*<title>"."""

    results: list = Field(default_factory=list)


# ----- Decoded records -----


class ParsedItem(BaseModel):
    """A result record decoded into link, title and inferred platform."""

    model_config = ConfigDict(frozen=True)

    link: str
    title: str
    platform: Optional[Platform] = Field(default=None, description="None when the link matches no known platform")


class PlatformSelection(BaseModel):
    """Active platform filters. Defaults to LeetCode only."""

    model_config = ConfigDict(frozen=True)

    leetcode: bool = True
    codeforces: bool = False
    codechef: bool = False

    def is_active(self, platform: Optional[Platform]) -> bool:
        if platform is None:
            return False
        return getattr(self, platform.value)

    def toggled(self, platform: Platform) -> "PlatformSelection":
        return self.model_copy(update={platform.value: not self.is_active(platform)})

    @property
    def active_platforms(self) -> list[Platform]:
        return [p for p in Platform if self.is_active(p)]


# ----- Rendered view -----


class ResultItemView(BaseModel):
    link: str
    title: str
    platform: Platform
    label: str
    logo: str


class ResultsView(BaseModel):
    """What the presentation layer renders for the current session."""

    session_id: int
    query: str
    status: LoadStatus
    error: Optional[str] = None
    selection: PlatformSelection
    items: list[ResultItemView] = Field(default_factory=list)
    displayed_count: int = 0
    filtered_count: int = 0
    has_more: bool = Field(default=False, description="Whether the scroll sentinel is rendered")
    no_results: bool = False


class IntersectionReport(BaseModel):
    """One viewport-intersection notification for the scroll sentinel."""

    session_id: Optional[int] = None
    is_intersecting: bool = True
    intersection_ratio: float = Field(default=1.0, ge=0, le=1)


class PlatformInfo(BaseModel):
    platform: Platform
    label: str
    fragment: str
    url: str
    logo: str
    accent: str
