"""Pytest fixtures for result pipeline tests."""

import pytest

from algosearch.pipeline.schemas import ParsedItem, Platform, PlatformSelection
from algosearch.pipeline.support import get_diagnostics


@pytest.fixture(autouse=True)
def reset_diagnostics():
    get_diagnostics().reset()
    yield
    get_diagnostics().reset()


@pytest.fixture
def mixed_records():
    return [
        "https://leetcode.com/p1*Two Sum",
        "https://codeforces.com/p2*B. Problem",
    ]


@pytest.fixture
def all_platform_records():
    return [
        "https://leetcode.com/problems/two-sum*Two Sum",
        "https://codeforces.com/problemset/problem/4/A*Watermelon",
        "https://www.codechef.com/problems/FLOW001*Add Two Numbers",
        "https://leetcode.com/problems/3sum*3Sum",
        "https://example.com/other*Not a judge",
    ]


@pytest.fixture
def leetcode_only():
    return PlatformSelection(leetcode=True, codeforces=False, codechef=False)


@pytest.fixture
def all_off():
    return PlatformSelection(leetcode=False, codeforces=False, codechef=False)


@pytest.fixture
def all_on():
    return PlatformSelection(leetcode=True, codeforces=True, codechef=True)


def _make_records(count: int, platform: str = "leetcode") -> list[str]:
    return [f"https://{platform}.com/problems/p{i}*Problem {i}" for i in range(count)]


@pytest.fixture
def make_records():
    return _make_records


@pytest.fixture
def twenty_five_records():
    return _make_records(25)


@pytest.fixture
def two_sum_item():
    return ParsedItem(link="https://leetcode.com/p1", title="Two Sum", platform=Platform.LEETCODE)
