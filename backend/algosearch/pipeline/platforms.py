"""
Static platform registry: label, domain fragment, home page, icon and accent per judge.

Order matters: classification tests fragments in this order and takes the first hit.
"""

from algosearch.pipeline.schemas import Platform, PlatformInfo

PLATFORMS: list[PlatformInfo] = [
    PlatformInfo(
        platform=Platform.LEETCODE,
        label="LeetCode",
        fragment="leetcode",
        url="https://leetcode.com",
        logo="https://assets.leetcode.com/static_assets/public/icons/favicon-192x192.png",
        accent="yellow-400",
    ),
    PlatformInfo(
        platform=Platform.CODEFORCES,
        label="CodeForces",
        fragment="codeforces",
        url="https://codeforces.com",
        logo="https://codeforces.org/s/0/favicon-96x96.png",
        accent="red-400",
    ),
    PlatformInfo(
        platform=Platform.CODECHEF,
        label="CodeChef",
        fragment="codechef",
        url="https://codechef.com",
        logo="https://cdn.codechef.com/images/cc-logo.svg",
        accent="orange-400",
    ),
]

_BY_PLATFORM = {info.platform: info for info in PLATFORMS}


def get_platform_info(platform: Platform) -> PlatformInfo:
    return _BY_PLATFORM[platform]


def resolve_platform(name: str) -> Platform | None:
    """Look up a platform by enum value or label, case-insensitively."""
    n = name.strip().lower()
    for info in PLATFORMS:
        if n in (info.platform.value, info.label.lower()):
            return info.platform
    return None
