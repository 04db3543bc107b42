"""Version string helpers."""

from __future__ import annotations

import re

_MAJOR_RE = re.compile(r"^(\d+)")


def parse_major(version: str) -> int:
    """Leading digit run of ``version``; 0 when it does not start with a digit.

    No semver parsing: "2.0.0-rc.1" -> 2, "v3" -> 0, "latest" -> 0.
    """
    match = _MAJOR_RE.match(version)
    return int(match.group(1)) if match else 0
