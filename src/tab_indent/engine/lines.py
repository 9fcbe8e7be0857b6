"""Line helpers used by dedent."""

from __future__ import annotations


def line_start(text: str, offset: int) -> int:
    """Offset just after the newline preceding ``offset``, or 0."""

    return text.rfind("\n", 0, offset) + 1


def leading_spaces(segment: str, limit: int) -> int:
    """Count leading ``" "`` characters of ``segment``, at most ``limit``.

    Only literal spaces count: a tab or any other whitespace stops the scan.
    """

    count = 0
    for char in segment[:limit]:
        if char != " ":
            break
        count += 1
    return count


__all__ = ["line_start", "leading_spaces"]
