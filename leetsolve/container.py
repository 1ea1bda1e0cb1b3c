"""Largest water container formed by two vertical lines."""

from collections.abc import Sequence


def max_area(height: Sequence[int]) -> int:
    """Return the largest area between two lines of ``height``.

    Uses two pointers moving inward from the ends, always advancing the
    shorter wall. Fewer than two lines give an area of 0.
    """
    left, right = 0, len(height) - 1
    best = 0
    while left < right:
        best = max(best, (right - left) * min(height[left], height[right]))
        if height[left] < height[right]:
            left += 1
        else:
            right -= 1
    return best