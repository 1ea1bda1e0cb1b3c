"""Median of two sorted sequences in logarithmic time."""

import math
from collections.abc import Sequence


def find_median_sorted_arrays(nums1: Sequence[int], nums2: Sequence[int]) -> float:
    """Return the median of the merged contents of two ascending sequences.

    Binary-searches a partition over the shorter sequence.

    Raises:
        ValueError: if both sequences are empty or the inputs are not sorted.
    """
    if len(nums1) > len(nums2):
        nums1, nums2 = nums2, nums1
    m, n = len(nums1), len(nums2)
    if m + n == 0:
        raise ValueError("median of two empty sequences is undefined")

    low, high = 0, m
    half = (m + n + 1) // 2
    while low <= high:
        i = (low + high) // 2
        j = half - i
        a_left = nums1[i - 1] if i > 0 else -math.inf
        a_right = nums1[i] if i < m else math.inf
        b_left = nums2[j - 1] if j > 0 else -math.inf
        b_right = nums2[j] if j < n else math.inf

        if a_left <= b_right and b_left <= a_right:
            left_max = max(a_left, b_left)
            if (m + n) % 2 == 1:
                return float(left_max)
            return (left_max + min(a_right, b_right)) / 2.0
        if a_left > b_right:
            high = i - 1
        else:
            low = i + 1

    raise ValueError("inputs must be sorted in ascending order")