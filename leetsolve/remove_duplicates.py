"""Deduplicate a sorted list in place."""


def remove_duplicates(nums: list[int]) -> int:
    """Collapse runs of equal values in sorted ``nums`` in place.

    Afterwards the list holds each distinct value once, still in sorted order.
    Returns the number of distinct values.
    """
    if not nums:
        return 0
    slow = 0
    for value in nums[1:]:
        if value != nums[slow]:
            slow += 1
            nums[slow] = value
    del nums[slow + 1:]
    return slow + 1