"""Remove every occurrence of a value from a list in place."""


def remove_element(nums: list[int], val: int) -> int:
    """Drop all items equal to ``val`` from ``nums`` in place.

    The relative order of the remaining items is kept. Returns how many remain.
    """
    nums[:] = [item for item in nums if item != val]
    return len(nums)