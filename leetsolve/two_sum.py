"""Find two positions in a sequence whose values add up to a target."""

from collections.abc import Sequence


def two_sum(nums: Sequence[int], target: int) -> tuple[int, int] | None:
    """Return indices ``(i, j)`` with ``i < j`` and ``nums[i] + nums[j] == target``.

    Runs in a single pass using a value-to-index map. Returns ``None`` when
    no such pair exists.
    """
    seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        partner = seen.get(target - value)
        if partner is not None:
            return partner, index
        seen[value] = index
    return None