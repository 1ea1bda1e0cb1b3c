import pytest
from hypothesis import given, strategies as st

from leetsolve.remove_element import remove_element


@pytest.mark.parametrize(
    "nums, val, expected_k",
    [
        ([3, 2, 2, 3], 3, 2),
        ([0, 1, 2, 2, 3, 0, 4, 2], 2, 5),
        ([1, 2, 3, 4], 5, 4),
    ],
)
def test_known_cases(nums, val, expected_k):
    k = remove_element(nums, val)
    assert k == expected_k
    assert val not in nums[:k]


def test_order_preserved():
    nums = [0, 1, 2, 2, 3, 0, 4, 2]
    remove_element(nums, 2)
    assert nums == [0, 1, 3, 0, 4]


def test_absent_value_leaves_list_unchanged():
    nums = [1, 2, 3, 4]
    remove_element(nums, 5)
    assert nums == [1, 2, 3, 4]


@given(st.lists(st.integers(-5, 5), max_size=40), st.integers(-5, 5))
def test_invariants(values, val):
    nums = list(values)
    k = remove_element(nums, val)
    assert k == len(values) - values.count(val)
    assert len(nums) == k
    assert val not in nums
    assert [x for x in values if x != val] == nums