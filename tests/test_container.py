import pytest
from hypothesis import given, strategies as st

from leetsolve.container import max_area


@pytest.mark.parametrize(
    "height, expected",
    [
        ([1, 8, 6, 2, 5, 4, 8, 3, 7], 49),
        ([1, 1], 1),
        ([4, 3, 2, 1, 4], 16),
        ([1, 2, 1], 2),
        ([], 0),
    ],
)
def test_known_cases(height, expected):
    assert max_area(height) == expected


def test_single_line_is_zero():
    assert max_area([5]) == 0


heights = st.lists(st.integers(0, 10_000), min_size=2, max_size=60)


@given(heights)
def test_at_least_any_chosen_pair(height):
    result = max_area(height)
    n = len(height)
    assert result >= (n - 1) * min(height[0], height[-1])
    assert result >= min(height[0], height[1])


@given(heights)
def test_upper_bound(height):
    assert max_area(height) <= (len(height) - 1) * max(height)


@given(heights)
def test_reversal_invariant(height):
    assert max_area(height) == max_area(height[::-1])