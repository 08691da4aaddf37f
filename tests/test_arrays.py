import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.arrays import (
    find_max_consecutive_ones,
    largest_element,
    largest_element_scan,
    linear_search,
    rotate_left,
    rotate_left_by_one,
    rotate_left_by_reversal,
    second_largest_element,
)

int_lists = st.lists(st.integers(min_value=-50, max_value=50), max_size=40)


@given(int_lists, st.integers(min_value=-50, max_value=50))
def test_linear_search_finds_first_occurrence(nums, target):
    index = linear_search(nums, target)
    if target in nums:
        assert nums[index] == target
        assert target not in nums[:index]
    else:
        assert index == -1


def test_linear_search_missing():
    assert linear_search([], 3) == -1


@pytest.mark.parametrize("finder", [largest_element, largest_element_scan])
@given(nums=st.lists(st.integers(), min_size=1, max_size=40))
def test_largest_is_member_and_upper_bound(finder, nums):
    result = finder(nums)
    assert result in nums
    assert all(value <= result for value in nums)


@pytest.mark.parametrize("finder", [largest_element, largest_element_scan])
def test_largest_empty_raises(finder):
    with pytest.raises(ValueError):
        finder([])


@given(int_lists)
def test_second_largest_invariants(nums):
    result = second_largest_element(nums)
    distinct = set(nums)
    if len(nums) < 2 or len(distinct) < 2:
        assert result == -1
    else:
        top = max(distinct)
        assert result in distinct
        assert result < top
        assert all(v <= result for v in distinct if v != top)


def test_second_largest_examples():
    assert second_largest_element([1, 2]) == 1
    assert second_largest_element([5]) == -1
    assert second_largest_element([7, 7, 7]) == -1


@given(st.lists(st.sampled_from([0, 1]), max_size=40))
def test_max_consecutive_ones_is_longest_run(nums):
    result = find_max_consecutive_ones(nums)
    text = "".join(map(str, nums))
    assert "1" * result in text
    assert "1" * (result + 1) not in text


def test_max_consecutive_ones_example():
    assert find_max_consecutive_ones([1, 1, 0, 1, 1, 1]) == 3


def test_rotate_left_by_one_example():
    nums = [1, 2, 3]
    rotate_left_by_one(nums)
    assert nums == [2, 3, 1]


@given(st.lists(st.integers(), min_size=1, max_size=30), st.integers(0, 100))
def test_rotations_agree(nums, k):
    by_copy = list(nums)
    by_reversal = list(nums)
    by_steps = list(nums)
    rotate_left(by_copy, k)
    rotate_left_by_reversal(by_reversal, k)
    for _ in range(k):
        rotate_left_by_one(by_steps)
    assert by_copy == by_reversal == by_steps


@pytest.mark.parametrize("rotate", [rotate_left, rotate_left_by_reversal])
@given(nums=st.lists(st.integers(), min_size=1, max_size=30), k=st.integers(0, 100))
def test_rotation_round_trip(rotate, nums, k):
    work = list(nums)
    rotate(work, k)
    rotate(work, len(nums) - k % len(nums))
    assert work == nums


@pytest.mark.parametrize("rotate", [rotate_left, rotate_left_by_reversal])
def test_rotate_left_example(rotate):
    nums = [1, 2, 3, 4, 5]
    rotate(nums, 2)
    assert nums == [3, 4, 5, 1, 2]


@pytest.mark.parametrize("rotate", [rotate_left, rotate_left_by_reversal])
def test_rotate_empty_raises(rotate):
    with pytest.raises(ValueError):
        rotate([], 1)


def test_rotate_by_one_empty_raises():
    with pytest.raises(ValueError):
        rotate_left_by_one([])


@pytest.mark.parametrize("rotate", [rotate_left, rotate_left_by_reversal])
def test_rotate_negative_raises(rotate):
    with pytest.raises(ValueError):
        rotate([1, 2, 3], -1)