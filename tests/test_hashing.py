import pytest

from algonotes.hashing import (
    group_anagrams,
    longest_consecutive,
    subarray_sum,
    two_sum,
)


@pytest.mark.parametrize(
    "nums, target",
    [([2, 7, 11, 15], 9), ([3, 2, 4], 6), ([3, 3], 6), ([-4, 10, 8, -1], 7)],
)
def test_two_sum_returns_matching_pair(nums, target):
    result = two_sum(nums, target)
    assert len(result) == 2
    i, j = result
    assert i < j
    assert nums[i] + nums[j] == target


def test_two_sum_no_pair_gives_empty_list():
    assert two_sum([1, 2, 3], 100) == []


def test_two_sum_does_not_reuse_an_element():
    assert two_sum([5], 10) == []


def test_longest_consecutive_source_example():
    assert longest_consecutive([200, 4, 100, 2, 1, 3]) == 4


def test_longest_consecutive_empty():
    assert longest_consecutive([]) == 0


def test_longest_consecutive_full_range():
    values = list(range(10, 25))
    assert longest_consecutive(reversed(values)) == len(values)


def test_longest_consecutive_ignores_duplicates():
    nums = [9, 1, 4, 7, 3, -1, 0, 5, 8, -1, 6]
    assert longest_consecutive(nums + nums) == longest_consecutive(nums)


def test_group_anagrams_keeps_first_seen_order():
    words = ["eat", "tea", "tan", "ate", "nat", "bat"]
    assert group_anagrams(words) == [["eat", "tea", "ate"], ["tan", "nat"], ["bat"]]


def test_group_anagrams_partitions_input():
    words = ["listen", "silent", "enlist", "google", "", "gogole", ""]
    groups = group_anagrams(words)
    assert sorted(w for g in groups for w in g) == sorted(words)
    for group in groups:
        assert len({"".join(sorted(w)) for w in group}) == 1


def test_group_anagrams_empty():
    assert group_anagrams([]) == []


def test_subarray_sum_whole_array_counts():
    nums = [4, 6, 9]
    assert subarray_sum(nums, sum(nums)) >= 1


def test_subarray_sum_single_element():
    nums = [7]
    assert subarray_sum(nums, 7) == len(nums)


def test_subarray_sum_unreachable_target():
    assert subarray_sum([1, 2, 3], sum([1, 2, 3]) + 1) == 0


def test_subarray_sum_with_negatives_matches_reversed():
    nums = [1, -1, 2, -2, 3, 0, -3]
    assert subarray_sum(nums, 0) == subarray_sum(list(reversed(nums)), 0)