import pytest

from algodrills.arrays import (
    average_value,
    count_hill_valley,
    find_disappeared_numbers,
    find_gcd,
    find_lucky,
    find_missing_and_repeated_values,
    fizz_buzz,
    furthest_distance_from_origin,
    get_concatenation,
    judge_circle,
    return_to_boundary_count,
)


def test_boundary_count_grows_when_returning():
    nums = [2, 3, -1]
    base = return_to_boundary_count(nums)
    assert return_to_boundary_count(nums + [-sum(nums)]) == base + 1


@pytest.mark.parametrize("k", [1, 2, 5])
def test_boundary_count_back_and_forth(k):
    assert return_to_boundary_count([1, -1] * k) == k


def test_boundary_count_does_not_mutate():
    nums = [1, -1, 2]
    return_to_boundary_count(nums)
    assert nums == [1, -1, 2]


def test_average_single_qualifier():
    assert average_value([6, 1, 3]) == 6


def test_average_without_qualifiers_matches_empty():
    assert average_value([1, 2, 3, 4]) == average_value([])


def test_average_of_equal_values():
    assert average_value([12, 12, 12]) == 12


def test_concatenation_halves():
    nums = [1, 2, 1]
    result = get_concatenation(nums)
    assert len(result) == 2 * len(nums)
    assert result[: len(nums)] == nums
    assert result[len(nums):] == nums


def test_concatenation_leaves_input():
    nums = [4, 5]
    get_concatenation(nums)
    assert nums == [4, 5]


def test_count_hill_valley_example():
    assert count_hill_valley([2, 4, 1, 1, 6, 5]) == 3


def test_count_hill_valley_ignores_duplicates():
    nums = [2, 4, 1, 6, 5, 7]
    doubled = [x for x in nums for _ in range(2)]
    assert count_hill_valley(doubled) == count_hill_valley(nums)


def test_count_hill_valley_monotonic_equals_flat():
    assert count_hill_valley([1, 2, 3]) == count_hill_valley([3, 3, 3])


def test_count_hill_valley_empty():
    with pytest.raises(ValueError):
        count_hill_valley([])


def test_disappeared_numbers_partition_range():
    nums = [4, 3, 2, 7, 8, 2, 3, 1]
    missing = find_disappeared_numbers(nums)
    assert set(missing).isdisjoint(nums)
    assert set(missing) | set(nums) == set(range(1, len(nums) + 1))
    assert missing == sorted(missing)


def test_disappeared_numbers_permutation():
    assert find_disappeared_numbers([3, 1, 2]) == []


def test_gcd_divides_extremes():
    nums = [18, 24, 30]
    g = find_gcd(nums)
    assert min(nums) % g == 0 and max(nums) % g == 0


def test_gcd_of_multiple():
    assert find_gcd([7, 7 * 3, 7 * 2]) == 7


def test_gcd_empty():
    with pytest.raises(ValueError):
        find_gcd([])


@pytest.mark.parametrize(
    "arr, expected",
    [([2, 2, 3, 4], 2), ([1, 2, 2, 3, 3, 3], 3), ([5], -1)],
)
def test_find_lucky(arr, expected):
    assert find_lucky(arr) == expected


def test_missing_and_repeated():
    values = list(range(1, 10))
    values[values.index(5)] = 7
    grid = [values[0:3], values[3:6], values[6:9]]
    assert find_missing_and_repeated_values(grid) == [7, 5]


def test_fizz_buzz_words():
    result = fizz_buzz(15)
    assert len(result) == 15
    assert result[14] == "FizzBuzz"
    assert result[2] == "Fizz"
    assert result[4] == "Buzz"
    assert result[0] == str(1)


def test_fizz_buzz_empty():
    assert fizz_buzz(0) == []


@pytest.mark.parametrize("moves", ["LLL", "___", "RR_"])
def test_furthest_distance_one_way(moves):
    assert furthest_distance_from_origin(moves) == len(moves)


def test_furthest_distance_symmetric():
    assert furthest_distance_from_origin("LR_") == furthest_distance_from_origin("RL_")


def test_judge_circle():
    assert judge_circle("UD") is True
    assert judge_circle("LL") is False


def test_judge_circle_with_inverse():
    inverse = {"U": "D", "D": "U", "L": "R", "R": "L"}
    moves = "UURLD"
    back = "".join(inverse[c] for c in reversed(moves))
    assert judge_circle(moves + back) is True