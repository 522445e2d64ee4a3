"""Problems over integer sequences and ranges."""

from collections import Counter
from itertools import accumulate


def largest_altitude(gain):
    """Return the highest altitude reached starting at 0 and adding each gain."""
    return max(accumulate(gain, initial=0))


def _digit_sum(number):
    return sum(int(digit) for digit in str(number))


def count_balls(low_limit, high_limit):
    """Return the size of the fullest box when each ball goes to the box of its digit sum."""
    if low_limit > high_limit:
        raise ValueError("low_limit must not exceed high_limit")
    counts = Counter(_digit_sum(number) for number in range(low_limit, high_limit + 1))
    return max(counts.values())


def check_sorted_rotated(nums):
    """Return whether nums is a non-decreasing sequence rotated by some amount."""
    values = list(nums)
    if not values:
        return True
    drops = sum(a > b for a, b in zip(values, values[1:] + values[:1]))
    return drops <= 1


def can_choose(groups, nums):
    """Return whether the groups occur in nums in order as disjoint contiguous runs."""
    values = list(nums)
    position = 0
    for group in groups:
        pattern = list(group)
        size = len(pattern)
        while position + size <= len(values) and values[position:position + size] != pattern:
            position += 1
        if position + size > len(values):
            return False
        position += size
    return True


def min_operations_to_move_balls(boxes):
    """For each box, return the moves needed to bring every ball into it.

    ``boxes`` is a string of "0" and "1"; a move shifts one ball to an
    adjacent box.
    """
    if set(boxes) - {"0", "1"}:
        raise ValueError("boxes must consist of '0' and '1' only")
    result = [0] * len(boxes)

    balls = moves = 0
    for i, box in enumerate(boxes):
        result[i] += moves
        balls += box == "1"
        moves += balls

    balls = moves = 0
    for i in reversed(range(len(boxes))):
        result[i] += moves
        balls += boxes[i] == "1"
        moves += balls
    return result


def closest_cost(base_costs, topping_costs, target):
    """Return the dessert cost closest to target, the lower one on ties.

    A dessert has exactly one base and up to two of each topping.
    """
    if not base_costs:
        raise ValueError("at least one base cost is required")
    topping_sums = {0}
    for topping in topping_costs:
        topping_sums = {total + topping * count for total in topping_sums for count in (0, 1, 2)}
    costs = (base + extra for base in base_costs for extra in topping_sums)
    return min(costs, key=lambda cost: (abs(cost - target), cost))