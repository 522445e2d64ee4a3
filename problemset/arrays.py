"""Problems over integer arrays and matrices."""

from collections import Counter


def min_operations_equal_sum(nums1, nums2):
    """Return the fewest changes of dice values (1..6) that make both sums equal.

    Returns -1 when no number of changes can make the sums equal.
    """
    first, second = list(nums1), list(nums2)
    if any(not 1 <= value <= 6 for value in (*first, *second)):
        raise ValueError("values must lie between 1 and 6")
    if 6 * len(first) < len(second) or 6 * len(second) < len(first):
        return -1
    diff = sum(second) - sum(first)
    if diff < 0:
        first, second = second, first
        diff = -diff
    # The smaller side can raise values to 6, the larger side lower them to 1.
    gains = Counter(6 - value for value in first)
    gains.update(value - 1 for value in second)
    operations = 0
    for gain in range(5, 0, -1):
        if diff <= 0:
            break
        taken = min(gains[gain], -(-diff // gain))
        operations += taken
        diff -= taken * gain
    return operations


def nearest_valid_point(x, y, points):
    """Return the index of the closest point sharing x or y, or -1 if none does.

    Distance is Manhattan distance; ties go to the smallest index.
    """
    candidates = (
        (abs(px - x) + abs(py - y), index)
        for index, (px, py) in enumerate(points)
        if px == x or py == y
    )
    best = min(candidates, default=None)
    return -1 if best is None else best[1]


def check_powers_of_three(n):
    """Return whether n is a sum of distinct powers of three."""
    if n < 0:
        raise ValueError("n must not be negative")
    while n:
        n, digit = divmod(n, 3)
        if digit == 2:
            return False
    return True


def min_elements(nums, limit, goal):
    """Return how many elements of magnitude at most limit must be added to reach goal."""
    if limit < 1:
        raise ValueError("limit must be positive")
    diff = abs(goal - sum(nums))
    return -(-diff // limit)


def array_sign(nums):
    """Return the sign (-1, 0 or 1) of the product of nums."""
    sign = 1
    for value in nums:
        if value == 0:
            return 0
        if value < 0:
            sign = -sign
    return sign


def min_operations_increasing(nums):
    """Return the fewest unit increments that make nums strictly increasing."""
    operations = 0
    previous = None
    for value in nums:
        if previous is not None and value <= previous:
            operations += previous + 1 - value
            value = previous + 1
        previous = value
    return operations


def find_k_distant_indices(nums, key, k):
    """Return, in order, every index within k of some position holding key."""
    result = []
    n = len(nums)
    unchecked = 0
    for i, value in enumerate(nums):
        if value == key:
            start = max(unchecked, i - k)
            unchecked = min(n - 1, i + k) + 1
            result.extend(range(start, unchecked))
    return result


def check_x_matrix(grid):
    """Return whether the square grid is non-zero exactly on both diagonals."""
    n = len(grid)
    if any(len(row) != n for row in grid):
        raise ValueError("grid must be square")
    return all(
        (value != 0) == (j == i or j == n - 1 - i)
        for i, row in enumerate(grid)
        for j, value in enumerate(row)
    )


def match_players_and_trainers(players, trainers):
    """Return the most pairs where a player's ability does not exceed the trainer's capacity."""
    ordered_players = sorted(players)
    matched = 0
    for capacity in sorted(trainers):
        if matched == len(ordered_players):
            break
        if ordered_players[matched] <= capacity:
            matched += 1
    return matched


def average_value(nums):
    """Return the truncated average of the values divisible by 6, or 0 if there are none."""
    chosen = [value for value in nums if value % 6 == 0]
    if not chosen:
        return 0
    total = sum(chosen)
    quotient = abs(total) // len(chosen)
    return quotient if total >= 0 else -quotient


def apply_operations(nums):
    """Double each value equal to its successor, zero the successor, then move zeros to the end."""
    values = list(nums)
    for i in range(len(values) - 1):
        if values[i] == values[i + 1]:
            values[i] *= 2
            values[i + 1] = 0
    non_zero = [value for value in values if value]
    return non_zero + [0] * (len(values) - len(non_zero))