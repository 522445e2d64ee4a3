"""Sliding-window problems over integer arrays."""

import math
from collections import Counter


def maximum_subarray_sum(nums, k):
    """Return the largest sum of a length-k subarray whose values are all distinct.

    Returns 0 when no such subarray exists.
    """
    if k < 1:
        raise ValueError("k must be at least 1")
    values = list(nums)
    counts = Counter()
    best = window_sum = 0
    left = 0
    for right, value in enumerate(values):
        window_sum += value
        counts[value] += 1
        while counts[value] > 1 or right - left + 1 > k:
            window_sum -= values[left]
            counts[values[left]] -= 1
            left += 1
        if right - left + 1 == k:
            best = max(best, window_sum)
    return best


def subarray_lcm(nums, k):
    """Return the number of contiguous subarrays whose least common multiple is k."""
    values = list(nums)
    count = 0
    for start in range(len(values)):
        running = values[start]
        for value in values[start:]:
            running = math.lcm(running, value)
            if running == k:
                count += 1
            elif running > k:
                break
    return count