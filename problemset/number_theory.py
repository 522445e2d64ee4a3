"""Counting problems solved with modular arithmetic."""

import math

MOD = 10**9 + 7


def nth_magical_number(n, a, b):
    """Return the n-th positive integer divisible by a or b, modulo 1e9+7."""
    if a < 1 or b < 1:
        raise ValueError("divisors must be positive")
    c = math.lcm(a, b)
    low = min(a, b)
    high = n * min(a, b)
    while low <= high:
        mid = (low + high) // 2
        if mid // a + mid // b - mid // c >= n:
            high = mid - 1
        else:
            low = mid + 1
    return (high + 1) % MOD


def sum_subseq_widths(nums):
    """Return the sum of (max - min) over all non-empty subsequences, modulo 1e9+7."""
    ordered = sorted(nums)
    n = len(ordered)
    total = sum(
        value * (pow(2, i, MOD) - pow(2, n - 1 - i, MOD))
        for i, value in enumerate(ordered)
    )
    return total % MOD