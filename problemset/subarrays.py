"""Problems about contiguous subarrays: shortest sum window and sum of minimums."""

from collections import deque
from itertools import accumulate

MOD = 10**9 + 7


def shortest_subarray(nums, k):
    """Return the length of the shortest non-empty subarray with sum >= k, or -1."""
    prefix = [0, *accumulate(nums)]
    best = len(nums) + 1
    starts = deque()
    for end, total in enumerate(prefix):
        while starts and total - prefix[starts[0]] >= k:
            best = min(best, end - starts.popleft())
        while starts and total <= prefix[starts[-1]]:
            starts.pop()
        starts.append(end)
    return -1 if best > len(nums) else best


def sum_subarray_mins(arr):
    """Return the sum of min(b) over every contiguous subarray b, modulo 1e9+7."""
    n = len(arr)
    left = [0] * n
    right = [0] * n

    stack = []
    for i, value in enumerate(arr):
        while stack and value <= arr[stack[-1]]:
            stack.pop()
        left[i] = i - (stack[-1] if stack else -1)
        stack.append(i)

    stack = []
    for i in reversed(range(n)):
        while stack and arr[i] < arr[stack[-1]]:
            stack.pop()
        right[i] = (stack[-1] if stack else n) - i
        stack.append(i)

    return sum(l * r * v for l, r, v in zip(left, right, arr)) % MOD