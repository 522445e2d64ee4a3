"""Loading and packing problems: deliveries, trucks, box piles and stone games."""

from collections import deque
from itertools import accumulate


def box_delivering(boxes, ports_count, max_boxes, max_weight):
    """Return the fewest trips a ship needs to deliver boxes in order.

    Each box is ``(port, weight)``.  The ship carries at most ``max_boxes``
    boxes and ``max_weight`` weight at once.  Each load costs one trip from
    the storage, one per change of port and one back to the storage.
    ``ports_count`` is part of the problem statement and does not affect
    the result.
    """
    if max_boxes < 1:
        raise ValueError("max_boxes must be at least 1")
    if any(weight > max_weight for _, weight in boxes):
        raise ValueError("a box is heavier than max_weight")
    n = len(boxes)
    if not n:
        return 0

    ports = [0, *(port for port, _ in boxes)]
    weights = [0, *accumulate(weight for _, weight in boxes)]
    changes = [0] * (n + 1)
    for i in range(2, n + 1):
        changes[i] = changes[i - 1] + (ports[i - 1] != ports[i])

    trips = [0] * (n + 1)
    base = [0] * (n + 1)
    candidates = deque([0])
    for i in range(1, n + 1):
        while (
            i - candidates[0] > max_boxes
            or weights[i] - weights[candidates[0]] > max_weight
        ):
            candidates.popleft()
        trips[i] = base[candidates[0]] + changes[i] + 2
        if i != n:
            base[i] = trips[i] - changes[i + 1]
            while candidates and base[i] <= base[candidates[-1]]:
                candidates.pop()
            candidates.append(i)
    return trips[n]


def maximum_units(box_types, truck_size):
    """Return the most units a truck holding truck_size boxes can carry.

    Each box type is ``(number_of_boxes, units_per_box)``.
    """
    remaining = truck_size
    total = 0
    for count, units in sorted(box_types, key=lambda box_type: box_type[1], reverse=True):
        if remaining <= 0:
            break
        taken = min(count, remaining)
        total += taken * units
        remaining -= taken
    return total


def minimum_boxes(n):
    """Return the fewest boxes touching the floor when n unit boxes are piled in a corner."""
    if n < 1:
        raise ValueError("n must be positive")
    layer = level = extra = 1
    while n > layer:
        n -= layer
        level += 1
        layer += level
    step = 1
    while n > step:
        n -= step
        extra += 1
        step += 1
    return (level - 1) * level // 2 + extra


def maximum_score(a, b, c):
    """Return the most turns of taking one stone from each of two non-empty piles."""
    total = a + b + c
    return min(total // 2, total - max(a, b, c))