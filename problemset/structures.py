"""Small stateful data structures."""

from collections import Counter, defaultdict


class FreqStack:
    """A stack whose pop removes the most frequent value, latest first on ties."""

    def __init__(self):
        self._counts = Counter()
        self._groups = defaultdict(list)
        self._max_freq = 0

    def push(self, val):
        self._counts[val] += 1
        freq = self._counts[val]
        self._groups[freq].append(val)
        self._max_freq = max(self._max_freq, freq)

    def pop(self):
        if not self._max_freq:
            raise IndexError("pop from empty FreqStack")
        group = self._groups[self._max_freq]
        val = group.pop()
        self._counts[val] -= 1
        if not group:
            del self._groups[self._max_freq]
            self._max_freq -= 1
        return val

    def __len__(self):
        return sum(self._counts.values())


class ParkingSystem:
    """A car park with fixed numbers of big (1), medium (2) and small (3) slots."""

    def __init__(self, big, medium, small):
        self._free = {1: big, 2: medium, 3: small}

    def add_car(self, car_type):
        """Park a car of the given type; return whether a slot was free."""
        if self._free.get(car_type, 0) > 0:
            self._free[car_type] -= 1
            return True
        return False