"""Problems on integer grids: bridging islands and locating the best signal."""

import math
from collections import deque

_DIRECTIONS = ((-1, 0), (1, 0), (0, 1), (0, -1))


def _neighbours(x, y, n):
    for dx, dy in _DIRECTIONS:
        nx, ny = x + dx, y + dy
        if 0 <= nx < n and 0 <= ny < n:
            yield nx, ny


def shortest_bridge(grid):
    """Return the fewest water cells to flip so that the two islands join.

    The grid is square, with 1 for land and 0 for water.  The input is not
    modified.  A grid with fewer than two islands gives 0.
    """
    n = len(grid)
    if any(len(row) != n for row in grid):
        raise ValueError("grid must be square")
    cells = [list(row) for row in grid]

    start = next(
        ((i, j) for i, row in enumerate(cells) for j, value in enumerate(row) if value == 1),
        None,
    )
    if start is None:
        return 0

    island = []
    pending = deque([start])
    cells[start[0]][start[1]] = -1
    while pending:
        x, y = pending.popleft()
        island.append((x, y))
        for nx, ny in _neighbours(x, y, n):
            if cells[nx][ny] == 1:
                cells[nx][ny] = -1
                pending.append((nx, ny))

    frontier = deque(island)
    step = 0
    while frontier:
        for _ in range(len(frontier)):
            x, y = frontier.popleft()
            for nx, ny in _neighbours(x, y, n):
                if cells[nx][ny] == 1:
                    return step
                if cells[nx][ny] == 0:
                    cells[nx][ny] = -1
                    frontier.append((nx, ny))
        step += 1
    return 0


def best_coordinate(towers, radius):
    """Return the integer point [x, y] with the highest network quality.

    Each tower ``(x, y, q)`` contributes ``floor(q / (1 + d))`` to any point
    within Euclidean distance ``d <= radius``.  Only points inside the
    bounding box of the towers are considered; ties go to the smallest x,
    then the smallest y.  With no positive quality anywhere, [0, 0] is given.
    """
    if not towers:
        return [0, 0]
    xs = [tower[0] for tower in towers]
    ys = [tower[1] for tower in towers]

    def quality(x, y):
        total = 0
        for tx, ty, q in towers:
            dist = math.sqrt((x - tx) ** 2 + (y - ty) ** 2)
            if dist <= radius:
                total += math.floor(q / (1 + dist))
        return total

    best_power, best = 0, [0, 0]
    for x in range(min(xs), max(xs) + 1):
        for y in range(min(ys), max(ys) + 1):
            power = quality(x, y)
            if power > best_power:
                best_power, best = power, [x, y]
    return best